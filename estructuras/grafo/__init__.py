"""Grafos y árboles: DAG, K-D, Kruskal, ponderado, bipartito, binario y de adyacencia."""