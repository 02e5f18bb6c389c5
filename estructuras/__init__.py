"""Colas, grafos, árboles, archivos de registros y sincronización entre hilos."""

__version__ = "0.1.0"
__all__ = ["archivo", "arreglo", "cola", "grafo", "hilos"]