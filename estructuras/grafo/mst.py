"""Minimum spanning tree by Kruskal's algorithm."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TextIO


@dataclass(frozen=True)
class Arista:
    """An undirected weighted edge between two vertices numbered from 0."""

    origen: int
    destino: int
    peso: int


class Subconjuntos:
    """Disjoint sets with path compression and union by rank."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("el número de elementos no puede ser negativo")
        self.padre = list(range(n))
        self.rango = [0] * n

    def encontrar(self, i: int) -> int:
        """Return the representative of ``i``'s set, compressing the path."""
        raiz = i
        while self.padre[raiz] != raiz:
            raiz = self.padre[raiz]
        while self.padre[i] != raiz:
            self.padre[i], i = raiz, self.padre[i]
        return raiz

    def unir(self, x: int, y: int) -> None:
        """Merge the sets of ``x`` and ``y``; on equal rank ``x``'s root wins."""
        raiz_x = self.encontrar(x)
        raiz_y = self.encontrar(y)
        if raiz_x == raiz_y:
            return
        if self.rango[raiz_x] < self.rango[raiz_y]:
            self.padre[raiz_x] = raiz_y
        elif self.rango[raiz_x] > self.rango[raiz_y]:
            self.padre[raiz_y] = raiz_x
        else:
            self.padre[raiz_y] = raiz_x
            self.rango[raiz_x] += 1


def kruskal(aristas: Iterable[Arista], num_vertices: int) -> list[Arista]:
    """Return the edges of a minimum spanning forest, in the order chosen."""
    ordenadas = sorted(aristas, key=lambda a: a.peso)
    for arista in ordenadas:
        for vertice in (arista.origen, arista.destino):
            if not 0 <= vertice < num_vertices:
                raise ValueError(f"vértice fuera de rango: {vertice}")
    conjuntos = Subconjuntos(num_vertices)
    arbol: list[Arista] = []
    for arista in ordenadas:
        if len(arbol) >= num_vertices - 1:
            break
        x = conjuntos.encontrar(arista.origen)
        y = conjuntos.encontrar(arista.destino)
        if x != y:
            arbol.append(arista)
            conjuntos.unir(x, y)
    return arbol


def _tokens(flujo: TextIO) -> Iterator[str]:
    for linea in flujo:
        yield from linea.split()


def _leer_entero(tokens: Iterator[str], mensaje: str | None = None) -> int:
    if mensaje is not None:
        print(mensaje, end="", flush=True)
    return int(next(tokens))


def main(argv: list[str] | None = None) -> int:
    """Read a graph from standard input and print its minimum spanning tree."""
    argparse.ArgumentParser(description="Árbol de expansión mínima (Kruskal).").parse_args(argv)
    tokens = _tokens(sys.stdin)
    try:
        num_vertices = _leer_entero(tokens, "Ingrese el número de vértices: ")
        num_aristas = _leer_entero(tokens, "Ingrese el número de aristas: ")
        print("Ingrese las aristas (origen, destino, peso):")
        aristas = [
            Arista(_leer_entero(tokens), _leer_entero(tokens), _leer_entero(tokens))
            for _ in range(num_aristas)
        ]
        arbol = kruskal(aristas, num_vertices)
    except (StopIteration, ValueError) as error:
        print(f"Error: entrada inválida {error}".rstrip())
        return 1
    print("Arbol de Expansión Mínima (Kruskal):")
    for arista in arbol:
        print(f"{arista.origen} -- {arista.destino} == {arista.peso}")
    print(f"Peso total del MST: {sum(a.peso for a in arbol)}")
    return 0