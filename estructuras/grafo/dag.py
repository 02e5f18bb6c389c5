"""Directed acyclic graph with numbered nodes and topological ordering."""

from __future__ import annotations

import argparse

MAX_NODOS = 100


class CicloError(ValueError):
    """Raised when a topological order is asked of a graph with a cycle."""


class Dag:
    """Directed graph whose nodes are numbered from 1 in order of creation.

    Each node's successors are kept newest first.
    """

    def __init__(self, max_nodos: int = MAX_NODOS) -> None:
        if max_nodos <= 0:
            raise ValueError("el máximo de nodos debe ser positivo")
        self.max_nodos = max_nodos
        self._adyacencia: list[list[int]] = []

    def _validar(self, nodo: int) -> None:
        if not 1 <= nodo <= len(self._adyacencia):
            raise IndexError(f"El nodo {nodo} no existe.")

    def agregar_nodo(self) -> int:
        """Add a node and return its number; raise OverflowError at the limit."""
        if len(self._adyacencia) >= self.max_nodos:
            raise OverflowError("No se pueden agregar más nodos. Limite alcanzado.")
        self._adyacencia.append([])
        return len(self._adyacencia)

    def agregar_arista(self, origen: int, destino: int) -> None:
        """Add a directed edge; raise IndexError if either node does not exist."""
        self._validar(origen)
        self._validar(destino)
        self._adyacencia[origen - 1].insert(0, destino)

    def adyacentes(self, nodo: int) -> list[int]:
        """Return the successors of ``nodo``, most recently added first."""
        self._validar(nodo)
        return list(self._adyacencia[nodo - 1])

    def orden_topologico(self) -> list[int]:
        """Return the nodes so that every edge points forward.

        Raises CicloError when the graph holds a cycle.
        """
        visitado: set[int] = set()
        en_pila: set[int] = set()
        postorden: list[int] = []
        for inicio in range(1, len(self._adyacencia) + 1):
            if inicio in visitado:
                continue
            visitado.add(inicio)
            en_pila.add(inicio)
            pila = [(inicio, iter(self._adyacencia[inicio - 1]))]
            while pila:
                nodo, vecinos = pila[-1]
                for vecino in vecinos:
                    if vecino in en_pila:
                        raise CicloError(
                            "El DAG contiene un ciclo. No se puede ordenar topológicamente."
                        )
                    if vecino not in visitado:
                        visitado.add(vecino)
                        en_pila.add(vecino)
                        pila.append((vecino, iter(self._adyacencia[vecino - 1])))
                        break
                else:
                    pila.pop()
                    en_pila.discard(nodo)
                    postorden.append(nodo)
        postorden.reverse()
        return postorden

    def __len__(self) -> int:
        return len(self._adyacencia)

    def formatear(self) -> str:
        """Render each node with its successors."""
        return "\n".join(
            f"Nodo {numero} -> {' '.join(map(str, vecinos))}".rstrip()
            for numero, vecinos in enumerate(self._adyacencia, start=1)
        )


def main(argv: list[str] | None = None) -> int:
    """Build a small example graph and print its topological order."""
    argparse.ArgumentParser(description="Ejemplo de DAG y orden topológico.").parse_args(argv)
    dag = Dag()
    for _ in range(4):
        print(f"Nodo {dag.agregar_nodo()} agregado al DAG")
    for origen, destino in ((1, 2), (1, 3), (2, 4), (3, 4)):
        dag.agregar_arista(origen, destino)
        print(f"Arista de {origen} -> {destino} agregada.")
    print("Estructura del DAG:")
    print(dag.formatear())
    try:
        orden = dag.orden_topologico()
    except CicloError as error:
        print(f"Error: {error}")
        return 1
    print("Orden topológico: " + " ".join(map(str, orden)))
    return 0