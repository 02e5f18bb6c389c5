"""Bipartite graph with two sets of nodes numbered from 1."""

from __future__ import annotations


class NodoFueraDeRangoError(IndexError):
    """Raised when a node number is not in its set."""


class GrafoBipartito:
    """Graph whose edges always join a node of set 1 with a node of set 2.

    Each node's neighbours are kept most recently added first.
    """

    def __init__(self, nodos_conjunto_1: int, nodos_conjunto_2: int) -> None:
        if nodos_conjunto_1 < 0 or nodos_conjunto_2 < 0:
            raise ValueError("el número de nodos no puede ser negativo")
        self._conjunto_1: list[list[int]] = [[] for _ in range(nodos_conjunto_1)]
        self._conjunto_2: list[list[int]] = [[] for _ in range(nodos_conjunto_2)]

    @staticmethod
    def _lista(conjunto: list[list[int]], nodo: int) -> list[int]:
        if not 1 <= nodo <= len(conjunto):
            raise NodoFueraDeRangoError(f"Nodo fuera de rango: {nodo}")
        return conjunto[nodo - 1]

    def agregar_arista(self, nodo_1: int, nodo_2: int) -> None:
        """Join node ``nodo_1`` of set 1 with node ``nodo_2`` of set 2."""
        lista_1 = self._lista(self._conjunto_1, nodo_1)
        lista_2 = self._lista(self._conjunto_2, nodo_2)
        lista_1.insert(0, nodo_2)
        lista_2.insert(0, nodo_1)

    def adyacentes_conjunto_1(self, nodo: int) -> list[int]:
        """Return the set-2 neighbours of a set-1 node."""
        return list(self._lista(self._conjunto_1, nodo))

    def adyacentes_conjunto_2(self, nodo: int) -> list[int]:
        """Return the set-1 neighbours of a set-2 node."""
        return list(self._lista(self._conjunto_2, nodo))

    def formatear(self) -> str:
        """Render both sets with each node's neighbours."""

        def bloque(titulo: str, conjunto: list[list[int]]) -> list[str]:
            return [titulo] + [
                f"Nodo {numero}: {' '.join(map(str, vecinos))}".rstrip()
                for numero, vecinos in enumerate(conjunto, start=1)
            ]

        lineas = bloque("Conjunto 1 (Nodo | Adyacentes):", self._conjunto_1)
        lineas.append("")
        lineas += bloque("Conjunto 2 (Nodo | Adyacentes):", self._conjunto_2)
        return "\n".join(lineas)