"""Undirected weighted graph stored as adjacency lists."""

from __future__ import annotations


class GrafoPonderado:
    """Graph of nodes numbered from 0 whose edges carry a weight.

    Each node's neighbours are kept most recently added first.
    """

    def __init__(self, num_nodos: int) -> None:
        if num_nodos < 0:
            raise ValueError("el número de nodos no puede ser negativo")
        self._adyacencia: list[list[tuple[int, int]]] = [[] for _ in range(num_nodos)]

    def _validar(self, nodo: int) -> None:
        if not 0 <= nodo < len(self._adyacencia):
            raise IndexError(f"nodo fuera de rango: {nodo}")

    def agregar_arista(self, origen: int, destino: int, peso: int) -> None:
        """Connect two nodes in both directions with the given weight."""
        self._validar(origen)
        self._validar(destino)
        self._adyacencia[origen].insert(0, (destino, peso))
        self._adyacencia[destino].insert(0, (origen, peso))

    def adyacentes(self, nodo: int) -> list[tuple[int, int]]:
        """Return ``(neighbour, weight)`` pairs of ``nodo``, newest first."""
        self._validar(nodo)
        return list(self._adyacencia[nodo])

    def formatear(self) -> str:
        """Render every node followed by its weighted neighbours."""
        return "\n".join(
            f"Nodo {nodo}:"
            + "".join(f" -> {destino} (peso: {peso})" for destino, peso in vecinos)
            for nodo, vecinos in enumerate(self._adyacencia)
        )