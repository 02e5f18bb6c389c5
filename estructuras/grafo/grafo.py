"""Directed graph of records with per-node adjacency lists."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field, replace

from estructuras.cola.circular import Dato


@dataclass
class NodoGrafo:
    """A graph node: its record and the ids it points to, newest first."""

    dato: Dato
    adyacentes: list[int] = field(default_factory=list)


class Grafo:
    """Graph whose nodes are kept newest first and looked up by record id.

    Edge destinations are not checked, and removing a node leaves edges that
    point to it in place.
    """

    def __init__(self) -> None:
        self._nodos: list[NodoGrafo] = []

    def _nodo(self, id_nodo: int) -> NodoGrafo | None:
        return next((n for n in self._nodos if n.dato.i == id_nodo), None)

    def insertar_nodo(self, dato: Dato) -> None:
        """Add a node holding ``dato`` at the head of the node list."""
        self._nodos.insert(0, NodoGrafo(dato))

    def insertar_arista(self, origen: int, destino: int) -> bool:
        """Add an edge from ``origen``; return False when that node is missing."""
        nodo = self._nodo(origen)
        if nodo is None:
            return False
        nodo.adyacentes.insert(0, destino)
        return True

    def eliminar_nodo(self, id_nodo: int) -> bool:
        """Remove the first node with ``id_nodo``; return whether one was found."""
        for posicion, nodo in enumerate(self._nodos):
            if nodo.dato.i == id_nodo:
                del self._nodos[posicion]
                return True
        return False

    def eliminar_arista(self, origen: int, destino: int) -> bool:
        """Remove the first edge from ``origen`` to ``destino``."""
        nodo = self._nodo(origen)
        if nodo is None or destino not in nodo.adyacentes:
            return False
        nodo.adyacentes.remove(destino)
        return True

    def modificar_nodo(self, id_nodo: int, valor: int) -> bool:
        """Set the value of the node's record; return whether the node exists."""
        nodo = self._nodo(id_nodo)
        if nodo is None:
            return False
        nodo.dato = replace(nodo.dato, valor=valor)
        return True

    def consultar_nodo(self, id_nodo: int) -> NodoGrafo | None:
        """Return a copy of the first node with ``id_nodo``, or None."""
        nodo = self._nodo(id_nodo)
        if nodo is None:
            return None
        return NodoGrafo(nodo.dato, list(nodo.adyacentes))

    def __len__(self) -> int:
        return len(self._nodos)

    def __iter__(self) -> Iterator[NodoGrafo]:
        return (NodoGrafo(n.dato, list(n.adyacentes)) for n in self._nodos)

    def formatear(self) -> str:
        """Render every node with the ids it points to."""
        return "\n".join(
            f"Nodo {nodo.dato.i}:" + "".join(f" -> {d}" for d in nodo.adyacentes)
            for nodo in self._nodos
        )