"""Binary tree ordered by value on insertion and searched by identifier."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class DatoArbol:
    """A record held in the tree: an identifier and a value."""

    i: int
    valor: int


@dataclass
class _Nodo:
    dato: DatoArbol
    izquierda: _Nodo | None = None
    derecha: _Nodo | None = None


def _eliminar(nodo: _Nodo | None, id_nodo: int) -> tuple[_Nodo | None, bool]:
    if nodo is None:
        return None, False
    if id_nodo < nodo.dato.i:
        nodo.izquierda, hecho = _eliminar(nodo.izquierda, id_nodo)
        return nodo, hecho
    if id_nodo > nodo.dato.i:
        nodo.derecha, hecho = _eliminar(nodo.derecha, id_nodo)
        return nodo, hecho
    if nodo.izquierda is None:
        return nodo.derecha, True
    if nodo.derecha is None:
        return nodo.izquierda, True
    minimo = nodo.derecha
    while minimo.izquierda is not None:
        minimo = minimo.izquierda
    nodo.dato = minimo.dato
    nodo.derecha, _ = _eliminar(nodo.derecha, minimo.dato.i)
    return nodo, True


def _preorden(nodo: _Nodo | None) -> Iterator[DatoArbol]:
    if nodo is not None:
        yield nodo.dato
        yield from _preorden(nodo.izquierda)
        yield from _preorden(nodo.derecha)


def _inorden(nodo: _Nodo | None) -> Iterator[DatoArbol]:
    if nodo is not None:
        yield from _inorden(nodo.izquierda)
        yield nodo.dato
        yield from _inorden(nodo.derecha)


def _postorden(nodo: _Nodo | None) -> Iterator[DatoArbol]:
    if nodo is not None:
        yield from _postorden(nodo.izquierda)
        yield from _postorden(nodo.derecha)
        yield nodo.dato


class ArbolBinario:
    """Binary tree placing records by value but finding and removing them by id.

    The two orderings only agree when ids and values grow together; otherwise
    a search or removal by id may miss a record that is present.
    """

    def __init__(self) -> None:
        self._raiz: _Nodo | None = None

    def insertar(self, dato: DatoArbol) -> None:
        """Insert a record; smaller values go left, equal or larger go right."""
        nuevo = _Nodo(dato)
        if self._raiz is None:
            self._raiz = nuevo
            return
        actual = self._raiz
        while True:
            if dato.valor < actual.dato.valor:
                if actual.izquierda is None:
                    actual.izquierda = nuevo
                    return
                actual = actual.izquierda
            else:
                if actual.derecha is None:
                    actual.derecha = nuevo
                    return
                actual = actual.derecha

    def _nodo(self, id_nodo: int) -> _Nodo | None:
        actual = self._raiz
        while actual is not None and actual.dato.i != id_nodo:
            actual = actual.izquierda if id_nodo < actual.dato.i else actual.derecha
        return actual

    def eliminar(self, id_nodo: int) -> bool:
        """Remove the record with ``id_nodo``; return whether one was removed."""
        self._raiz, eliminado = _eliminar(self._raiz, id_nodo)
        return eliminado

    def buscar(self, id_nodo: int) -> DatoArbol | None:
        """Return the record with ``id_nodo``, or None when not found."""
        nodo = self._nodo(id_nodo)
        return None if nodo is None else nodo.dato

    def modificar(self, id_nodo: int, valor: int) -> bool:
        """Set the value of the record with ``id_nodo`` without moving it."""
        nodo = self._nodo(id_nodo)
        if nodo is None:
            return False
        nodo.dato = replace(nodo.dato, valor=valor)
        return True

    def preorden(self) -> list[DatoArbol]:
        """Return the records in preorder."""
        return list(_preorden(self._raiz))

    def inorden(self) -> list[DatoArbol]:
        """Return the records in inorder."""
        return list(_inorden(self._raiz))

    def postorden(self) -> list[DatoArbol]:
        """Return the records in postorder."""
        return list(_postorden(self._raiz))