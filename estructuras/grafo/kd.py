"""K-dimensional tree with nearest-neighbour search."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

K_POR_DEFECTO = 2

Punto = tuple[int, ...]


@dataclass
class _Nodo:
    punto: Punto
    izquierda: _Nodo | None = field(default=None)
    derecha: _Nodo | None = field(default=None)


class ArbolKD:
    """Binary tree splitting on one coordinate per level, cycling through them."""

    def __init__(self, k: int = K_POR_DEFECTO) -> None:
        if k <= 0:
            raise ValueError("k debe ser positivo")
        self.k = k
        self._raiz: _Nodo | None = None

    def _validar(self, punto: Sequence[int]) -> Punto:
        punto = tuple(punto)
        if len(punto) != self.k:
            raise ValueError(f"el punto debe tener {self.k} coordenadas")
        return punto

    def insertar(self, punto: Sequence[int]) -> None:
        """Insert a point; equal coordinates go to the right subtree."""
        punto = self._validar(punto)
        nuevo = _Nodo(punto)
        if self._raiz is None:
            self._raiz = nuevo
            return
        actual = self._raiz
        profundidad = 0
        while True:
            eje = profundidad % self.k
            if punto[eje] < actual.punto[eje]:
                if actual.izquierda is None:
                    actual.izquierda = nuevo
                    return
                actual = actual.izquierda
            else:
                if actual.derecha is None:
                    actual.derecha = nuevo
                    return
                actual = actual.derecha
            profundidad += 1

    def preorden(self) -> Iterator[Punto]:
        """Yield the stored points in preorder."""
        pila = [self._raiz] if self._raiz is not None else []
        while pila:
            nodo = pila.pop()
            yield nodo.punto
            if nodo.derecha is not None:
                pila.append(nodo.derecha)
            if nodo.izquierda is not None:
                pila.append(nodo.izquierda)

    def mas_cercano(self, punto: Sequence[int]) -> Punto | None:
        """Return the stored point closest to ``punto``, or None if the tree is empty."""
        punto = self._validar(punto)
        mejor: Punto | None = None
        mejor_distancia = -1

        def buscar(nodo: _Nodo | None, profundidad: int) -> None:
            nonlocal mejor, mejor_distancia
            if nodo is None:
                return
            distancia = sum((a - b) ** 2 for a, b in zip(nodo.punto, punto))
            if mejor_distancia == -1 or distancia < mejor_distancia:
                mejor_distancia = distancia
                mejor = nodo.punto
            eje = profundidad % self.k
            if punto[eje] < nodo.punto[eje]:
                buscar(nodo.izquierda, profundidad + 1)
                if punto[eje] + mejor_distancia > nodo.punto[eje]:
                    buscar(nodo.derecha, profundidad + 1)
            else:
                buscar(nodo.derecha, profundidad + 1)
                if punto[eje] - mejor_distancia < nodo.punto[eje]:
                    buscar(nodo.izquierda, profundidad + 1)

        buscar(self._raiz, 0)
        return mejor


def _texto(punto: Punto) -> str:
    return "(" + "".join(f"{c} " for c in punto) + ")"


def main(argv: list[str] | None = None) -> int:
    """Build the example tree, print it and find the point nearest to (10, 5)."""
    argparse.ArgumentParser(description="Ejemplo de árbol K-D.").parse_args(argv)
    arbol = ArbolKD()
    for punto in ((3, 6), (17, 15), (13, 15), (6, 12), (9, 1), (2, 7), (10, 19)):
        arbol.insertar(punto)
    print("Árbol K-D:")
    for punto in arbol.preorden():
        print(_texto(punto))
    buscado = (10, 5)
    mejor = arbol.mas_cercano(buscado)
    assert mejor is not None
    print(
        f"\nEl punto más cercano a ({buscado[0]}, {buscado[1]}) "
        f"es ({mejor[0]}, {mejor[1]})"
    )
    return 0