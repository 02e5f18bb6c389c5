"""Unbounded first-in first-out queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from estructuras.cola.circular import ColaVaciaError, Dato

_SEPARADOR = "-" * 50


class ColaFifo:
    """Queue where records leave in the order they arrived."""

    def __init__(self) -> None:
        self._nodos: deque[Dato] = deque()

    def encolar(self, dato: Dato) -> None:
        """Add a record at the end."""
        self._nodos.append(dato)

    def desencolar(self) -> Dato:
        """Remove and return the front record; raise ColaVaciaError when empty."""
        if not self._nodos:
            raise ColaVaciaError("La cola está vacía")
        return self._nodos.popleft()

    def frente(self) -> Dato | None:
        """Return the front record without removing it, or None when empty."""
        return self._nodos[0] if self._nodos else None

    def __len__(self) -> int:
        return len(self._nodos)

    def __iter__(self) -> Iterator[Dato]:
        return iter(self._nodos)

    def formatear(self) -> str:
        """Render the queue as a table; each row names the next record's id."""
        lineas = [
            "Contenido de la cola:",
            _SEPARADOR,
            "|  i  |   Valor   | Siguiente |",
            _SEPARADOR,
        ]
        siguientes = list(self._nodos)[1:] + [None]
        for dato, siguiente in zip(self._nodos, siguientes):
            texto = "-" if siguiente is None else str(siguiente.i)
            lineas.append(f"| {dato.i:3d} | {dato.valor:9d} | {texto:>9} |")
        lineas.append(_SEPARADOR)
        return "\n".join(lineas)