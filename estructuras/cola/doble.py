"""Double-ended queue with insertion and removal at both ends."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from estructuras.cola.circular import ColaVaciaError, Dato

_SEPARADOR = "-" * 50


class ColaDoble:
    """Queue whose records can enter and leave at the front or the back."""

    def __init__(self) -> None:
        self._nodos: deque[Dato] = deque()

    def insertar_adelante(self, dato: Dato) -> None:
        """Add a record at the front."""
        self._nodos.appendleft(dato)

    def insertar_atras(self, dato: Dato) -> None:
        """Add a record at the back."""
        self._nodos.append(dato)

    def eliminar_adelante(self) -> Dato:
        """Remove and return the front record; raise ColaVaciaError when empty."""
        if not self._nodos:
            raise ColaVaciaError("La cola está vacía")
        return self._nodos.popleft()

    def eliminar_atras(self) -> Dato:
        """Remove and return the back record; raise ColaVaciaError when empty."""
        if not self._nodos:
            raise ColaVaciaError("La cola está vacía")
        return self._nodos.pop()

    def frente(self) -> Dato | None:
        """Return the front record, or None when empty."""
        return self._nodos[0] if self._nodos else None

    def final(self) -> Dato | None:
        """Return the back record, or None when empty."""
        return self._nodos[-1] if self._nodos else None

    def __len__(self) -> int:
        return len(self._nodos)

    def __iter__(self) -> Iterator[Dato]:
        return iter(self._nodos)

    def formatear(self) -> str:
        """Render the queue front to back, naming each record's neighbours."""
        lineas = [
            "Contenido de la cola doble:",
            _SEPARADOR,
            "|  i  |   Valor   | Anterior | Siguiente |",
            _SEPARADOR,
        ]
        nodos = list(self._nodos)
        anteriores = [None] + nodos[:-1]
        siguientes = nodos[1:] + [None]
        for dato, anterior, siguiente in zip(nodos, anteriores, siguientes):
            ant = "-" if anterior is None else str(anterior.i)
            sig = "-" if siguiente is None else str(siguiente.i)
            lineas.append(f"| {dato.i:3d} | {dato.valor:9d} | {ant:>8} | {sig:>9} |")
        lineas.append(_SEPARADOR)
        return "\n".join(lineas)