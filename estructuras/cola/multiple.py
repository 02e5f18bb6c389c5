"""A fixed set of independent FIFO queues addressed by number."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from estructuras.cola.circular import ColaVaciaError, Dato

NUM_COLAS_POR_DEFECTO = 3

_SEPARADOR = "-" * 49


class NumeroColaInvalidoError(IndexError):
    """Raised when a queue number is outside the available range."""


def _formatear_cola(datos: Iterable[Dato]) -> str:
    nodos = list(datos)
    if not nodos:
        return "La cola está vacía"
    lineas = [_SEPARADOR, "|  i  |   Valor   | Siguiente |", _SEPARADOR]
    siguientes: list[Dato | None] = [*nodos[1:], None]
    for dato, siguiente in zip(nodos, siguientes):
        texto = "-" if siguiente is None else str(siguiente.i)
        lineas.append(f"| {dato.i:3d} | {dato.valor:9d} | {texto:>9} |")
    lineas.append(_SEPARADOR)
    return "\n".join(lineas)


class ColaMultiple:
    """Several FIFO queues kept side by side, each selected by its number."""

    def __init__(self, num_colas: int = NUM_COLAS_POR_DEFECTO) -> None:
        if num_colas <= 0:
            raise ValueError("el número de colas debe ser positivo")
        self._colas: list[deque[Dato]] = [deque() for _ in range(num_colas)]

    def _cola(self, numero: int) -> deque[Dato]:
        if not 0 <= numero < len(self._colas):
            raise NumeroColaInvalidoError(f"Número de cola inválido: {numero}")
        return self._colas[numero]

    def encolar(self, numero: int, dato: Dato) -> None:
        """Append a record to the end of queue ``numero``."""
        self._cola(numero).append(dato)

    def desencolar(self, numero: int) -> Dato:
        """Remove and return the front record of queue ``numero``."""
        cola = self._cola(numero)
        if not cola:
            raise ColaVaciaError("La cola está vacía")
        return cola.popleft()

    def longitud(self, numero: int) -> int:
        """Return how many records queue ``numero`` holds."""
        return len(self._cola(numero))

    def cola(self, numero: int) -> tuple[Dato, ...]:
        """Return the records of queue ``numero`` from front to back."""
        return tuple(self._cola(numero))

    def __len__(self) -> int:
        return len(self._colas)

    def formatear(self) -> str:
        """Render every queue in turn."""
        bloques = [
            f"Contenido de la cola {numero}:\n{_formatear_cola(cola)}\n"
            for numero, cola in enumerate(self._colas)
        ]
        return "\n".join(bloques)