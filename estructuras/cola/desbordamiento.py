"""Priority queue that makes room for new records once it is full."""

from __future__ import annotations

from bisect import insort_right
from collections.abc import Iterator

from estructuras.cola.circular import ColaVaciaError
from estructuras.cola.fifo_prioridad import DatoPrioridad

CAPACIDAD_POR_DEFECTO = 5

_SEPARADOR = "-" * 49


def _prioridad(dato: DatoPrioridad) -> int:
    return dato.prioridad


class ColaPrioritaria:
    """Queue ordered by ascending priority number; the head leaves first.

    Records of equal priority keep their arrival order.
    """

    def __init__(self, capacidad: int = CAPACIDAD_POR_DEFECTO) -> None:
        if capacidad <= 0:
            raise ValueError("la capacidad debe ser positiva")
        self.capacidad = capacidad
        self._elementos: list[DatoPrioridad] = []

    def encolar(self, dato: DatoPrioridad) -> None:
        """Insert a record in priority order, after any of equal priority."""
        insort_right(self._elementos, dato, key=_prioridad)

    def desencolar(self) -> DatoPrioridad:
        """Remove and return the head record."""
        if not self._elementos:
            raise ColaVaciaError("La cola está vacía.")
        return self._elementos.pop(0)

    def esta_llena(self) -> bool:
        """Tell whether the queue has reached its capacity."""
        return len(self._elementos) >= self.capacidad

    def reemplazar(self, dato: DatoPrioridad) -> DatoPrioridad | None:
        """Drop the first record whose priority is lower than ``dato``'s and insert ``dato``.

        Returns the dropped record, or None when no record qualifies and
        the queue is left unchanged.
        """
        for posicion, actual in enumerate(self._elementos):
            if actual.prioridad < dato.prioridad:
                del self._elementos[posicion]
                self.encolar(dato)
                return actual
        return None

    def insertar(self, dato: DatoPrioridad) -> DatoPrioridad | None:
        """Insert ``dato``, replacing a record when the queue is full."""
        if self.esta_llena():
            return self.reemplazar(dato)
        self.encolar(dato)
        return None

    def __len__(self) -> int:
        return len(self._elementos)

    def __iter__(self) -> Iterator[DatoPrioridad]:
        return iter(list(self._elementos))

    def formatear(self) -> str:
        """Render the queue as a table from head to tail."""
        if not self._elementos:
            return "La cola está vacía"
        lineas = [
            "Contenido de la cola prioritaria:",
            _SEPARADOR,
            "|  ID  |   Valor   | Prioridad | Posición |",
            _SEPARADOR,
        ]
        lineas.extend(
            f"| {d.i:4d} | {d.valor:9d} |    {d.prioridad:3d}    | {posicion:8d} |"
            for posicion, d in enumerate(self._elementos)
        )
        lineas.append(_SEPARADOR)
        return "\n".join(lineas)