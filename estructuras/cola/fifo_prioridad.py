"""Bounded priority queue kept sorted from highest to lowest priority."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from estructuras.cola.circular import ColaLlenaError, ColaVaciaError

CAPACIDAD_POR_DEFECTO = 5

_SEPARADOR = "-" * 60


@dataclass(frozen=True)
class DatoPrioridad:
    """A queued record carrying a priority; larger numbers leave first."""

    i: int
    valor: int
    prioridad: int


def _ordenar(elementos: list[DatoPrioridad]) -> None:
    # Exchange sort, descending; the order of equal priorities follows from it.
    for i in range(len(elementos) - 1):
        for j in range(i + 1, len(elementos)):
            if elementos[i].prioridad < elementos[j].prioridad:
                elementos[i], elementos[j] = elementos[j], elementos[i]


class ColaPrioridadAcotada:
    """Priority queue with a fixed maximum number of records."""

    def __init__(self, capacidad: int = CAPACIDAD_POR_DEFECTO) -> None:
        if capacidad <= 0:
            raise ValueError("la capacidad debe ser positiva")
        self.capacidad = capacidad
        self._elementos: list[DatoPrioridad] = []

    def encolar(self, dato: DatoPrioridad) -> None:
        """Insert a record and re-sort; raise ColaLlenaError when full."""
        if len(self._elementos) == self.capacidad:
            raise ColaLlenaError("La cola de prioridad está llena")
        self._elementos.append(dato)
        _ordenar(self._elementos)

    def desencolar(self) -> DatoPrioridad:
        """Remove and return the highest-priority record."""
        if not self._elementos:
            raise ColaVaciaError("La cola de prioridad está vacía")
        return self._elementos.pop(0)

    def __len__(self) -> int:
        return len(self._elementos)

    def __iter__(self) -> Iterator[DatoPrioridad]:
        return iter(list(self._elementos))

    def formatear(self) -> str:
        """Render the queue as a table in leaving order."""
        if not self._elementos:
            return "La cola de prioridad está vacía"
        lineas = [
            "Contenido de la cola de prioridad:",
            _SEPARADOR,
            "|  i  |   Valor   | Prioridad | Posición |",
            _SEPARADOR,
        ]
        lineas.extend(
            f"| {d.i:3d} | {d.valor:9d} | {d.prioridad:9d} | {posicion:8d} |"
            for posicion, d in enumerate(self._elementos)
        )
        lineas.append(_SEPARADOR)
        return "\n".join(lineas)