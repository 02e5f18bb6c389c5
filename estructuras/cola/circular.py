"""Fixed-capacity circular queue backed by a ring of slots."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

CAPACIDAD_POR_DEFECTO = 5

_SEPARADOR = "-" * 50


@dataclass(frozen=True)
class Dato:
    """A queued record: an identifier and a value."""

    i: int
    valor: int


class ColaVaciaError(LookupError):
    """Raised when removing from an empty queue."""


class ColaLlenaError(OverflowError):
    """Raised when adding to a queue that has no free slot."""


class ColaCircular:
    """Queue of bounded capacity whose indices wrap around a fixed ring."""

    def __init__(self, capacidad: int = CAPACIDAD_POR_DEFECTO) -> None:
        if capacidad <= 0:
            raise ValueError("la capacidad debe ser positiva")
        self._elementos: list[Dato | None] = [None] * capacidad
        self._frente = 0
        self._final = -1
        self._longitud = 0

    @property
    def capacidad(self) -> int:
        return len(self._elementos)

    def encolar(self, dato: Dato) -> None:
        """Add a record at the end; raise ColaLlenaError when full."""
        if self._longitud == self.capacidad:
            raise ColaLlenaError("La cola está llena")
        self._final = (self._final + 1) % self.capacidad
        self._elementos[self._final] = dato
        self._longitud += 1

    def desencolar(self) -> Dato:
        """Remove and return the front record; raise ColaVaciaError when empty."""
        if self._longitud == 0:
            raise ColaVaciaError("La cola está vacía")
        dato = self._elementos[self._frente]
        self._elementos[self._frente] = None
        self._frente = (self._frente + 1) % self.capacidad
        self._longitud -= 1
        assert dato is not None
        return dato

    def _ocupadas(self) -> Iterator[tuple[int, Dato]]:
        for desplazamiento in range(self._longitud):
            posicion = (self._frente + desplazamiento) % self.capacidad
            dato = self._elementos[posicion]
            assert dato is not None
            yield posicion, dato

    def __len__(self) -> int:
        return self._longitud

    def __iter__(self) -> Iterator[Dato]:
        return (dato for _, dato in self._ocupadas())

    def formatear(self) -> str:
        """Render the queue contents from front to back as a table."""
        if self._longitud == 0:
            return "La cola está vacía"
        lineas = [
            "Contenido de la cola circular:",
            _SEPARADOR,
            "|  i  |   Valor   | Posición |",
            _SEPARADOR,
        ]
        lineas.extend(
            f"| {dato.i:3d} | {dato.valor:9d} | {posicion:8d} |"
            for posicion, dato in self._ocupadas()
        )
        lineas.append(_SEPARADOR)
        return "\n".join(lineas)