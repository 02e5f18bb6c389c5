"""Ring buffer laid over the cells of a fixed matrix, row by row."""

from __future__ import annotations

FILAS_POR_DEFECTO = 3
COLUMNAS_POR_DEFECTO = 3


class MatrizCircular:
    """Write and read cursors that wrap around a zero-filled matrix.

    Neither cursor checks the other: writing past the reader overwrites
    cells, and reading past the writer returns whatever the cell holds.
    """

    def __init__(
        self, filas: int = FILAS_POR_DEFECTO, columnas: int = COLUMNAS_POR_DEFECTO
    ) -> None:
        if filas <= 0 or columnas <= 0:
            raise ValueError("las dimensiones deben ser positivas")
        self.filas = filas
        self.columnas = columnas
        self._matriz = [[0] * columnas for _ in range(filas)]
        self._inicio = 0
        self._fin = 0

    @property
    def celdas(self) -> int:
        return self.filas * self.columnas

    @property
    def matriz(self) -> tuple[tuple[int, ...], ...]:
        """Snapshot of the matrix contents."""
        return tuple(tuple(fila) for fila in self._matriz)

    def insertar(self, valor: int) -> None:
        """Store a value at the write cursor and advance it."""
        fila, columna = divmod(self._inicio, self.columnas)
        self._matriz[fila][columna] = valor
        self._inicio = (self._inicio + 1) % self.celdas

    def obtener(self) -> int:
        """Return the value at the read cursor and advance it."""
        fila, columna = divmod(self._fin, self.columnas)
        valor = self._matriz[fila][columna]
        self._fin = (self._fin + 1) % self.celdas
        return valor