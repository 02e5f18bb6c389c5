"""Copy a file's bytes to an output stream in fixed-size blocks."""

from __future__ import annotations

import argparse
import sys
from functools import partial
from os import PathLike
from typing import BinaryIO

TAMANO_BLOQUE = 1024


def volcar(
    ruta: str | PathLike[str],
    salida: BinaryIO | None = None,
    tamano_bloque: int = TAMANO_BLOQUE,
) -> int:
    """Write the file at ``ruta`` to ``salida`` (standard output by default).

    Returns the number of bytes copied.
    """
    if tamano_bloque <= 0:
        raise ValueError("el tamaño de bloque debe ser positivo")
    destino = sys.stdout.buffer if salida is None else salida
    total = 0
    with open(ruta, "rb") as archivo:
        for bloque in iter(partial(archivo.read, tamano_bloque), b""):
            destino.write(bloque)
            total += len(bloque)
    return total


def main(argv: list[str] | None = None) -> int:
    """Print a file's contents to standard output."""
    parser = argparse.ArgumentParser(description="Vuelca un archivo por la salida estándar.")
    parser.add_argument("archivo", nargs="?", default="archivo.txt")
    args = parser.parse_args(argv)
    sys.stdout.flush()
    try:
        volcar(args.archivo)
    except OSError:
        print("Error al abrir el archivo.")
        return 1
    sys.stdout.buffer.flush()
    return 0