"""Array of a size chosen at run time, filled with multiples of ten."""

from __future__ import annotations

import argparse


def multiplos_de_diez(tamano: int) -> list[int]:
    """Return ``tamano`` values where position i holds i * 10."""
    if tamano < 0:
        raise ValueError("el tamaño no puede ser negativo")
    return [i * 10 for i in range(tamano)]


def _pedir_tamano() -> int:
    partes = input("Ingrese el tamaño del arreglo: ").split()
    return int(partes[0]) if partes else 0


def main(argv: list[str] | None = None) -> int:
    """Ask for a size and print the array's elements."""
    parser = argparse.ArgumentParser(description="Crea un arreglo de tamaño dinámico.")
    parser.add_argument("tamano", type=int, nargs="?")
    args = parser.parse_args(argv)
    try:
        tamano = args.tamano if args.tamano is not None else _pedir_tamano()
        valores = multiplos_de_diez(tamano)
    except ValueError:
        print("Error en la asignación de memoria")
        return 1
    print("Elementos del arreglo:")
    print("".join(f"{v} " for v in valores))
    return 0