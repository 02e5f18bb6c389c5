"""Integer arithmetic dispatched through a table of operations."""

from __future__ import annotations

import argparse
from collections.abc import Callable


def sumar(a: int, b: int) -> int:
    """Return a + b."""
    return a + b


def restar(a: int, b: int) -> int:
    """Return a - b."""
    return a - b


def multiplicar(a: int, b: int) -> int:
    """Return a * b."""
    return a * b


def dividir(a: int, b: int) -> int:
    """Integer quotient truncated toward zero; 0 when dividing by zero."""
    if b == 0:
        return 0
    cociente = abs(a) // abs(b)
    return cociente if (a < 0) == (b < 0) else -cociente


OPERACIONES: tuple[tuple[str, Callable[[int, int], int]], ...] = (
    ("Suma", sumar),
    ("Resta", restar),
    ("Multiplicación", multiplicar),
    ("División", dividir),
)


def main(argv: list[str] | None = None) -> int:
    """Apply every operation in the table to two integers and print the results."""
    parser = argparse.ArgumentParser(description="Aplica las cuatro operaciones.")
    parser.add_argument("a", type=int, nargs="?", default=10)
    parser.add_argument("b", type=int, nargs="?", default=5)
    args = parser.parse_args(argv)
    for nombre, operacion in OPERACIONES:
        print(f"{nombre}: {operacion(args.a, args.b)}")
    return 0