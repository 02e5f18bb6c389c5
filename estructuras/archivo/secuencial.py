"""Sequential stock update from a master file and a sales file."""

from __future__ import annotations

import argparse
import struct
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace
from os import PathLike
from pathlib import Path

_MAESTRO = struct.Struct("<iif")
_DETALLE = struct.Struct("<ii")

Ruta = str | PathLike[str]


@dataclass(frozen=True)
class Producto:
    """A master record: product code, stock on hand and price."""

    codigo: int
    stock: int
    precio: float


@dataclass(frozen=True)
class Venta:
    """A detail record: product code and quantity sold."""

    codigo: int
    cantidad: int


def _registros(ruta: Ruta, formato: struct.Struct) -> Iterator[tuple]:
    datos = Path(ruta).read_bytes()
    return formato.iter_unpack(datos[: len(datos) - len(datos) % formato.size])


def leer_productos(ruta: Ruta) -> list[Producto]:
    """Read every whole master record."""
    return [Producto(*campos) for campos in _registros(ruta, _MAESTRO)]


def leer_ventas(ruta: Ruta) -> list[Venta]:
    """Read every whole sales record."""
    return [Venta(*campos) for campos in _registros(ruta, _DETALLE)]


def escribir_productos(ruta: Ruta, productos: Iterable[Producto]) -> None:
    """Write master records, replacing the file's contents."""
    Path(ruta).write_bytes(
        b"".join(_MAESTRO.pack(p.codigo, p.stock, p.precio) for p in productos)
    )


def actualizar_stock(
    productos: Iterable[Producto], ventas: Iterable[Venta]
) -> list[Producto]:
    """Subtract from each product the quantity of its first matching sale."""
    primera: dict[int, int] = {}
    for venta in ventas:
        primera.setdefault(venta.codigo, venta.cantidad)
    return [
        replace(p, stock=p.stock - primera[p.codigo]) if p.codigo in primera else p
        for p in productos
    ]


def procesar(ruta_stock: Ruta, ruta_ventas: Ruta, ruta_salida: Ruta) -> list[Producto]:
    """Read both files, write the updated master file and return its records."""
    productos = leer_productos(ruta_stock)
    ventas = leer_ventas(ruta_ventas)
    resultado = actualizar_stock(productos, ventas)
    escribir_productos(ruta_salida, resultado)
    return resultado


def main(argv: list[str] | None = None) -> int:
    """Apply the sales file to the stock file and save the result."""
    parser = argparse.ArgumentParser(description="Actualiza el stock con las ventas.")
    parser.add_argument("--stock", default="kiosco.dat")
    parser.add_argument("--ventas", default="movimientos.dat")
    parser.add_argument("--salida", default="salida.dat")
    args = parser.parse_args(argv)
    try:
        procesar(args.stock, args.ventas, args.salida)
    except OSError:
        print("Error al abrir los archivos.")
        return 1
    print(f"Archivo actualizado y guardado en '{args.salida}'.")
    return 0