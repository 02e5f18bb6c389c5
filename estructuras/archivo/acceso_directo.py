"""Fixed-size records of news stands, updated in place."""

from __future__ import annotations

import argparse
import struct
from collections.abc import Iterable
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

_LARGO_CALLE = 30
_LARGO_NOMBRE = 20
_REGISTRO = struct.Struct(f"<{_LARGO_CALLE}s{_LARGO_NOMBRE}s2xii")

ARCHIVO_POR_DEFECTO = "diarios.dat"

Ruta = str | PathLike[str]


@dataclass(frozen=True)
class Puesto:
    """A news stand: its street, name and counts of papers and magazines."""

    calle: str
    nombre: str
    cant_diarios: int
    cant_revistas: int


def _codificar(texto: str, largo: int) -> bytes:
    datos = texto.encode("utf-8")
    if len(datos) >= largo:
        raise ValueError(f"{texto!r} no cabe en un campo de {largo} bytes")
    return datos.ljust(largo, b"\0")


def _decodificar(campo: bytes) -> str:
    return campo.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def _empaquetar(puesto: Puesto) -> bytes:
    return _REGISTRO.pack(
        _codificar(puesto.calle, _LARGO_CALLE),
        _codificar(puesto.nombre, _LARGO_NOMBRE),
        puesto.cant_diarios,
        puesto.cant_revistas,
    )


def _desempaquetar(bloque: bytes) -> Puesto:
    calle, nombre, diarios, revistas = _REGISTRO.unpack(bloque)
    return Puesto(_decodificar(calle), _decodificar(nombre), diarios, revistas)


def leer_puestos(ruta: Ruta) -> list[Puesto]:
    """Read every whole record in the file; a trailing partial record is ignored."""
    datos = Path(ruta).read_bytes()
    completos = len(datos) - len(datos) % _REGISTRO.size
    return [
        _desempaquetar(datos[inicio : inicio + _REGISTRO.size])
        for inicio in range(0, completos, _REGISTRO.size)
    ]


def escribir_puestos(ruta: Ruta, puestos: Iterable[Puesto]) -> None:
    """Write the records to the file, replacing its contents."""
    Path(ruta).write_bytes(b"".join(_empaquetar(p) for p in puestos))


def actualizar_direccion(
    ruta: Ruta, nombre: str, nueva_direccion: str
) -> tuple[int, str | None]:
    """Set the street of every stand called ``nombre``, rewriting the file in place.

    Returns how many records were updated and the name of the stand with
    the largest delivery, or None when no stand beats zero on both counts.
    """
    calle = _codificar(nueva_direccion, _LARGO_CALLE)
    actualizados = 0
    max_diarios = max_revistas = 0
    puesto_max: str | None = None
    with open(ruta, "r+b") as archivo:
        while True:
            posicion = archivo.tell()
            bloque = archivo.read(_REGISTRO.size)
            if len(bloque) < _REGISTRO.size:
                break
            puesto = _desempaquetar(bloque)
            if puesto.nombre == nombre:
                archivo.seek(posicion)
                archivo.write(calle)
                archivo.seek(posicion + _REGISTRO.size)
                actualizados += 1
            if puesto.cant_diarios > max_diarios and puesto.cant_revistas > max_revistas:
                max_diarios = puesto.cant_diarios
                max_revistas = puesto.cant_revistas
                puesto_max = puesto.nombre
    return actualizados, puesto_max


def _pedir(mensaje: str) -> str:
    partes = input(mensaje).split()
    return partes[0] if partes else ""


def main(argv: list[str] | None = None) -> int:
    """Update a stand's street and report the stand with the largest delivery."""
    parser = argparse.ArgumentParser(description="Actualiza la dirección de un puesto.")
    parser.add_argument("--archivo", default=ARCHIVO_POR_DEFECTO)
    parser.add_argument("nombre", nargs="?")
    parser.add_argument("direccion", nargs="?")
    args = parser.parse_args(argv)

    nombre = args.nombre or _pedir("Ingrese el nombre del puesto a modificar: ")
    direccion = args.direccion or _pedir("Ingrese la nueva dirección: ")
    try:
        actualizados, puesto_max = actualizar_direccion(args.archivo, nombre, direccion)
    except OSError:
        print("Error al abrir el archivo.")
        return 1
    except ValueError as error:
        print(f"Error: {error}")
        return 1
    for _ in range(actualizados):
        print("Dirección actualizada correctamente.")
    print(f"Puesto con mayor entrega: {puesto_max or ''}")
    return 0