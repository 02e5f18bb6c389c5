"""A tensor of functions run one cell per thread or one cell per process."""

from __future__ import annotations

import os
import threading
from collections.abc import Callable
from concurrent.futures import ProcessPoolExecutor

X_POR_DEFECTO = 5
Y_POR_DEFECTO = 5
Z_POR_DEFECTO = 5

Funcion = Callable[[], str]


def _anunciar(letra: str) -> str:
    mensaje = f"Ejecutando funcion {letra}"
    print(mensaje, flush=True)
    return mensaje


def _funcion_a() -> str:
    return _anunciar("A")


def _funcion_b() -> str:
    return _anunciar("B")


def _funcion_c() -> str:
    return _anunciar("C")


def _funcion_d() -> str:
    return _anunciar("D")


def _funcion_e() -> str:
    return _anunciar("E")


_POR_CAPA: tuple[Funcion, ...] = (_funcion_a, _funcion_b, _funcion_c, _funcion_d)


def _validar(x: int, y: int, z: int) -> None:
    if x <= 0 or y <= 0 or z <= 0:
        raise ValueError("las dimensiones deben ser positivas")


def construir_tensor(
    x: int = X_POR_DEFECTO, y: int = Y_POR_DEFECTO, z: int = Z_POR_DEFECTO
) -> list[list[list[Funcion]]]:
    """Build an x*y*z tensor whose layer 0..3 holds functions A..D and later layers E."""
    _validar(x, y, z)
    return [
        [[_POR_CAPA[i] if i < len(_POR_CAPA) else _funcion_e for _ in range(z)] for _ in range(y)]
        for i in range(x)
    ]


def coordenadas(indice: int, y: int, z: int) -> tuple[int, int, int]:
    """Turn a flat row-major index into ``(x, y, z)`` for a tensor of depth y, z."""
    if y <= 0 or z <= 0:
        raise ValueError("las dimensiones deben ser positivas")
    if indice < 0:
        raise ValueError("el índice no puede ser negativo")
    return indice // (y * z), (indice // z) % y, indice % z


def ejecutar_con_hilos(
    x: int = X_POR_DEFECTO, y: int = Y_POR_DEFECTO, z: int = Z_POR_DEFECTO
) -> list[str]:
    """Start one thread per cell; each runs its cell's function alone.

    Returns the messages in the order the functions ran.
    """
    tensor = construir_tensor(x, y, z)
    semaforo = threading.Semaphore(1)
    mensajes: list[str] = []

    def ejecutar(indice: int) -> None:
        i, j, k = coordenadas(indice, y, z)
        with semaforo:
            mensajes.append(tensor[i][j][k]())

    hilos = [threading.Thread(target=ejecutar, args=(n,)) for n in range(x * y * z)]
    for hilo in hilos:
        hilo.start()
    for hilo in hilos:
        hilo.join()
    return mensajes


def ejecutar_con_procesos(
    x: int = X_POR_DEFECTO, y: int = Y_POR_DEFECTO, z: int = Z_POR_DEFECTO
) -> list[str]:
    """Run each cell's function in a child process and wait for all of them.

    Returns the messages in cell order.
    """
    tensor = construir_tensor(x, y, z)
    total = x * y * z
    celdas = [coordenadas(n, y, z) for n in range(total)]
    with ProcessPoolExecutor(max_workers=min(total, os.cpu_count() or 1)) as ejecutor:
        futuros = [ejecutor.submit(tensor[i][j][k]) for i, j, k in celdas]
        return [futuro.result() for futuro in futuros]