"""Print jobs sharing a limited pool of printers through a counting semaphore."""

from __future__ import annotations

import threading
import time

NUM_IMPRESORAS = 3
NUM_TRABAJOS = 10
DURACION = 2.0

INTENTO = "intento"
TOMADA = "tomada"
TERMINADA = "terminada"


def imprimir_trabajos(
    trabajos: int = NUM_TRABAJOS,
    impresoras: int = NUM_IMPRESORAS,
    duracion: float = DURACION,
) -> list[tuple[int, str]]:
    """Run ``trabajos`` jobs, at most ``impresoras`` printing at once.

    Each job holds a printer for ``duracion`` seconds. Returns the events
    ``(job, INTENTO | TOMADA | TERMINADA)`` in the order they happened.
    """
    if trabajos < 0:
        raise ValueError("la cantidad de trabajos no puede ser negativa")
    if impresoras <= 0:
        raise ValueError("debe haber al menos una impresora")
    if duracion < 0:
        raise ValueError("la duración no puede ser negativa")
    semaforo = threading.Semaphore(impresoras)
    cerrojo = threading.Lock()
    eventos: list[tuple[int, str]] = []

    def anotar(trabajo: int, evento: str, mensaje: str) -> None:
        with cerrojo:
            eventos.append((trabajo, evento))
            print(f"Trabajo {trabajo}: {mensaje}")

    def usar_impresora(trabajo: int) -> None:
        anotar(trabajo, INTENTO, "Intentando usar una impresora...")
        with semaforo:
            anotar(trabajo, TOMADA, "Impresora tomada. Imprimiendo...")
            time.sleep(duracion)
            anotar(trabajo, TERMINADA, "Impresión terminada. Liberando impresora.")

    hilos = [
        threading.Thread(target=usar_impresora, args=(trabajo,))
        for trabajo in range(1, trabajos + 1)
    ]
    for hilo in hilos:
        hilo.start()
    for hilo in hilos:
        hilo.join()
    return eventos