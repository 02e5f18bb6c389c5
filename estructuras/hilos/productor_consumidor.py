"""Producer and consumer exchanging items through a bounded stack."""

from __future__ import annotations

import threading

BUFFER_SIZE = 5
CANTIDAD = 10


def ejecutar(cantidad: int = CANTIDAD, capacidad: int = BUFFER_SIZE) -> tuple[list[int], list[int]]:
    """Produce ``cantidad`` items into a buffer of ``capacidad`` slots and consume them.

    The buffer is a stack: the consumer takes the most recent item.
    Returns the items in the order produced and in the order consumed.
    """
    if cantidad < 0:
        raise ValueError("la cantidad no puede ser negativa")
    if capacidad <= 0:
        raise ValueError("la capacidad debe ser positiva")
    vacio = threading.Semaphore(capacidad)
    lleno = threading.Semaphore(0)
    cerrojo = threading.Lock()
    buffer: list[int] = []
    producidos: list[int] = []
    consumidos: list[int] = []

    def productor() -> None:
        for item in range(cantidad):
            vacio.acquire()
            with cerrojo:
                buffer.append(item)
                producidos.append(item)
                print(f"Productor: produjo {item}")
            lleno.release()

    def consumidor() -> None:
        for _ in range(cantidad):
            lleno.acquire()
            with cerrojo:
                item = buffer.pop()
                consumidos.append(item)
                print(f"Consumidor: consumió {item}")
            vacio.release()

    hilos = [threading.Thread(target=productor), threading.Thread(target=consumidor)]
    for hilo in hilos:
        hilo.start()
    for hilo in hilos:
        hilo.join()
    return producidos, consumidos