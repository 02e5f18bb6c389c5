"""Readers and writers sharing a text file, with readers given priority."""

from __future__ import annotations

import sys
import threading
from os import PathLike

MAX_LECTORES = 5
NUM_ESCRITURAS = 3
ARCHIVO_POR_DEFECTO = "hola.txt"


def ejecutar(
    ruta: str | PathLike[str] = ARCHIVO_POR_DEFECTO,
    lectores: int = MAX_LECTORES,
    escritores: int = NUM_ESCRITURAS,
) -> dict[int, list[str] | None]:
    """Run the readers and writers concurrently on the file at ``ruta``.

    Readers may read together; a writer appends one line alone. Returns,
    for each reader number, the lines it read, or None when it could not
    open the file.
    """
    if lectores < 0 or escritores < 0:
        raise ValueError("las cantidades no pueden ser negativas")
    mutex = threading.Semaphore(1)
    mutex_escritura = threading.Semaphore(1)
    contador_lectores = 0
    lecturas: dict[int, list[str] | None] = {}

    def lector(numero: int) -> None:
        nonlocal contador_lectores
        with mutex:
            contador_lectores += 1
            if contador_lectores == 1:
                mutex_escritura.acquire()
        try:
            try:
                with open(ruta, encoding="utf-8") as archivo:
                    lineas = archivo.readlines()
            except OSError as error:
                print(f"Error al abrir el archivo: {error}", file=sys.stderr)
                lecturas[numero] = None
                return
            print(f"Lector {numero} está leyendo el archivo...")
            for linea in lineas:
                print(f"Lector {numero} leyó: {linea}", end="")
            lecturas[numero] = lineas
        finally:
            with mutex:
                contador_lectores -= 1
                if contador_lectores == 0:
                    mutex_escritura.release()

    def escritor(numero: int) -> None:
        with mutex_escritura:
            try:
                with open(ruta, "a", encoding="utf-8") as archivo:
                    print(f"Escritor {numero} está escribiendo en el archivo...")
                    archivo.write(f"Escritor {numero} añadió esta línea.\n")
            except OSError as error:
                print(f"Error al abrir el archivo: {error}", file=sys.stderr)

    hilos = [
        threading.Thread(target=lector, args=(numero,))
        for numero in range(1, lectores + 1)
    ]
    hilos += [
        threading.Thread(target=escritor, args=(numero,))
        for numero in range(1, escritores + 1)
    ]
    for hilo in hilos:
        hilo.start()
    for hilo in hilos:
        hilo.join()
    return lecturas