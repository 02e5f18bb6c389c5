"""Small thread-synchronisation exercises built on semaphores."""

from __future__ import annotations

import os
import threading


def identificar_hilos(cantidad: int = 3) -> list[tuple[int, int, int]]:
    """Run ``cantidad`` threads one at a time, each reporting who it is.

    A single semaphore, opened once by the caller, is passed from thread
    to thread. Returns ``(number, thread id, process id)`` in the order
    the threads ran.
    """
    if cantidad < 0:
        raise ValueError("la cantidad de hilos no puede ser negativa")
    turno = threading.Semaphore(0)
    registro: list[tuple[int, int, int]] = []

    def trabajar(numero: int) -> None:
        with turno:
            tid = threading.get_ident()
            pid = os.getpid()
            print(f"Soy el hilo {numero} (TID: {tid}), en el proceso (PID: {pid})")
            registro.append((numero, tid, pid))

    hilos = [
        threading.Thread(target=trabajar, args=(numero,))
        for numero in range(1, cantidad + 1)
    ]
    for hilo in hilos:
        hilo.start()
    turno.release()
    for hilo in hilos:
        hilo.join()
    return registro


def contador_compartido(iteraciones: int = 10000) -> list[tuple[int, int]]:
    """Increment a shared counter in one thread, then decrement it in another.

    The decrementing thread (function 1) waits until the incrementing one
    (function 2) has finished. Returns ``(function, counter)`` after every step.
    """
    if iteraciones < 0:
        raise ValueError("las iteraciones no pueden ser negativas")
    listo = threading.Semaphore(0)
    contador = 0
    traza: list[tuple[int, int]] = []

    def restar() -> None:
        nonlocal contador
        listo.acquire()
        for _ in range(iteraciones):
            contador -= 1
            print(f"Funcion 1: {contador} ")
            traza.append((1, contador))

    def sumar() -> None:
        nonlocal contador
        for _ in range(iteraciones):
            contador += 1
            print(f"Funcion 2: {contador}")
            traza.append((2, contador))
        listo.release()

    hilos = [threading.Thread(target=restar), threading.Thread(target=sumar)]
    for hilo in hilos:
        hilo.start()
    for hilo in hilos:
        hilo.join()
    return traza


def alternar_par(limite: int = 50) -> list[str]:
    """Print the numbers 0..limite, with a second thread announcing each even one.

    Returns the printed lines in order: every even number is followed by
    ``"Par"``.
    """
    if limite < 0:
        raise ValueError("el límite no puede ser negativo")
    s1 = threading.Semaphore(1)
    s2 = threading.Semaphore(0)
    terminado = False
    salida: list[str] = []

    def contar() -> None:
        nonlocal terminado
        for i in range(limite + 1):
            s1.acquire()
            print(i)
            salida.append(str(i))
            if i % 2 == 0:
                s2.release()
            else:
                s1.release()
        s1.acquire()
        terminado = True
        s2.release()

    def anunciar() -> None:
        while True:
            s2.acquire()
            if terminado:
                return
            print("Par")
            salida.append("Par")
            s1.release()

    hilos = [threading.Thread(target=contar), threading.Thread(target=anunciar)]
    for hilo in hilos:
        hilo.start()
    for hilo in hilos:
        hilo.join()
    return salida


def venta_y_deposito(saldo: int = 1000) -> tuple[int, list[str]]:
    """Run a sale of 200 and a deposit of 500 concurrently on one balance.

    The sale only goes through when the balance covers it. Returns the final
    balance and the messages of both operations in the order they happened.
    """
    semaforo = threading.Semaphore(1)
    mensajes: list[str] = []

    def vender() -> None:
        nonlocal saldo
        with semaforo:
            print("Realizando venta...")
            if saldo >= 200:
                saldo -= 200
                mensaje = f"Venta realizada. Nuevo saldo: {saldo}"
            else:
                mensaje = "Saldo insuficiente para realizar la venta."
            print(mensaje)
            mensajes.append(mensaje)

    def depositar() -> None:
        nonlocal saldo
        with semaforo:
            print("Realizando depósito...")
            saldo += 500
            mensaje = f"Depósito realizado. Nuevo saldo: {saldo}"
            print(mensaje)
            mensajes.append(mensaje)

    hilos = [threading.Thread(target=vender), threading.Thread(target=depositar)]
    for hilo in hilos:
        hilo.start()
    for hilo in hilos:
        hilo.join()
    print(f"Saldo final: {saldo}")
    return saldo, mensajes