import os
import threading

import pytest

from estructuras.hilos.sincronizacion import (
    alternar_par,
    contador_compartido,
    identificar_hilos,
    venta_y_deposito,
)


def test_identificar_hilos_runs_every_thread_once():
    registro = identificar_hilos(3)
    assert sorted(numero for numero, _, _ in registro) == [1, 2, 3]
    assert all(pid == os.getpid() for _, _, pid in registro)
    assert all(tid != threading.get_ident() for _, tid, _ in registro)


def test_identificar_hilos_rejects_negative():
    with pytest.raises(ValueError):
        identificar_hilos(-1)


def test_contador_compartido_small_trace():
    assert contador_compartido(2) == [(2, 1), (2, 2), (1, 1), (1, 0)]


def test_contador_compartido_increments_before_decrements():
    n = 50
    traza = contador_compartido(n)
    assert len(traza) == 2 * n
    assert all(funcion == 2 for funcion, _ in traza[:n])
    assert all(funcion == 1 for funcion, _ in traza[n:])
    assert max(valor for _, valor in traza) == n
    assert traza[-1] == (1, 0)


def test_alternar_par_even_limit():
    assert alternar_par(4) == ["0", "Par", "1", "2", "Par", "3", "4", "Par"]


@pytest.mark.parametrize("limite", [0, 3, 7, 20])
def test_alternar_par_invariants(limite):
    salida = alternar_par(limite)
    numeros = [int(linea) for linea in salida if linea != "Par"]
    assert numeros == list(range(limite + 1))
    for posicion, linea in enumerate(salida):
        if linea == "Par":
            assert int(salida[posicion - 1]) % 2 == 0
        elif int(linea) % 2 == 0:
            assert salida[posicion + 1] == "Par"


def test_venta_y_deposito_with_enough_balance():
    saldo, mensajes = venta_y_deposito(1000)
    assert saldo == 1300
    assert len(mensajes) == 2


def test_venta_y_deposito_low_balance_is_consistent():
    saldo, mensajes = venta_y_deposito(100)
    if any(m.startswith("Venta realizada") for m in mensajes):
        assert saldo == 400
    else:
        assert "Saldo insuficiente para realizar la venta." in mensajes
        assert saldo == 600