from collections import Counter

import pytest

from estructuras.hilos.tensor_funciones import (
    construir_tensor,
    coordenadas,
    ejecutar_con_hilos,
    ejecutar_con_procesos,
)


def test_coordenadas_corners():
    assert coordenadas(0, 5, 5) == (0, 0, 0)
    assert coordenadas(124, 5, 5) == (4, 4, 4)


def test_coordenadas_cover_every_cell_once():
    celdas = [coordenadas(n, 3, 4) for n in range(2 * 3 * 4)]
    assert len(set(celdas)) == 24
    assert all(0 <= i < 2 and 0 <= j < 3 and 0 <= k < 4 for i, j, k in celdas)
    assert celdas == sorted(celdas)


def test_coordenadas_rejects_bad_input():
    with pytest.raises(ValueError):
        coordenadas(-1, 5, 5)
    with pytest.raises(ValueError):
        coordenadas(3, 0, 5)


def test_construir_tensor_layers():
    tensor = construir_tensor(6, 2, 2)
    assert len(tensor) == 6
    assert tensor[0][1][1]() == "Ejecutando funcion A"
    assert tensor[3][0][0]() == "Ejecutando funcion D"
    assert tensor[4][0][1]() == tensor[5][1][1]() == "Ejecutando funcion E"


def test_construir_tensor_rejects_zero():
    with pytest.raises(ValueError):
        construir_tensor(0, 1, 1)


def test_ejecutar_con_hilos_runs_every_cell():
    mensajes = ejecutar_con_hilos(3, 2, 2)
    assert Counter(mensajes) == {
        "Ejecutando funcion A": 4,
        "Ejecutando funcion B": 4,
        "Ejecutando funcion C": 4,
    }


def test_ejecutar_con_procesos_in_cell_order():
    mensajes = ejecutar_con_procesos(2, 1, 2)
    tensor = construir_tensor(2, 1, 2)
    assert mensajes == [tensor[0][0][0](), tensor[0][0][1](), tensor[1][0][0](), tensor[1][0][1]()]
    assert mensajes[0] != mensajes[2]