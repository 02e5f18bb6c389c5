import pytest

from estructuras.cola.circular import (
    ColaCircular,
    ColaLlenaError,
    ColaVaciaError,
    Dato,
)


def _llena(capacidad, cantidad):
    cola = ColaCircular(capacidad)
    for n in range(1, cantidad + 1):
        cola.encolar(Dato(n, n * 10))
    return cola


def test_fifo_order():
    cola = _llena(5, 3)
    assert [cola.desencolar().i for _ in range(3)] == [1, 2, 3]
    assert len(cola) == 0


def test_default_capacity_is_five():
    cola = _llena(5, 5)
    with pytest.raises(ColaLlenaError):
        cola.encolar(Dato(6, 0))
    assert ColaCircular().capacidad == 5


def test_full_queue_keeps_contents():
    cola = _llena(2, 2)
    with pytest.raises(ColaLlenaError):
        cola.encolar(Dato(3, 30))
    assert [d.i for d in cola] == [1, 2]


def test_empty_dequeue_raises():
    cola = ColaCircular(3)
    with pytest.raises(ColaVaciaError):
        cola.desencolar()


def test_wraparound():
    cola = _llena(3, 3)
    assert cola.desencolar() == Dato(1, 10)
    cola.encolar(Dato(4, 40))
    assert [d.i for d in cola] == [2, 3, 4]
    assert len(cola) == 3


def test_many_cycles_preserve_order():
    cola = ColaCircular(3)
    salida = []
    for n in range(10):
        cola.encolar(Dato(n, n))
        if len(cola) == 3:
            salida.append(cola.desencolar().i)
    salida.extend(d.i for d in cola)
    assert salida == list(range(10))


def test_invalid_capacity():
    with pytest.raises(ValueError):
        ColaCircular(0)


def test_formatear_empty():
    assert ColaCircular().formatear() == "La cola está vacía"


def test_formatear_rows():
    cola = _llena(3, 3)
    cola.desencolar()
    cola.encolar(Dato(4, 40))
    lineas = cola.formatear().splitlines()
    assert lineas[0] == "Contenido de la cola circular:"
    filas = [linea for linea in lineas if linea.startswith("| ") and "Valor" not in linea]
    assert len(filas) == 3
    assert filas[-1].split("|")[1].strip() == "4"
    assert filas[-1].split("|")[3].strip() == "0"