import pytest

from estructuras.hilos.productor_consumidor import ejecutar


def test_everything_produced_is_consumed():
    producidos, consumidos = ejecutar(10, 5)
    assert producidos == list(range(10))
    assert sorted(consumidos) == producidos


def test_single_slot_keeps_order():
    producidos, consumidos = ejecutar(6, 1)
    assert consumidos == producidos == list(range(6))


def test_nothing_to_produce():
    assert ejecutar(0, 3) == ([], [])


@pytest.mark.parametrize("cantidad, capacidad", [(-1, 5), (3, 0)])
def test_invalid_arguments(cantidad, capacidad):
    with pytest.raises(ValueError):
        ejecutar(cantidad, capacidad)