import pytest

from estructuras.grafo.dag import CicloError, Dag, main


def _dag(nodos, aristas):
    dag = Dag()
    for _ in range(nodos):
        dag.agregar_nodo()
    for origen, destino in aristas:
        dag.agregar_arista(origen, destino)
    return dag


def test_agregar_nodo_numera_desde_uno():
    dag = Dag()
    numeros = [dag.agregar_nodo() for _ in range(3)]
    assert numeros == [1, 2, 3]
    assert len(dag) == 3


def test_limite_de_nodos():
    dag = Dag(2)
    dag.agregar_nodo()
    dag.agregar_nodo()
    with pytest.raises(OverflowError):
        dag.agregar_nodo()
    assert len(dag) == 2


@pytest.mark.parametrize("origen,destino", [(0, 1), (1, 3), (4, 1)])
def test_arista_con_nodo_inexistente(origen, destino):
    dag = _dag(2, [])
    with pytest.raises(IndexError):
        dag.agregar_arista(origen, destino)


def test_adyacentes_mas_reciente_primero():
    dag = _dag(3, [(1, 2), (1, 3)])
    assert dag.adyacentes(1) == [3, 2]
    assert dag.adyacentes(2) == []


def test_orden_del_ejemplo():
    dag = _dag(4, [(1, 2), (1, 3), (2, 4), (3, 4)])
    assert dag.orden_topologico() == [1, 2, 3, 4]


def test_orden_respeta_todas_las_aristas():
    aristas = [(5, 1), (5, 3), (2, 4), (3, 2), (6, 5), (6, 4), (1, 4)]
    dag = _dag(6, aristas)
    orden = dag.orden_topologico()
    assert sorted(orden) == list(range(1, 7))
    posicion = {nodo: i for i, nodo in enumerate(orden)}
    for origen, destino in aristas:
        assert posicion[origen] < posicion[destino]


def test_grafo_vacio():
    assert Dag().orden_topologico() == []


def test_ciclo_lanza_error():
    dag = _dag(3, [(1, 2), (2, 3), (3, 1)])
    with pytest.raises(CicloError):
        dag.orden_topologico()


def test_lazo_lanza_error():
    dag = _dag(1, [(1, 1)])
    with pytest.raises(CicloError):
        dag.orden_topologico()


def test_formatear():
    dag = _dag(2, [(1, 2)])
    assert dag.formatear().splitlines() == ["Nodo 1 -> 2", "Nodo 2 ->"]


def test_main(capsys):
    assert main([]) == 0
    salida = capsys.readouterr().out
    assert "Orden topológico: 1 2 3 4" in salida
    assert "Arista de 3 -> 4 agregada." in salida