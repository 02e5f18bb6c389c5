from estructuras.cola.circular import Dato
from estructuras.grafo.grafo import Grafo


def _grafo(*ids):
    grafo = Grafo()
    for i in ids:
        grafo.insertar_nodo(Dato(i, i * 10))
    return grafo


def test_nodes_are_kept_newest_first():
    grafo = _grafo(1, 2, 3)
    assert len(grafo) == 3
    assert [n.dato.i for n in grafo] == [3, 2, 1]


def test_edges_are_kept_newest_first():
    grafo = _grafo(1)
    assert grafo.insertar_arista(1, 5) is True
    assert grafo.insertar_arista(1, 7) is True
    nodo = grafo.consultar_nodo(1)
    assert nodo is not None
    assert nodo.adyacentes == [7, 5]


def test_edge_from_missing_node_is_rejected():
    grafo = _grafo(1)
    assert grafo.insertar_arista(9, 1) is False
    assert grafo.consultar_nodo(1).adyacentes == []


def test_remove_edge():
    grafo = _grafo(1)
    grafo.insertar_arista(1, 5)
    grafo.insertar_arista(1, 7)
    assert grafo.eliminar_arista(1, 5) is True
    assert grafo.consultar_nodo(1).adyacentes == [7]
    assert grafo.eliminar_arista(1, 5) is False
    assert grafo.eliminar_arista(4, 7) is False


def test_remove_node_keeps_edges_pointing_to_it():
    grafo = _grafo(1, 2)
    grafo.insertar_arista(1, 2)
    assert grafo.eliminar_nodo(2) is True
    assert len(grafo) == 1
    assert grafo.consultar_nodo(2) is None
    assert grafo.consultar_nodo(1).adyacentes == [2]
    assert grafo.eliminar_nodo(2) is False


def test_modify_node_value():
    grafo = _grafo(1, 2)
    assert grafo.modificar_nodo(1, 77) is True
    assert grafo.consultar_nodo(1).dato == Dato(1, 77)
    assert grafo.modificar_nodo(8, 1) is False


def test_duplicate_ids_resolve_to_newest():
    grafo = Grafo()
    grafo.insertar_nodo(Dato(1, 10))
    grafo.insertar_nodo(Dato(1, 20))
    assert grafo.consultar_nodo(1).dato.valor == 20


def test_consulted_node_is_a_copy():
    grafo = _grafo(1)
    copia = grafo.consultar_nodo(1)
    copia.adyacentes.append(3)
    assert grafo.consultar_nodo(1).adyacentes == []


def test_format_lists_nodes_and_edges():
    grafo = _grafo(1, 2)
    grafo.insertar_arista(1, 5)
    grafo.insertar_arista(1, 7)
    assert grafo.formatear() == "Nodo 2:\nNodo 1: -> 7 -> 5"