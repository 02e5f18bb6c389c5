import struct

import pytest

from estructuras.archivo.secuencial import (
    Producto,
    Venta,
    actualizar_stock,
    escribir_productos,
    leer_productos,
    leer_ventas,
    main,
    procesar,
)

PRODUCTOS = [Producto(1, 10, 2.5), Producto(2, 5, 1.0), Producto(3, 8, 0.5)]
VENTAS = [Venta(1, 3), Venta(3, 2), Venta(1, 4)]


def _escribir_ventas(ruta, ventas):
    ruta.write_bytes(b"".join(struct.pack("<ii", v.codigo, v.cantidad) for v in ventas))


@pytest.fixture
def archivos(tmp_path):
    stock = tmp_path / "kiosco.dat"
    ventas = tmp_path / "movimientos.dat"
    escribir_productos(stock, PRODUCTOS)
    _escribir_ventas(ventas, VENTAS)
    return stock, ventas, tmp_path / "salida.dat"


def test_solo_cuenta_la_primera_venta():
    resultado = actualizar_stock(PRODUCTOS, VENTAS)
    assert resultado[0].stock == 7


def test_producto_sin_venta_no_cambia():
    resultado = actualizar_stock(PRODUCTOS, VENTAS)
    assert resultado[1] == PRODUCTOS[1]


def test_conserva_codigo_precio_y_orden():
    resultado = actualizar_stock(PRODUCTOS, VENTAS)
    assert [(p.codigo, p.precio) for p in resultado] == [
        (p.codigo, p.precio) for p in PRODUCTOS
    ]


def test_sin_ventas_es_identidad():
    assert actualizar_stock(PRODUCTOS, []) == PRODUCTOS


def test_productos_ida_y_vuelta(tmp_path):
    ruta = tmp_path / "p.dat"
    escribir_productos(ruta, PRODUCTOS)
    assert leer_productos(ruta) == PRODUCTOS


def test_leer_ventas(archivos):
    _, ventas, _ = archivos
    assert leer_ventas(ventas) == VENTAS


def test_procesar(archivos):
    stock, ventas, salida = archivos
    resultado = procesar(stock, ventas, salida)
    assert resultado == actualizar_stock(PRODUCTOS, VENTAS)
    assert leer_productos(salida) == resultado


def test_procesar_archivo_faltante(tmp_path):
    with pytest.raises(FileNotFoundError):
        procesar(tmp_path / "a", tmp_path / "b", tmp_path / "c")


def test_main(archivos, capsys):
    stock, ventas, salida = archivos
    codigo = main(["--stock", str(stock), "--ventas", str(ventas), "--salida", str(salida)])
    assert codigo == 0
    assert "Archivo actualizado y guardado en" in capsys.readouterr().out
    assert leer_productos(salida) == actualizar_stock(PRODUCTOS, VENTAS)


def test_main_error(tmp_path, capsys):
    codigo = main(["--stock", str(tmp_path / "falta.dat"), "--salida", str(tmp_path / "s")])
    assert codigo == 1
    assert "Error al abrir los archivos." in capsys.readouterr().out