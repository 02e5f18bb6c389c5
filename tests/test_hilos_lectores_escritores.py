import pytest

from estructuras.hilos.lectores_escritores import ejecutar


def test_writers_append_each_line_once(tmp_path):
    ruta = tmp_path / "hola.txt"
    ruta.write_text("hola\n", encoding="utf-8")
    ejecutar(ruta, 5, 3)
    finales = ruta.read_text(encoding="utf-8").splitlines(keepends=True)
    assert finales[0] == "hola\n"
    assert sorted(finales[1:]) == sorted(
        f"Escritor {n} añadió esta línea.\n" for n in range(1, 4)
    )


def test_readers_see_a_prefix_of_the_final_file(tmp_path):
    ruta = tmp_path / "hola.txt"
    ruta.write_text("hola\nmundo\n", encoding="utf-8")
    lecturas = ejecutar(ruta, 5, 3)
    finales = ruta.read_text(encoding="utf-8").splitlines(keepends=True)
    assert set(lecturas) == {1, 2, 3, 4, 5}
    for lineas in lecturas.values():
        assert lineas is not None
        assert len(lineas) >= 2
        assert lineas == finales[: len(lineas)]


def test_readers_only_leave_file_unchanged(tmp_path):
    ruta = tmp_path / "hola.txt"
    ruta.write_text("uno\ndos\n", encoding="utf-8")
    lecturas = ejecutar(ruta, 3, 0)
    assert lecturas == {n: ["uno\n", "dos\n"] for n in (1, 2, 3)}
    assert ruta.read_text(encoding="utf-8") == "uno\ndos\n"


def test_missing_file_gives_none(tmp_path):
    lecturas = ejecutar(tmp_path / "falta.txt", 2, 0)
    assert lecturas == {1: None, 2: None}


def test_negative_counts_rejected(tmp_path):
    with pytest.raises(ValueError):
        ejecutar(tmp_path / "hola.txt", -1, 0)