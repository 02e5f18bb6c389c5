[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "estructuras"
version = "0.1.0"
description = "Colas, grafos, árboles, archivos de registros y sincronización entre hilos en Python puro"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "estructuras de datos",
    "colas",
    "grafos",
    "kruskal",
    "arbol kd",
    "orden topologico",
    "hilos",
    "semaforos",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
estructuras-acceso-directo = "estructuras.archivo.acceso_directo:main"
estructuras-secuencial = "estructuras.archivo.secuencial:main"
estructuras-operaciones = "estructuras.arreglo.operaciones:main"
estructuras-volcado = "estructuras.arreglo.volcado:main"
estructuras-dinamico = "estructuras.arreglo.dinamico:main"
estructuras-dag = "estructuras.grafo.dag:main"
estructuras-kd = "estructuras.grafo.kd:main"
estructuras-mst = "estructuras.grafo.mst:main"

[tool.hatch.build.targets.wheel]
packages = ["estructuras"]

[tool.hatch.build.targets.sdist]
include = ["estructuras", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
