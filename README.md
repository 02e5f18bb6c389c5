# estructuras

Estructuras de datos, grafos, archivos de registros binarios y ejercicios de
sincronización entre hilos, escritos en Python puro y sin dependencias
externas.

## Contenido

- **Colas** (`estructuras.cola`)
  - `circular.ColaCircular`: cola de capacidad fija (5 por defecto) sobre un
    anillo de posiciones; guarda registros `Dato(i, valor)`.
  - `fifo.ColaFifo`: cola FIFO sin límite, con `frente()`.
  - `fifo_prioridad.ColaPrioridadAcotada`: cola acotada de
    `DatoPrioridad(i, valor, prioridad)`; sale primero la prioridad más alta.
  - `doble.ColaDoble`: inserción y eliminación por ambos extremos, con
    `frente()` y `final()`.
  - `multiple.ColaMultiple`: varias colas FIFO (3 por defecto) elegidas por
    número; un número fuera de rango lanza `NumeroColaInvalidoError`.
  - `desbordamiento.ColaPrioritaria`: ordenada por número de prioridad
    ascendente; cuando está llena, `insertar()` reemplaza el primer elemento
    de prioridad menor que la del nuevo.
- **Grafos y árboles** (`estructuras.grafo`)
  - `dag.Dag`: grafo dirigido con nodos numerados desde 1 y
    `orden_topologico()`; un ciclo lanza `CicloError`.
  - `kd.ArbolKD`: árbol K-D con `insertar()`, `preorden()` y `mas_cercano()`.
  - `mst.kruskal()` y `mst.Subconjuntos`: árbol de expansión mínima con
    conjuntos disjuntos.
  - `ponderado.GrafoPonderado`: grafo no dirigido con pesos.
  - `bipartito.GrafoBipartito`: dos conjuntos de nodos numerados desde 1.
  - `arbol.ArbolBinario`: inserta por valor y busca, modifica y elimina por
    identificador; recorridos en preorden, inorden y postorden.
  - `grafo.Grafo`: grafo dirigido de registros con listas de adyacencia.
- **Arreglos** (`estructuras.arreglo`)
  - `operaciones`: `sumar`, `restar`, `multiplicar` y `dividir` (división
    entera truncada hacia cero; dividir por cero devuelve 0).
  - `buffer_circular.MatrizCircular`: cursores de escritura y lectura que
    recorren una matriz fila por fila y vuelven al principio.
  - `volcado.volcar()`: copia un archivo a un flujo binario por bloques.
  - `dinamico.multiplos_de_diez()`: lista donde la posición i vale i * 10.
- **Archivos de registros** (`estructuras.archivo`)
  - `acceso_directo`: registros fijos `Puesto` de puestos de diarios;
    `actualizar_direccion()` cambia la calle en el lugar y devuelve cuántos
    registros cambió y el puesto con mayor entrega.
  - `secuencial`: registros `Producto` y `Venta`; `procesar()` descuenta de
    cada producto la primera venta de su código y escribe el archivo nuevo.
- **Hilos** (`estructuras.hilos`)
  - `sincronizacion`: `identificar_hilos`, `contador_compartido`,
    `alternar_par` y `venta_y_deposito`.
  - `lectores_escritores.ejecutar()`: lectores y escritores sobre un archivo
    de texto, con prioridad para los lectores.
  - `productor_consumidor.ejecutar()`: productor y consumidor con un buffer
    acotado que funciona como pila.
  - `impresoras.imprimir_trabajos()`: trabajos que comparten impresoras con
    un semáforo contador.
  - `tensor_funciones`: un tensor de funciones ejecutado una celda por hilo
    (`ejecutar_con_hilos`) o una celda por proceso (`ejecutar_con_procesos`).

Las colas admiten `len()` e iteración del frente al final, y `formatear()`
devuelve su contenido como tabla de texto. Sacar de una cola vacía lanza
`ColaVaciaError`; meter en una cola acotada llena lanza `ColaLlenaError`.

## Instalación

```
pip install .
```

Para correr las pruebas:

```
pip install ".[test]"
pytest
```

## Uso como biblioteca

```python
from estructuras.arreglo.operaciones import sumar, restar, multiplicar, dividir

sumar(10, 5)        # 15
restar(10, 5)       # 5
multiplicar(10, 5)  # 50
dividir(10, 5)      # 2
dividir(10, 0)      # 0
```

```python
from estructuras.grafo.dag import Dag, CicloError

dag = Dag(100)
for _ in range(4):
    dag.agregar_nodo()
dag.agregar_arista(1, 2)
dag.agregar_arista(1, 3)
dag.agregar_arista(2, 4)
dag.agregar_arista(3, 4)

print(dag.formatear())
print(dag.orden_topologico())   # [1, 2, 3, 4]
```

```python
from estructuras.cola.circular import ColaCircular, Dato

cola = ColaCircular(3)
cola.encolar(Dato(1, 42))
cola.encolar(Dato(2, 7))
cola.desencolar()   # Dato(i=1, valor=42)
len(cola)           # 1
```

## Comandos

| Comando | Qué hace |
| --- | --- |
| `estructuras-acceso-directo` | Cambia la dirección de un puesto en un archivo de registros (`diarios.dat` por defecto, opción `--archivo`) y muestra el puesto con mayor entrega |
| `estructuras-secuencial` | Genera un archivo de stock actualizado (`--stock`, `--ventas`, `--salida`) |
| `estructuras-operaciones` | Muestra suma, resta, multiplicación y división de dos enteros (10 y 5 por defecto) |
| `estructuras-volcado` | Copia un archivo (`archivo.txt` por defecto) a la salida estándar |
| `estructuras-dinamico` | Pide un tamaño y muestra un arreglo de múltiplos de diez |
| `estructuras-dag` | Construye un DAG de ejemplo y muestra su orden topológico |
| `estructuras-kd` | Construye un árbol K-D de ejemplo y busca el punto más cercano a (10, 5) |
| `estructuras-mst` | Lee vértices y aristas de la entrada estándar y muestra el árbol de expansión mínima |

Cada comando acepta `--help`.

## Lo que no incluye

- No hay algoritmos de ordenamiento (burbuja, quicksort, heapsort y demás),
  ni matriz o arreglo de tamaño fijo que se ordenen.
- No hay un tensor 3D de valores numéricos; el único tensor es el de
  funciones de `estructuras.hilos.tensor_funciones`.
- Las colas, el árbol binario y el grafo son solo bibliotecas: no tienen un
  menú interactivo ni un comando propio.