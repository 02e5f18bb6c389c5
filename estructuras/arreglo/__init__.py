"""Operaciones enteras, matriz como buffer circular, volcado de archivos y arreglos dinámicos."""