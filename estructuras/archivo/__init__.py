"""Lectura y actualización de archivos de registros binarios."""