"""Ejercicios de sincronización entre hilos y procesos con semáforos."""