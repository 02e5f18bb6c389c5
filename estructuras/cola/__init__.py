"""Colas: circular, FIFO, doble, múltiple y de prioridad."""