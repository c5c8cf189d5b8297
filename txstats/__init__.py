"""
txstats
=========
Servicio HTTP en memoria que registra transacciones monetarias y
calcula sum/avg/max/min/count de los últimos 60 segundos.
"""

__version__ = "1.0.0"
