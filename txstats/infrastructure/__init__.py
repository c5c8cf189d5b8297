"""
txstats – Infrastructure Layer
================================
Implementaciones concretas de las interfaces del dominio.

Este módulo contiene:
- persistence/: InMemoryTransactionStore
"""
