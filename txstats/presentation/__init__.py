"""
txstats – Presentation Layer
==============================
Adaptadores HTTP (FastAPI). Sin lógica de negocio.
"""
