"""Dominio: modelos de la API, vocabulario de consultas y errores.

Sin HTTP ni CLI aquí; solo conceptos del problema (listados, ventanas de
fecha, filtros).
"""
