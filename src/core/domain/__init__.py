"""Modelos del dominio: DTO remoto, `Quote`, mapper y estados de vista.

El dominio no conoce HTTP, CLI, ni Rich: solo conceptos del problema.
"""
