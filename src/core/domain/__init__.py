"""Modelos y entidades del dominio.

Aquí viven las estructuras de datos puras y estrictas (Pydantic v2): clientes,
mascotas, medicamentos y consultas. El dominio no conoce la CLI ni los
exportadores.
"""
