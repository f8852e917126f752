"""Interfaces/abstracciones del Core.

Contratos (Protocol) que cumplen las entidades y que usan los servicios sin
acoplarse a clases concretas.
"""
