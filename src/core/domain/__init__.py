"""Modelos y vocabulario del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2) y los
  enums de estilo de Bootstrap.
- El dominio no conoce Jinja2, HTML ni CLI: solo conceptos del problema.
"""
