"""Errores del paquete.

El Core (composición de clases y paginación) no lanza excepciones: las
entradas se acotan o se tratan como ausentes. Estos errores cubren los bordes
(proveedores de metadata, adaptadores).
"""

from __future__ import annotations


class BootstrapMarkupError(Exception):
    pass


class UnknownFieldError(BootstrapMarkupError, KeyError):
    """El proveedor de metadata no conoce el `field_id` pedido."""

    def __init__(self, field_id: str, model_name: str | None = None):
        self.field_id = field_id
        self.model_name = model_name
        where = f" on {model_name}" if model_name else ""
        super().__init__(f"Unknown field '{field_id}'{where}")

    def __str__(self) -> str:
        return str(self.args[0])
