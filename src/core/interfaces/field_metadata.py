"""Contrato del proveedor de metadata de formularios.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Sustituye la reflexión sobre expresiones del framework por una capacidad
  explícita: quien renderiza un input recibe el proveedor como argumento.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.style import ValidationState


@runtime_checkable
class FieldMetadataProvider(Protocol):
    """Metadata de un campo enlazado, identificado por `field_id`.

    Reglas de diseño:
    - Todas las consultas son síncronas y sin efectos secundarios.
    - Un `field_id` desconocido es un error del llamador
      (`core.errors.UnknownFieldError`).
    """

    def is_field_required(self, field_id: str) -> bool:
        ...

    def is_field_read_only(self, field_id: str) -> bool:
        ...

    def get_validation_state(self, field_id: str) -> ValidationState:
        ...

    def get_display_name(self, field_id: str) -> str:
        ...

    def is_email_field(self, field_id: str) -> bool:
        """True si el campo debe renderizarse como `type="email"`."""

        ...

    def get_value(self, field_id: str) -> str | None:
        """Valor intentado (enviado) para el campo, si existe."""

        ...

    def get_error_message(self, field_id: str) -> str | None:
        ...
