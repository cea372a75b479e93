"""Proveedor de metadata de formularios sobre modelos Pydantic.

Por qué Pydantic:
- Es el sistema de modelos/validación del proyecto: `FieldInfo` ya sabe si un
  campo es requerido, su título y su tipo.
- Un envío de formulario validado con `model_validate` da los valores
  intentados y los errores por campo (equivalente a un "model state").
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, get_args

from pydantic import BaseModel, EmailStr, ValidationError
from pydantic.fields import FieldInfo

from core.domain.style import ValidationState
from core.errors import UnknownFieldError


logger = logging.getLogger(__name__)


def humanize_field_name(name: str) -> str:
    """`favourite_color` -> `Favourite color`."""

    words = name.replace("_", " ").strip()
    return words[:1].upper() + words[1:]


class PydanticFieldMetadata:
    """`FieldMetadataProvider` respaldado por una clase de modelo Pydantic.

    - `values`: valores intentados por campo (lo que llegó en el envío).
    - `errors`: mensajes de error por campo (primer nivel de `loc`).

    Sin envío (formulario recién abierto) ningún campo tiene estado de
    validación.
    """

    def __init__(
        self,
        model_cls: type[BaseModel],
        *,
        values: Mapping[str, Any] | None = None,
        errors: Mapping[str, list[str]] | None = None,
    ) -> None:
        self.model_cls = model_cls
        # Envíos y errores de Pydantic usan el alias; las consultas, el nombre del campo.
        by_alias = {(f.alias or n): n for n, f in model_cls.model_fields.items()}
        self.values: dict[str, Any] = {by_alias.get(k, k): v for k, v in (values or {}).items()}
        self.errors: dict[str, list[str]] = {}
        for key, messages in (errors or {}).items():
            self.errors.setdefault(by_alias.get(key, key), []).extend(messages)
        self.instance: BaseModel | None = None

    @classmethod
    def from_submission(
        cls, model_cls: type[BaseModel], data: Mapping[str, Any]
    ) -> "PydanticFieldMetadata":
        """Valida `data` contra `model_cls` y conserva valores y errores."""

        values = {k: v for k, v in data.items() if v is not None}
        errors: dict[str, list[str]] = {}
        instance: BaseModel | None = None
        try:
            instance = model_cls.model_validate(dict(data))
        except ValidationError as exc:
            for err in exc.errors():
                loc = err.get("loc") or ()
                if not loc:
                    continue
                errors.setdefault(str(loc[0]), []).append(str(err.get("msg", "")))
            logger.debug("Submission for %s has %d invalid field(s)", model_cls.__name__, len(errors))

        metadata = cls(model_cls, values=values, errors=errors)
        metadata.instance = instance
        return metadata

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def _field(self, field_id: str) -> FieldInfo:
        field = self.model_cls.model_fields.get(field_id)
        if field is None:
            raise UnknownFieldError(field_id, self.model_cls.__name__)
        return field

    def is_field_required(self, field_id: str) -> bool:
        return self._field(field_id).is_required()

    def is_field_read_only(self, field_id: str) -> bool:
        field = self._field(field_id)
        if field.frozen:
            return True
        extra = field.json_schema_extra
        return isinstance(extra, dict) and bool(extra.get("readOnly"))

    def get_validation_state(self, field_id: str) -> ValidationState:
        self._field(field_id)
        if self.errors.get(field_id):
            return ValidationState.INVALID
        if self.values.get(field_id) is not None:
            return ValidationState.VALID
        return ValidationState.NONE

    def get_display_name(self, field_id: str) -> str:
        field = self._field(field_id)
        return field.title or humanize_field_name(field_id)

    def is_email_field(self, field_id: str) -> bool:
        annotation = self._field(field_id).annotation
        # `EmailStr | None` y similares: se mira un nivel dentro del tipo.
        return annotation is EmailStr or EmailStr in get_args(annotation)

    def get_value(self, field_id: str) -> str | None:
        self._field(field_id)
        value = self.values.get(field_id)
        return None if value is None else str(value)

    def get_error_message(self, field_id: str) -> str | None:
        self._field(field_id)
        messages = self.errors.get(field_id)
        return messages[0] if messages else None
