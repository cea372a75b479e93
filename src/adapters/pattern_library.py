"""Pattern library: una página HTML con todos los componentes.

Por qué está en adapters:
- Es un consumidor real de la integración Jinja2 (`register_bootstrap_helpers`):
  el template llama a los helpers igual que lo haría una app.
- Sirve para revisar visualmente los componentes y para detectar roturas en
  los templates (la CLI `doctor` la renderiza).
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping

from pydantic import BaseModel, EmailStr, Field

from adapters.jinja_helpers import register_bootstrap_helpers
from adapters.markup_assembler import build_environment
from adapters.pydantic_metadata import PydanticFieldMetadata
from core.config import AppSettings
from core.domain.style import Variant


logger = logging.getLogger(__name__)


class PatternLibraryForm(BaseModel):
    """Formulario de ejemplo: requeridos, e-mail, textarea."""

    name: str | None = None
    favourite_color: str = Field(..., min_length=1, title="Favourite color")
    email: EmailStr | None = None
    description: str | None = None


def render_pattern_library_html(
    *,
    submission: Mapping[str, Any] | None = None,
    settings: AppSettings | None = None,
) -> str:
    """Renderiza la pattern library autocontenida.

    Con `submission` el formulario de ejemplo muestra estados de validación
    (como tras un POST); sin él se muestra vacío.
    """

    settings = settings or AppSettings()
    if submission is None:
        form = PydanticFieldMetadata(PatternLibraryForm)
    else:
        form = PydanticFieldMetadata.from_submission(PatternLibraryForm, submission)

    env = register_bootstrap_helpers(build_environment(), settings=settings)
    template = env.get_template("pattern_library.html")
    return template.render(
        title="Bootstrap Pattern Library",
        generated_at=datetime.now(timezone.utc).isoformat(timespec="seconds"),
        variants=[v.value for v in Variant],
        form=form,
    )


def export_pattern_library_html(
    *,
    output_path: Path,
    submission: Mapping[str, Any] | None = None,
    settings: AppSettings | None = None,
) -> Path:
    """Escribe la pattern library en `output_path` (crea directorios)."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    html = render_pattern_library_html(submission=submission, settings=settings)
    output_path.write_text(html, encoding="utf-8")
    logger.info("Pattern library written to %s", output_path)
    return output_path
