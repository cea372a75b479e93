"""Exportación JSON de planes de paginación.

Por qué JSON:
- Interoperabilidad con frontends/tests que quieran el plan sin el HTML.
- Formato estable (claves ordenadas) para poder diffear planes.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

from core.domain.models import PageLinkDescriptor


def export_pagination_plan_json(*, links: Iterable[PageLinkDescriptor], output_path: Path) -> Path:
    """Exporta los descriptores (resueltos o no) a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = [link.model_dump(mode="json") for link in links]
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
