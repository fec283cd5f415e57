"""Exportación JSON de un quote.

Por qué JSON:
- Interoperabilidad con otras herramientas y pipelines.
- Permite guardar el resultado sin depender del render de la terminal.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import Quote


def export_quote_json(*, quote: Quote, output_path: Path) -> Path:
    """Exporta `Quote` a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = quote.model_dump(mode="json")
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
