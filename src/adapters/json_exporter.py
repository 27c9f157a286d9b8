"""JSON export of exercise results.

Used by ``--json`` so results can be piped into other tools.
"""

from __future__ import annotations

import json
from collections.abc import Sequence

from pydantic import BaseModel


def export_result_json(result: BaseModel | Sequence[BaseModel]) -> str:
    """Serialize one result model (or a list of them) to stable, indented JSON."""

    if isinstance(result, BaseModel):
        payload = result.model_dump(mode="json")
    else:
        payload = [item.model_dump(mode="json") for item in result]
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True)
