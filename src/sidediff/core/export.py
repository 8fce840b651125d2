"""JSON export of assembled comparison results"""

import json
from pathlib import Path

from sidediff.core.models import ComparisonResult


def write_result(result: ComparisonResult, path: Path) -> Path:
    """Write result as indented JSON, creating parent directories. Returns path.

    Non-ASCII text is written as \\u escapes, so surrogate-escaped input bytes are kept.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(result.model_dump(mode="json"), indent=2), encoding="utf-8")
    return path
