from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any


class ExtractionTraceLogger:
    """Appends one JSON line per extraction run."""

    def __init__(self, trace_file: Path) -> None:
        self._trace_file = trace_file

    def log(self, payload: dict[str, Any]) -> None:
        record = {'timestamp': datetime.now(timezone.utc).isoformat(), **payload}
        self._trace_file.parent.mkdir(parents=True, exist_ok=True)
        with self._trace_file.open('a', encoding='utf-8') as fh:
            fh.write(json.dumps(record, ensure_ascii=True))
            fh.write('\n')
