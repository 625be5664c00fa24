from __future__ import annotations

import os
from dataclasses import dataclass


def _env(key: str, default: str) -> str:
    return os.getenv(key, default)


def _env_alias(keys: list[str], default: str) -> str:
    for key in keys:
        value = os.getenv(key)
        if value is not None and value != '':
            return value
    return default


@dataclass(frozen=True)
class AppConfig:
    fetch_timeout_seconds: int
    fetch_max_redirects: int
    fetch_user_agent: str
    chart_output_dir: str
    chart_width: int
    chart_height: int
    extraction_trace_file: str
    log_level: str
    policy_file: str


def load_config() -> AppConfig:
    return AppConfig(
        fetch_timeout_seconds=int(_env('FETCH_TIMEOUT_SECONDS', '30')),
        fetch_max_redirects=int(_env('FETCH_MAX_REDIRECTS', '5')),
        fetch_user_agent=_env_alias(
            ['FETCH_USER_AGENT', 'HTTP_USER_AGENT'],
            'WikipediaTableExtractor/1.0 (contact@example.com)',
        ),
        chart_output_dir=_env('CHART_OUTPUT_DIR', 'storage/app/public'),
        chart_width=int(_env('CHART_WIDTH', '800')),
        chart_height=int(_env('CHART_HEIGHT', '600')),
        extraction_trace_file=_env(
            'EXTRACTION_TRACE_FILE', '.context/reports/extraction_traces.jsonl'
        ),
        log_level=_env('LOG_LEVEL', 'INFO').strip().upper() or 'INFO',
        policy_file=_env('POLICY_FILE', '').strip(),
    )
