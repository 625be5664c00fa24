from __future__ import annotations

from packages.application.config import load_config


def test_defaults(monkeypatch) -> None:
    for key in (
        'FETCH_TIMEOUT_SECONDS',
        'FETCH_MAX_REDIRECTS',
        'FETCH_USER_AGENT',
        'HTTP_USER_AGENT',
        'CHART_OUTPUT_DIR',
        'CHART_WIDTH',
        'CHART_HEIGHT',
        'EXTRACTION_TRACE_FILE',
        'LOG_LEVEL',
        'POLICY_FILE',
    ):
        monkeypatch.delenv(key, raising=False)

    cfg = load_config()

    assert cfg.fetch_timeout_seconds == 30
    assert cfg.fetch_max_redirects == 5
    assert cfg.fetch_user_agent == 'WikipediaTableExtractor/1.0 (contact@example.com)'
    assert cfg.chart_output_dir == 'storage/app/public'
    assert (cfg.chart_width, cfg.chart_height) == (800, 600)
    assert cfg.log_level == 'INFO'
    assert cfg.policy_file == ''


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv('FETCH_TIMEOUT_SECONDS', '5')
    monkeypatch.delenv('FETCH_USER_AGENT', raising=False)
    monkeypatch.setenv('HTTP_USER_AGENT', 'charts-bot/2.0')
    monkeypatch.setenv('CHART_WIDTH', '1024')
    monkeypatch.setenv('LOG_LEVEL', 'debug')

    cfg = load_config()

    assert cfg.fetch_timeout_seconds == 5
    assert cfg.fetch_user_agent == 'charts-bot/2.0'
    assert cfg.chart_width == 1024
    assert cfg.log_level == 'DEBUG'
