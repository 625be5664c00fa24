from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from packages.adapters.charts.matplotlib_chart_renderer_adapter import MatplotlibChartRendererAdapter
from packages.adapters.data_contracts.policy_contracts import load_policies
from packages.adapters.fetch.factory import create_page_fetcher
from packages.adapters.html.beautifulsoup_parser_adapter import BeautifulSoupParserAdapter
from packages.adapters.tracing.extraction_trace_logger import ExtractionTraceLogger
from packages.application.config import load_config
from packages.application.tables.numeric_column_identifier import NumericColumnIdentifier
from packages.application.tables.table_namer import TableNamer
from packages.application.use_cases.chart_page_table import (
    ChartPageTableInput,
    chart_page_table_use_case,
)
from packages.domain.errors import TableExtractionError


def default_output_name(now: datetime | None = None) -> str:
    return f"graph-{(now or datetime.now()).strftime('%Y-%m-%d-%H%M%S')}.png"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    cfg = load_config()
    parser = argparse.ArgumentParser(
        description='Extract numeric data from a Wikipedia table and generate a graph'
    )
    parser.add_argument('url', help='The Wikipedia URL (or saved HTML file) to extract data from')
    parser.add_argument(
        '--output',
        default=None,
        help='Output filename for the graph image (default: graph-Y-m-d-His.png)',
    )
    parser.add_argument('--output-dir', type=Path, default=Path(cfg.chart_output_dir))
    parser.add_argument(
        '--policy-file',
        type=Path,
        default=Path(cfg.policy_file) if cfg.policy_file else None,
        help='YAML file overriding the table heuristics',
    )
    parser.add_argument('--trace-file', type=Path, default=Path(cfg.extraction_trace_file))
    parser.add_argument('--log-level', default=cfg.log_level)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    cfg = load_config()

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    try:
        policies = load_policies(args.policy_file)
    except (FileNotFoundError, ValueError) as exc:
        print(f'ERROR [config]: {exc}')
        return 1

    try:
        result = chart_page_table_use_case(
            ChartPageTableInput(
                source=args.url,
                output_name=args.output or default_output_name(),
            ),
            page_fetcher=create_page_fetcher(
                args.url,
                timeout_seconds=cfg.fetch_timeout_seconds,
                max_redirects=cfg.fetch_max_redirects,
                user_agent=cfg.fetch_user_agent,
            ),
            html_parser=BeautifulSoupParserAdapter(),
            chart_renderer=MatplotlibChartRendererAdapter(
                args.output_dir,
                width=cfg.chart_width,
                height=cfg.chart_height,
            ),
            column_identifier=NumericColumnIdentifier(policies.numeric_column),
            table_namer=TableNamer(policies.table_naming),
            trace_logger=ExtractionTraceLogger(args.trace_file),
        )
    except TableExtractionError as exc:
        print(f'ERROR [{exc.stage}]: {exc.message}')
        return 1

    print(json.dumps({
        'source': result.source,
        'output_path': str(result.output_path),
        'table_name': result.label,
        'column_index': result.column_index,
        'tables_found': result.tables_found,
        'value_count': len(result.values),
        'range': [min(result.values), max(result.values)],
    }, indent=2))
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
