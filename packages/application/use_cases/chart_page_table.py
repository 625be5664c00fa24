from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol

from packages.application.tables.numeric_column_identifier import NumericColumnIdentifier
from packages.application.tables.table_locator import TableLocator
from packages.application.tables.table_namer import TableNamer
from packages.application.use_cases.extract_numeric_series import run_table_pipeline
from packages.domain.errors import RenderFailed, TableExtractionError
from packages.ports.chart_renderer_port import ChartRendererPort
from packages.ports.html_parser_port import HtmlParserPort
from packages.ports.page_fetcher_port import PageFetcherPort

logger = logging.getLogger(__name__)


class TraceLoggerPort(Protocol):
    def log(self, payload: dict[str, Any]) -> None: ...


@dataclass(frozen=True)
class ChartPageTableInput:
    source: str
    output_name: str


@dataclass(frozen=True)
class ChartPageTableOutput:
    source: str
    output_path: Path
    label: str | None
    column_index: int
    values: list[float]
    tables_found: int


def chart_page_table_use_case(
    input_data: ChartPageTableInput,
    *,
    page_fetcher: PageFetcherPort,
    html_parser: HtmlParserPort,
    chart_renderer: ChartRendererPort,
    table_locator: TableLocator | None = None,
    column_identifier: NumericColumnIdentifier | None = None,
    table_namer: TableNamer | None = None,
    trace_logger: TraceLoggerPort | None = None,
) -> ChartPageTableOutput:
    """Fetch a page, pick its first numeric table column and chart it.

    Every failure surfaces as a TableExtractionError subclass naming the stage;
    nothing is retried and no partial output is produced.
    """
    try:
        logger.info('Fetching page: %s', input_data.source)
        html = page_fetcher.fetch(input_data.source)
        logger.info('pageFetcher: Page fetched successfully')

        extracted = run_table_pipeline(
            html_parser.parse(html),
            table_locator=table_locator,
            column_identifier=column_identifier,
            table_namer=table_namer,
        )
        series = extracted.series

        try:
            output_path = chart_renderer.render(series.values, input_data.output_name, series.label)
        except RenderFailed:
            raise
        except Exception as exc:
            raise RenderFailed(f'Failed to render chart: {exc}') from exc
        logger.info('chartRenderer: Graph generated successfully at %s', output_path)
    except TableExtractionError as exc:
        if trace_logger is not None:
            trace_logger.log({
                'source': input_data.source,
                'status': 'failed',
                'stage': exc.stage,
                'error': exc.message,
            })
        raise

    output = ChartPageTableOutput(
        source=input_data.source,
        output_path=Path(output_path),
        label=series.label,
        column_index=series.column_index,
        values=list(series.values),
        tables_found=extracted.tables_found,
    )
    if trace_logger is not None:
        trace_logger.log({
            'source': output.source,
            'status': 'ok',
            'tables_found': output.tables_found,
            'table_position': series.table.position,
            'column_index': output.column_index,
            'label': output.label,
            'value_count': len(output.values),
            'output_path': str(output.output_path),
        })
    return output
