from __future__ import annotations

import logging
from dataclasses import dataclass

from packages.application.tables.numeric_column_identifier import NumericColumnIdentifier
from packages.application.tables.table_locator import TableLocator
from packages.application.tables.table_namer import TableNamer
from packages.domain.errors import NoNumericColumnFound, NoNumericValuesExtracted, NoTablesFound
from packages.domain.models import ExtractedSeries
from packages.ports.html_parser_port import DomIndex, HtmlParserPort

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtractNumericSeriesInput:
    html: str


@dataclass(frozen=True)
class ExtractNumericSeriesOutput:
    series: ExtractedSeries
    tables_found: int

    @property
    def values(self) -> list[float]:
        return self.series.values

    @property
    def label(self) -> str | None:
        return self.series.label


def run_table_pipeline(
    document: DomIndex,
    *,
    table_locator: TableLocator | None = None,
    column_identifier: NumericColumnIdentifier | None = None,
    table_namer: TableNamer | None = None,
) -> ExtractNumericSeriesOutput:
    """Select the first table with a numeric column and extract its series.

    Tables after the first match are never inspected. Raises NoTablesFound,
    NoNumericColumnFound or NoNumericValuesExtracted.
    """
    locator = table_locator or TableLocator()
    identifier = column_identifier or NumericColumnIdentifier()
    namer = table_namer or TableNamer()

    tables = locator.locate(document)
    if not tables:
        raise NoTablesFound()
    logger.info('tableLocator: Found %d table(s)', len(tables))

    for table in tables:
        column_index = identifier.identify(table)
        if column_index is None:
            logger.debug('Table at position %d has no numeric column', table.position)
            continue

        logger.info('columnIdentifier: Found numeric column at index %d', column_index)
        label = namer.name(table, document)
        if label is not None:
            logger.info('tableNamer: Table name: %s', label)

        values = identifier.extract_values(table, column_index)
        if not values:
            raise NoNumericValuesExtracted(
                f'No numeric values found in column {column_index} of the selected table'
            )

        series = ExtractedSeries(
            table=table,
            column_index=column_index,
            values=values,
            label=label,
        )
        logger.info(
            'columnIdentifier: Extracted %d numeric values (range %s - %s)',
            len(values),
            series.minimum,
            series.maximum,
        )
        return ExtractNumericSeriesOutput(series=series, tables_found=len(tables))

    raise NoNumericColumnFound()


def extract_numeric_series_use_case(
    input_data: ExtractNumericSeriesInput,
    *,
    html_parser: HtmlParserPort,
    table_locator: TableLocator | None = None,
    column_identifier: NumericColumnIdentifier | None = None,
    table_namer: TableNamer | None = None,
) -> ExtractNumericSeriesOutput:
    document = html_parser.parse(input_data.html)
    return run_table_pipeline(
        document,
        table_locator=table_locator,
        column_identifier=column_identifier,
        table_namer=table_namer,
    )
