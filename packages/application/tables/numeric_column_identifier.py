from __future__ import annotations

from typing import Any

from packages.domain.models import TableHandle
from packages.domain.policies import NumericColumnPolicy
from packages.ports.html_parser_port import DomIndex

CELL_SELECTOR = 'td, th'


class NumericColumnIdentifier:
    """Finds the first majority-numeric column of a table and extracts its values.

    Qualification and extraction pick their data rows independently:

    - qualification samples the ``tbody`` rows from index 0 when a body group
      exists, otherwise every row from index 1;
    - extraction takes every ``tbody`` row when a body group exists, otherwise
      every row, skipping the first only when it holds ``th`` cells and no
      ``td`` cells.

    On irregular markup the two passes can disagree, so a qualifying column
    may still extract nothing. Callers must treat an empty extraction as a
    distinct outcome.
    """

    def __init__(self, policy: NumericColumnPolicy | None = None) -> None:
        self._policy = policy or NumericColumnPolicy()

    def identify(self, table: TableHandle) -> int | None:
        rows = self._rows(table)
        if len(rows) < 2:
            return None

        column_count = len(self._cells(table.document, rows[1]))
        for column_index in range(column_count):
            if self.is_numeric_column(table, column_index):
                return column_index
        return None

    def is_numeric_column(self, table: TableHandle, column_index: int) -> bool:
        body_rows = self._body_rows(table)
        if body_rows:
            candidates = body_rows
        else:
            candidates = self._rows(table)[1:]

        numeric_count = 0
        considered_count = 0
        for row in candidates:
            cells = self._cells(table.document, row)
            if len(cells) <= column_index:
                continue
            if self._cell_value(table.document, cells[column_index]) is not None:
                numeric_count += 1
            considered_count += 1

        return self._policy.qualifies(numeric_count, considered_count)

    def extract_values(self, table: TableHandle, column_index: int) -> list[float]:
        if column_index < 0:
            raise ValueError(f'column index must be >= 0, got {column_index}')

        rows = self._body_rows(table)
        if not rows:
            rows = self._rows(table)
            if rows and self._is_header_row(table.document, rows[0]):
                rows = rows[1:]

        values: list[float] = []
        for row in rows:
            cells = self._cells(table.document, row)
            if len(cells) <= column_index:
                continue
            value = self._cell_value(table.document, cells[column_index])
            if value is not None:
                values.append(value)
        return values

    # ------------------------------------------------------------------ helpers

    @staticmethod
    def _rows(table: TableHandle) -> list[Any]:
        return table.document.find_all(table.node, 'tr')

    @staticmethod
    def _body_rows(table: TableHandle) -> list[Any]:
        return table.document.find_all(table.node, 'tbody tr')

    @staticmethod
    def _cells(document: DomIndex, row: Any) -> list[Any]:
        return document.find_all(row, CELL_SELECTOR)

    @staticmethod
    def _is_header_row(document: DomIndex, row: Any) -> bool:
        return bool(document.find_all(row, 'th')) and not document.find_all(row, 'td')

    def _cell_value(self, document: DomIndex, cell: Any) -> float | None:
        return self._policy.parse_leading_number(document.text_content(cell))
