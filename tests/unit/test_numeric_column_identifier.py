from __future__ import annotations

import pytest

from packages.adapters.html.beautifulsoup_parser_adapter import BeautifulSoupParserAdapter
from packages.application.tables.numeric_column_identifier import NumericColumnIdentifier
from packages.application.tables.table_locator import TableLocator
from packages.domain.models import TableHandle
from packages.domain.policies import NumericColumnPolicy


def _first_table(html: str) -> TableHandle:
    document = BeautifulSoupParserAdapter().parse(html)
    return TableLocator().locate(document)[0]


def _table(header: list[str], rows: list[list[str]]) -> str:
    head = '<tr>' + ''.join(f'<th>{h}</th>' for h in header) + '</tr>'
    body = ''.join('<tr>' + ''.join(f'<td>{c}</td>' for c in row) + '</tr>' for row in rows)
    return f'<table>{head}{body}</table>'


@pytest.fixture()
def identifier() -> NumericColumnIdentifier:
    return NumericColumnIdentifier()


class TestIdentify:
    def test_exactly_half_numeric_qualifies(self, identifier: NumericColumnIdentifier) -> None:
        html = _table(
            ['Name', 'Score'],
            [['Anna', '1'], ['Bob', 'x'], ['Cleo', '2'], ['Dan', 'y']],
        )
        assert identifier.identify(_first_table(html)) == 1

    def test_one_of_three_numeric_does_not_qualify(self, identifier: NumericColumnIdentifier) -> None:
        html = _table(['Name', 'Score'], [['Anna', '1'], ['Bob', 'x'], ['Cleo', 'y']])
        assert identifier.identify(_first_table(html)) is None

    def test_first_qualifying_column_wins(self, identifier: NumericColumnIdentifier) -> None:
        html = _table(
            ['Name', 'Height', 'Weight'],
            [['Anna', '1.75', '60'], ['Bob', '1.80', '82']],
        )
        assert identifier.identify(_first_table(html)) == 1

    def test_single_row_table_never_qualifies(self, identifier: NumericColumnIdentifier) -> None:
        html = '<table><tr><td>1</td><td>2</td></tr></table>'
        assert identifier.identify(_first_table(html)) is None

    def test_text_only_table_has_no_numeric_column(self, identifier: NumericColumnIdentifier) -> None:
        html = _table(['Name', 'City'], [['Anna', 'Oslo'], ['Bob', 'Rome']])
        assert identifier.identify(_first_table(html)) is None

    def test_column_count_comes_from_second_row(self, identifier: NumericColumnIdentifier) -> None:
        html = (
            '<table>'
            '<tr><th>Name</th><th>Year</th><th>Total</th></tr>'
            '<tr><td>Anna</td></tr>'
            '<tr><td>Bob</td><td>n/a</td><td>12</td></tr>'
            '</table>'
        )
        # Only column 0 is tested because the second row has a single cell.
        assert identifier.identify(_first_table(html)) is None

    def test_tbody_rows_are_all_sampled(self, identifier: NumericColumnIdentifier) -> None:
        # Wikipedia-style: header row lives inside tbody and counts as a sample.
        html = (
            '<table class="wikitable"><tbody>'
            '<tr><th>Name</th><th>Height</th></tr>'
            '<tr><td>Anna</td><td>1.75 m</td></tr>'
            '<tr><td>Bob</td><td>1.80 m</td></tr>'
            '</tbody></table>'
        )
        table = _first_table(html)
        assert identifier.is_numeric_column(table, 1) is True
        assert identifier.identify(table) == 1

    def test_rows_missing_the_column_are_not_considered(
        self, identifier: NumericColumnIdentifier
    ) -> None:
        html = (
            '<table>'
            '<tr><th>Name</th><th>Value</th></tr>'
            '<tr><td>Anna</td><td>3</td></tr>'
            '<tr><td colspan="2">Footnote text</td></tr>'
            '</table>'
        )
        assert identifier.identify(_first_table(html)) == 1

    def test_results_are_deterministic(self, identifier: NumericColumnIdentifier) -> None:
        html = _table(['Name', 'Height'], [['Anna', '1.75'], ['Bob', '1.80']])
        table = _first_table(html)
        assert identifier.identify(table) == identifier.identify(table) == 1
        assert identifier.extract_values(table, 1) == identifier.extract_values(table, 1)

    def test_threshold_is_configurable(self) -> None:
        html = _table(['Name', 'Score'], [['Anna', '1'], ['Bob', 'x'], ['Cleo', 'y']])
        lenient = NumericColumnIdentifier(NumericColumnPolicy(threshold=0.3))
        assert lenient.identify(_first_table(html)) == 1


class TestExtractValues:
    def test_units_and_annotations_are_ignored(self, identifier: NumericColumnIdentifier) -> None:
        html = _table(
            ['Athlete', 'Height'],
            [['Anna', '1.482 m (4 ft 10¼ in)'], ['Bob', '2.01 m'], ['Cleo', '—'], ['Dan', 'N/A']],
        )
        assert identifier.extract_values(_first_table(html), 1) == [1.482, 2.01]

    def test_order_follows_rows(self, identifier: NumericColumnIdentifier) -> None:
        rows = [['a', '3'], ['b', '1'], ['c', '2']]
        forward = identifier.extract_values(_first_table(_table(['k', 'v'], rows)), 1)
        backward = identifier.extract_values(_first_table(_table(['k', 'v'], rows[::-1])), 1)

        assert forward == [3.0, 1.0, 2.0]
        assert backward == forward[::-1]

    def test_first_row_kept_when_it_is_not_a_header(
        self, identifier: NumericColumnIdentifier
    ) -> None:
        html = '<table><tr><td>10</td></tr><tr><td>20</td></tr></table>'
        assert identifier.extract_values(_first_table(html), 0) == [10.0, 20.0]

    def test_mixed_first_row_is_treated_as_data(self, identifier: NumericColumnIdentifier) -> None:
        html = (
            '<table>'
            '<tr><th>2001</th><td>5</td></tr>'
            '<tr><th>2002</th><td>7</td></tr>'
            '</table>'
        )
        assert identifier.extract_values(_first_table(html), 0) == [2001.0, 2002.0]

    def test_pure_header_first_row_is_skipped(self, identifier: NumericColumnIdentifier) -> None:
        html = _table(['Year 1990', 'Total'], [['1991', '4'], ['1992', '6']])
        assert identifier.extract_values(_first_table(html), 0) == [1991.0, 1992.0]

    def test_all_tbody_rows_are_processed(self, identifier: NumericColumnIdentifier) -> None:
        html = (
            '<table>'
            '<thead><tr><th>Name</th><th>Points</th></tr></thead>'
            '<tbody>'
            '<tr><td>Anna</td><td>12</td></tr>'
            '<tr><td>Bob</td><td>9.5</td></tr>'
            '</tbody>'
            '</table>'
        )
        table = _first_table(html)
        assert identifier.identify(table) == 1
        assert identifier.extract_values(table, 1) == [12.0, 9.5]

    def test_short_rows_are_skipped(self, identifier: NumericColumnIdentifier) -> None:
        html = (
            '<table>'
            '<tr><th>Name</th><th>Value</th></tr>'
            '<tr><td>Anna</td><td>3</td></tr>'
            '<tr><td>Total only</td></tr>'
            '<tr><td>Bob</td><td>4</td></tr>'
            '</table>'
        )
        assert identifier.extract_values(_first_table(html), 1) == [3.0, 4.0]

    def test_negative_column_index_is_rejected(self, identifier: NumericColumnIdentifier) -> None:
        html = _table(['Name', 'Value'], [['Anna', '3']])
        with pytest.raises(ValueError):
            identifier.extract_values(_first_table(html), -1)


class TestNestedTables:
    HTML = (
        '<table><tbody><tr><td>layout</td><td>'
        + _table(['Name', 'Height (2020)'], [['Anna', '1.75'], ['Bob', '1.80']])
        + '</td></tr></tbody></table>'
    )

    def _inner(self) -> TableHandle:
        document = BeautifulSoupParserAdapter().parse(self.HTML)
        return TableLocator().locate(document)[1]

    def test_outer_tbody_does_not_count_as_inner_body_group(
        self, identifier: NumericColumnIdentifier
    ) -> None:
        inner = self._inner()
        assert identifier.identify(inner) == 1
        assert identifier.extract_values(inner, 1) == [1.75, 1.8]

    def test_inner_header_is_not_sampled(self) -> None:
        strict = NumericColumnIdentifier(NumericColumnPolicy(threshold=1.0))
        html = (
            '<table><tbody><tr><td>'
            + _table(['Name', 'Height'], [['Anna', '1.75'], ['Bob', '1.80']])
            + '</td></tr></tbody></table>'
        )
        document = BeautifulSoupParserAdapter().parse(html)
        inner = TableLocator().locate(document)[1]
        assert strict.is_numeric_column(inner, 1) is True
