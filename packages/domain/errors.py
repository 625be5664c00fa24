from __future__ import annotations


class TableExtractionError(Exception):
    """Base error for a failed extraction run.

    ``stage`` names the pipeline step that failed so callers can report it.
    """

    stage = 'pipeline'

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NoTablesFound(TableExtractionError):
    stage = 'tableLocator'

    def __init__(self, message: str = 'No tables found on the page') -> None:
        super().__init__(message)


class NoNumericColumnFound(TableExtractionError):
    stage = 'columnIdentifier'

    def __init__(self, message: str = 'No numeric column found in any table') -> None:
        super().__init__(message)


class NoNumericValuesExtracted(TableExtractionError):
    stage = 'columnIdentifier'

    def __init__(self, message: str = 'No numeric values found in the column') -> None:
        super().__init__(message)


class RetrievalFailed(TableExtractionError):
    """Raised when the page fetch fails; the cause is chained with ``from``."""

    stage = 'pageFetcher'


class RenderFailed(TableExtractionError):
    stage = 'chartRenderer'
