from __future__ import annotations

import logging

from packages.domain.models import TableHandle
from packages.ports.html_parser_port import DomIndex

logger = logging.getLogger(__name__)

# The wikitable class is advisory: the union matches every table either way.
TABLE_SELECTOR = 'table.wikitable, table'


class TableLocator:
    def __init__(self, selector: str = TABLE_SELECTOR) -> None:
        self._selector = selector

    def locate(self, document: DomIndex) -> list[TableHandle]:
        tables = [
            TableHandle(
                node=node,
                position=document.document_position(node),
                document=document,
            )
            for node in document.find_all(document.root, self._selector)
        ]
        logger.debug('Located %d table(s)', len(tables))
        return tables
