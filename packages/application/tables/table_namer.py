from __future__ import annotations

import logging

from packages.domain.models import TableHandle
from packages.domain.policies import TableNamingPolicy
from packages.ports.html_parser_port import DomIndex

logger = logging.getLogger(__name__)


class TableNamer:
    """Derives a human-readable label for a table.

    Resolution order: caption (prefixed by the closest preceding section
    heading unless the caption already mentions it), then a stray caption
    sitting just before the table, then the first header cell. Returns None
    when nothing usable is found.
    """

    def __init__(self, policy: TableNamingPolicy | None = None) -> None:
        self._policy = policy or TableNamingPolicy()

    def name(self, table: TableHandle, document: DomIndex | None = None) -> str | None:
        caption = self.caption(table)
        context = self.context_heading(table, document) if document is not None else None

        label = self._policy.merge(context, caption)
        if label:
            return label

        sibling_caption = self.sibling_caption(table)
        if sibling_caption:
            return sibling_caption

        return self.header_cell_label(table)

    def caption(self, table: TableHandle) -> str | None:
        captions = table.document.find_all(table.node, 'caption')
        if not captions:
            return None
        return table.document.text_content(captions[0]) or None

    def context_heading(self, table: TableHandle, document: DomIndex) -> str | None:
        """Closest heading strictly before the table, by document position."""
        if not self._policy.heading_tags:
            return None

        closest = None
        closest_distance = None
        for heading in document.find_all(document.root, ', '.join(self._policy.heading_tags)):
            distance = table.position - document.document_position(heading)
            if distance <= 0:
                continue
            if closest_distance is None or distance < closest_distance:
                closest_distance = distance
                closest = heading

        if closest is None:
            return None

        text = self._policy.clean_heading(document.text_content(closest))
        if not self._policy.is_usable_context(text):
            logger.debug('Ignoring heading %r as table context', text)
            return None
        return text

    def sibling_caption(self, table: TableHandle) -> str | None:
        sibling = table.document.preceding_sibling(table.node)
        if sibling is None or table.document.tag_name(sibling) != 'caption':
            return None
        return table.document.text_content(sibling) or None

    def header_cell_label(self, table: TableHandle) -> str | None:
        rows = table.document.find_all(table.node, 'tr')
        if not rows:
            return None
        header_cells = table.document.find_all(rows[0], 'th')
        if not header_cells:
            return None
        text = table.document.text_content(header_cells[0])
        if text and len(text) < self._policy.max_header_cell_length:
            return text
        return None
