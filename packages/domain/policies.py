from __future__ import annotations

import re
from dataclasses import dataclass, field

# First run of digits with an optional single decimal point, e.g. "1.482 m" -> "1.482".
DEFAULT_NUMERIC_PATTERN = re.compile(r'(\d+\.?\d*)', flags=re.ASCII)
DEFAULT_QUALIFICATION_THRESHOLD = 0.5

DEFAULT_BOILERPLATE_HEADINGS: tuple[str, ...] = (
    'references',
    'see also',
    'external links',
    'notes',
    'sources',
)
DEFAULT_HEADING_TAGS: tuple[str, ...] = ('h2', 'h3', 'h4', 'h5')
DEFAULT_EDIT_MARKER = re.compile(r'\s*\[edit\]\s*', flags=re.IGNORECASE)


@dataclass(frozen=True)
class NumericColumnPolicy:
    pattern: re.Pattern[str] = DEFAULT_NUMERIC_PATTERN
    threshold: float = DEFAULT_QUALIFICATION_THRESHOLD

    def __post_init__(self) -> None:
        if not 0.0 <= self.threshold <= 1.0:
            raise ValueError(f'threshold must be within [0, 1], got {self.threshold}')
        if self.pattern.groups < 1:
            raise ValueError('numeric pattern must define a capture group')

    def parse_leading_number(self, text: str) -> float | None:
        """Return the first numeric run in ``text`` as a float, or None.

        Leading labels and trailing units are ignored:
        ``"1.482 m (4 ft 10¼ in)"`` gives ``1.482``; ``"N/A"`` gives None.
        """
        match = self.pattern.search(text)
        if match is None:
            return None
        try:
            return float(match.group(1))
        except (TypeError, ValueError):
            return None

    def qualifies(self, numeric_count: int, considered_count: int) -> bool:
        return considered_count > 0 and (numeric_count / considered_count) >= self.threshold


@dataclass(frozen=True)
class TableNamingPolicy:
    boilerplate_headings: tuple[str, ...] = DEFAULT_BOILERPLATE_HEADINGS
    heading_tags: tuple[str, ...] = DEFAULT_HEADING_TAGS
    max_context_length: int = 50
    max_header_cell_length: int = 100
    edit_marker: re.Pattern[str] = field(default=DEFAULT_EDIT_MARKER)

    def clean_heading(self, text: str) -> str:
        return self.edit_marker.sub('', text.strip()).strip()

    def is_usable_context(self, heading: str) -> bool:
        """Boilerplate section names and overly long headings never label a table."""
        if not heading:
            return False
        if heading.lower() in {name.lower() for name in self.boilerplate_headings}:
            return False
        return len(heading) < self.max_context_length

    def merge(self, context: str | None, caption: str | None) -> str | None:
        if context and caption:
            if context.lower() not in caption.lower():
                return f'{context} - {caption}'
        return caption or None
