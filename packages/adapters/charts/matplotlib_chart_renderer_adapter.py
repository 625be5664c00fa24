from __future__ import annotations

import logging
from pathlib import Path

import matplotlib.pyplot as plt
from matplotlib.ticker import FormatStrFormatter

from packages.domain.errors import RenderFailed
from packages.ports.chart_renderer_port import ChartRendererPort

logger = logging.getLogger(__name__)

plt.switch_backend('Agg')

LINE_COLOR = '#0064c8'
GRID_COLOR = '#c8c8c8'
GRID_INTERVALS = 5
# Approximate pixel width of one title character at the title font size.
_TITLE_CHAR_WIDTH_PX = 9
_TITLE_MARGIN_PX = 40


def truncate_title(title: str, max_chars: int) -> str:
    if len(title) <= max_chars:
        return title
    return title[: max(max_chars - 3, 0)] + '...'


class MatplotlibChartRendererAdapter(ChartRendererPort):
    """Line chart of a numeric series, one point per value in input order."""

    def __init__(
        self,
        output_dir: Path,
        *,
        width: int = 800,
        height: int = 600,
        dpi: int = 100,
    ) -> None:
        self._output_dir = output_dir
        self._width = width
        self._height = height
        self._dpi = dpi

    @property
    def max_title_chars(self) -> int:
        return max((self._width - _TITLE_MARGIN_PX) // _TITLE_CHAR_WIDTH_PX, 4)

    def render(self, values: list[float], output_name: str, title: str | None = None) -> Path:
        if not values:
            raise RenderFailed('Data array cannot be empty')

        data = [float(value) for value in values]
        out_path = self._output_dir / output_name

        fig, ax = plt.subplots(
            figsize=(self._width / self._dpi, self._height / self._dpi),
            dpi=self._dpi,
        )
        try:
            low, high = min(data), max(data)
            if high == low:
                high = low + 1.0

            xs = list(range(len(data)))
            if len(data) > 1:
                ax.plot(xs, data, color=LINE_COLOR, linewidth=1, marker='o', markersize=4)
                ax.set_xlim(0, len(data) - 1)
            else:
                ax.scatter(xs, data, color=LINE_COLOR, s=16, zorder=3)
                ax.set_xlim(-0.5, 0.5)

            ax.set_ylim(low, high)
            ax.set_yticks([low + (high - low) * step / GRID_INTERVALS for step in range(GRID_INTERVALS + 1)])
            ax.yaxis.set_major_formatter(FormatStrFormatter('%.2f'))
            ax.grid(axis='y', color=GRID_COLOR)
            ax.set_axisbelow(True)

            if title:
                fig.suptitle(truncate_title(title.strip(), self.max_title_chars))

            out_path.parent.mkdir(parents=True, exist_ok=True)
            fig.savefig(out_path, format='png', facecolor='white')
        except (OSError, ValueError) as exc:
            raise RenderFailed(f'Failed to render chart: {exc}') from exc
        finally:
            plt.close(fig)

        logger.debug('Rendered %d points to %s', len(data), out_path)
        return out_path
