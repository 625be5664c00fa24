from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class ChartRendererPort(ABC):
    @abstractmethod
    def render(self, values: list[float], output_name: str, title: str | None = None) -> Path:
        """Draw ``values`` in order and return the path of the persisted image.

        Raises RenderFailed when ``values`` is empty.
        """
        raise NotImplementedError
