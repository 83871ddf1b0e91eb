"""The top-level chart document and its builder operations."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from pydantic import Field

from .axis import Axis
from .config import FormatConfig, load_yaml
from .dataset import Dataset
from .encoder import dumps
from .errors import InvalidAxisPosition
from .options import Options
from .types import AxisPosition, ChartModel, ChartType

logger = logging.getLogger(__name__)


class Data(ChartModel):
    """Datasets in legend/drawing order, plus category labels."""

    datasets: List[Dataset] = Field(default_factory=list)
    # only used by category axes
    labels: List[str] = Field(default_factory=list)

    def to_tree(self, formats: Optional[FormatConfig] = None) -> Dict[str, Any]:
        return {
            "datasets": [d.to_tree(formats) for d in self.datasets],
            "labels": list(self.labels),
        }


class Chart(ChartModel):
    """A Chart.js chart configuration.

    Build it up with the ``add_*`` methods and render it with :meth:`to_json`:

        chart = Chart(type=ChartType.LINE)
        chart.add_x_axis(Axis(type=AxisType.LINEAR, position=AxisPosition.BOTTOM))
        chart.add_dataset(Dataset(label="temps", data=XYRs(x=xs, y=ys)))
        payload = chart.to_json()
    """

    type: ChartType = ChartType.LINE
    label: Optional[str] = None
    data: Data = Field(default_factory=Data)
    options: Options = Field(default_factory=Options)

    def add_dataset(self, d: Dataset) -> None:
        """Append a copy of ``d``; the payload itself is shared, not copied."""
        owned = d.model_copy(update={"data": None}).model_copy(deep=True)
        owned.data = d.data
        self.data.datasets.append(owned)

    def add_axis(self, axis: Axis) -> None:
        """Store a copy of ``axis`` under its id, replacing any axis with the same id."""
        if axis.id in self.options.scales:
            logger.debug("Replacing axis %r", axis.id)
        self.options.scales[axis.id] = axis.model_copy(deep=True)

    def add_x_axis(self, x: Axis) -> str:
        """Add an x-axis and return its id ("x" unless one was set).

        Raises:
            InvalidAxisPosition: The axis is positioned left or right.
        """
        x = x.model_copy(update={"id": x.id or "x"})
        if x.position in (AxisPosition.LEFT, AxisPosition.RIGHT):
            raise InvalidAxisPosition(f"chart: added x-axis {x.id!r} to {x.position.value}")
        self.add_axis(x)
        return x.id

    def add_y_axis(self, y: Axis) -> str:
        """Add a y-axis and return its id ("y" unless one was set).

        Raises:
            InvalidAxisPosition: The axis is positioned top or bottom.
        """
        y = y.model_copy(update={"id": y.id or "y"})
        if y.position in (AxisPosition.TOP, AxisPosition.BOTTOM):
            raise InvalidAxisPosition(f"chart: added y-axis {y.id!r} to {y.position.value}")
        self.add_axis(y)
        return y.id

    def to_tree(self, formats: Optional[FormatConfig] = None) -> Dict[str, Any]:
        """Build the ordered JSON tree of the whole document.

        Args:
            formats: Number formats for dataset values; ``FormatConfig()``
                (two decimals) when omitted. Datasets may override them.
        """
        tree: Dict[str, Any] = {"type": self.type.value}
        if self.label:
            tree["label"] = self.label
        tree["data"] = self.data.to_tree(formats)
        tree["options"] = self.options.to_dict()
        return tree

    def to_json(self, formats: Optional[FormatConfig] = None, indent: Optional[int] = None) -> str:
        """Serialize the chart for Chart.js.

        Raises:
            ValuesError: A dataset payload has an inconsistent shape.
        """
        out = dumps(self.to_tree(formats), indent=indent)
        logger.debug("Encoded %s chart with %d dataset(s) into %d bytes", self.type.value, len(self.data.datasets), len(out))
        return out

    @classmethod
    def from_dict(cls, mapping: Mapping[str, Any]) -> "Chart":
        """Build a chart from plain data (camelCase or snake_case keys)."""
        return cls.model_validate(dict(mapping))

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "Chart":
        """Load a chart from a YAML file.

        The chart may sit at the top level or under a ``chart:`` key (next to
        an optional ``formats:`` section, see :func:`load_document`).
        """
        chart, _ = load_document(path)
        return chart


def load_document(path: Union[str, Path], defaults: Optional[FormatConfig] = None) -> Tuple[Chart, FormatConfig]:
    """Load a YAML chart document and the number formats it asks for."""
    raw = load_yaml(path)
    body = raw.get("chart", raw)
    if not isinstance(body, dict):
        raise ValueError(f"Unexpected 'chart' section in {path}; expected mapping")
    formats = (defaults or FormatConfig()).merged(raw.get("formats"))
    return Chart.from_dict(body), formats
