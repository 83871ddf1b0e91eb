"""A single plotted series and its encoding."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Mapping, Optional

from pydantic import Field, field_validator

from .config import FormatConfig
from .types import RGBA, Bool, ChartModel, ChartType, InterpMode, Shape
from .values import JSONMarshaler, Values, XYRs, encode_payload

logger = logging.getLogger(__name__)


class Dataset(ChartModel):
    """One series of a chart.

    ``data`` may be anything with a ``to_json()`` method, anything exposing
    ``xs()/ys()/rs()`` (see :class:`chartjs.values.Values`), or, on input, a
    ``{"x": [...], "y": [...], "r": [...]}`` mapping or a plain list of
    numbers, both of which become :class:`XYRs`.
    """

    data: Any = Field(None, exclude=True)
    type: Optional[ChartType] = None
    background_color: Optional[RGBA] = None
    # color of the line
    border_color: Optional[RGBA] = None
    border_width: float = 0.0

    # name shown in the legend
    label: Optional[str] = None
    fill: Bool = None

    # TRUE means no interpolation; line_tension is ignored
    stepped_line: Bool = None
    line_tension: float = 0.0
    cubic_interpolation_mode: Optional[InterpMode] = None
    point_background_color: Optional[RGBA] = None
    point_border_color: Optional[RGBA] = None
    point_border_width: float = 0.0
    point_radius: float = 0.0
    point_hit_radius: float = 0.0
    point_hover_radius: float = 0.0
    point_hover_border_color: Optional[RGBA] = None
    point_hover_border_width: float = 0.0
    point_style: Optional[Shape] = None

    show_line: Bool = None
    span_gaps: Bool = None

    # must match the id of an Axis of the chart
    x_axis_id: Optional[str] = Field(None, alias="xAxisID")
    y_axis_id: Optional[str] = Field(None, alias="yAxisID")

    # decimals sent for the data, e.g. "%.2f"; never serialized
    x_float_format: Optional[str] = Field(None, exclude=True)
    y_float_format: Optional[str] = Field(None, exclude=True)

    @field_validator("data", mode="before")
    @classmethod
    def coerce_data(cls, v: Any) -> Any:
        if v is None or isinstance(v, (JSONMarshaler, Values)):
            return v
        if isinstance(v, Mapping):
            if v and set(v) <= {"x", "y", "r"}:
                return XYRs.model_validate(v)
            return v
        if isinstance(v, Iterable) and not isinstance(v, (str, bytes)):
            # a bare sequence is category data
            return XYRs(y=list(v))
        return v

    def formats(self, defaults: Optional[FormatConfig] = None) -> FormatConfig:
        """Resolve the number formats for this dataset, per-dataset overrides first."""
        defaults = defaults or FormatConfig()
        overrides = {
            key: value
            for key, value in (("x_float_format", self.x_float_format), ("y_float_format", self.y_float_format))
            if value
        }
        return defaults.merged(overrides)

    def to_tree(self, formats: Optional[FormatConfig] = None) -> Dict[str, Any]:
        """Build the ordered JSON tree of this dataset.

        The styling fields come first, in declaration order, followed by a
        single ``data`` key holding the encoded payload (None when the payload
        has neither capability).
        """

        resolved = self.formats(formats)
        payload = encode_payload(self.data, resolved.x_float_format, resolved.y_float_format)
        tree = self.to_dict()
        tree["data"] = payload
        logger.debug("Encoded dataset %r with %d styling key(s)", self.label, len(tree) - 1)
        return tree
