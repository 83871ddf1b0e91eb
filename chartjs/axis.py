"""Axes, called "scales" by Chart.js."""

from typing import Optional

from pydantic import Field

from .types import RGBA, AxisPosition, AxisType, Bool, ChartModel


class AxisTitle(ChartModel):
    display: Bool = None
    text: Optional[str] = None


class Tick(ChartModel):
    """Tick options; min/max clamp the data range shown."""

    min: Optional[float] = None
    max: Optional[float] = None
    begin_at_zero: Bool = None


class ScaleLabel(ChartModel):
    """Scale title. ``display=TRUE`` must be set for it to be shown."""

    display: Bool = None
    label_string: Optional[str] = None
    font_color: Optional[RGBA] = None
    font_family: Optional[str] = None
    font_size: Optional[int] = None
    font_style: Optional[str] = None


class Axis(ChartModel):
    """A coordinate axis.

    ``id`` is the key under which the axis is stored in ``options.scales``
    and what datasets reference through ``x_axis_id``/``y_axis_id``; it is
    not written as a field of the axis itself.
    """

    type: AxisType = AxisType.CATEGORY
    position: Optional[AxisPosition] = None
    label: Optional[str] = None
    id: str = Field("", exclude=True)
    grid_lines: Bool = Field(None, alias="gridLine")
    stacked: Bool = None
    display: Bool = None
    scale_label: Optional[ScaleLabel] = None
    tick: Optional[Tick] = Field(None, alias="ticks")
    title: Optional[AxisTitle] = None
