"""Chart-wide ``options`` object."""

from typing import ClassVar, Dict, Optional, Tuple

from pydantic import Field, model_validator

from .axis import Axis
from .types import Bool, ChartModel


class Title(ChartModel):
    display: Bool = None
    text: Optional[str] = None


class Legend(ChartModel):
    display: Bool = None


class Tooltip(ChartModel):
    """Tooltip options; ``custom`` is JavaScript source passed through as a string."""

    enabled: Bool = None
    intersect: Bool = None
    mode: Optional[str] = None
    custom: Optional[str] = None


class Animation(ChartModel):
    duration: int = 0


class Options(ChartModel):
    """The ``options`` object.

    Empty ``scales`` and ``plugins`` mappings are left out of the output.
    """

    responsive: Bool = None
    maintain_aspect_ratio: Bool = None
    title: Optional[Title] = None
    scales: Dict[str, Axis] = Field(default_factory=dict)
    legend: Optional[Legend] = None
    tooltip: Optional[Tooltip] = Field(None, alias="tooltips")
    animation: Optional[Animation] = None
    plugins: Dict[str, Dict[str, str]] = Field(default_factory=dict)

    omit_when_empty: ClassVar[Tuple[str, ...]] = ("scales", "plugins")

    @model_validator(mode="after")
    def assign_scale_ids(self) -> "Options":
        # the options own their axes; the caller's objects are never touched
        for key, axis in list(self.scales.items()):
            self.scales[key] = axis.model_copy(update={"id": axis.id or key}, deep=True)
        return self
