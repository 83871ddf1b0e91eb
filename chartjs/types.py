"""Primitive types shared by every part of the Chart.js schema mirror.

Enums are ``str`` subclasses whose value is the literal Chart.js expects, so
pydantic serializes them without any lookup table. An "unspecified" choice is
spelled ``None`` on an optional field and is dropped from the output.
"""

from enum import Enum
from typing import Any, ClassVar, Dict, Optional, Sequence, Tuple, cast

from pydantic import BaseModel, ConfigDict, Field, SerializerFunctionWrapHandler, model_serializer, model_validator
from pydantic.alias_generators import to_camel


class ChartType(str, Enum):
    LINE = "line"
    BAR = "bar"
    BUBBLE = "bubble"


class InterpMode(str, Enum):
    """Cubic interpolation mode of a line dataset."""

    MONOTONE = "monotone"
    DEFAULT = "default"


class Shape(str, Enum):
    """Marker drawn at each point of a dataset."""

    CIRCLE = "circle"
    TRIANGLE = "triangle"
    RECT = "rect"
    RECT_ROT = "rectRot"
    CROSS = "cross"
    CROSS_ROT = "crossRot"
    STAR = "star"
    LINE = "line"
    DASH = "dash"


class AxisType(str, Enum):
    CATEGORY = "category"  # default, used for bar plots
    LINEAR = "linear"  # scatter plots
    LOG = "logarithmic"
    TIME = "time"
    RADIAL = "radialLinear"


class AxisPosition(str, Enum):
    BOTTOM = "bottom"
    TOP = "top"
    LEFT = "left"
    RIGHT = "right"


# Tri-state boolean: None means "not specified" and the key is left out.
Bool = Optional[bool]

TRUE: Bool = True
FALSE: Bool = False


class ChartModel(BaseModel):
    """Base for all schema objects.

    Attribute names are snake_case; the JSON keys are the camelCase names
    Chart.js reads. Either spelling is accepted on input, and assignments are
    validated like constructor arguments. Empty strings are left out of the
    output just like unset fields.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, validate_assignment=True)

    # keys dropped from the output when their value is empty
    omit_when_empty: ClassVar[Tuple[str, ...]] = ()

    @model_serializer(mode="wrap")
    def omit_empty(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        data = handler(self)
        for key in [k for k, v in data.items() if v == "" or (k in self.omit_when_empty and not v)]:
            del data[key]
        return data

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class RGBA(BaseModel):
    """An 8-bit colour, serialized as a CSS ``rgba()`` string."""

    r: int = Field(0, ge=0, le=255)
    g: int = Field(0, ge=0, le=255)
    b: int = Field(0, ge=0, le=255)
    a: int = Field(255, ge=0, le=255)

    @model_validator(mode="before")
    @classmethod
    def coerce_channels(cls, data: Any) -> Any:
        if isinstance(data, str):
            return _parse_hex(data)
        if isinstance(data, (tuple, list)):
            channels = cast(Sequence[int], data)
            if len(channels) not in (3, 4):
                raise ValueError(f"expected 3 or 4 colour channels, got {len(channels)}")
            return dict(zip("rgba", channels))
        return data

    @model_serializer
    def serialize_rgba(self) -> str:
        return f"rgba({self.r}, {self.g}, {self.b}, {self.a / 255:.3f})"

    def __str__(self) -> str:
        return self.serialize_rgba()


def _parse_hex(value: str) -> Dict[str, int]:
    digits = value.strip().lstrip("#")
    if len(digits) not in (6, 8):
        raise ValueError(f"{value!r} is not a #rrggbb or #rrggbbaa colour")
    try:
        channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
    except ValueError:
        raise ValueError(f"{value!r} is not a #rrggbb or #rrggbbaa colour")
    return dict(zip("rgba", channels))
