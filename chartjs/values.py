"""Numeric series payloads and their encoding into Chart.js ``data`` arrays.

A dataset payload either knows how to render itself (``to_json()``) or exposes
X/Y/R coordinate sequences through the Values capability. Values are written
with printf-style formats so the precision sent to the browser is under the
caller's control:

    >>> encode_values(XYRs(x=[1, 2], y=[3, float("nan")]))
    '[{"x":1.00,"y":3.00},{"x":2.00,"y": null}]'
"""

from __future__ import annotations

import logging
import math
from typing import Any, Iterable, List, Optional, Protocol, Sequence, runtime_checkable

from pydantic import BaseModel, field_validator

from .config import DEFAULT_FLOAT_FORMAT
from .encoder import RawJSON
from .errors import InvalidShape, NonFiniteValue, ShapeMismatch

logger = logging.getLogger(__name__)


@runtime_checkable
class Values(Protocol):
    """Coordinates of a plotted series.

    If only ``xs`` are given the chart must be a bar plot; ``rs`` size the
    points of a bubble plot.
    """

    def xs(self) -> Sequence[float]: ...

    def ys(self) -> Sequence[float]: ...

    def rs(self) -> Sequence[float]: ...


@runtime_checkable
class JSONMarshaler(Protocol):
    """A payload that produces its own JSON fragment."""

    def to_json(self) -> str: ...


class XYRs(BaseModel):
    """Plain container implementing Values.

    Accepts lists, tuples, numpy arrays or any iterable of numbers.
    """

    x: List[float] = []
    y: List[float] = []
    r: List[float] = []

    @field_validator("x", "y", "r", mode="before")
    @classmethod
    def coerce_sequence(cls, v: Any) -> Any:
        if v is None:
            return []
        if isinstance(v, (list, tuple)):
            return v
        return list(v)

    def xs(self) -> Sequence[float]:
        return self.x

    def ys(self) -> Sequence[float]:
        return self.y

    def rs(self) -> Sequence[float]:
        return self.r


def _floats(seq: Optional[Iterable[float]]) -> List[float]:
    if seq is None:
        return []
    return [float(v) for v in seq]


def _num(fmt: str, value: float, axis: str) -> str:
    if not math.isfinite(value):
        raise NonFiniteValue(f"chart: {axis} value {value!r} has no JSON encoding")
    return fmt % value


def _y(fmt: str, value: float) -> str:
    if math.isnan(value):
        return " null"
    return _num(fmt, value, "y")


def encode_values(values: Values, x_format: str = DEFAULT_FLOAT_FORMAT, y_format: str = DEFAULT_FLOAT_FORMAT) -> str:
    """Encode a Values payload as a JSON array literal.

    Args:
        values: Payload exposing xs/ys/rs.
        x_format: printf-style format for X values (and bare category values).
        y_format: printf-style format for Y and R values.

    Returns:
        ``[n,...]`` when only one sequence is present, otherwise an array of
        ``{"x":..,"y":..}`` or ``{"x":..,"y":..,"r":..}`` objects. A NaN Y is
        written as ``null``.

    Raises:
        InvalidShape: R values are given without X values.
        ShapeMismatch: Sequences that must pair up differ in length.
        NonFiniteValue: X or R is NaN/infinite, or Y is infinite.
    """

    xs, ys, rs = _floats(values.xs()), _floats(values.ys()), _floats(values.rs())
    bare_axis = "x"
    if not xs:
        if rs:
            raise InvalidShape("chart: bad format of Values data. R values require X values")
        # category data: the Y values are the plotted numbers
        xs, ys = ys, []
        bare_axis = "y"

    items: List[str] = []
    if rs:
        if len(xs) != len(ys) or len(xs) != len(rs):
            raise ShapeMismatch(
                f"chart: bad format of Values. All axes must be of the same length (x={len(xs)}, y={len(ys)}, r={len(rs)})"
            )
        for x, y, r in zip(xs, ys, rs):
            items.append('{"x":' + _num(x_format, x, "x") + ',"y":' + _y(y_format, y) + ',"r":' + _num(y_format, r, "r") + "}")
    elif ys:
        if len(xs) != len(ys):
            raise ShapeMismatch(f"chart: bad format of Values. X and Y must be of the same length (x={len(xs)}, y={len(ys)})")
        for x, y in zip(xs, ys):
            items.append('{"x":' + _num(x_format, x, "x") + ',"y":' + _y(y_format, y) + "}")
    else:
        for x in xs:
            if bare_axis == "y" and math.isnan(x):
                items.append("null")
            else:
                items.append(_num(x_format, x, bare_axis))

    logger.debug("Encoded %d %s point(s)", len(items), "xyr" if rs else "xy" if ys else "bare")
    return "[" + ",".join(items) + "]"


def encode_payload(data: Any, x_format: str = DEFAULT_FLOAT_FORMAT, y_format: str = DEFAULT_FLOAT_FORMAT) -> Optional[RawJSON]:
    """Encode a dataset payload, trying ``to_json()`` before Values.

    Returns None when the payload offers neither capability.
    """

    if isinstance(data, JSONMarshaler):
        return RawJSON(data.to_json())
    if isinstance(data, Values):
        return RawJSON(encode_values(data, x_format, y_format))
    if data is not None:
        logger.debug("Payload of type %s has no JSON or Values capability", type(data).__name__)
    return None
