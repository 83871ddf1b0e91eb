"""Build Chart.js chart configurations in Python and render them as JSON."""

from .axis import Axis, AxisTitle, ScaleLabel, Tick
from .chart import Chart, Data, load_document
from .config import DEFAULT_FLOAT_FORMAT, FormatConfig
from .dataset import Dataset
from .encoder import RawJSON, dumps
from .errors import ChartError, InvalidAxisPosition, InvalidShape, NonFiniteValue, ShapeMismatch, ValuesError
from .options import Animation, Legend, Options, Title, Tooltip
from .types import FALSE, RGBA, TRUE, AxisPosition, AxisType, Bool, ChartType, InterpMode, Shape
from .values import JSONMarshaler, Values, XYRs, encode_payload, encode_values

__all__ = [
    "Chart",
    "Data",
    "Dataset",
    "Axis",
    "AxisTitle",
    "ScaleLabel",
    "Tick",
    "Options",
    "Title",
    "Legend",
    "Tooltip",
    "Animation",
    "ChartType",
    "InterpMode",
    "Shape",
    "AxisType",
    "AxisPosition",
    "Bool",
    "TRUE",
    "FALSE",
    "RGBA",
    "Values",
    "JSONMarshaler",
    "XYRs",
    "RawJSON",
    "FormatConfig",
    "DEFAULT_FLOAT_FORMAT",
    "ChartError",
    "ValuesError",
    "ShapeMismatch",
    "InvalidShape",
    "NonFiniteValue",
    "InvalidAxisPosition",
    "encode_values",
    "encode_payload",
    "dumps",
    "load_document",
]
