"""Exceptions raised while building or encoding a chart document."""


class ChartError(Exception):
    pass


class ValuesError(ChartError, ValueError):
    """A Values payload cannot be turned into a Chart.js data array."""


class ShapeMismatch(ValuesError):
    """X, Y and R sequences disagree in length."""


class InvalidShape(ValuesError):
    """R values were given without any X domain."""


class NonFiniteValue(ValuesError):
    """A coordinate holds NaN or infinity where JSON has no spelling for it."""


class InvalidAxisPosition(ChartError, ValueError):
    """An axis was added on a side its orientation cannot occupy."""
