from __future__ import annotations

import math
from typing import Any, Dict, List, TextIO

from chartjs.axis import Axis, ScaleLabel, Tick
from chartjs.chart import Chart
from chartjs.dataset import Dataset
from chartjs.encoder import dumps
from chartjs.options import Legend, Title, Tooltip
from chartjs.types import FALSE, RGBA, TRUE, AxisPosition, AxisType, ChartType, InterpMode, Shape
from chartjs.values import XYRs

from . import command
from .core import formats_from_opts, indent_from_opts


def line_chart() -> Chart:
    """Two trigonometric series on linear axes; the cosine has a gap."""
    xs = [i * 0.5 for i in range(13)]
    cos = [math.cos(x) for x in xs]
    cos[6] = float("nan")

    chart = Chart(type=ChartType.LINE, label="demo_line")
    x_id = chart.add_x_axis(
        Axis(type=AxisType.LINEAR, position=AxisPosition.BOTTOM, scale_label=ScaleLabel(display=TRUE, label_string="t"))
    )
    y_id = chart.add_y_axis(Axis(type=AxisType.LINEAR, position=AxisPosition.LEFT, tick=Tick(min=-1, max=1)))
    chart.add_dataset(
        Dataset(
            label="sin",
            data=XYRs(x=xs, y=[math.sin(x) for x in xs]),
            border_color=RGBA(r=54, g=162, b=235),
            border_width=2,
            fill=FALSE,
            cubic_interpolation_mode=InterpMode.MONOTONE,
            point_radius=2,
            x_axis_id=x_id,
            y_axis_id=y_id,
        )
    )
    chart.add_dataset(
        Dataset(
            label="cos",
            data=XYRs(x=xs, y=cos),
            border_color=RGBA(r=255, g=99, b=132),
            border_width=2,
            fill=FALSE,
            span_gaps=FALSE,
            point_radius=2,
            point_style=Shape.TRIANGLE,
            x_axis_id=x_id,
            y_axis_id=y_id,
        )
    )
    chart.options.responsive = TRUE
    chart.options.title = Title(display=TRUE, text="sin / cos")
    return chart


def bar_chart() -> Chart:
    """Category data: one value per label, no X coordinates."""
    chart = Chart(type=ChartType.BAR, label="demo_bar")
    chart.data.labels = ["Q1", "Q2", "Q3", "Q4"]
    chart.add_x_axis(Axis(type=AxisType.CATEGORY, stacked=TRUE))
    chart.add_y_axis(Axis(type=AxisType.LINEAR, stacked=TRUE, tick=Tick(begin_at_zero=TRUE)))
    chart.add_dataset(Dataset(label="2023", data=XYRs(y=[3, 5, 2, 4]), background_color=RGBA(r=75, g=192, b=192, a=128)))
    chart.add_dataset(Dataset(label="2024", data=XYRs(y=[4, 3, 6, float("nan")]), background_color=RGBA(r=153, g=102, b=255, a=128)))
    chart.options.legend = Legend(display=TRUE)
    return chart


def bubble_chart() -> Chart:
    """Points sized by R."""
    chart = Chart(type=ChartType.BUBBLE, label="demo_bubble")
    chart.add_x_axis(Axis(type=AxisType.LINEAR))
    chart.add_y_axis(Axis(type=AxisType.LOG, position=AxisPosition.RIGHT))
    chart.add_dataset(
        Dataset(
            label="cities",
            data=XYRs(x=[1, 2, 3, 4], y=[10, 100, 1000, 10000], r=[5, 10, 15, 20]),
            background_color=RGBA(r=255, g=159, b=64, a=160),
            y_float_format="%.0f",
        )
    )
    chart.options.tooltip = Tooltip(enabled=TRUE, intersect=FALSE, mode="nearest")
    return chart


DEMOS = {
    "demo_line": line_chart,
    "demo_bar": bar_chart,
    "demo_bubble": bubble_chart,
}


def _print_demo(name: str, out: TextIO, opts: Dict[str, Any]) -> int:
    chart = DEMOS[name]()
    print(chart.to_json(formats_from_opts(opts), indent=indent_from_opts(opts)), file=out)
    return 0


@command("demo_line")
def demo_line(out: TextIO, args: List[str], opts: Dict[str, Any]) -> int:
    return _print_demo("demo_line", out, opts)


@command("demo_bar")
def demo_bar(out: TextIO, args: List[str], opts: Dict[str, Any]) -> int:
    return _print_demo("demo_bar", out, opts)


@command("demo_bubble")
def demo_bubble(out: TextIO, args: List[str], opts: Dict[str, Any]) -> int:
    return _print_demo("demo_bubble", out, opts)


@command("demo_charts")
def demo_charts(out: TextIO, args: List[str], opts: Dict[str, Any]) -> int:
    formats = formats_from_opts(opts)
    trees = [build().to_tree(formats) for build in DEMOS.values()]
    print(dumps(trees, indent=indent_from_opts(opts)), file=out)
    return 0
