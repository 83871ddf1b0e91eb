"""Tests for the chart builder and document encoder."""

import json

import pytest
from pydantic import ValidationError

from chartjs import (
    FALSE,
    RGBA,
    TRUE,
    Animation,
    Axis,
    AxisPosition,
    AxisType,
    Chart,
    ChartType,
    Dataset,
    FormatConfig,
    InvalidAxisPosition,
    Legend,
    Options,
    ScaleLabel,
    Tick,
    Title,
    Tooltip,
    XYRs,
    load_document,
)


def test_empty_chart(chart):
    assert chart.to_json() == '{"type":"line","data":{"datasets":[],"labels":[]},"options":{}}'


def test_label_is_emitted_when_set():
    out = json.loads(Chart(type=ChartType.BUBBLE, label="sizes").to_json())
    assert list(out) == ["type", "label", "data", "options"]
    assert out["type"] == "bubble"
    assert out["label"] == "sizes"


def test_add_dataset_preserves_order(chart):
    for name in ("a", "b", "c"):
        chart.add_dataset(Dataset(label=name))
    out = json.loads(chart.to_json())
    assert [d["label"] for d in out["data"]["datasets"]] == ["a", "b", "c"]


def test_add_x_axis_defaults_id(chart):
    axis = Axis(type=AxisType.LINEAR, position=AxisPosition.BOTTOM)
    assert chart.add_x_axis(axis) == "x"
    assert list(chart.options.scales) == ["x"]
    assert chart.options.scales["x"].id == "x"
    # the caller's axis is left alone
    assert axis.id == ""


def test_add_y_axis_defaults_id(chart):
    assert chart.add_y_axis(Axis(position=AxisPosition.RIGHT)) == "y"
    assert chart.add_y_axis(Axis(id="y2", position=AxisPosition.LEFT)) == "y2"
    assert list(chart.options.scales) == ["y", "y2"]


@pytest.mark.parametrize("position", [AxisPosition.LEFT, AxisPosition.RIGHT])
def test_x_axis_on_the_side_is_rejected(chart, position):
    with pytest.raises(InvalidAxisPosition):
        chart.add_x_axis(Axis(position=position))
    assert chart.options.scales == {}


@pytest.mark.parametrize("position", [AxisPosition.TOP, AxisPosition.BOTTOM])
def test_y_axis_on_top_or_bottom_is_rejected(chart, position):
    chart.add_y_axis(Axis(id="keep"))
    with pytest.raises(InvalidAxisPosition):
        chart.add_y_axis(Axis(position=position))
    assert list(chart.options.scales) == ["keep"]


def test_add_axis_same_id_overwrites(chart):
    chart.add_axis(Axis(id="x", type=AxisType.LINEAR))
    chart.add_axis(Axis(id="x", type=AxisType.TIME))
    assert len(chart.options.scales) == 1
    assert json.loads(chart.to_json())["options"]["scales"] == {"x": {"type": "time"}}


def test_added_dataset_is_owned_by_chart(chart, xy):
    d = Dataset(label="before", data=xy, border_color=RGBA(r=1))
    chart.add_dataset(d)
    before = chart.to_json()
    d.label = "changed"
    d.border_color.r = 200
    assert chart.to_json() == before
    # the payload is shared, not copied
    assert chart.data.datasets[0].data is xy


def test_added_axis_is_owned_by_chart(chart):
    axis = Axis(id="x", type=AxisType.LINEAR, tick=Tick(min=0))
    chart.add_axis(axis)
    before = chart.to_json()
    axis.type = AxisType.TIME
    axis.tick.min = 5
    assert chart.to_json() == before


def test_options_leave_the_callers_axis_alone():
    axis = Axis(type=AxisType.LINEAR)
    options = Options(scales={"y2": axis})
    assert axis.id == ""
    assert options.scales["y2"].id == "y2"
    assert options.scales["y2"] is not axis


def test_assigned_position_is_validated(chart):
    axis = Axis()
    axis.position = "left"
    assert axis.position is AxisPosition.LEFT
    with pytest.raises(InvalidAxisPosition):
        chart.add_x_axis(axis)
    assert chart.options.scales == {}


def test_assigned_unknown_literal_is_rejected():
    axis = Axis()
    with pytest.raises(ValidationError):
        axis.type = "pie"


@pytest.mark.parametrize("label", [None, ""])
def test_empty_label_is_omitted(label):
    assert "label" not in json.loads(Chart(label=label).to_json())


def test_empty_strings_are_omitted_from_options(chart):
    chart.add_axis(Axis(id="x", label=""))
    chart.options.title = Title(display=TRUE, text="")
    out = json.loads(chart.to_json())["options"]
    assert out == {"title": {"display": True}, "scales": {"x": {"type": "category"}}}


def test_axis_json(chart):
    chart.add_x_axis(
        Axis(
            type=AxisType.LINEAR,
            position=AxisPosition.BOTTOM,
            grid_lines=FALSE,
            scale_label=ScaleLabel(display=TRUE, label_string="time", font_size=12),
            tick=Tick(min=0, begin_at_zero=TRUE),
        )
    )
    assert json.loads(chart.to_json())["options"] == {
        "scales": {
            "x": {
                "type": "linear",
                "position": "bottom",
                "gridLine": False,
                "scaleLabel": {"display": True, "labelString": "time", "fontSize": 12},
                "ticks": {"min": 0.0, "beginAtZero": True},
            }
        }
    }


def test_unset_tri_state_never_emitted():
    chart = Chart(options=Options(responsive=FALSE, legend=Legend()))
    out = chart.to_json()
    assert '"responsive":false' in out
    assert "maintainAspectRatio" not in out
    assert json.loads(out)["options"]["legend"] == {}


def test_options_json():
    options = Options(
        maintain_aspect_ratio=TRUE,
        title=Title(display=TRUE, text="Sales"),
        tooltip=Tooltip(mode="index", custom="function(t) {}"),
        animation=Animation(duration=250),
        plugins={"datalabels": {"color": "white"}},
    )
    assert json.loads(Chart(options=options).to_json())["options"] == {
        "maintainAspectRatio": True,
        "title": {"display": True, "text": "Sales"},
        "tooltips": {"mode": "index", "custom": "function(t) {}"},
        "animation": {"duration": 250},
        "plugins": {"datalabels": {"color": "white"}},
    }


def test_document_with_data(chart, xy):
    chart.data.labels = ["a", "b"]
    chart.add_dataset(Dataset(label="s", data=xy))
    out = json.loads(chart.to_json(FormatConfig(x_float_format="%.0f")))
    assert out["data"]["labels"] == ["a", "b"]
    assert out["data"]["datasets"][0]["data"] == [{"x": 1, "y": 3.0}, {"x": 2, "y": None}]


def test_encoding_is_idempotent(chart, xy):
    chart.add_x_axis(Axis(type=AxisType.LINEAR))
    chart.add_dataset(Dataset(label="s", data=xy, fill=FALSE))
    assert chart.to_json() == chart.to_json()


def test_indent_does_not_change_content(chart, xy):
    chart.add_dataset(Dataset(data=xy))
    pretty = chart.to_json(indent=2)
    assert "\n" in pretty
    assert json.loads(pretty) == json.loads(chart.to_json())


def test_from_dict_accepts_camel_case():
    chart = Chart.from_dict(
        {
            "type": "bar",
            "data": {
                "labels": ["a", "b"],
                "datasets": [{"label": "s", "backgroundColor": "#336699", "data": [1, 2]}],
            },
            "options": {"scales": {"y": {"type": "linear", "ticks": {"beginAtZero": True}}}},
        }
    )
    assert chart.type is ChartType.BAR
    assert chart.options.scales["y"].id == "y"
    assert chart.options.scales["y"].tick.begin_at_zero is True
    out = json.loads(chart.to_json())
    assert out["data"]["datasets"][0]["data"] == [1.0, 2.0]
    assert out["data"]["datasets"][0]["backgroundColor"] == "rgba(51, 102, 153, 1.000)"


def test_load_document(write_yaml):
    path = write_yaml(
        """
formats:
  x_float_format: "%.1f"
chart:
  type: line
  label: from yaml
  data:
    datasets:
      - label: s
        xAxisID: x
        data: {x: [1, 2], y: [3, 4]}
"""
    )
    chart, formats = load_document(path)
    assert formats == FormatConfig(x_float_format="%.1f")
    assert chart.label == "from yaml"
    assert chart.to_json(formats).endswith('"data":[{"x":1.0,"y":3.00},{"x":2.0,"y":4.00}]}],"labels":[]},"options":{}}')


def test_from_yaml_top_level_chart(write_yaml):
    path = write_yaml("type: bubble\ndata:\n  datasets:\n    - data: {x: [1], y: [2], r: [3]}\n")
    chart = Chart.from_yaml(path)
    assert chart.type is ChartType.BUBBLE
    assert isinstance(chart.data.datasets[0].data, XYRs)
