from __future__ import annotations

import logging
from typing import Any, Dict, List, TextIO

from chartjs.chart import load_document
from chartjs.config import FormatConfig

from . import command, names

logger = logging.getLogger(__name__)


def formats_from_opts(opts: Dict[str, Any], base: FormatConfig | None = None) -> FormatConfig:
    """Apply ``--x_format``/``--y_format`` on top of ``base`` (the environment by default)."""
    base = base or FormatConfig.from_env()
    overrides = {
        field: str(opts[key])
        for key, field in (("x_format", "x_float_format"), ("y_format", "y_float_format"))
        if opts.get(key) not in (None, True)
    }
    return base.merged(overrides)


def indent_from_opts(opts: Dict[str, Any]) -> int | None:
    indent = opts.get("indent")
    if indent is True:
        return 2
    if isinstance(indent, int):
        return indent
    return None


@command("help")
def _help(out: TextIO, args: List[str], opts: Dict[str, Any]) -> int:
    lines = [
        "Usage: chartjs <command> [args] [--x_format %.2f] [--y_format %.2f] [--indent N] [--verbose]",
        "",
        "Commands:",
        "  help                       Show this help",
        "  demo_line                  Print a demo line chart",
        "  demo_bar                   Print a demo bar chart",
        "  demo_bubble                Print a demo bubble chart",
        "  demo_charts                Print all demo charts as a JSON array",
        "  render <file.yml>          Render a YAML chart document to JSON",
        "",
        f"Available: {', '.join(sorted(names()))}",
    ]
    print("\n".join(lines), file=out)
    return 0


@command("render")
def _render(out: TextIO, args: List[str], opts: Dict[str, Any]) -> int:
    if not args:
        print("Usage: chartjs render <file.yml>", file=out)
        return 2
    chart, formats = load_document(args[0], defaults=FormatConfig.from_env())
    formats = formats_from_opts(opts, base=formats)
    logger.debug("Rendering %s with %s", args[0], formats)
    print(chart.to_json(formats, indent=indent_from_opts(opts)), file=out)
    return 0


_ = (_help, _render)
