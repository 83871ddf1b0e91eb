"""Developer command line: ``python -m chartjs <command> [args] [options]``.

Examples:
  chartjs help
  chartjs demo_line --indent 2
  chartjs render chart.yml --x_format %.0f
  chartjs demo_charts y_format=%.3f
"""

import logging
import shlex
import sys
from typing import Any, Dict, List, Optional, Sequence, TextIO, Tuple

import yaml

from chartjs.errors import ChartError
from chartjs.log import configure_logging

from .commands import get as get_command
from .commands import names as list_command_names

logger = logging.getLogger(__name__)


def _coerce_scalar(val: str) -> Any:
    """Best-effort cast of string token to int/float/bool/str."""
    low = val.lower()
    if low in ("true", "false"):
        return low == "true"
    for caster in (int, float):
        try:
            return caster(val)
        except ValueError:
            pass
    return val


def parse_cmd(cmdline: str | Sequence[str]) -> Tuple[str | None, List[str], Dict[str, Any]]:
    """
    Parse a command line into (subcommand, args, options).
    Supports:
      - flags: -k v, --key v, --flag (True)
      - key=value tokens
      - positional args collected into args list
    """
    parts = shlex.split(cmdline) if isinstance(cmdline, str) else list(cmdline)
    if not parts:
        return None, [], {}
    sub = parts[0]
    args: List[str] = []
    opts: Dict[str, Any] = {}

    i = 1
    while i < len(parts):
        t = parts[i]
        if "=" in t and not t.startswith("--="):
            key, val = t.split("=", 1)
            opts[key.lstrip("-")] = _coerce_scalar(val)
        elif t.startswith("-"):
            key = t.lstrip("-")
            # standalone flag
            if i + 1 >= len(parts) or parts[i + 1].startswith("-"):
                opts[key] = True
            else:
                opts[key] = _coerce_scalar(parts[i + 1])
                i += 1
        else:
            args.append(t)
        i += 1

    return sub, args, opts


def main(argv: Optional[Sequence[str]] = None, out: Optional[TextIO] = None) -> int:
    out = out or sys.stdout
    sub, args, opts = parse_cmd(sys.argv[1:] if argv is None else argv)
    configure_logging("DEBUG" if opts.pop("verbose", False) else None)

    # If no subcommand, default to 'help'
    if not sub:
        sub = "help"

    handler = get_command(sub)
    if handler is None:
        print(f"Unknown command: {sub}. Try one of: {', '.join(sorted(list_command_names()))}", file=sys.stderr)
        return 2

    try:
        return handler(out, args, opts)
    except (ChartError, ValueError, OSError, yaml.YAMLError) as e:
        logger.debug("[%s] failed", sub, exc_info=True)
        print(f"chartjs {sub}: {e}", file=sys.stderr)
        return 1
