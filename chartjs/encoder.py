"""Single-pass JSON writer for chart trees.

Chart trees are plain dicts/lists produced by ``model_dump`` with a few
``RawJSON`` leaves holding pre-formatted numeric arrays. The writer emits
those leaves verbatim and hands every other scalar to :mod:`json`, so the
formatted precision of the data survives while the rest of the document is
ordinary JSON.
"""

from __future__ import annotations

import json
from typing import Any, List, Mapping, Optional


class RawJSON:
    """A JSON fragment that is written to the output as-is.

    Also usable directly as a dataset payload: it satisfies the
    ``to_json()`` capability.
    """

    __slots__ = ("text",)

    def __init__(self, text: str):
        self.text = text

    def to_json(self) -> str:
        return self.text

    def __eq__(self, other: object) -> bool:
        return isinstance(other, RawJSON) and other.text == self.text

    def __repr__(self) -> str:
        return f"RawJSON({self.text!r})"


def dumps(tree: Any, indent: Optional[int] = None) -> str:
    """Serialize a chart tree.

    Args:
        tree: Nested dict/list/scalar structure, possibly holding RawJSON leaves.
        indent: Pretty-print with this many spaces per level; compact when None.

    Returns:
        The JSON document. Compact output uses no whitespace between tokens.

    Raises:
        ValueError: When a float outside a RawJSON leaf is NaN or infinite.
        TypeError: When the tree holds a value JSON cannot represent.
    """

    out: List[str] = []
    _write(tree, out, indent, 0)
    return "".join(out)


def _newline(indent: Optional[int], level: int) -> str:
    if indent is None:
        return ""
    return "\n" + " " * (indent * level)


def _write(node: Any, out: List[str], indent: Optional[int], level: int) -> None:
    if isinstance(node, RawJSON):
        out.append(node.text)
    elif isinstance(node, Mapping):
        if not node:
            out.append("{}")
            return
        out.append("{")
        for i, (key, value) in enumerate(node.items()):
            if i:
                out.append(",")
            out.append(_newline(indent, level + 1))
            out.append(json.dumps(str(key), ensure_ascii=False))
            out.append(":" if indent is None else ": ")
            _write(value, out, indent, level + 1)
        out.append(_newline(indent, level))
        out.append("}")
    elif isinstance(node, (list, tuple)):
        if not node:
            out.append("[]")
            return
        out.append("[")
        for i, item in enumerate(node):
            if i:
                out.append(",")
            out.append(_newline(indent, level + 1))
            _write(item, out, indent, level + 1)
        out.append(_newline(indent, level))
        out.append("]")
    else:
        out.append(json.dumps(node, ensure_ascii=False, allow_nan=False))
