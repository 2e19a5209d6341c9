"""
Template rendering for log lines.

Placeholders use the ``${name}`` syntax only, where ``name`` is made of ASCII
letters, digits and underscores. Anything that does not form a complete
placeholder is kept as literal text, so a typo in a custom template never
raises.
"""

import string
from typing import List, Mapping, Optional, Tuple


DEFAULT_FORMAT = (
    "${now} ${traceCode} ${counter} ${level} "
    "${funcName}[${fileName}:${lineNumber}] ${value}"
)

KNOWN_PLACEHOLDERS = frozenset({
    "now", "traceCode", "counter", "level",
    "funcName", "fileName", "lineNumber", "value",
})

_NAME_CHARS = frozenset(string.ascii_letters + string.digits + "_")

# (raw text, placeholder name or None for literal text)
Segment = Tuple[str, Optional[str]]


def _parse(template: str) -> List[Segment]:
    """Split a template into literal and placeholder segments in one pass."""

    segments: List[Segment] = []
    length = len(template)
    pos = 0

    while pos < length:
        start = template.find("${", pos)
        if start == -1:
            segments.append((template[pos:], None))
            break

        if start > pos:
            segments.append((template[pos:start], None))

        end = start + 2
        while end < length and template[end] in _NAME_CHARS:
            end += 1

        if end < length and template[end] == "}" and end > start + 2:
            segments.append((template[start:end + 1], template[start + 2:end]))
            pos = end + 1
        else:
            # Not a placeholder: keep the delimiter and rescan after it
            segments.append(("${", None))
            pos = start + 2

    return segments


class Formatter:
    """Renders bindings into a fixed template."""

    def __init__(self, template: str = DEFAULT_FORMAT):
        self._template = template
        self._segments = _parse(template)

    @property
    def template(self) -> str:
        return self._template

    @property
    def placeholders(self) -> List[str]:
        """Names of the well-formed placeholders, in template order."""

        return [name for _, name in self._segments if name is not None]

    def render(self, bindings: Mapping[str, str]) -> str:
        """
        Substitute bound placeholders.

        Args:
            bindings: Placeholder name to replacement text

        Returns:
            Rendered text; unbound placeholders are emitted unchanged
        """
        parts = []
        for raw, name in self._segments:
            if name is not None and name in bindings:
                parts.append(bindings[name])
            else:
                parts.append(raw)
        return "".join(parts)


def render(template: str, bindings: Mapping[str, str]) -> str:
    """Render ``template`` once with ``bindings``."""

    return Formatter(template).render(bindings)


__all__ = [
    "DEFAULT_FORMAT",
    "KNOWN_PLACEHOLDERS",
    "Formatter",
    "render",
]
