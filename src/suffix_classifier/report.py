"""Classification reporting utilities."""
from __future__ import annotations

from typing import Sequence

from .outputs import HostClassification, OutputKind


def _format_value(value: bool | str) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return value or "-"


def render_report(
    results: Sequence[HostClassification],
    kinds: Sequence[OutputKind] | None = None,
) -> str:
    """Return a human-readable report of classified hosts."""

    kinds = list(kinds or OutputKind)
    lines = ["Public Suffix Report", f"Hosts classified: {len(results)}"]
    if not results:
        lines.append("No hosts given.")
        return "\n".join(lines)

    for result in results:
        lines.append(result.host or "(empty)")
        for kind in kinds:
            lines.append(f"  {kind.value}: {_format_value(result.get(kind))}")
    return "\n".join(lines)
