"""
Query-string builder for OpenF1 filters.

OpenF1 expresses range filters by putting the comparison operator between
the field and the value (``speed>=300``, ``date<2024-03-02``). Callers
describe filters with `gte`/`gt`/`lte`/`lt` and never spell that syntax
themselves; only `render_query` knows about it.
"""
from dataclasses import dataclass
from typing import Any, Iterable, Mapping
from urllib.parse import quote

OPERATORS = (">=", ">", "<=", "<")


@dataclass(frozen=True)
class Comparison:
    """A server-side comparison filter on one field."""

    op: str
    value: Any

    def __post_init__(self) -> None:
        if self.op not in OPERATORS:
            raise ValueError(f"Unsupported comparison operator: {self.op!r}")


def gte(value: Any) -> Comparison:
    return Comparison(">=", value)


def gt(value: Any) -> Comparison:
    return Comparison(">", value)


def lte(value: Any) -> Comparison:
    return Comparison("<=", value)


def lt(value: Any) -> Comparison:
    return Comparison("<", value)


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return quote(str(value), safe="-_.:")


def _iter_terms(key: str, value: Any) -> Iterable[str]:
    if value is None:
        return
    if isinstance(value, (list, tuple)):
        for item in value:
            yield from _iter_terms(key, item)
        return
    field = quote(key, safe="_")
    if isinstance(value, Comparison):
        yield f"{field}{value.op}{_format_value(value.value)}"
    else:
        yield f"{field}={_format_value(value)}"


def render_query(filters: Mapping[str, Any] | None) -> str:
    """
    Render a filter mapping to an OpenF1 query string (without the '?').

    Args:
        filters: Field name → plain value, `Comparison`, or a list of either
            (a list expresses a range, e.g. ``[gte(5), lt(10)]``).
            ``None`` values are skipped.

    Returns:
        Query string in insertion order, e.g. ``session_key=9158&speed>=300``.
    """
    if not filters:
        return ""
    terms: list[str] = []
    for key, value in filters.items():
        terms.extend(_iter_terms(key, value))
    return "&".join(terms)
