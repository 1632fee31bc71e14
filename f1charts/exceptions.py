"""
Exception hierarchy for f1charts.

Every error raised by the library derives from `F1ChartsError`, so callers
can catch the whole family or a single kind.
"""
from typing import Optional


class F1ChartsError(Exception):
    """Base class for all f1charts errors."""


class ResolutionNotFoundError(F1ChartsError):
    """No meeting or session name contained the requested fragment."""

    def __init__(self, kind: str, scope: object, fragment: str) -> None:
        self.kind = kind
        self.scope = scope
        self.fragment = fragment
        super().__init__(f"{kind.capitalize()} '{fragment}' not found for {scope}")


NotFoundError = ResolutionNotFoundError


class TransportError(F1ChartsError):
    """The upstream request failed or answered with a non-success status."""

    def __init__(self, message: str, status_code: Optional[int] = None, url: str = "") -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(message)


class MalformedResponseError(F1ChartsError):
    """The upstream body was not the JSON list we expected."""

    def __init__(self, message: str, url: str = "") -> None:
        self.url = url
        super().__init__(message)
