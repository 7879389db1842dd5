"""Error taxonomy for the fetch → map → render pipeline.

Core components raise these and leave the decision about user feedback to
the caller (the HTTP layer in ``league_table.main``).
"""

from __future__ import annotations

from typing import Any, Optional


class LeagueTableError(Exception):
    """Base class for all pipeline failures."""

    code = "league_table_error"

    def __init__(self, message: str, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class FetchError(LeagueTableError):
    """Transport failure or non-2xx response from the standings API."""

    code = "upstream_error"

    def __init__(
        self,
        message: str,
        *,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Any] = None,
    ) -> None:
        super().__init__(message, details)
        self.url = url
        self.status_code = status_code


class DecodeError(LeagueTableError):
    """Response body is not JSON or does not match the record schema."""

    code = "decode_error"


class RenderTargetMissing(LeagueTableError):
    """The display surface (``<table>``) or its ``<tbody>`` is absent."""

    code = "render_error"
