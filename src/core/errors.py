"""Error taxonomy for a scan cycle.

Every error aborts the current cycle; the scheduler logs it and runs the
next cycle on schedule.
"""

from __future__ import annotations


class ScanError(Exception):
    """Base class for anything that aborts a scan cycle."""


class FetchRequestError(ScanError):
    """The data source could not be contacted."""


class FetchDecodeError(ScanError):
    """The data source answered, but the body is not the expected shape."""


class UpstreamDataError(ScanError):
    """The response reports errors or lacks a required field."""

    def __init__(self, field: str, detail: str = "missing") -> None:
        super().__init__(f"{field}: {detail}")
        self.field = field
        self.detail = detail


class DispatchError(ScanError):
    """The notification transport rejected or could not deliver a payload."""
