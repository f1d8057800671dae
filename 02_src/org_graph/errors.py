"""Error types raised by the graph pipeline."""

from typing import Optional


class SourceUnavailable(Exception):
    """The record source rejected or failed a request.

    ``status`` is the upstream HTTP status, or ``None`` when the request never
    got a response (network failure, timeout).
    """

    def __init__(self, status: Optional[int], message: str) -> None:
        self.status = status
        self.message = message
        prefix = f"Notion API error ({status})" if status is not None else "Notion API unreachable"
        super().__init__(f"{prefix}: {message}")
