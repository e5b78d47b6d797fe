from __future__ import annotations

from fastapi import Response

TOTAL_COUNT_HEADER = "X-Total-Count"


def set_total_count(response: Response, total: int) -> None:
    # List endpoints are unpaginated; the header mirrors the body length for admin UIs.
    response.headers[TOTAL_COUNT_HEADER] = str(total)
