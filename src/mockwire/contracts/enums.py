"""Modes shared between expectation authoring and the verification runtime."""

from enum import StrEnum


class OrderingType(StrEnum):
    """How strictly message arrival at one endpoint must follow authored order.

    TOTAL messages arrive exactly where they were authored in the test
    timeline. PARTIAL messages may arrive later than their position but never
    ahead of earlier expectations. NONE matches by content alone.

    Not to be confused with the endpoint-ordered flag, which places an
    endpoint relative to *other* endpoints.
    """

    TOTAL = "total"
    PARTIAL = "partial"
    NONE = "none"
