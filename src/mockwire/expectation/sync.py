# src/mockwire/expectation/sync.py
"""Expectation parts for request/reply endpoints.

A synchronous mock answers each expected message with a response body
and/or response headers. Body ``i`` and headers ``i`` belong to the
``i``-th expected message and are applied together.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Self

import structlog

from mockwire.content.processors import BodyProcessor, HeadersProcessor
from mockwire.content.resources import Resource
from mockwire.contracts.protocols import Processor
from mockwire.expectation.definition import ExpectationDefinition
from mockwire.expectation.part import ExpectationPart

logger = structlog.get_logger(__name__)


class SyncExpectationPart(ExpectationPart):
    """ExpectationPart that also produces response bodies and headers."""

    def __init__(self, endpoint_uri: str) -> None:
        super().__init__(endpoint_uri)
        self._response_bodies: list[Any] = []
        self._response_headers: list[Mapping[str, Any]] = []

    def response_body(self, *bodies: Any) -> Self:
        """Bodies returned to the caller, one per expected message, in order."""
        self._response_bodies.extend(bodies)
        return self

    def response_body_from(self, *resources: Resource[Any]) -> Self:
        """Like ``response_body`` but reads each body from a resource now."""
        return self.response_body(*(resource.value() for resource in resources))

    def response_headers(self, *headers: Mapping[str, Any]) -> Self:
        """Headers returned to the caller, one mapping per expected message."""
        self._response_headers.extend(headers)
        return self

    def response_headers_from(self, *resources: Resource[Mapping[str, Any]]) -> Self:
        """Like ``response_headers`` but reads each mapping from a resource now."""
        return self.response_headers(*(resource.value() for resource in resources))

    def build(self, previous: ExpectationDefinition | None) -> ExpectationDefinition:
        bodies = self._response_bodies
        headers = self._response_headers
        logger.debug(
            "sync_response_processors",
            endpoint_uri=self.endpoint_uri,
            body_count=len(bodies),
            header_count=len(headers),
        )

        # Generated into a copy so building twice does not duplicate responses
        slots: list[list[Processor]] = [list(slot) for slot in self._processor_slots]
        for index in range(max(len(bodies), len(headers))):
            while len(slots) <= index:
                slots.append([])
            if index < len(bodies):
                slots[index].append(BodyProcessor(bodies[index]))
            if index < len(headers):
                slots[index].append(HeadersProcessor(headers[index]))

        return self._merge(slots, previous)
