# src/mockwire/expectation/feeder.py
"""Feeder routes: how an endpoint is attached to the capture mechanism.

The expectation core treats a feeder route as opaque. It only guarantees
that every endpoint has exactly one, defined by its first part.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace

from mockwire.contracts.message import Message

FeederStep = Callable[[Message], None]


def convert_body_to_text(message: Message) -> None:
    """Decode a bytes body as UTF-8 so predicates see text."""
    if isinstance(message.body, (bytes, bytearray)):
        message.body = bytes(message.body).decode("utf-8")


@dataclass(frozen=True, slots=True)
class FeederRoute:
    """Wiring between a listening endpoint and the verification runtime.

    Attributes:
        steps: Transformations applied to each inbound message before it is
            handed to the runtime, in order.
        source_uri: Endpoint the route consumes from. Unset until the route
            is bound by the first part of an endpoint.
    """

    steps: tuple[FeederStep, ...] = ()
    source_uri: str | None = None

    def bound_to(self, endpoint_uri: str) -> FeederRoute:
        """Return a copy of this route consuming from ``endpoint_uri``."""
        return replace(self, source_uri=endpoint_uri)

    def feed(self, message: Message) -> Message:
        """Run the route's steps over an inbound message and return it."""
        for step in self.steps:
            step(message)
        return message


def default_feeder_route(endpoint_uri: str) -> FeederRoute:
    """Feeder route used when the first part of an endpoint defines none."""
    return FeederRoute(steps=(convert_body_to_text,), source_uri=endpoint_uri)
