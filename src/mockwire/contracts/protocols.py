# src/mockwire/contracts/protocols.py
"""Capability protocols consumed by the expectation core.

Predicates and processors are supplied by pluggable collaborators; the core
only invokes them, in list order, and never inspects them.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from mockwire.contracts.message import Message


@runtime_checkable
class Predicate(Protocol):
    """Decides whether an inbound message matches an expectation."""

    def __call__(self, message: Message) -> bool: ...


@runtime_checkable
class Processor(Protocol):
    """Writes a response into a message (body/header substitution)."""

    def __call__(self, message: Message) -> None: ...


@runtime_checkable
class LenientResponder(Protocol):
    """Produces the response for each message on a lenient endpoint.

    Implementations are shared by every message-handling thread of the
    endpoint and must be safe to call concurrently.
    """

    def next(self) -> Processor | None: ...

    def __call__(self, message: Message) -> None: ...


class LenientResponderFactory(Protocol):
    """Builds a lenient responder from a part's authored processors."""

    def __call__(self, processors: Sequence[Processor]) -> LenientResponder: ...
