# src/mockwire/expectation/definition.py
"""The merged, immutable expectation for one endpoint.

An ExpectationDefinition is what the verification runtime consumes. It is
produced by ``ExpectationPart.build()`` and never mutated afterwards, so
the runtime may share it between message-handling threads without locking.
"""

from __future__ import annotations

from dataclasses import dataclass

from mockwire.contracts.enums import OrderingType
from mockwire.contracts.protocols import LenientResponder, Predicate, Processor
from mockwire.expectation.feeder import FeederRoute


@dataclass(frozen=True, slots=True)
class ExpectationDefinition:
    """All parts authored for one endpoint, folded together.

    Attributes:
        endpoint_uri: Endpoint the expectation listens on (the merge key).
        ordering: Ordering discipline shared by every part of the endpoint.
        endpoint_ordered: Whether the endpoint holds a fixed position in the
            cross-endpoint timeline.
        predicates: One predicate per expected message, earliest part first.
        processors: One processor per expected message, earliest part first.
        expected_message_count: Sum of the parts' counts (lenient parts add 0).
        assertion_time_ms: How long the runtime waits for messages; the first
            part's value applies to the whole endpoint.
        feeder_route: Wiring defined by the first part.
        lenient_selector: Selector of the endpoint's lenient part, if any.
        lenient_responder: Responder of the endpoint's lenient part, if any.
    """

    endpoint_uri: str
    ordering: OrderingType
    endpoint_ordered: bool
    predicates: tuple[Predicate, ...]
    processors: tuple[Processor, ...]
    expected_message_count: int
    assertion_time_ms: int
    feeder_route: FeederRoute
    lenient_selector: Predicate | None = None
    lenient_responder: LenientResponder | None = None

    @property
    def is_lenient(self) -> bool:
        """True when one of the endpoint's parts was marked lenient."""
        return self.lenient_selector is not None
