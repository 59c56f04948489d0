# src/mockwire/expectation/part.py
"""Expectation parts and the algorithm that merges them per endpoint.

A test author may describe one endpoint in several parts, for example
declaring how many messages arrive first and attaching responses later.
Each part is built against the definition produced by the endpoint's
previous part:

    first = ExpectationPart("queue:orders").expected_message_count(1).predicates(is_order).build(None)
    merged = ExpectationPart("queue:orders").expected_message_count(1).predicates(is_refund).build(first)

The fold is strictly left to right. Because every part of an endpoint must
agree on ordering, endpoint ordering and feeder route, the final
definition behaves exactly as if the parts had been authored as one.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Self

import structlog

from mockwire.contracts.enums import OrderingType
from mockwire.contracts.errors import ConfigurationError, MergeConflictError
from mockwire.contracts.message import Message
from mockwire.contracts.protocols import LenientResponder, LenientResponderFactory, Predicate, Processor
from mockwire.expectation.composite import combine_predicates, combine_processors
from mockwire.expectation.cycler import ResponseCycler
from mockwire.expectation.definition import ExpectationDefinition
from mockwire.expectation.feeder import FeederRoute, default_feeder_route

if TYPE_CHECKING:
    from mockwire.config import ExpectationDefaults

logger = structlog.get_logger(__name__)

DEFAULT_ASSERTION_TIME_MS = 15_000


def accept_all(message: Message) -> bool:
    """Lenient selector used when none is given: every message is accepted."""
    return True


def _resolve_slots[T](
    endpoint_uri: str,
    kind: str,
    slots: Sequence[Sequence[T]],
    repeated: Sequence[T],
    count: int,
    combine: Callable[[Sequence[T]], T],
) -> list[T]:
    """Turn authored per-message slots into exactly ``count`` entries.

    Raises:
        ConfigurationError: If the number of slots disagrees with ``count``.
    """
    if not slots and repeated:
        return [combine(repeated)] * count
    if len(slots) != count:
        raise ConfigurationError(
            f"Endpoint {endpoint_uri} expects {count} message(s) but {len(slots)} {kind} were provided; "
            f"provide one {kind[:-1]} per expected message"
        )
    return [combine([*slot, *repeated]) for slot in slots]


class ExpectationPart:
    """Fluent builder for one increment of an endpoint's expectation.

    Setters return the builder itself so a part reads as one expression.
    ``build()`` never mutates the authored configuration, so a part whose
    build failed can be corrected and built again.
    """

    def __init__(self, endpoint_uri: str) -> None:
        self._endpoint_uri = endpoint_uri
        self._ordering = OrderingType.TOTAL
        self._endpoint_ordered = True
        self._expected_message_count = 1
        self._assertion_time_ms = DEFAULT_ASSERTION_TIME_MS
        self._feeder_route: FeederRoute | None = None
        self._lenient_selector: Predicate | None = None
        self._lenient_responder_factory: LenientResponderFactory = ResponseCycler

        self._predicate_slots: list[list[Predicate]] = []
        self._processor_slots: list[list[Processor]] = []
        self._repeated_predicates: list[Predicate] = []
        self._repeated_processors: list[Processor] = []

    @classmethod
    def from_defaults(cls, endpoint_uri: str, defaults: ExpectationDefaults) -> Self:
        """Create a part seeded from configured expectation defaults."""
        part = cls(endpoint_uri)
        part._ordering = defaults.ordering
        part._endpoint_ordered = defaults.endpoint_ordered
        part._assertion_time_ms = defaults.assertion_time_ms
        return part.expected_message_count(defaults.expected_message_count)

    @property
    def endpoint_uri(self) -> str:
        """Endpoint this part describes."""
        return self._endpoint_uri

    # === Endpoint-level settings ===

    def expected_message_count(self, count: int) -> Self:
        """Number of messages this part expects on the endpoint.

        Raises:
            ConfigurationError: If ``count`` is negative.
        """
        if count < 0:
            raise ConfigurationError(
                f"The expected message count for endpoint {self._endpoint_uri} must be at least 0, got {count}"
            )
        self._expected_message_count = count
        return self

    def ordering(self, ordering: OrderingType) -> Self:
        """Ordering discipline for messages arriving at this endpoint."""
        self._ordering = OrderingType(ordering)
        return self

    def endpoint_ordered(self, ordered: bool) -> Self:
        """Whether the endpoint holds a fixed place among other endpoints."""
        self._endpoint_ordered = ordered
        return self

    def endpoint_not_ordered(self) -> Self:
        return self.endpoint_ordered(False)

    def assertion_time(self, milliseconds: int) -> Self:
        """How long the verification runtime waits for this endpoint's messages."""
        self._assertion_time_ms = milliseconds
        return self

    def feeder_route(self, route: FeederRoute | None) -> Self:
        """Wiring to the capture mechanism; only the first part may set it."""
        self._feeder_route = route
        return self

    # === Leniency ===

    def lenient(self, selector: Predicate | None = None) -> Self:
        """Mark this part lenient: accept matching messages and cycle responses.

        Args:
            selector: Which messages the lenient part accepts. Accepts every
                message when omitted.
        """
        return self.lenient_selector(selector if selector is not None else accept_all)

    def lenient_selector(self, selector: Predicate | None) -> Self:
        """Set or clear (with None) the lenient selector."""
        self._lenient_selector = selector
        return self

    def lenient_responses(self, *processors: Processor) -> Self:
        """Responses a lenient part cycles through (one slot per response)."""
        return self.processors(*processors)

    def lenient_responder(self, factory: LenientResponderFactory) -> Self:
        """Strategy that turns the authored responses into a lenient responder."""
        self._lenient_responder_factory = factory
        return self

    # === Predicates and processors ===

    def predicates(self, *predicates: Predicate) -> Self:
        """Append predicates, one per expected message."""
        self._predicate_slots.extend([predicate] for predicate in predicates)
        return self

    def add_predicates(self, index: int, *predicates: Predicate) -> Self:
        """Add predicates to the message at ``index``, creating slots up to it."""
        _slot(self._predicate_slots, index).extend(predicates)
        return self

    def add_repeated_predicates(self, *predicates: Predicate) -> Self:
        """Add predicates that every message of this part must satisfy."""
        self._repeated_predicates.extend(predicates)
        return self

    def processors(self, *processors: Processor) -> Self:
        """Append processors, one per expected message."""
        self._processor_slots.extend([processor] for processor in processors)
        return self

    def add_processors(self, index: int, *processors: Processor) -> Self:
        """Add processors to the message at ``index``, creating slots up to it."""
        _slot(self._processor_slots, index).extend(processors)
        return self

    def add_repeated_processors(self, *processors: Processor) -> Self:
        """Add processors applied to every message of this part."""
        self._repeated_processors.extend(processors)
        return self

    # === Merge ===

    def build(self, previous: ExpectationDefinition | None) -> ExpectationDefinition:
        """Merge this part onto the endpoint's previous definition.

        Args:
            previous: Definition produced by the endpoint's previous part, or
                None if this is the endpoint's first part.

        Returns:
            A new immutable definition covering every part so far.

        Raises:
            ConfigurationError: If this part is malformed on its own.
            MergeConflictError: If this part contradicts an earlier part.
        """
        return self._merge(self._processor_slots, previous)

    def _merge(
        self,
        processor_slots: Sequence[Sequence[Processor]],
        previous: ExpectationDefinition | None,
    ) -> ExpectationDefinition:
        endpoint_uri = self._endpoint_uri
        count = self._expected_message_count

        if count < 0:
            raise ConfigurationError(f"The expected message count for endpoint {endpoint_uri} must be at least 0, got {count}")

        lenient_selector = self._lenient_selector
        lenient_responder: LenientResponder | None = None
        if lenient_selector is not None:
            if count > 0:
                logger.warning("lenient_expectations_ignored", endpoint_uri=endpoint_uri, expected_message_count=count)
            count = 0
            lenient_responder = self._lenient_responder_factory(self._lenient_response_processors(processor_slots))

        if previous is None:
            feeder_route = default_feeder_route(endpoint_uri) if self._feeder_route is None else self._feeder_route.bound_to(endpoint_uri)
        else:
            feeder_route = previous.feeder_route

        predicates: list[Predicate]
        processors: list[Processor]
        if lenient_selector is not None:
            if self._predicate_slots or self._repeated_predicates:
                logger.warning("lenient_predicates_ignored", endpoint_uri=endpoint_uri)
            predicates = []
            processors = []
        else:
            predicates = _resolve_slots(
                endpoint_uri, "predicates", self._predicate_slots, self._repeated_predicates, count, combine_predicates
            )
            processors = _resolve_slots(
                endpoint_uri, "processors", processor_slots, self._repeated_processors, count, combine_processors
            )

        assertion_time_ms = self._assertion_time_ms
        endpoint_ordered = self._endpoint_ordered

        if previous is not None:
            self._check_mergeable(previous)

            if previous.assertion_time_ms != assertion_time_ms:
                logger.warning(
                    "assertion_time_mismatch",
                    endpoint_uri=endpoint_uri,
                    assertion_time_ms=previous.assertion_time_ms,
                    ignored_assertion_time_ms=assertion_time_ms,
                )
                assertion_time_ms = previous.assertion_time_ms

            # A lenient part contributes empty lists, so concatenation also
            # carries an earlier endpoint's lists through a lenient part.
            predicates = [*previous.predicates, *predicates]
            processors = [*previous.processors, *processors]
            count += previous.expected_message_count
            endpoint_ordered = previous.endpoint_ordered
            if previous.lenient_selector is not None:
                lenient_selector = previous.lenient_selector
                lenient_responder = previous.lenient_responder

        return ExpectationDefinition(
            endpoint_uri=endpoint_uri,
            ordering=self._ordering,
            endpoint_ordered=endpoint_ordered,
            predicates=tuple(predicates),
            processors=tuple(processors),
            expected_message_count=count,
            assertion_time_ms=assertion_time_ms,
            feeder_route=feeder_route,
            lenient_selector=lenient_selector,
            lenient_responder=lenient_responder,
        )

    def _check_mergeable(self, previous: ExpectationDefinition) -> None:
        """Raise MergeConflictError if this part cannot follow ``previous``."""
        endpoint_uri = self._endpoint_uri
        if previous.endpoint_uri != endpoint_uri:
            raise MergeConflictError(
                endpoint_uri,
                "endpoint_uri",
                f"the previous part belongs to endpoint '{previous.endpoint_uri}'",
            )
        if previous.endpoint_ordered != self._endpoint_ordered:
            raise MergeConflictError(
                endpoint_uri,
                "endpoint_ordered",
                f"endpoint ordering must be the same for all parts (previous={previous.endpoint_ordered}, "
                f"this={self._endpoint_ordered})",
            )
        if previous.ordering != self._ordering:
            raise MergeConflictError(
                endpoint_uri,
                "ordering",
                f"ordering type must be the same for all parts (previous={previous.ordering}, this={self._ordering})",
            )
        if self._feeder_route is not None:
            raise MergeConflictError(
                endpoint_uri,
                "feeder_route",
                "the feeder route can only be specified in the first part",
            )
        if previous.lenient_selector is not None and self._lenient_selector is not None:
            raise MergeConflictError(
                endpoint_uri,
                "lenient",
                "only one part of an endpoint can be lenient",
            )

    def _lenient_response_processors(self, processor_slots: Sequence[Sequence[Processor]]) -> list[Processor]:
        """Responses for a lenient part: one per authored slot."""
        repeated = self._repeated_processors
        if not processor_slots:
            return [combine_processors(repeated)] if repeated else []
        return [combine_processors([*slot, *repeated]) for slot in processor_slots]


def _slot[T](slots: list[list[T]], index: int) -> list[T]:
    if index < 0:
        raise ConfigurationError(f"Message index must be at least 0, got {index}")
    while len(slots) <= index:
        slots.append([])
    return slots[index]
