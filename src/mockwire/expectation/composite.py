# src/mockwire/expectation/composite.py
"""Composites that apply several predicates or processors to one message.

Each expected message of a part owns one slot; when a slot holds more than
one entry (including repeated entries), the entries are combined here.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from mockwire.contracts.message import Message
from mockwire.contracts.protocols import Predicate, Processor


@dataclass(frozen=True, slots=True)
class MultiPredicate:
    """Matches when every wrapped predicate matches (empty matches everything)."""

    predicates: tuple[Predicate, ...]

    def __call__(self, message: Message) -> bool:
        return all(predicate(message) for predicate in self.predicates)


@dataclass(frozen=True, slots=True)
class MultiProcessor:
    """Applies every wrapped processor to the message, in order."""

    processors: tuple[Processor, ...]

    def __call__(self, message: Message) -> None:
        for processor in self.processors:
            processor(message)


def combine_predicates(predicates: Sequence[Predicate]) -> Predicate:
    """Collapse a slot into one predicate, returning a lone entry unwrapped."""
    if len(predicates) == 1:
        return predicates[0]
    return MultiPredicate(tuple(predicates))


def combine_processors(processors: Sequence[Processor]) -> Processor:
    """Collapse a slot into one processor, returning a lone entry unwrapped."""
    if len(processors) == 1:
        return processors[0]
    return MultiProcessor(tuple(processors))
