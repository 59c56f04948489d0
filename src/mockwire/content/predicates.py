# src/mockwire/content/predicates.py
"""Predicates that match inbound messages by body or headers."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from mockwire.contracts.message import Message


@dataclass(frozen=True, slots=True)
class BodyPredicate:
    """Matches a message whose body equals ``expected``.

    If ``expected`` is callable it is applied to the body instead, which
    lets format-aware comparators (XML, JSON) plug in without subclassing.
    """

    expected: Any

    def __call__(self, message: Message) -> bool:
        if callable(self.expected):
            matcher: Callable[[Any], bool] = self.expected
            return bool(matcher(message.body))
        return bool(message.body == self.expected)


@dataclass(frozen=True, slots=True)
class HeadersPredicate:
    """Matches a message carrying every expected header with an equal value.

    Headers not listed in ``expected`` are ignored.
    """

    expected: Mapping[str, Any]

    def __call__(self, message: Message) -> bool:
        for name, value in self.expected.items():
            if name not in message.headers or message.headers[name] != value:
                return False
        return True
