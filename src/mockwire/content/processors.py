# src/mockwire/content/processors.py
"""Processors that write a mocked response into a message."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from mockwire.contracts.message import Message


@dataclass(frozen=True, slots=True)
class BodyProcessor:
    """Replaces the message body with ``body``."""

    body: Any

    def __call__(self, message: Message) -> None:
        message.body = self.body


@dataclass(frozen=True, slots=True)
class HeadersProcessor:
    """Sets each of ``headers`` on the message, keeping other headers."""

    headers: Mapping[str, Any]

    def __call__(self, message: Message) -> None:
        message.headers.update(self.headers)
