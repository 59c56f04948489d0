# src/mockwire/contracts/message.py
"""In-memory message representation passed to predicates and processors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class Message:
    """A message received by (or answered from) a mocked endpoint.

    Deliberately mutable: processors write the response into the same
    message they were handed, the way a request/reply exchange works.

    Attributes:
        body: Message payload, usually text or bytes.
        headers: Transport headers keyed by name.
        endpoint_uri: Endpoint the message arrived on, if known.
    """

    body: Any = None
    headers: dict[str, Any] = field(default_factory=dict)
    endpoint_uri: str | None = None
