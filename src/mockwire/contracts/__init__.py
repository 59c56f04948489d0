"""Shared contracts for expectation authoring and verification.

Enums, errors, the message representation and the capability protocols
that cross the boundary between the expectation core and its
collaborators (transport, verification runtime, content matchers).

This package is a LEAF MODULE with no outbound dependencies to
mockwire.expectation or mockwire.config.
"""

from mockwire.contracts.enums import OrderingType
from mockwire.contracts.errors import ConfigurationError, MergeConflictError, MockwireError
from mockwire.contracts.message import Message
from mockwire.contracts.protocols import (
    LenientResponder,
    LenientResponderFactory,
    Predicate,
    Processor,
)

__all__ = [
    "ConfigurationError",
    "LenientResponder",
    "LenientResponderFactory",
    "MergeConflictError",
    "Message",
    "MockwireError",
    "OrderingType",
    "Predicate",
    "Processor",
]
