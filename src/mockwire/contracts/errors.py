# src/mockwire/contracts/errors.py
"""Exceptions raised while authoring and merging expectations.

Both error types are fatal and raised synchronously from ``build()``.
Advisories (ignored lenient expectations, differing assertion times) are
logged, never raised.
"""


class MockwireError(Exception):
    """Base class for all mockwire errors."""


class ConfigurationError(MockwireError):
    """Raised when a single expectation part is malformed.

    Examples: a negative expected message count, or a predicate/processor
    list whose length disagrees with the expected message count.
    """


class MergeConflictError(MockwireError):
    """Raised when a part cannot be merged with an endpoint's earlier parts.

    Attributes:
        endpoint_uri: Endpoint whose parts conflict
        attribute: The conflicting attribute (e.g. "ordering", "feeder_route")
        message: Human-readable error description
    """

    def __init__(self, endpoint_uri: str, attribute: str, message: str) -> None:
        self.endpoint_uri = endpoint_uri
        self.attribute = attribute
        self.message = message
        super().__init__(f"Cannot merge expectation for endpoint '{endpoint_uri}' ({attribute}): {message}")
