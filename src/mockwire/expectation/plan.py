# src/mockwire/expectation/plan.py
"""Collects a test's expectation parts and folds them per endpoint.

The plan is the hand-off point to the verification runtime: parts are
added in authoring order and each endpoint ends up with one definition.
"""

from __future__ import annotations

from collections.abc import Iterator

from mockwire.expectation.definition import ExpectationDefinition
from mockwire.expectation.part import ExpectationPart


class ExpectationPlan:
    """Ordered mapping of endpoint URI to its merged expectation definition.

    Endpoints keep the order in which their first part was added. A part
    that fails to build leaves the endpoint's existing definition in place.
    """

    def __init__(self) -> None:
        self._definitions: dict[str, ExpectationDefinition] = {}

    def add(self, part: ExpectationPart) -> ExpectationDefinition:
        """Merge ``part`` into its endpoint's definition and return the result.

        Raises:
            ConfigurationError: If the part is malformed.
            MergeConflictError: If the part contradicts the endpoint's earlier parts.
        """
        definition = part.build(self._definitions.get(part.endpoint_uri))
        self._definitions[part.endpoint_uri] = definition
        return definition

    def definition(self, endpoint_uri: str) -> ExpectationDefinition:
        """Return the merged definition for an endpoint.

        Raises:
            KeyError: If no part was added for the endpoint.
        """
        return self._definitions[endpoint_uri]

    def definitions(self) -> tuple[ExpectationDefinition, ...]:
        return tuple(self._definitions.values())

    def endpoints(self) -> tuple[str, ...]:
        return tuple(self._definitions)

    def __contains__(self, endpoint_uri: object) -> bool:
        return endpoint_uri in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self) -> Iterator[ExpectationDefinition]:
        return iter(self._definitions.values())
