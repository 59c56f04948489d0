"""Expectation authoring: parts, the part merger and merged definitions.

- ExpectationPart: fluent builder for one increment of an endpoint
- SyncExpectationPart: builder that also produces response bodies/headers
- ExpectationDefinition: immutable merged result handed to the runtime
- ResponseCycler: round-robin responder for lenient endpoints
- ExpectationPlan: folds a test's parts per endpoint in authoring order
"""

from mockwire.expectation.composite import MultiPredicate, MultiProcessor
from mockwire.expectation.cycler import ResponseCycler
from mockwire.expectation.definition import ExpectationDefinition
from mockwire.expectation.feeder import FeederRoute, convert_body_to_text, default_feeder_route
from mockwire.expectation.part import DEFAULT_ASSERTION_TIME_MS, ExpectationPart, accept_all
from mockwire.expectation.plan import ExpectationPlan
from mockwire.expectation.sync import SyncExpectationPart

__all__ = [
    "DEFAULT_ASSERTION_TIME_MS",
    "ExpectationDefinition",
    "ExpectationPart",
    "ExpectationPlan",
    "FeederRoute",
    "MultiPredicate",
    "MultiProcessor",
    "ResponseCycler",
    "SyncExpectationPart",
    "accept_all",
    "convert_body_to_text",
    "default_feeder_route",
]
