"""Pluggable content capabilities: body/header predicates and processors."""

from mockwire.content.predicates import BodyPredicate, HeadersPredicate
from mockwire.content.processors import BodyProcessor, HeadersProcessor
from mockwire.content.resources import PlainTextResource, Resource

__all__ = [
    "BodyPredicate",
    "BodyProcessor",
    "HeadersPredicate",
    "HeadersProcessor",
    "PlainTextResource",
    "Resource",
]
