"""
Mockwire: Declarative mock expectations for message-driven integration tests.

Test authors describe, per listening endpoint, which messages are expected,
in what order, how many times, and what each response looks like. Parts
authored incrementally are folded into one immutable definition per
endpoint that a verification runtime can drive.
"""

__version__ = "0.1.0"
