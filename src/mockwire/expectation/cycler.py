# src/mockwire/expectation/cycler.py
"""Round-robin response selection for lenient endpoints.

A lenient endpoint accepts any message its selector matches and answers
with the next configured response, wrapping around at the end of the list.
Message delivery may call the same cycler from several worker threads.
"""

from __future__ import annotations

import itertools
from collections.abc import Sequence

from mockwire.contracts.message import Message
from mockwire.contracts.protocols import Processor


class ResponseCycler:
    """Applies the next processor in round-robin order on each call.

    Thread-safe without a lock on GIL builds of CPython: ``next()`` on an
    ``itertools.count`` is a single C-level step, so concurrent callers each
    receive a distinct counter value. Free-threaded builds (3.13t) make no
    such guarantee for ``itertools.count`` and are not supported. Processors
    handed to a cycler must themselves be thread-safe.

    An empty processor list is valid and turns every call into a no-op
    (accept and ignore).
    """

    def __init__(self, processors: Sequence[Processor]) -> None:
        self._processors: tuple[Processor, ...] = tuple(processors)
        self._counter = itertools.count()

    @property
    def processors(self) -> tuple[Processor, ...]:
        """The processors cycled through, in order."""
        return self._processors

    def next(self) -> Processor | None:
        """Return the processor for the next message, or None if there are none."""
        if not self._processors:
            return None
        return self._processors[next(self._counter) % len(self._processors)]

    def __call__(self, message: Message) -> None:
        processor = self.next()
        if processor is not None:
            processor(message)
