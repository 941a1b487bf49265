"""Best-effort progress notifications

The callback may be sync or async. Its failures are logged and swallowed:
progress reporting must never abort an analysis.
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, Awaitable, Callable, Optional, Union

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[float, Optional[str]], Union[None, Awaitable[Any]]]


class ProgressReporter:
    """Throttled, monotonic wrapper around a progress callback"""

    def __init__(self, callback: Optional[ProgressCallback] = None, total_sequences: int = 0):
        self.callback = callback
        self.total_sequences = total_sequences
        self.progress = 0.0
        # Report roughly every third of the screenplay
        self.chunk_size = max(1, total_sequences // 3)

    async def report(self, value: float, message: Optional[str] = None):
        self.progress = min(100.0, max(self.progress, float(value)))
        if self.callback is None:
            return
        try:
            result = self.callback(self.progress, message)
            if inspect.isawaitable(result):
                await result
        except Exception as e:
            logger.warning(f"Progress callback failed at {self.progress:.0f}%: {e}")

    async def advance(self, step: float, message: Optional[str] = None):
        await self.report(self.progress + step, message)

    async def sequence_started(self, sequence_number: int):
        """Checkpoint every `chunk_size` sequences (1-based sequence number)"""
        if sequence_number % self.chunk_size == 0:
            await self.advance(
                20, f"Analyzing sequences ({sequence_number}/{self.total_sequences} completed)"
            )
