"""Depth limiting for recursive sub-message scanning.

Plural, select and choice arguments contain sub-messages which may contain
further complex arguments. The tokenizer recurses once per level, so
adversarial patterns could otherwise exhaust the Python stack.

Thread-safe: uses explicit state, no thread-local storage.
Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

from icuaccessors.constants import MAX_DEPTH
from icuaccessors.diagnostics import ErrorTemplate, NestingDepthExceededError

__all__ = ["DepthGuard", "depth_clamp"]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DepthGuard:
    """Context manager for tracking and limiting recursion depth.

    Usage in the tokenizer:
        guard = DepthGuard(source=pattern)
        with guard.at(offset):
            self._scan_message(...)

    Mutability Note:
        Intentionally mutable (not frozen=True) to enable stateful depth
        tracking via context manager protocol. The current_depth field is
        incremented/decremented on __enter__/__exit__.

    Attributes:
        max_depth: Maximum allowed depth (default: MAX_DEPTH)
        source: Pattern being scanned, for error spans
        current_depth: Current recursion depth
        position: Offset of the sub-message being entered
    """

    max_depth: int = MAX_DEPTH
    source: str = ""
    current_depth: int = field(default=0, init=False)
    position: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        """Clamp max_depth against Python recursion limit."""
        self.max_depth = depth_clamp(self.max_depth)

    def at(self, position: int) -> DepthGuard:
        """Record the offset of the next sub-message and return self for `with`."""
        self.position = position
        return self

    def __enter__(self) -> DepthGuard:
        """Enter guarded section, increment depth.

        Validates depth limit BEFORE incrementing: __exit__ is not called when
        __enter__ raises, so incrementing first would leave current_depth
        permanently elevated.

        Raises:
            NestingDepthExceededError: If the limit is already reached
        """
        if self.current_depth >= self.max_depth:
            raise NestingDepthExceededError(
                ErrorTemplate.nesting_depth_exceeded(self.source, self.position, self.max_depth),
                pattern=self.source,
            )
        self.current_depth += 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Exit guarded section, decrement depth."""
        self.current_depth -= 1

    @property
    def depth(self) -> int:
        """Current depth (alias for current_depth)."""
        return self.current_depth


def depth_clamp(requested_depth: int, reserve_frames: int = 50) -> int:
    """Clamp requested depth against Python recursion limit.

    Each nesting level costs a few stack frames in the tokenizer, so the
    usable depth is a fraction of sys.getrecursionlimit(). Logs a warning
    if clamping occurs.

    Args:
        requested_depth: Desired maximum depth
        reserve_frames: Stack frames to reserve for call overhead (default: 50)

    Returns:
        Safe depth value, clamped if necessary

    Example:
        >>> depth_clamp(100)  # default recursion limit 1000
        100
    """
    max_safe_depth = (sys.getrecursionlimit() - reserve_frames) // 4
    if requested_depth > max_safe_depth:
        logger.warning(
            "Requested depth %d exceeds Python recursion limit (%d). "
            "Clamping to %d to prevent RecursionError.",
            requested_depth,
            sys.getrecursionlimit(),
            max_safe_depth,
        )
        return max_safe_depth
    return requested_depth
