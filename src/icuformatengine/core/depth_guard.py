"""Unified depth limiting for recursion protection.

Provides reusable depth tracking to prevent stack overflow from:
- Deeply nested plural/select clauses in templates
- Runaway nested builder callbacks

Thread-safe: uses explicit state, no thread-local storage.
Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

from icuformatengine.constants import MAX_DEPTH
from icuformatengine.diagnostics import DepthLimitExceededError, ErrorTemplate

__all__ = ["DepthGuard", "depth_clamp"]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DepthGuard:
    """Context manager for tracking and limiting recursion depth.

    Usage in formatting:
        guard = DepthGuard()
        with guard:
            # Recursive operation
            result = self._format(selected_text, parameters, guard)

    Mutability Note:
        Intentionally mutable (not frozen=True) to enable stateful depth
        tracking via context manager protocol. The current_depth field is
        incremented/decremented on __enter__/__exit__.

    Thread Safety:
        Uses explicit instance state, fully reentrant.
        Each top-level format() call creates its own DepthGuard instance.

    Attributes:
        max_depth: Maximum allowed depth (default: MAX_DEPTH)
        current_depth: Current recursion depth
    """

    max_depth: int = MAX_DEPTH
    current_depth: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        """Clamp max_depth against Python recursion limit."""
        self.max_depth = depth_clamp(self.max_depth)

    def __enter__(self) -> DepthGuard:
        """Enter guarded section, increment depth.

        Validates depth limit BEFORE incrementing: __exit__ is not called when
        __enter__ raises, so incrementing first would leave current_depth
        permanently elevated.
        """
        if self.current_depth >= self.max_depth:
            raise DepthLimitExceededError(ErrorTemplate.depth_exceeded(self.max_depth))
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

    Each nesting level of a template costs several interpreter frames
    (tokenize, evaluate, select), so the limit is divided accordingly.

    Args:
        requested_depth: Desired maximum depth
        reserve_frames: Stack frames to reserve for call overhead (default: 50)

    Returns:
        Safe depth value, clamped if necessary

    Example:
        >>> depth_clamp(64)  # default recursion limit of 1000
        64
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
