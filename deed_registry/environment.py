"""Execution environment collaborators: the block height clock."""

import logging

logger = logging.getLogger(__name__)


class BlockClock:
    """Monotonically non-decreasing height used for every registry timestamp.

    Parameters
    ----------
    initial_height : int
        Height reported before the first advance.
    """

    def __init__(self, initial_height: int = 1) -> None:
        if initial_height < 0:
            raise ValueError(f"Height must be non-negative, got {initial_height}")
        self._height = initial_height

    @property
    def height(self) -> int:
        """Current height."""
        return self._height

    def advance(self, blocks: int = 1) -> int:
        """Move the height forward and return the new value."""
        if blocks < 0:
            raise ValueError("Height cannot move backwards")
        self._height += blocks
        logger.debug("Advanced clock to height %d", self._height)
        return self._height
