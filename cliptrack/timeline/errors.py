"""Errors raised by timeline edit operations."""


class SplitRejectedError(ValueError):
    """A split point was refused; the layer is left unchanged."""

    def __init__(self, clip_id: str, split_time: float, reason: str) -> None:
        """Initialize the error.

        Args:
            clip_id: The clip that was to be split.
            split_time: The proposed split time in seconds.
            reason: Why the split was refused.
        """
        super().__init__(f"Cannot split clip {clip_id} at {split_time:.3f}s: {reason}")
        self.clip_id = clip_id
        self.split_time = split_time
        self.reason = reason
