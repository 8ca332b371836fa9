"""Time tolerance shared by every timeline comparison."""

# Two times closer than this are the same instant. Part of the Layer invariant:
# adjacent clips touch when next.start is within EPSILON of previous end.
EPSILON = 1e-4


def approx_equal(a: float, b: float) -> bool:
    """Return True when two times are the same instant within EPSILON."""
    return abs(a - b) <= EPSILON
