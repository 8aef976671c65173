"""Exception types raised by the dual/truncation pipeline."""


class TopologyError(ValueError):
    """A polyhedron violates the 3-valent, consistently wound invariant.

    Raised when a vertex does not touch exactly three faces, or when the
    faces around a vertex cannot be walked into a single closed cycle.
    The transforms have no defined behaviour for such inputs, so this is
    never recoverable by retrying.
    """
