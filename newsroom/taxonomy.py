"""
Hierarchical taxonomies such as site sections.

A path is an ordered sequence of segment names from the root down, e.g.
``["News", "University", "Academics"]``. Paths are stored as a single
string with segments joined by ``SEPARATOR``.
"""

SEPARATOR = "/"


def split_path(value):
    """Return the list of segments in a stored path (or any path-like value)."""
    if value is None:
        return []
    if isinstance(value, str):
        return [segment for segment in value.split(SEPARATOR) if segment]
    return [str(segment) for segment in value]


def join_path(segments):
    """Return the stored form of a sequence of segments."""
    segments = split_path(segments)
    for segment in segments:
        if SEPARATOR in segment:
            raise ValueError(f"Path segment {segment!r} may not contain {SEPARATOR!r}")
    return SEPARATOR.join(segments)


def section_matches(path, target):
    """
    Check whether ``path`` is ``target`` or one of its descendants.

    Matching is segment by segment and case sensitive. Ancestors of the
    target do not match.
    """
    path = split_path(path)
    target = split_path(target)
    return path[: len(target)] == target and len(path) >= len(target)


class Taxonomy:
    """
    A query against one taxonomy dimension.

        Taxonomy("sections", ["News", "University"])
    """

    def __init__(self, dimension, path):
        self.dimension = str(dimension)
        self.path = tuple(split_path(path))

    def __repr__(self):
        return f"Taxonomy({self.dimension!r}, {list(self.path)!r})"

    def __str__(self):
        return " > ".join(self.path)

    def __eq__(self, other):
        if not isinstance(other, Taxonomy):
            return NotImplemented
        return (self.dimension, self.path) == (other.dimension, other.path)

    def __hash__(self):
        return hash((self.dimension, self.path))

    @property
    def stored_path(self):
        return join_path(self.path)

    @property
    def is_root(self):
        return not self.path

    def matches(self, path):
        return section_matches(path, self.path)

    def parent(self):
        """Return the taxonomy one level up, or None at the root."""
        if self.is_root:
            return None
        return Taxonomy(self.dimension, self.path[:-1])

    def child(self, segment):
        return Taxonomy(self.dimension, self.path + (segment,))
