"""sectioned_list exception types.

Errors raised by caller-supplied extractors, comparers and groupers are
never wrapped; these cover the package's own failures only.
"""


class SectionedListError(Exception):
    """Base error."""
    pass


class SectionedListConfigError(SectionedListError):
    """Configuration error."""
    pass


class RowIdError(SectionedListError, ValueError):
    """Malformed row ID."""
    pass
