"""Error definitions for template tag helpers."""


class TemplateTagError(Exception):
    """Base class for errors raised by this package."""


class InvalidInputError(TemplateTagError, ValueError):
    """
    Raised when a tag function is called with malformed static strings.

    Covers a missing or mismatched ``raw`` sequence, non-string chunks, and
    a dynamic value count that does not fit the number of chunks.
    """
