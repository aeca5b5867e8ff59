"""
Checks for whether a call looks like a tagged template call.

A tag function receives (strings, *values). These helpers let a function
that accepts several call shapes decide whether it was called as a tag.
It is possible, but unlikely, for them to return True when the caller did
not intend a tag call.
"""

from typing import Any

from .template_strings import TemplateStrings


def _all_strings(items) -> bool:
    return all(isinstance(item, str) for item in items)


def called_as_template_tag_quick(first_argument: Any, argument_count: int) -> bool:
    """
    True iff first_argument might be static strings for a call with
    argument_count positional arguments in total.

    Unlike called_as_template_tag, does not check that the chunks are strings.
    """
    if not isinstance(first_argument, TemplateStrings):
        return False
    raw = first_argument.raw
    return (
        len(first_argument) == argument_count
        and isinstance(raw, tuple)
        and len(raw) == argument_count
    )


def called_as_template_tag(first_argument: Any, argument_count: int) -> bool:
    """
    True iff first_argument is static strings for a call with
    argument_count positional arguments and every chunk is a string.

    Usage:
        def tag(*args):
            if called_as_template_tag(args[0] if args else None, len(args)):
                ...
    """
    # Not checked: that each cooked chunk is consistent with its raw chunk.
    return (
        called_as_template_tag_quick(first_argument, argument_count)
        and _all_strings(first_argument)
        and _all_strings(first_argument.raw)
    )
