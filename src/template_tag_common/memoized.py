"""
memoized_tag_function - Splits a template tag into static and dynamic work.

KEY CONCEPT:
Most of the work a tag does depends only on its static strings: parsing,
trimming indentation, working out escaping contexts. That work is the
same every time a call site is reached. Only folding in the values
changes per call.

    compute_static(strings)                         -> once per template
    compute_result(options, state, strings, values) -> every call

So the per-call cost of a tag depends on the complexity of handling its
dynamic values, not on the size of its static text.

A tag can also be configured before use:

    csv = memoized_tag_function(parse_row, format_row)
    semicolon_csv = csv({"delimiter": ";"})
    semicolon_csv(ROW, a, b)
"""

import logging
from collections.abc import Sequence
from types import MappingProxyType
from typing import Any, Callable, Generic, Optional, TypeVar

from .cache import StaticStateTable
from .errors import InvalidInputError

logger = logging.getLogger(__name__)

O = TypeVar("O")
T = TypeVar("T")
R = TypeVar("R")

# Options used until a tag is configured
NO_OPTIONS = MappingProxyType({})


def is_array_like(value: Any) -> bool:
    """True for ordered sequences other than text."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _all_strings(items) -> bool:
    return all(isinstance(item, str) for item in items)


def require_valid_tag_inputs(strings: Any, values: tuple) -> None:
    """
    Validate the shape of a tag call.

    Raises:
        InvalidInputError: If strings is not a sequence of str with a
            parallel ``raw`` sequence of str, or if there is not exactly
            one fewer value than there are chunks.
    """
    raw = getattr(strings, "raw", None)
    if not (
        is_array_like(strings)
        and is_array_like(raw)
        and len(strings) == len(raw)
        and _all_strings(strings)
        and _all_strings(raw)
    ):
        raise InvalidInputError("Invalid static strings")
    if len(values) + 1 != len(strings):
        raise InvalidInputError(
            f"Too many or too few dynamic values: {len(strings)} != {len(values)}"
        )


class TaggedFunction(Generic[O, T, R]):
    """
    A template tag with memoized static state.

    Called with static strings and values, returns compute_result's result.
    Called with a single non-sequence argument, returns a new tag bound to
    that argument as its options. Called with no arguments, returns a new
    tag whose options are None.

    Usage:
        tag = memoized_tag_function(
            lambda strings: len(strings),
            lambda options, count, strings, values: (count, list(values)),
        )
        tag(PAIR, 1)                 # (2, [1])
        tag.configure(opts)(PAIR, 1)  # same, with opts as options

    Configured tags share one StaticStateTable with the tag they came from.
    """

    def __init__(
        self,
        compute_static: Callable[[Any], T],
        compute_result: Callable[[O, T, Any, tuple], R],
        options: O = NO_OPTIONS,
        table: Optional[StaticStateTable] = None,
    ):
        self._compute_static = compute_static
        self._compute_result = compute_result
        self._options = options
        self._table = table if table is not None else StaticStateTable()

    @property
    def options(self) -> O:
        """Options passed to compute_result."""
        return self._options

    @property
    def table(self) -> StaticStateTable:
        """Static state shared by this tag and every tag configured from it."""
        return self._table

    def __call__(self, strings_or_options: Any = None, *values: Any):
        # Only passed an options object (or nothing, meaning None options):
        # return a tag that uses it.
        if not values and not is_array_like(strings_or_options):
            return self.configure(strings_or_options)
        return self.invoke(strings_or_options, *values)

    def configure(self, options: O) -> "TaggedFunction[O, T, R]":
        """
        A new tag that passes options to compute_result.

        This tag is left unchanged.
        """
        logger.debug("Configuring tag with %s options", type(options).__name__)
        return type(self)(self._compute_static, self._compute_result, options, self._table)

    def invoke(self, strings: Any, *values: Any) -> R:
        """
        Apply the tag to static strings and dynamic values.

        Raises:
            InvalidInputError: If the call is not shaped like a tag call.
            Any exception raised by compute_static or compute_result.
        """
        require_valid_tag_inputs(strings, values)
        state = self._table.state_for(strings, self._compute_static)
        return self._compute_result(self._options, state, strings, values)


def memoized_tag_function(
    compute_static: Callable[[Any], T],
    compute_result: Callable[[Any, T, Any, tuple], R],
) -> TaggedFunction:
    """
    Build a template tag that computes static state once per template.

    Args:
        compute_static: Called with the static strings the first time a
            template is seen. Its result, or the exception it raises, is
            stored weakly against that TemplateStrings object.
        compute_result: Called on every use with
            (options, static_state, strings, values).

    Usage:
        dedent = memoized_tag_function(
            trim_common_whitespace_from_lines,
            lambda options, trimmed, strings, values: interleave(trimmed, values),
        )
    """
    return TaggedFunction(compute_static, compute_result)
