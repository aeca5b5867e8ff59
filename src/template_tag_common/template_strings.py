"""
TemplateStrings - the static half of a tagged template call.

KEY CONCEPT:
A tag function is called as tag(strings, *values):

    GREETING = TemplateStrings.from_raw(("Hello, ", "!"))
    tag(GREETING, name)
        strings = ("Hello, ", "!")   # fixed per call site
        values  = (name,)            # computed per call

The static strings are built once per call site and reused, so their
*identity* is a stable key for anything derived only from them. That is
why TemplateStrings compares by identity, is immutable, and supports weak
references: caches can hang derived state off it without keeping it alive.
"""

import weakref
from collections.abc import Iterable, Sequence
from typing import Optional, Union, overload

from .escapes import cook


class TemplateStrings(Sequence):
    """
    Immutable sequence of cooked chunks with a parallel ``raw`` tuple.

    Two instances with the same text are still different keys; only the
    same object is "the same template".

    Example:
        strings = TemplateStrings.from_raw(("a\\tb", "c"))
        list(strings)   # ['a\tb', 'c']
        strings.raw     # ('a\\tb', 'c')
    """

    __slots__ = ("_cooked", "_raw", "_static_state", "__weakref__")

    def __init__(self, cooked: Iterable[str], raw: Optional[Iterable[str]] = None):
        """
        Args:
            cooked: Chunks with escape sequences interpreted
            raw: Chunks as written; defaults to ``cooked``
        """
        cooked = tuple(cooked)
        raw = cooked if raw is None else tuple(raw)
        object.__setattr__(self, "_cooked", cooked)
        object.__setattr__(self, "_raw", raw)
        # Static state per StaticStateTable, owned by this object so it is
        # released together with it.
        object.__setattr__(self, "_static_state", weakref.WeakKeyDictionary())

    @classmethod
    def from_raw(cls, raw: Iterable[str]) -> "TemplateStrings":
        """
        Build static strings from raw chunks, cooking each one.

        Usage:
            ROW = TemplateStrings.from_raw(("", ",", "\\n"))
        """
        raw = tuple(raw)
        return cls((cook(chunk) for chunk in raw), raw)

    @property
    def raw(self) -> tuple:
        """The chunks before escape processing."""
        return self._raw

    @overload
    def __getitem__(self, index: int) -> str: ...
    @overload
    def __getitem__(self, index: slice) -> tuple: ...
    def __getitem__(self, index: Union[int, slice]):
        return self._cooked[index]

    def __len__(self) -> int:
        return len(self._cooked)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"TemplateStrings({list(self._cooked)!r}, raw={list(self._raw)!r})"
