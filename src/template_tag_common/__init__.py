"""
Template Tag Common - Helpers for writing template tag functions.

A template tag is called as tag(strings, *values): a fixed sequence of
static text chunks (with their raw, unescaped form) interleaved with
values computed per call.

Main components:
- memoized_tag_function: Computes static state once per template,
  combines it with dynamic values on every call
- Trimmer: Strips indentation common to every line of a template
- TemplateStrings: Immutable, identity-keyed static strings
- called_as_template_tag: Detects tag-shaped calls
- TypedString: Marks strings that satisfy a named contract
"""

import logging

from .cache import StaticEntry, StaticStateTable
from .config import TrimConfig
from .detection import called_as_template_tag, called_as_template_tag_quick
from .errors import InvalidInputError, TemplateTagError
from .escapes import cook
from .memoized import TaggedFunction, memoized_tag_function
from .template_strings import TemplateStrings
from .trimmer import Trimmer, trim_common_whitespace_from_lines
from .typed_string import TypedString, satisfies

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Config
    "TrimConfig",
    # Errors
    "InvalidInputError",
    "TemplateTagError",
    # Static strings
    "TemplateStrings",
    "cook",
    # Detection
    "called_as_template_tag",
    "called_as_template_tag_quick",
    # Memoization
    "StaticEntry",
    "StaticStateTable",
    "TaggedFunction",
    "memoized_tag_function",
    # Trimming
    "Trimmer",
    "trim_common_whitespace_from_lines",
    # Typed strings
    "TypedString",
    "satisfies",
]
