"""
StaticEntry and StaticStateTable for per-template static state.

KEY CONCEPT: Identity keys
Static state depends only on the static strings of a template, and each
call site reuses the same TemplateStrings object. So the object itself is
the key:

    tag(GREETING, "Ada")   -> miss, compute_static(GREETING), store
    tag(GREETING, "Bob")   -> hit, reuse stored state
    tag(TemplateStrings.from_raw(("Hello, ", "!")), "Cy")
                           -> miss: same text, different object

Entries are stored on the template itself, one per table, so an entry
lives exactly as long as its template. State that refers back to the
template (a trimmer returning its input, an exception whose traceback
holds it) forms a cycle the garbage collector can reclaim.
"""

import logging
import threading
import time
import traceback
import weakref
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from ..template_strings import TemplateStrings

logger = logging.getLogger(__name__)

# Guards creating entries on a template; templates are shared between tables.
_entry_lock = threading.Lock()


@dataclass
class StaticEntry:
    """
    The outcome of computing static state for one template.

    Attributes:
        state: Value returned by the static helper
        failure: Exception raised by the static helper, if it failed
        computed: False until the static helper has run for this entry
        hits: Number of lookups served without recomputing
        last_access: Timestamp of the last lookup
    """
    state: Any = None
    failure: Optional[Exception] = None
    computed: bool = False
    hits: int = 0
    last_access: float = field(default_factory=time.time)
    lock: Any = field(default_factory=threading.RLock, repr=False)

    def touch(self) -> None:
        """Record a cache hit."""
        self.hits += 1
        self.last_access = time.time()

    @property
    def failed(self) -> bool:
        return self.failure is not None

    def outcome(self) -> Any:
        """
        The stored state, or raise the stored failure.

        The failure is raised with its traceback reset, so repeated
        lookups do not keep extending it.
        """
        if self.failure is not None:
            raise self.failure.with_traceback(None)
        return self.state


class StaticStateTable:
    """
    Weak, identity-keyed table from static strings to static state.

    Only TemplateStrings are stored: they are immutable, so state derived
    from them cannot go stale. Any other sequence (a list with a ``raw``
    attribute, say) may be edited between calls and is recomputed every time.

    The static helper runs at most once per template, even when several
    threads hit a new template at the same time.

    Example:
        table = StaticStateTable()
        table.state_for(strings, len)   # computes
        table.state_for(strings, len)   # served from the table
    """

    def __init__(self):
        # Templates holding an entry for this table; weak, for len() and clear()
        self._templates: "weakref.WeakSet[TemplateStrings]" = weakref.WeakSet()

    @staticmethod
    def is_memoizable(strings: Any) -> bool:
        """Static state for strings can be stored."""
        return isinstance(strings, TemplateStrings)

    def state_for(self, strings: Any, compute_static: Callable[[Any], Any]) -> Any:
        """
        Static state for strings, computing it if needed.

        Raises:
            Whatever compute_static raised. For a stored template the same
            exception is raised again on every later lookup, without
            calling compute_static again.
        """
        if not self.is_memoizable(strings):
            return compute_static(strings)

        with _entry_lock:
            entries = strings._static_state
            entry = entries.get(self)
            if entry is None:
                entry = StaticEntry()
                entries[self] = entry
                self._templates.add(strings)

        with entry.lock:
            if not entry.computed:
                return self._compute(entry, strings, compute_static)
            entry.touch()
        return entry.outcome()

    def _compute(
        self,
        entry: StaticEntry,
        strings: TemplateStrings,
        compute_static: Callable[[Any], Any],
    ) -> Any:
        logger.debug("Computing static state for %d chunk template", len(strings))
        try:
            entry.state = compute_static(strings)
        except Exception as exc:
            # A broken template stays broken for this object.
            logger.debug("Static state failed, storing failure: %r", exc)
            traceback.clear_frames(exc.__traceback__)
            entry.failure = exc
            raise
        finally:
            entry.computed = True
        return entry.state

    def get_entry(self, strings: Any) -> Optional[StaticEntry]:
        """Get the entry stored for strings, if any."""
        if not self.is_memoizable(strings):
            return None
        with _entry_lock:
            return strings._static_state.get(self)

    def clear(self) -> None:
        """Drop every stored entry."""
        with _entry_lock:
            for strings in list(self._templates):
                strings._static_state.pop(self, None)
            self._templates.clear()

    def __contains__(self, strings: Any) -> bool:
        return self.get_entry(strings) is not None

    def __len__(self) -> int:
        """Number of live templates with stored static state."""
        return len(self._templates)
