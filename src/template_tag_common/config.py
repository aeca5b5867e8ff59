"""
Configuration classes for template tag helpers.

Each option is explicit and typed so a tag author can build the
configuration once and share it between static helpers.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TrimConfig:
    """
    Configuration for common-indentation trimming.

    Example:
        TrimConfig(trim_eol_at_start=True, trim_eol_at_end=True)
        # '\n    bar\n    ' trims to 'bar'
    """
    # Remove one line break right after the opening delimiter
    trim_eol_at_start: bool = False

    # Remove one line break right before the closing delimiter
    trim_eol_at_end: bool = False

    @property
    def trims_eol(self) -> bool:
        """True when either boundary line break should be removed."""
        return self.trim_eol_at_start or self.trim_eol_at_end
