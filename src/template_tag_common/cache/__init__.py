"""
Cache components for template tag helpers.

Components:
- StaticEntry: Stored static state (or failure) for one template
- StaticStateTable: Weak, identity-keyed table of static entries
"""

from .static_table import StaticEntry, StaticStateTable

__all__ = ["StaticEntry", "StaticStateTable"]
