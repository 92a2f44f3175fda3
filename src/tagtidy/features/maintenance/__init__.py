"""
Summary: Public surface for filesystem mutation phases.
Why: Keep delete and rename side effects behind one import for the service.
"""

from .mutation import apply_renames, delete_unplayable

__all__ = ["apply_renames", "delete_unplayable"]
