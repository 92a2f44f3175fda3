"""
Summary: Public surface for file naming.
Why: Group templating, sanitization and collision handling behind one import.
"""

from .collision import NameReservations, find_available_name
from .name_builder import build_name, format_track_number
from .sanitizer import Sanitizer

__all__ = [
    "NameReservations",
    "Sanitizer",
    "build_name",
    "find_available_name",
    "format_track_number",
]
