"""
Summary: Public surface for per-file inspection.
Why: Expose records, run options and the inspector from one place.
"""

from .inspector import FileInspector, TagReader
from .models import FileRecord, RunOptions, RunReport

__all__ = ["FileInspector", "FileRecord", "RunOptions", "RunReport", "TagReader"]
