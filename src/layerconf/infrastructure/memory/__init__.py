"""
Layer memory reports.
"""

from ._memory_report import MemoryReport, CACHE_MODE_ALL_ZEROS

__all__ = [
    MemoryReport.__name__,
    "CACHE_MODE_ALL_ZEROS",
]
