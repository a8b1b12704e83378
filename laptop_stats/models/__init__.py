"""Domain models for the laptop listing statistics tool.

Records, aggregate triples and processing results used throughout the
application. All models are frozen dataclasses.
"""

from .aggregated_data import AggregatedData, SummaryStats
from .laptop import Laptop
from .parse_report import ParseReport
from .processing_result import FileStat, ProcessingResult

__all__ = [
    # Records
    "Laptop",
    "ParseReport",
    # Aggregates
    "AggregatedData",
    "SummaryStats",
    # Processing models
    "FileStat",
    "ProcessingResult",
]
