from .errors import InvalidUploadError, JobBoardError, UploadInProgressError
from .filters import FILTER_ATTRIBUTES, FilterSelection, apply_filters, distinct_values
from .ingest import parse_jobs
from .models import UNKNOWN_RECENCY, Job
from .render import Entry, render
from .session import JobSession
from .sorting import SortMode, sort_jobs

__all__ = [
    "Job", "UNKNOWN_RECENCY", "parse_jobs",
    "FILTER_ATTRIBUTES", "FilterSelection", "apply_filters", "distinct_values",
    "SortMode", "sort_jobs", "Entry", "render", "JobSession",
    "JobBoardError", "InvalidUploadError", "UploadInProgressError",
]
