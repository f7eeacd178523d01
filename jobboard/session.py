"""Per-user job list state and the events the page reacts to."""
from __future__ import annotations

from typing import Any, Callable

from jobboard.errors import InvalidUploadError, UploadInProgressError
from jobboard.filters import FILTER_ATTRIBUTES, FilterSelection, apply_filters, distinct_values
from jobboard.ingest import parse_jobs
from jobboard.log import get_logger
from jobboard.models import Job
from jobboard.render import Entry, render
from jobboard.sorting import SortMode, sort_jobs

log = get_logger(__name__)

EVENTS: tuple[str, ...] = ("loaded", "load_failed", "changed")

Handler = Callable[..., Any]


class JobSession:
    """Owns the job list for one page session.

    The list is replaced on every successful load, reordered by
    :meth:`set_sort`, and never modified by filtering.
    """

    def __init__(self, *, strict: bool = False, sort_mode: SortMode | str | None = None) -> None:
        self.strict = strict
        self.jobs: list[Job] = []
        self.selection = FilterSelection()
        self.sort_mode: SortMode | None = SortMode(sort_mode) if sort_mode else None
        self.ready = False
        self.busy = False
        self._handlers: dict[str, list[Handler]] = {name: [] for name in EVENTS}

    def on(self, event: str, handler: Handler) -> Handler:
        if event not in self._handlers:
            raise ValueError(f"unknown event {event!r}; expected one of {EVENTS}")
        self._handlers[event].append(handler)
        return handler

    def _emit(self, event: str, *args: Any) -> None:
        for handler in self._handlers[event]:
            handler(self, *args)

    def load(self, raw: bytes | str) -> list[Job]:
        """Replace the job list with the parsed upload.

        On InvalidUploadError the previous list, filters and sort are kept.
        """
        if self.busy:
            raise UploadInProgressError("an upload is already being loaded")
        self.busy = True
        try:
            jobs = parse_jobs(raw, strict=self.strict)
        except InvalidUploadError as exc:
            self._emit("load_failed", exc)
            raise
        finally:
            self.busy = False

        self.jobs = jobs
        self.selection = FilterSelection()
        if self.sort_mode is not None:
            sort_jobs(self.jobs, self.sort_mode)
        self.ready = True
        log.info("Session loaded %d job(s)", len(jobs))
        self._emit("loaded", jobs)
        self._emit("changed")
        return jobs

    def set_filters(self, selection: FilterSelection) -> None:
        self.selection = selection
        self._emit("changed")

    def set_sort(self, mode: SortMode | str | None) -> None:
        """Reorder the list by *mode*; ``None`` keeps the current order and
        stops later loads from being re-sorted."""
        if mode is None:
            self.sort_mode = None
        else:
            mode = SortMode(mode)
            sort_jobs(self.jobs, mode)
            self.sort_mode = mode
        self._emit("changed")

    def visible(self) -> list[Job]:
        return apply_filters(self.jobs, self.selection)

    def filter_options(self) -> dict[str, list[str]]:
        return {attr: distinct_values(self.jobs, attr) for attr in FILTER_ATTRIBUTES}

    def entries(self) -> list[Entry]:
        return render(self.visible())
