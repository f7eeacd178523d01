"""Streamlit page: upload a JSON file of job postings, filter, sort and inspect them."""
from __future__ import annotations

import sys
from pathlib import Path

import streamlit as st

ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(ROOT))

from jobboard.config import SAMPLE_JOBS_PATH, load_settings
from jobboard.errors import InvalidUploadError, UploadInProgressError
from jobboard.filters import FILTER_ATTRIBUTES, FilterSelection
from jobboard.log import get_logger
from jobboard.session import JobSession
from jobboard.sorting import SortMode

log = get_logger(__name__)

# ── Constants ────────────────────────────────────────────────────────────

ALL = "All"
FILTER_LABELS: dict[str, str] = {"level": "Level", "type": "Type", "skill": "Skill"}

_CARD_CSS = """
<style>
/* job entries read as list rows, not buttons */
[data-testid="stMainBlockContainer"] .stButton > button {
    justify-content: flex-start;
    text-align: left;
    border-radius: 8px;
    border: 1px solid rgba(74,144,217,0.25);
    background: rgba(255,255,255,0.65);
}
.stButton > button:hover {
    border-color: #4a90d9;
}
h1, h2, h3 {
    color: #1a1a2e;
}
</style>
"""

SETTINGS = load_settings()

st.set_page_config(page_title=SETTINGS["page_title"], page_icon="💼", layout="wide")

# ── Session ──────────────────────────────────────────────────────────────


def _on_loaded(session: JobSession, jobs: list) -> None:
    st.session_state["upload_error"] = ""
    # fresh widget keys so the filter dropdowns fall back to "All"
    st.session_state["load_count"] = st.session_state.get("load_count", 0) + 1


def _on_load_failed(session: JobSession, exc: InvalidUploadError) -> None:
    st.session_state["upload_error"] = str(exc)


def _on_changed(session: JobSession) -> None:
    log.debug("Session changed: %d of %d job(s) visible", len(session.visible()), len(session.jobs))


def _session() -> JobSession:
    if "session" not in st.session_state:
        session = JobSession(
            strict=bool(SETTINGS["ingest"].get("strict")),
            sort_mode=SETTINGS.get("default_sort"),
        )
        session.on("loaded", _on_loaded)
        session.on("load_failed", _on_load_failed)
        session.on("changed", _on_changed)
        st.session_state["session"] = session
        log.info("New page session")
    return st.session_state["session"]


def _load(session: JobSession, raw: bytes, source: str) -> None:
    try:
        session.load(raw)
        log.info("Loaded %s", source)
    except InvalidUploadError:
        log.warning("Rejected %s", source)
    except UploadInProgressError as exc:
        st.warning(str(exc))


# ── Widgets ──────────────────────────────────────────────────────────────


@st.dialog("Job details")
def _show_details(text: str) -> None:
    st.text(text)
    if st.button("OK", type="primary"):
        st.rerun()


def _upload_section(session: JobSession) -> None:
    uploaded = st.file_uploader("Upload a JSON file of job postings", type=["json"])
    if uploaded is not None:
        # Streamlit reruns on every interaction; load each file only once.
        file_id = getattr(uploaded, "file_id", None) or f"{uploaded.name}:{uploaded.size}"
        if st.session_state.get("loaded_file_id") != file_id:
            st.session_state["loaded_file_id"] = file_id
            _load(session, uploaded.getvalue(), uploaded.name)

    if st.session_state.get("upload_error"):
        st.error(st.session_state["upload_error"])


def _filter_section(session: JobSession) -> None:
    options = session.filter_options()
    generation = st.session_state.get("load_count", 0)
    chosen: dict[str, str | None] = {}

    cols = st.columns(len(FILTER_ATTRIBUTES) + 1)
    for col, attr in zip(cols, FILTER_ATTRIBUTES):
        with col:
            value = st.selectbox(
                FILTER_LABELS[attr],
                [ALL] + options[attr],
                key=f"filter_{attr}_{generation}",
            )
        chosen[attr] = None if value == ALL else value

    with cols[-1]:
        mode = st.selectbox(
            "Sort",
            [None] + list(SortMode),
            index=0 if session.sort_mode is None else 1 + list(SortMode).index(session.sort_mode),
            format_func=lambda m: "Sort by…" if m is None else m.label,
            key="sort_mode",
        )

    selection = FilterSelection(**chosen)
    if selection != session.selection:
        session.set_filters(selection)
    if mode != session.sort_mode:
        session.set_sort(mode)


def _job_list(session: JobSession) -> None:
    st.subheader("Jobs")
    st.caption("Click a job to view its description.")
    for entry in session.entries():
        if not entry.clickable:
            st.info(entry.label)
            continue
        if st.button(entry.label, key=entry.key, use_container_width=True):
            _show_details(entry.details())


def _sidebar(session: JobSession) -> None:
    if not SETTINGS.get("show_sample_loader") or not SAMPLE_JOBS_PATH.exists():
        return
    with st.sidebar:
        st.markdown("**No file at hand?**")
        if st.button("Load sample jobs", use_container_width=True):
            _load(session, SAMPLE_JOBS_PATH.read_bytes(), SAMPLE_JOBS_PATH.name)


# ── Main ─────────────────────────────────────────────────────────────────


def main() -> None:
    st.markdown(_CARD_CSS, unsafe_allow_html=True)
    st.header(SETTINGS["page_title"])

    session = _session()
    _sidebar(session)
    _upload_section(session)

    if not session.ready:
        return

    st.divider()
    _filter_section(session)
    _job_list(session)


main()
