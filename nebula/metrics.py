"""Prometheus metrics for Nebula Notes.

All metric objects are defined here so they can be imported from any module.
"""

from prometheus_client import Counter, Histogram

# ---------------------------------------------------------------------------
# Note store metrics
# ---------------------------------------------------------------------------

NOTE_MUTATIONS = Counter(
    "nebula_note_mutations_total",
    "Total number of note collection mutations",
    ["operation"],  # create, update, delete, toggle_favorite, seed
)

STORAGE_RECOVERIES = Counter(
    "nebula_storage_recoveries_total",
    "Times a corrupt persisted collection was replaced with the default state",
)

STORAGE_WRITE_FAILURES = Counter(
    "nebula_storage_write_failures_total",
    "Snapshot writes that failed and left only the in-memory state current",
)

# ---------------------------------------------------------------------------
# AI gateway metrics
# ---------------------------------------------------------------------------

AI_REQUESTS = Counter(
    "nebula_ai_requests_total",
    "Total text-generation requests",
    ["action", "status"],  # status: success, empty, failed, offline, rejected
)

AI_DURATION = Histogram(
    "nebula_ai_request_duration_seconds",
    "Duration of text-generation calls in seconds",
    ["action"],
    buckets=(0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0, 60.0),
)
