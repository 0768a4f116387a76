from plugin.src.services.resolver import resolve_stage_and_step, Resolution
from plugin.src.services.log_curator import curate_logs, trim_blank_logs
from plugin.src.services.metadata import format_label, extract_labels, has_labels
from plugin.src.services.renderer import CommentRenderer, render_comment
from plugin.src.services.lifecycle import CommentLifecycle, LifecycleOutcome, run

__all__ = [
    "resolve_stage_and_step",
    "Resolution",
    "curate_logs",
    "trim_blank_logs",
    "format_label",
    "extract_labels",
    "has_labels",
    "CommentRenderer",
    "render_comment",
    "CommentLifecycle",
    "LifecycleOutcome",
    "run",
]
