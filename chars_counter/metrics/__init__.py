"""Numeric summaries derived from character counts."""

from .frequency import FrequencySummary, relative_frequencies, shannon_entropy, summarize

__all__ = [
    "FrequencySummary",
    "relative_frequencies",
    "shannon_entropy",
    "summarize",
]
