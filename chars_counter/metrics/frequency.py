"""Distribution summaries over a character count."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

import numpy as np

from chars_counter.counting.result import CountResult


@dataclass(frozen=True)
class FrequencySummary:
    """Aggregate view of a single counting pass."""

    total: int
    distinct: int
    entropy: float
    top_share: float

    @property
    def empty(self) -> bool:
        return self.total == 0


def _counts_array(result: CountResult) -> np.ndarray:
    return np.fromiter((entry.count for entry in result), dtype=float, count=len(result))


def relative_frequencies(result: CountResult) -> Dict[str, float]:
    """Map each character to its share of the total, in result order."""
    if not result:
        return {}
    counts = _counts_array(result)
    shares = counts / counts.sum()
    return {entry.character: float(share) for entry, share in zip(result, shares)}


def shannon_entropy(result: CountResult, base: float = 2.0) -> float:
    """Compute the Shannon entropy of the character distribution.

    Args:
        result: Counting result to summarise.
        base: Logarithm base; 2.0 yields bits.

    Returns:
        Entropy as a float, 0.0 for empty or single-character results.
    """
    if not np.isfinite(base) or base <= 1.0:
        raise ValueError("Entropy base must be a finite number greater than 1.")
    if len(result) < 2:
        return 0.0
    counts = _counts_array(result)
    probabilities = counts / counts.sum()
    entropy = -np.sum(probabilities * np.log(probabilities)) / np.log(base)
    return float(entropy)


def summarize(result: CountResult) -> FrequencySummary:
    """Collect total, distinct, entropy and top share in one record."""
    total = result.total
    top_share = result[0].count / total if total else 0.0
    return FrequencySummary(
        total=total,
        distinct=len(result),
        entropy=shannon_entropy(result),
        top_share=float(top_share),
    )


__all__ = ["FrequencySummary", "relative_frequencies", "shannon_entropy", "summarize"]
