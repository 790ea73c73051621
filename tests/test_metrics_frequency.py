"""Tests for frequency summaries over character counts."""

from __future__ import annotations

from pathlib import Path
import sys

import numpy as np
import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from chars_counter.counting import CountResult, count_chars
from chars_counter.metrics import FrequencySummary, relative_frequencies, shannon_entropy, summarize


def test_relative_frequencies() -> None:
    shares = relative_frequencies(count_chars("aaab"))

    assert list(shares) == ["a", "b"]
    assert shares["a"] == pytest.approx(0.75)
    assert shares["b"] == pytest.approx(0.25)
    assert sum(shares.values()) == pytest.approx(1.0)


def test_relative_frequencies_empty() -> None:
    assert relative_frequencies(CountResult()) == {}


def test_shannon_entropy_uniform_pair_is_one_bit() -> None:
    assert shannon_entropy(count_chars("aabb")) == pytest.approx(1.0)


def test_shannon_entropy_respects_base() -> None:
    result = count_chars("abcd")
    assert shannon_entropy(result) == pytest.approx(2.0)
    assert shannon_entropy(result, base=np.e) == pytest.approx(np.log(4))


def test_shannon_entropy_degenerate_inputs() -> None:
    assert shannon_entropy(CountResult()) == 0.0
    assert shannon_entropy(count_chars("zzzz")) == 0.0


@pytest.mark.parametrize("base", [1.0, 0.5, float("inf"), float("nan")])
def test_shannon_entropy_rejects_bad_base(base: float) -> None:
    with pytest.raises(ValueError):
        shannon_entropy(count_chars("ab"), base=base)


def test_summarize() -> None:
    summary = summarize(count_chars("aaab"))

    assert isinstance(summary, FrequencySummary)
    assert summary.total == 4
    assert summary.distinct == 2
    assert summary.top_share == pytest.approx(0.75)
    assert summary.entropy == pytest.approx(-(0.75 * np.log2(0.75) + 0.25 * np.log2(0.25)))
    assert not summary.empty


def test_summarize_empty() -> None:
    summary = summarize(count_chars(""))

    assert summary == FrequencySummary(total=0, distinct=0, entropy=0.0, top_share=0.0)
    assert summary.empty
