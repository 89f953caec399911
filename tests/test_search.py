"""Tests for pattern filtering and random selection."""

from __future__ import annotations

import random
import re
from unittest.mock import MagicMock

from fortunes.index.search import filter_fortunes, iter_source_changes
from fortunes.index.selector import make_rng, pick_fortune
from fortunes.models import Fortune

SAMPLE = [
    Fortune(source="fortunes", text="Neckties strangle clear thinking."),
    Fortune(source="fortunes", text="You cannot achieve the impossible without attempting the absurd."),
    Fortune(source="fortunes", text="Assumption is the mother of all screw-ups."),
]


class TestFilterFortunes:
    """Test filter_fortunes function."""

    def test_matches_substring(self) -> None:
        results = list(filter_fortunes(SAMPLE, re.compile("the")))

        assert results == [SAMPLE[1], SAMPLE[2]]

    def test_case_sensitive(self) -> None:
        corpus = [Fortune(source="x", text="FOO bar")]

        assert list(filter_fortunes(corpus, re.compile("foo"))) == []

    def test_case_insensitive(self) -> None:
        corpus = [Fortune(source="x", text="FOO bar")]

        assert list(filter_fortunes(corpus, re.compile("foo", re.IGNORECASE))) == corpus

    def test_matches_across_lines(self) -> None:
        """Search is unanchored and sees every line of the text."""
        corpus = [Fortune(source="x", text="first\nsecond line")]

        assert list(filter_fortunes(corpus, re.compile("^second", re.MULTILINE))) == corpus

    def test_is_lazy(self) -> None:
        """Should not inspect the corpus until iterated."""
        pattern = MagicMock()
        results = filter_fortunes(SAMPLE, pattern)

        pattern.search.assert_not_called()
        next(results)
        pattern.search.assert_called_once_with(SAMPLE[0].text)

    def test_no_matches(self) -> None:
        assert list(filter_fortunes(SAMPLE, re.compile("zebra"))) == []


class TestIterSourceChanges:
    """Test iter_source_changes function."""

    def test_marks_source_changes(self) -> None:
        fortunes = [
            Fortune("jokes", "a"),
            Fortune("jokes", "b"),
            Fortune("quotes", "c"),
        ]

        flags = [changed for _, changed in iter_source_changes(fortunes)]

        assert flags == [True, False, True]

    def test_interleaved_sources_repeat_header(self) -> None:
        """Adjacency decides, so a source seen earlier is flagged again."""
        fortunes = [
            Fortune("jokes", "a"),
            Fortune("quotes", "b"),
            Fortune("jokes", "c"),
        ]

        flags = [changed for _, changed in iter_source_changes(fortunes)]

        assert flags == [True, True, True]

    def test_empty(self) -> None:
        assert list(iter_source_changes([])) == []


class TestPickFortune:
    """Test pick_fortune function."""

    def test_empty_corpus(self) -> None:
        assert pick_fortune([], 1) is None
        assert pick_fortune([]) is None

    def test_seeded_golden(self) -> None:
        """Seed 1 over the sample corpus is pinned to the first element."""
        assert pick_fortune(SAMPLE, 1) == SAMPLE[0]

    def test_seeded_is_reproducible(self) -> None:
        picks = {pick_fortune(SAMPLE, 12345) for _ in range(20)}

        assert len(picks) == 1

    def test_large_seed(self) -> None:
        assert pick_fortune(SAMPLE, 2**64 - 1) in SAMPLE

    def test_unseeded_returns_member(self) -> None:
        assert pick_fortune(SAMPLE) in SAMPLE

    def test_injected_rng(self) -> None:
        """An injected generator overrides the seed."""
        rng = MagicMock(spec=random.Random)
        rng.randrange.return_value = 2

        assert pick_fortune(SAMPLE, 1, rng=rng) == SAMPLE[2]
        rng.randrange.assert_called_once_with(3)

    def test_uniform_by_index(self) -> None:
        """Every index is reachable."""
        rng = random.Random(7)
        seen = {pick_fortune(SAMPLE, rng=rng) for _ in range(200)}

        assert seen == set(SAMPLE)


class TestMakeRng:
    """Test make_rng helper."""

    def test_seeded_generators_agree(self) -> None:
        assert make_rng(99).random() == make_rng(99).random()

    def test_unseeded(self) -> None:
        assert isinstance(make_rng(), random.Random)
