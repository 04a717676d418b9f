"""Tests for entry ordering."""

import random
import stat

import pytest

from eles.listing.entries import DirectoryEntry, FileMetadata, make_synthetic_entry
from eles.listing.sort import name_key, sort_entries


class BrokenEntry(DirectoryEntry):
    """An entry whose metadata can no longer be read."""

    def metadata(self) -> FileMetadata:
        raise FileNotFoundError(self.path)


@pytest.fixture
def entry(make_meta):
    """Factory for a regular-file entry with a given mtime (seconds)."""

    def factory(name: str, mtime: int = 1_700_000_000) -> DirectoryEntry:
        meta = make_meta(stat.S_IFREG | 0o644, mtime_ns=mtime * 1_000_000_000)
        return make_synthetic_entry(meta, name)

    return factory


def _names(entries) -> list[str]:
    return [e.name for e in entries]


class TestNameOrdering:
    """Tests for the base name ordering."""

    def test_case_insensitive(self, entry) -> None:
        """Test alphabetical order ignoring case."""
        entries = [entry(n) for n in ("banana", "Apple", "cherry")]
        assert _names(sort_entries(entries)) == ["Apple", "banana", "cherry"]

    def test_bucket_precedence(self, entry) -> None:
        """Test . then .. then dotfiles then everything else."""
        entries = [entry(n) for n in ("b", "A", ".hidden", "..", ".", "c.txt")]
        assert _names(sort_entries(entries)) == [
            ".",
            "..",
            ".hidden",
            "A",
            "b",
            "c.txt",
        ]

    def test_dotfiles_compared_without_dot(self, entry) -> None:
        """Test that dotfiles sort by the name after the dot."""
        entries = [entry(n) for n in (".zeta", ".Alpha", ".beta")]
        assert _names(sort_entries(entries)) == [".Alpha", ".beta", ".zeta"]

    def test_total_order_for_case_variants(self, entry) -> None:
        """Test that names differing only in case still have a fixed order."""
        forward = sort_entries([entry("readme"), entry("README")])
        backward = sort_entries([entry("README"), entry("readme")])

        assert _names(forward) == _names(backward) == ["README", "readme"]

    def test_name_key_distinct(self) -> None:
        """Test that distinct names never share a key."""
        names = [".", "..", ".a", "a", "A", ".A", "b"]
        assert len({name_key(n) for n in names}) == len(names)

    def test_does_not_mutate_input(self, entry) -> None:
        """Test that a new list is returned."""
        entries = [entry("b"), entry("a")]
        sort_entries(entries)
        assert _names(entries) == ["b", "a"]


class TestReverse:
    """Tests for reversed ordering."""

    def test_reverse_is_exact_inverse(self, entry) -> None:
        """Test that -r inverts the sorted order exactly."""
        names = ["delta", ".env", "Alpha", "alpha", "..", ".", "beta", "Gamma"]
        rng = random.Random(7)
        shuffled = names[:]
        rng.shuffle(shuffled)
        entries = [entry(n) for n in shuffled]

        forward = _names(sort_entries(entries))
        backward = _names(sort_entries(entries, reverse=True))

        assert backward == list(reversed(forward))

    def test_reverse_time_sort_is_exact_inverse(self, entry) -> None:
        """Test that -tr inverts -t exactly, ties included."""
        entries = [
            entry("b", 200),
            entry("a", 200),
            entry("c", 100),
            entry("d", 300),
        ]

        forward = _names(sort_entries(entries, time_sort=True))
        backward = _names(sort_entries(entries, time_sort=True, reverse=True))

        assert backward == list(reversed(forward))


class TestTimeSort:
    """Tests for modification-time ordering."""

    def test_newest_first(self, entry) -> None:
        """Test descending modification time."""
        entries = [entry("old", 100), entry("new", 300), entry("mid", 200)]
        assert _names(sort_entries(entries, time_sort=True)) == ["new", "mid", "old"]

    def test_oldest_first_when_reversed(self, entry) -> None:
        """Test that -t -r lists oldest first."""
        entries = [entry("old", 100), entry("new", 300), entry("mid", 200)]
        assert _names(sort_entries(entries, time_sort=True, reverse=True)) == [
            "old",
            "mid",
            "new",
        ]

    def test_ties_fall_back_to_names(self, entry) -> None:
        """Test deterministic name order for identical timestamps."""
        names = ["pear", "Apple", ".conf", "banana"]
        results = set()
        for seed in range(5):
            shuffled = names[:]
            random.Random(seed).shuffle(shuffled)
            ordered = sort_entries([entry(n, 500) for n in shuffled], time_sort=True)
            results.add(tuple(_names(ordered)))

        assert results == {(".conf", "Apple", "banana", "pear")}

    def test_unreadable_metadata_sorts_last(self, entry) -> None:
        """Test that entries without metadata are treated as oldest."""
        entries = [BrokenEntry("gone", "gone"), entry("here", 100)]
        assert _names(sort_entries(entries, time_sort=True)) == ["here", "gone"]
