"""Tests for base-name matching and display-path assembly."""

from __future__ import annotations

import os
import re
import unittest
from pathlib import Path

from pathgrep.entries import Entry
from pathgrep.matching import PatternSet, Segment, SpanRole, segments_text
from pathgrep.render import render_name


def _entry(*parts: str, is_dir: bool = False) -> Entry:
    path = Path(*parts)
    return Entry(path=path, is_dir=is_dir, display=str(path))


class RenderNameTests(unittest.TestCase):
    def test_without_name_pattern_display_path_is_verbatim(self) -> None:
        entry = _entry("dir", "Foo.txt")

        segments = render_name(entry, PatternSet())

        self.assertEqual(segments, (Segment(entry.display, SpanRole.CONTEXT),))

    def test_matches_are_highlighted_after_parent_prefix(self) -> None:
        entry = _entry("dir", "Foo.txt")

        segments = render_name(entry, PatternSet.build(re.compile("o"), None))

        assert segments is not None
        self.assertEqual(segments[0], Segment("dir" + os.sep, SpanRole.CONTEXT))
        self.assertEqual(segments_text(segments), entry.display)
        self.assertEqual(
            [segment.text for segment in segments if segment.role is SpanRole.HIGHLIGHTED],
            ["o", "o"],
        )

    def test_pattern_only_sees_base_name(self) -> None:
        entry = _entry("foo", "bar.txt")

        self.assertIsNone(render_name(entry, PatternSet.build(re.compile("foo"), None)))

    def test_no_match_drops_entry(self) -> None:
        self.assertIsNone(render_name(_entry("dir", "Foo.txt"), PatternSet.build(re.compile("zzz"), None)))

    def test_case_insensitive_name_match(self) -> None:
        entry = _entry("dir", "Foo.txt")

        self.assertIsNone(render_name(entry, PatternSet.build(re.compile("foo"), None)))
        segments = render_name(entry, PatternSet.build(re.compile("foo"), None, ignore_case=True))

        assert segments is not None
        self.assertIn(Segment("Foo", SpanRole.HIGHLIGHTED), segments)

    def test_entry_without_parent_has_no_prefix(self) -> None:
        segments = render_name(_entry("Foo.txt"), PatternSet.build(re.compile("txt"), None))

        self.assertEqual(
            segments,
            (
                Segment("Foo.", SpanRole.CONTEXT),
                Segment("txt", SpanRole.HIGHLIGHTED),
            ),
        )

    def test_undecodable_name_is_skipped_with_warning(self) -> None:
        entry = _entry("dir", "bad\udcff.txt")

        with self.assertLogs("pathgrep", level="WARNING") as logs:
            segments = render_name(entry, PatternSet.build(re.compile("bad"), None))

        self.assertIsNone(segments)
        self.assertIn("Could not interpret name", logs.output[0])


if __name__ == "__main__":
    unittest.main()
