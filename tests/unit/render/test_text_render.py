"""Tests for per-line text matching, decoding, and read failures."""

from __future__ import annotations

import re
import tempfile
import unittest
from pathlib import Path

from pathgrep.entries import Entry
from pathgrep.matching import PatternSet, SpanRole, segments_text
from pathgrep.render import render_text, split_lines


def _file_entry(path: Path) -> Entry:
    return Entry(path=path, is_dir=False, display=str(path))


class SplitLinesTests(unittest.TestCase):
    def test_universal_newlines(self) -> None:
        self.assertEqual(split_lines("a\r\nb\rc\n"), ["a", "b", "c"])

    def test_no_trailing_empty_line(self) -> None:
        self.assertEqual(split_lines(""), [])
        self.assertEqual(split_lines("\n"), [""])
        self.assertEqual(split_lines("a\n\nb"), ["a", "", "b"])


class RenderTextTests(unittest.TestCase):
    def test_without_text_pattern_nothing_is_read(self) -> None:
        entry = _file_entry(Path("/does/not/exist.txt"))

        self.assertEqual(render_text(entry, PatternSet()), ())

    def test_directory_is_dropped_when_text_pattern_set(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            entry = Entry(path=root, is_dir=True, display=str(root))

            self.assertIsNone(render_text(entry, PatternSet.build(None, re.compile("x"))))

    def test_only_matching_lines_are_rendered_with_line_numbers(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp).resolve() / "notes.txt"
            target.write_text("alpha\nbeta gamma beta\ndelta\n", encoding="utf-8")

            lines = render_text(_file_entry(target), PatternSet.build(None, re.compile("beta")))

            assert lines is not None
            self.assertEqual([line.line_number for line in lines], [2])
            segments = lines[0].segments
            self.assertEqual(segments_text(segments), "beta gamma beta")
            self.assertEqual(
                [(segment.text, segment.role) for segment in segments],
                [
                    ("beta", SpanRole.HIGHLIGHTED),
                    (" gamma ", SpanRole.LOW_EMPHASIS),
                    ("beta", SpanRole.HIGHLIGHTED),
                ],
            )

    def test_case_insensitive_text_matches_every_variant(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp).resolve() / "Foo.txt"
            target.write_text("hello world\nHELLO\n", encoding="utf-8")

            sensitive = render_text(_file_entry(target), PatternSet.build(None, re.compile("hello")))
            insensitive = render_text(_file_entry(target), PatternSet.build(None, re.compile("hello"), ignore_case=True))

            assert sensitive is not None and insensitive is not None
            self.assertEqual([line.line_number for line in sensitive], [1])
            self.assertEqual([line.line_number for line in insensitive], [1, 2])

    def test_no_matching_line_drops_entry(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            empty = Path(tmp).resolve() / "a.txt"
            empty.write_bytes(b"")
            other = Path(tmp).resolve() / "b.txt"
            other.write_text("nothing\n", encoding="utf-8")

            patterns = PatternSet.build(None, re.compile("x"))
            self.assertIsNone(render_text(_file_entry(empty), patterns))
            self.assertIsNone(render_text(_file_entry(other), patterns))

    def test_undecodable_content_is_skipped_with_warning(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp).resolve() / "blob.bin"
            target.write_bytes(b"\xff\xfe\x00x")

            with self.assertLogs("pathgrep", level="WARNING") as logs:
                lines = render_text(_file_entry(target), PatternSet.build(None, re.compile("x")))

            self.assertIsNone(lines)
            self.assertIn("Could not decode", logs.output[0])

    def test_special_entry_is_not_read(self) -> None:
        entry = Entry(path=Path("/does/not/matter"), is_dir=False, display="fifo", is_special=True)
        seen: list[str] = []

        lines = render_text(entry, PatternSet.build(None, re.compile("x")), seen.append)

        self.assertIsNone(lines)
        self.assertEqual(seen, ['Could not read "fifo"'])

    def test_warn_callback_replaces_logging(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp).resolve() / "blob.bin"
            target.write_bytes(b"\xff")
            seen: list[str] = []

            with self.assertNoLogs("pathgrep", level="WARNING"):
                lines = render_text(_file_entry(target), PatternSet.build(None, re.compile("x")), seen.append)

            self.assertIsNone(lines)
            self.assertEqual(seen, [f'Could not decode "{target}"'])

    def test_unreadable_file_is_skipped_with_warning(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp).resolve() / "gone.txt"

            with self.assertLogs("pathgrep", level="WARNING") as logs:
                lines = render_text(_file_entry(missing), PatternSet.build(None, re.compile("x")))

            self.assertIsNone(lines)
            self.assertIn("Could not read", logs.output[0])


if __name__ == "__main__":
    unittest.main()
