"""Unit tests for friend_quotes.friends."""

import tempfile
import unittest
from pathlib import Path

from markupsafe import Markup

from friend_quotes.content import ContentError, ContentStore
from friend_quotes.friends import load_friends, parse_friends


SAMPLE_TEXT = """\
A friend is someone who knows all about you
and still loves you.

Friendship is the only cement that will ever hold the world together.



   Walking with a friend in the dark
   is better than walking alone in the light.   
"""


class TestParseFriends(unittest.TestCase):

    def test_splits_on_blank_lines_in_order(self):
        friends = parse_friends(SAMPLE_TEXT)
        self.assertEqual(len(friends), 3)
        self.assertEqual(
            friends[0],
            "A friend is someone who knows all about you<br>and still loves you.",
        )
        self.assertEqual(
            friends[1],
            "Friendship is the only cement that will ever hold the world together.",
        )

    def test_trims_block_whitespace(self):
        friends = parse_friends(SAMPLE_TEXT)
        self.assertTrue(friends[2].startswith("Walking with a friend"))
        self.assertTrue(friends[2].endswith("in the light."))

    def test_entries_are_markup(self):
        for friend in parse_friends(SAMPLE_TEXT):
            self.assertIsInstance(friend, Markup)

    def test_windows_line_endings(self):
        friends = parse_friends("one\r\ntwo\r\n\r\nthree\r\n")
        self.assertEqual(friends, ["one<br>two", "three"])

    def test_empty_input(self):
        self.assertEqual(parse_friends(""), [])
        self.assertEqual(parse_friends("\n\n  \n\n"), [])


class TestLoadFriends(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        (self.root / "friends").mkdir()
        (self.root / "friends" / "friends.txt").write_text(SAMPLE_TEXT, encoding="utf-8")
        self.store = ContentStore(self.root)

    def tearDown(self):
        self._tmp.cleanup()

    def test_reads_through_store(self):
        friends = load_friends(self.store, "friends/friends.txt")
        self.assertEqual(len(friends), 3)

    def test_missing_file_raises(self):
        with self.assertRaises(ContentError):
            load_friends(self.store, "friends/missing.txt")

    def test_shipped_file_parses(self):
        friends = load_friends(ContentStore(), "friends/friends.txt")
        self.assertEqual(len(friends), 10)


if __name__ == "__main__":
    unittest.main()
