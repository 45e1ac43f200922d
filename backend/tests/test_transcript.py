# tests/test_transcript.py
from __future__ import annotations

import unittest

from coderelay.workspace.transcript import AI, PLACEHOLDER_TEXT, USER, Transcript


class TestTranscript(unittest.TestCase):
    def test_placeholder_is_replaced_in_place(self):
        t = Transcript().add_user("hi").add_placeholder()
        self.assertTrue(t.has_pending)
        self.assertEqual(t.messages[-1].content, PLACEHOLDER_TEXT)

        t = t.resolve("hello!")
        self.assertFalse(t.has_pending)
        self.assertEqual([(m.role, m.content) for m in t.messages], [(USER, "hi"), (AI, "hello!")])

    def test_resolve_without_placeholder_appends(self):
        t = Transcript().add_user("hi").resolve("late reply")
        self.assertEqual(len(t), 2)
        self.assertEqual(t.messages[-1].content, "late reply")

    def test_overlapping_requests_resolve_oldest_first(self):
        t = Transcript().add_user("one").add_placeholder().add_user("two").add_placeholder()
        t = t.resolve("reply one")
        self.assertEqual([m.content for m in t.messages], ["one", "reply one", "two", PLACEHOLDER_TEXT])
        self.assertTrue(t.has_pending)


if __name__ == "__main__":
    unittest.main()
