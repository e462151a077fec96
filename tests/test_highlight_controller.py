"""Unit tests for square hints and their expiry timer."""

import sys
import unittest

from PyQt6.QtCore import QCoreApplication
from PyQt6.QtTest import QTest

from boardkit.controllers.highlight_controller import HighlightController
from boardkit.models.square import Square
from boardkit.utils.square_mapper import from_algebraic


class TestHighlightController(unittest.TestCase):
    """Hinting, clearing, and timed expiry."""

    @classmethod
    def setUpClass(cls):
        cls.app = QCoreApplication.instance() or QCoreApplication(sys.argv[:1])

    def setUp(self):
        self.controller = HighlightController()
        self.model = self.controller.get_highlight_model()
        self.changes = []
        self.model.hinted_squares_changed.connect(self.changes.append)

    def tearDown(self):
        self.controller.clear_hint()

    def test_hint_is_idempotent(self):
        e4 = from_algebraic("e4")
        self.controller.hint(e4)
        self.controller.hint(e4)
        self.controller.hint("e4")
        self.assertEqual(self.model.hinted_squares, frozenset({e4}))
        self.assertEqual(len(self.changes), 1)

    def test_hint_accepts_names_and_squares(self):
        self.controller.hint(["d4", Square(row=4, column=5), "zz", "a9"])
        self.assertEqual(self.model.hinted_squares, frozenset({from_algebraic("d4"), from_algebraic("f5")}))
        self.assertTrue(self.model.is_hinted(from_algebraic("f5")))
        self.assertFalse(self.model.is_hinted(from_algebraic("a1")))

    def test_off_board_squares_are_skipped(self):
        self.controller.hint(Square(row=8, column=8))
        self.assertEqual(self.model.hinted_squares, frozenset())
        self.assertEqual(self.changes, [])

    def test_clear_hint(self):
        self.controller.hint(["a1", "h8"])
        self.controller.clear_hint()
        self.assertEqual(self.model.hinted_squares, frozenset())
        self.assertEqual(self.changes[-1], frozenset())

    def test_timed_hint_expires(self):
        self.controller.hint_for(["c3", "c4"], 0.05)
        self.assertEqual(len(self.model.hinted_squares), 2)
        self.assertTrue(self.controller.has_pending_clear)

        QTest.qWait(200)

        self.assertEqual(self.model.hinted_squares, frozenset())
        self.assertFalse(self.controller.has_pending_clear)

    def test_later_timed_hint_replaces_earlier_timer(self):
        self.controller.hint_for("a1", 0.05)
        self.controller.hint_for("b2", 1.0)

        QTest.qWait(200)

        self.assertEqual(self.model.hinted_squares, frozenset({from_algebraic("a1"), from_algebraic("b2")}))
        self.assertTrue(self.controller.has_pending_clear)

    def test_untimed_hint_keeps_pending_expiry(self):
        self.controller.hint_for("e4", 0.05)
        self.controller.hint("d4")
        self.assertTrue(self.controller.has_pending_clear)

        QTest.qWait(200)

        self.assertEqual(self.model.hinted_squares, frozenset({from_algebraic("d4")}))
        self.assertFalse(self.controller.has_pending_clear)

    def test_untimed_hint_makes_timed_square_permanent(self):
        self.controller.hint_for(["e4", "e5"], 0.05)
        self.controller.hint("e4")

        QTest.qWait(200)

        self.assertEqual(self.model.hinted_squares, frozenset({from_algebraic("e4")}))

    def test_expiry_spares_untimed_hints_added_before(self):
        self.controller.hint("a8")
        self.controller.hint_for("h8", 0.05)

        QTest.qWait(200)

        self.assertEqual(self.model.hinted_squares, frozenset({from_algebraic("a8")}))

    def test_clear_hint_cancels_pending_clear(self):
        self.controller.hint_for("a1", 0.05)
        self.controller.clear_hint()
        self.controller.hint("g7")

        QTest.qWait(200)

        self.assertEqual(self.model.hinted_squares, frozenset({from_algebraic("g7")}))


if __name__ == '__main__':
    unittest.main()
