"""Unit tests for the FEN grammar validator."""

import unittest

from boardkit.services.fen_validation_service import FenValidationService


START_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
AFTER_E4_FEN = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
AFTER_E4_E5_FEN = "rnbqkbnr/pppp1ppp/8/4p3/4P3/8/PPPP1PPP/RNBQKBNR w KQkq e6 0 2"


class TestFenValidationService(unittest.TestCase):
    """Field-by-field checks of the FEN grammar."""

    def test_accepts_standard_positions(self):
        self.assertTrue(FenValidationService.validate(START_FEN))
        self.assertTrue(FenValidationService.validate(AFTER_E4_FEN))
        self.assertTrue(FenValidationService.validate(AFTER_E4_E5_FEN))
        self.assertTrue(FenValidationService.validate("8/8/8/8/8/8/8/8 w - - 0 1"))

    def test_field_count(self):
        self.assertFalse(FenValidationService.validate("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0"))
        self.assertFalse(FenValidationService.validate(START_FEN + " 7"))
        self.assertFalse(FenValidationService.validate(""))

    def test_runs_of_spaces_collapse(self):
        self.assertTrue(FenValidationService.validate(START_FEN.replace(" ", "  ")))
        self.assertTrue(FenValidationService.validate(" " + START_FEN + " "))

    def test_other_whitespace_is_rejected(self):
        self.assertFalse(FenValidationService.validate(START_FEN.replace(" ", "\t")))

    def test_non_string_input(self):
        self.assertFalse(FenValidationService.validate(None))
        self.assertFalse(FenValidationService.validate(123))

    def test_rank_summing_to_seven(self):
        self.assertFalse(FenValidationService.validate(
            "rnbqkbn/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"))

    def test_rank_summing_to_nine(self):
        self.assertFalse(FenValidationService.validate(
            "rnbqkbnr/ppppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"))

    def test_rank_count(self):
        self.assertFalse(FenValidationService.validate("rnbqkbnr/pppppppp/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"))
        self.assertFalse(FenValidationService.validate("rnbqkbnr/pppppppp/8/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"))
        self.assertFalse(FenValidationService.validate("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR/ w KQkq - 0 1"))

    def test_digit_runs(self):
        self.assertTrue(FenValidationService.validate("44/8/8/8/8/8/8/8 w - - 0 1"))
        self.assertTrue(FenValidationService.validate("1p1p1p1p/8/8/8/8/8/8/8 w - - 0 1"))
        self.assertFalse(FenValidationService.validate("08/8/8/8/8/8/8/8 w - - 0 1"))
        self.assertFalse(FenValidationService.validate("9/8/8/8/8/8/8/8 w - - 0 1"))

    def test_invalid_piece_letter(self):
        self.assertFalse(FenValidationService.validate(
            "rnbqkbnx/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"))

    def test_active_color(self):
        self.assertTrue(FenValidationService.validate("8/8/8/8/8/8/8/8 b - - 0 1"))
        self.assertFalse(FenValidationService.validate("8/8/8/8/8/8/8/8 W - - 0 1"))
        self.assertFalse(FenValidationService.validate("8/8/8/8/8/8/8/8 white - - 0 1"))

    def test_castling(self):
        self.assertFalse(FenValidationService.validate(
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkqK - 0 1"))
        self.assertTrue(FenValidationService.validate(
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w - - 0 1"))
        self.assertTrue(FenValidationService.validate(
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w kq - 0 1"))
        self.assertFalse(FenValidationService.validate(
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KX - 0 1"))
        self.assertFalse(FenValidationService.validate(
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w K- - 0 1"))

    def test_en_passant_rank_must_match_side_to_move(self):
        self.assertFalse(FenValidationService.validate(AFTER_E4_FEN.replace(" b ", " w ")))
        self.assertTrue(FenValidationService.validate(AFTER_E4_FEN))
        self.assertFalse(FenValidationService.validate(AFTER_E4_E5_FEN.replace(" w ", " b ")))

    def test_en_passant_malformed(self):
        for square in ("i3", "e9", "e", "e33", "E3", "33"):
            with self.subTest(square=square):
                self.assertFalse(FenValidationService.validate(AFTER_E4_FEN.replace(" e3 ", f" {square} ")))

    def test_halfmove_clock(self):
        self.assertTrue(FenValidationService.validate("8/8/8/8/8/8/8/8 w - - 49 60"))
        self.assertFalse(FenValidationService.validate("8/8/8/8/8/8/8/8 w - - -1 1"))
        self.assertFalse(FenValidationService.validate("8/8/8/8/8/8/8/8 w - - +1 1"))
        self.assertFalse(FenValidationService.validate("8/8/8/8/8/8/8/8 w - - x 1"))

    def test_fullmove_number(self):
        self.assertFalse(FenValidationService.validate("8/8/8/8/8/8/8/8 w - - 0 0"))
        self.assertFalse(FenValidationService.validate("8/8/8/8/8/8/8/8 w - - 0 -3"))
        self.assertFalse(FenValidationService.validate("8/8/8/8/8/8/8/8 w - - 0 1.5"))

    def test_grammar_only_no_position_legality(self):
        # No kings at all, still grammatical
        self.assertTrue(FenValidationService.validate("pppppppp/8/8/8/8/8/8/PPPPPPPP w KQkq - 0 1"))


if __name__ == '__main__':
    unittest.main()
