"""FEN grammar validation service."""

from typing import List

from boardkit.services.logging_service import LoggingService


PIECE_LETTERS = "PNBRQKpnbrqk"
CASTLING_LETTERS = "KQkq"
EN_PASSANT_FILES = "abcdefgh"


class FenValidationService:
    """Strict grammar checker for Forsyth-Edwards Notation.

    Checks the six FEN fields independently of python-chess' own parser. This
    is a syntax check only: king counts, reachability and similar position
    legality questions are not examined.
    """

    @staticmethod
    def validate(fen: str) -> bool:
        """Validate a FEN string.

        Args:
            fen: FEN string to validate.

        Returns:
            True if every field is well formed, False otherwise. Never raises.
        """
        if not isinstance(fen, str):
            return False

        fields = FenValidationService._split_fields(fen)
        if len(fields) != 6:
            FenValidationService._reject("field count", str(len(fields)))
            return False

        placement, active_color, castling, en_passant, halfmove, fullmove = fields

        if not FenValidationService.is_valid_piece_placement(placement):
            FenValidationService._reject("piece placement", placement)
            return False

        if active_color not in ("w", "b"):
            FenValidationService._reject("active color", active_color)
            return False

        if not FenValidationService.is_valid_castling(castling):
            FenValidationService._reject("castling", castling)
            return False

        if not FenValidationService.is_valid_en_passant(en_passant, active_color):
            FenValidationService._reject("en passant", en_passant)
            return False

        if not FenValidationService._is_unsigned_int(halfmove):
            FenValidationService._reject("halfmove clock", halfmove)
            return False

        if not FenValidationService._is_unsigned_int(fullmove) or int(fullmove) <= 0:
            FenValidationService._reject("fullmove number", fullmove)
            return False

        return True

    @staticmethod
    def _split_fields(fen: str) -> List[str]:
        # Runs of spaces collapse; tabs and newlines stay inside a field and fail it
        return [field for field in fen.split(" ") if field]

    @staticmethod
    def is_valid_piece_placement(placement: str) -> bool:
        """Check the piece placement field.

        Args:
            placement: First FEN field, eight ranks separated by '/'.

        Returns:
            True if there are exactly 8 ranks and each covers exactly 8 files.
        """
        ranks = placement.split("/")
        if len(ranks) != 8:
            return False

        for rank in ranks:
            file_count = 0
            for char in rank:
                if char in "12345678":
                    file_count += int(char)
                elif char in PIECE_LETTERS:
                    file_count += 1
                else:
                    return False
            if file_count != 8:
                return False

        return True

    @staticmethod
    def is_valid_castling(castling: str) -> bool:
        """Check the castling availability field ("-" or unique letters of KQkq)."""
        if castling == "-":
            return True
        if not castling:
            return False
        if len(set(castling)) != len(castling):
            return False
        return all(char in CASTLING_LETTERS for char in castling)

    @staticmethod
    def is_valid_en_passant(square: str, active_color: str) -> bool:
        """Check the en passant target field.

        The target sits behind a pawn that just advanced two squares, so it is
        on rank 6 when white is to move and rank 3 when black is to move.

        Args:
            square: Fourth FEN field.
            active_color: Second FEN field ("w" or "b").

        Returns:
            True if the field is "-" or a square consistent with the side to move.
        """
        if square == "-":
            return True
        if len(square) != 2:
            return False

        file_char, rank_char = square[0], square[1]
        if file_char not in EN_PASSANT_FILES:
            return False
        if rank_char not in "12345678":
            return False

        rank = int(rank_char)
        if active_color == "w":
            return rank == 6
        if active_color == "b":
            return rank == 3
        return False

    @staticmethod
    def _is_unsigned_int(text: str) -> bool:
        return bool(text) and all(char in "0123456789" for char in text)

    @staticmethod
    def _reject(field: str, value: str) -> None:
        logging_service = LoggingService.get_instance()
        logging_service.debug(f"FEN rejected: invalid {field} ({value!r})")
