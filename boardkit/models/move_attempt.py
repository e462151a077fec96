"""Move attempt records exchanged between the board and its host."""

from dataclasses import dataclass
from typing import Optional

import chess

from boardkit.models.square import Square
from boardkit.utils.square_mapper import to_algebraic


PROMOTION_PIECE_TYPES = (chess.QUEEN, chess.ROOK, chess.BISHOP, chess.KNIGHT)


def parse_lan(lan: str) -> Optional[chess.Move]:
    """Parse long algebraic notation such as "e2e4" or "e7e8Q".

    Args:
        lan: Move text; the promotion letter may be either case.

    Returns:
        chess.Move, or None if the text is not a move.
    """
    if not isinstance(lan, str):
        return None
    try:
        return chess.Move.from_uci(lan.lower())
    except ValueError:
        return None


def promotion_letter(piece_type: chess.PieceType) -> str:
    """Upper-case promotion letter appended to LAN, e.g. "Q" for a queen."""
    return chess.piece_symbol(piece_type).upper()


def parse_promotion_kind(kind) -> Optional[chess.PieceType]:
    """Normalize a promotion choice.

    Args:
        kind: A python-chess piece type or a letter ("q", "R", ...).

    Returns:
        Queen, rook, bishop or knight piece type; None for anything else.
    """
    if isinstance(kind, str):
        if len(kind) != 1 or kind.lower() not in "qrbn":
            return None
        return chess.PIECE_SYMBOLS.index(kind.lower())
    if isinstance(kind, int) and not isinstance(kind, bool) and kind in PROMOTION_PIECE_TYPES:
        return kind
    return None


@dataclass(frozen=True)
class MoveAttempt:
    """One candidate move produced by user interaction; legal or not."""
    from_square: Square
    to_square: Square
    promotion: Optional[chess.PieceType] = None

    @property
    def lan(self) -> str:
        """Long algebraic notation, promotion letter upper-case."""
        text = f"{to_algebraic(self.from_square)}{to_algebraic(self.to_square)}"
        if self.promotion is not None:
            text += promotion_letter(self.promotion)
        return text

    def to_move(self) -> chess.Move:
        """Convert to a python-chess move."""
        return chess.Move(
            chess.square(self.from_square.column, self.from_square.row),
            chess.square(self.to_square.column, self.to_square.row),
            promotion=self.promotion,
        )


@dataclass(frozen=True)
class MoveEvent:
    """Outbound notification of a completed interaction."""
    attempt: MoveAttempt
    move: chess.Move
    is_legal: bool
    source_square: str  # e.g. "e7"
    target_square: str  # e.g. "e8"
    lan: str  # e.g. "e7e8Q"
    promotion: Optional[chess.PieceType] = None
