"""
session.py - Game session controller for Connect Four

A GameSession owns one board, the move history and the turn order. It is
passed explicitly to every operation; nothing here is process-global.

The module-level functions at the bottom are the request/response API a
front end uses: new_game, drop_piece, undo, request_computer_move and
on_turn_timeout.
"""

import random
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from connect4.ai.minimax import choose_move
from connect4.debug import debug
from connect4.game.board import Board
from connect4.game.rules import check_draw, check_win
from connect4.utils import (DEFAULT_COLS, DEFAULT_ROWS, Difficulty, GameStatus,
                            Player, validate_dimensions)

Cell = Tuple[int, int]

# Events kept in log_messages; older ones are dropped
MAX_LOG_MESSAGES = 1000


@dataclass(frozen=True)
class Move:
    row: int
    column: int
    player: Player


@dataclass(frozen=True)
class GameState:
    """Outcome of the game so far; winning_cells is empty for draws and timeouts."""
    status: GameStatus = GameStatus.IN_PROGRESS
    winner: Optional[Player] = None
    winning_cells: Tuple[Cell, ...] = ()
    timed_out: bool = False

    @property
    def is_game_over(self) -> bool:
        return self.status.is_game_over()


IN_PROGRESS = GameState()


@dataclass(frozen=True)
class DropResult:
    applied: bool
    row: Optional[int]
    column: int
    state: GameState


@dataclass(eq=False)
class GameSession:
    """
    One game of Connect Four, against a human or the computer.

    Args:
        rows, cols: Board size (each at least 4)
        computer_player: Side played by the computer, or None for two humans
        difficulty: Default computer strength
        seed: Seed for the EASY opponent's random choices
        log_sink: Receives every human-readable game event
    """
    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    computer_player: Optional[Player] = None
    difficulty: Difficulty = Difficulty.MEDIUM
    seed: Optional[int] = None
    log_sink: Optional[Callable[[str], None]] = None
    log_messages: List[str] = field(default_factory=list, init=False)
    game_count: int = field(default=0, init=False)

    def __post_init__(self):
        validate_dimensions(self.rows, self.cols)
        self.rng = random.Random(self.seed)
        self.reset()

    # Lifecycle

    def reset(self) -> None:
        """Start a new game on a fresh board with RED on move."""
        self.board = Board(self.rows, self.cols)
        self.history: List[Move] = []
        self.current_player = Player.RED
        self.state = IN_PROGRESS
        self.game_count += 1
        self._log(f"--- Game {self.game_count} Started ---")

    def configure(self, rows: int, cols: int) -> None:
        """
        Change the board size and start a new game.

        Raises:
            InvalidDimensions: if rows or cols is below 4; the current game is kept
        """
        validate_dimensions(rows, cols)
        self.rows, self.cols = rows, cols
        debug.info(f"Board size changed to {rows}x{cols}", "session")
        self.reset()

    def set_computer_player(self, player: Optional[Player]) -> None:
        """Enable (or with None, disable) computer play and start a new game."""
        if player == Player.EMPTY:
            raise ValueError("Computer must play RED or YELLOW")
        self.computer_player = player
        self.reset()

    # Queries

    @property
    def is_computer_turn(self) -> bool:
        return (self.computer_player is not None
                and self.state.status == GameStatus.IN_PROGRESS
                and self.current_player == self.computer_player)

    # Moves

    def drop_piece(self, column: int) -> DropResult:
        """
        Drop a piece for the active player.

        Moves on a finished game or into a full or missing column are
        ignored and reported with applied=False.
        """
        if self.state.is_game_over:
            debug.debug(f"Ignoring drop in column {column}: game is over", "session")
            return DropResult(False, None, column, self.state)

        row = self.board.lowest_empty_row(column)
        if row is None:
            debug.debug(f"Ignoring drop in column {column}: no room", "session")
            return DropResult(False, None, column, self.state)

        player = self.current_player
        self.board.place(row, column, player)
        self.history.append(Move(row, column, player))
        self._log(f"Player {player.name} placed in column {column + 1}")

        cells = check_win(self.board, row, column)
        if cells:
            self.state = GameState(GameStatus.WON, player, tuple(cells))
            self._log(f"Game {self.game_count}: {player.name} wins!")
        elif check_draw(self.board):
            self.state = GameState(GameStatus.DRAW)
            self._log(f"Game {self.game_count}: Draw!")
        else:
            self.current_player = player.other()

        return DropResult(True, row, column, self.state)

    def undo(self) -> bool:
        """
        Take back the last move, reopening the game if it had ended.

        With computer play on, a take-back that hands the turn to the
        computer also removes the computer's move before it, so the human
        is on move afterwards.

        Returns:
            False if there was nothing to undo
        """
        if not self._pop_move():
            debug.debug("No moves to undo", "session")
            return False

        if self.computer_player is not None and self.current_player == self.computer_player:
            self._pop_move()
        return True

    def _pop_move(self) -> bool:
        if not self.history:
            return False
        move = self.history.pop()
        self.board.remove(move.row, move.column)
        self.current_player = move.player
        self.state = IN_PROGRESS
        self._log(f"Undo: Player {move.player.name} removed move from column {move.column + 1}")
        return True

    def request_computer_move(self, difficulty: Optional[Difficulty] = None) -> Optional[int]:
        """
        Choose a column for the active player without playing it.

        Returns:
            The column, or None if the game is over or the board is full
        """
        if self.state.is_game_over:
            return None
        difficulty = difficulty or self.difficulty
        debug.debug(f"Computer ({self.current_player.name}) thinking at {difficulty.value}",
                    "session")
        return choose_move(self.board, difficulty, self.current_player, self.rng)

    def play_computer_turn(self, difficulty: Optional[Difficulty] = None) -> Optional[DropResult]:
        """Choose and play a computer move; None if no move was possible."""
        column = self.request_computer_move(difficulty)
        if column is None:
            return None
        return self.drop_piece(column)

    def on_turn_timeout(self) -> GameState:
        """The active player ran out of time: the opponent wins."""
        if self.state.is_game_over:
            return self.state

        loser = self.current_player
        winner = loser.other()
        self.state = GameState(GameStatus.WON, winner, (), timed_out=True)
        self._log(f"{loser.name} ran out of time! "
                  f"Game {self.game_count}: {winner.name} wins due to timeout!")
        return self.state

    def _log(self, message: str) -> None:
        self.log_messages.append(message)
        del self.log_messages[:-MAX_LOG_MESSAGES]
        debug.info(message, "session")
        if self.log_sink is not None:
            self.log_sink(message)


def new_game(rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS, **options) -> GameSession:
    """Create a session; raises InvalidDimensions for boards under 4x4."""
    return GameSession(rows=rows, cols=cols, **options)


def drop_piece(session: GameSession, column: int) -> DropResult:
    return session.drop_piece(column)


def undo(session: GameSession) -> bool:
    return session.undo()


def request_computer_move(session: GameSession,
                          difficulty: Optional[Difficulty] = None) -> Optional[int]:
    return session.request_computer_move(difficulty)


def on_turn_timeout(session: GameSession) -> GameState:
    return session.on_turn_timeout()
