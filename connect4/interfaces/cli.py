"""
cli.py - Command-line interface for Connect Four

Plays games in the terminal against another human or the computer, shows
and resets the saved scores, and benchmarks the computer's search.
"""

import argparse
import random
import sys
import time
from typing import Callable, List, Optional, Tuple

from connect4.ai.minimax import MinimaxPlayer
from connect4.data.scores import SCORES_FILE, ScoreStore
from connect4.debug import debug, DebugLevel
from connect4.game.board import Board
from connect4.game.clock import TurnClock
from connect4.game.session import GameSession
from connect4.utils import (BOARD_SIZES, COMPUTER_DELAY, DEFAULT_TIME_LIMIT, SEARCH_DEPTHS,
                            Difficulty, GameStatus, InvalidDimensions, Player,
                            parse_board_size)

# Special commands returned by get_human_move
QUIT, UNDO, RESTART = 'quit', 'undo', 'restart'


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for all subcommands."""
    parser = argparse.ArgumentParser(description='Connect Four CLI')
    parser.add_argument('--debug', action='store_true', help='Enable debug output')
    parser.add_argument('--debug-level', default='warning',
                        choices=[level.name.lower() for level in DebugLevel],
                        help='Logging level (default: warning)')
    parser.add_argument('--log-file', default=None, help='Also write logs to this file')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    play_parser = subparsers.add_parser('play', help='Play a game interactively')
    play_parser.add_argument('--size', default=BOARD_SIZES[0],
                             help=f'Board size ROWSxCOLS, e.g. {", ".join(BOARD_SIZES)}')
    play_parser.add_argument('--opponent', choices=['human', 'computer'], default='computer',
                             help='Who plays YELLOW')
    play_parser.add_argument('--difficulty', choices=[d.value for d in Difficulty],
                             default=Difficulty.MEDIUM.value, help='Computer strength')
    play_parser.add_argument('--time-limit', type=int, default=DEFAULT_TIME_LIMIT,
                             help='Seconds per turn, 0 to disable the timer')
    play_parser.add_argument('--seed', type=int, default=None,
                             help='Seed for the easy computer opponent')
    play_parser.add_argument('--delay', type=float, default=COMPUTER_DELAY,
                             help='Pause before the computer moves (seconds)')
    play_parser.add_argument('--scores-file', default=SCORES_FILE, help='Score file path')

    scores_parser = subparsers.add_parser('scores', help='Show saved scores')
    scores_parser.add_argument('--reset', action='store_true', help='Reset scores to zero')
    scores_parser.add_argument('--scores-file', default=SCORES_FILE, help='Score file path')

    benchmark_parser = subparsers.add_parser('benchmark', help='Time the computer search')
    benchmark_parser.add_argument('--size', default=BOARD_SIZES[0], help='Board size ROWSxCOLS')
    benchmark_parser.add_argument('--difficulty', choices=['medium', 'hard'], default='medium',
                                  help='Search depth to benchmark')
    benchmark_parser.add_argument('--iterations', type=int, default=5,
                                  help='Number of random positions to search')
    benchmark_parser.add_argument('--seed', type=int, default=None, help='Random seed')

    return parser


class SimpleCLI:
    """Simple command-line interface for Connect Four."""

    def __init__(self, input_func: Callable[[str], str] = input,
                 output: Callable[[str], None] = print):
        self.args = None
        self.input = input_func
        self.output = output
        self.session: Optional[GameSession] = None
        self.scores: Optional[ScoreStore] = None

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments and configure logging."""
        self.args = build_parser().parse_args(argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.configure(level=DebugLevel[self.args.debug_level.upper()])
        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the CLI; returns the process exit code."""
        if not self.args:
            self.parse_args(argv)

        try:
            if self.args.command == 'play':
                self.play_game()
            elif self.args.command == 'scores':
                self.show_scores()
            elif self.args.command == 'benchmark':
                self.benchmark()
            else:
                self.output("Please specify a command. Use --help for options.")
                return 1
        except InvalidDimensions as e:
            self.output(f"Error: {e}")
            return 2
        return 0

    # Play

    def play_game(self) -> None:
        """Play Connect Four interactively until the user quits."""
        rows, cols = parse_board_size(self.args.size)
        computer = Player.YELLOW if self.args.opponent == 'computer' else None
        self.session = GameSession(rows=rows, cols=cols, computer_player=computer,
                                   difficulty=Difficulty(self.args.difficulty),
                                   seed=self.args.seed, log_sink=self.output)
        self.scores = ScoreStore(self.args.scores_file)
        clock = TurnClock(self.args.time_limit) if self.args.time_limit > 0 else None

        self.output("Starting a new Connect Four game!")
        self.output(f"Enter a column number (1-{cols}) to drop a piece.")
        self.output("Other commands: 'u' undo, 'r' restart, 'size RxC' resize, 'q' quit.")

        session = self.session
        turn = None
        while True:
            if session.state.is_game_over:
                if clock:
                    clock.stop()
                self.output(session.board.render())
                self.output(self.describe_state())
                command = self.get_human_move(finished=True)
                if command == QUIT:
                    return
                self.handle_command(command)
                turn = None
                continue

            if session.is_computer_turn:
                self.output("Computer is thinking...")
                time.sleep(self.args.delay)
                result = session.play_computer_turn()
                if result is not None:
                    self.after_drop(result.state)
                continue

            # A new turn restarts the countdown
            current_turn = (session.game_count, len(session.history))
            if clock and current_turn != turn:
                clock.start()
            turn = current_turn

            self.output(session.board.render())
            prompt_time = f" [{clock.remaining():.0f}s]" if clock else ""
            self.output(f"{session.current_player.name} to move{prompt_time}")
            command = self.get_human_move()

            if clock and clock.expired():
                state = session.on_turn_timeout()
                self.after_drop(state)
                continue

            if command == QUIT:
                self.output("Quitting game.")
                return
            self.handle_command(command)

    def handle_command(self, command) -> None:
        """Apply a parsed command to the session."""
        session = self.session
        if command is None:
            return
        if command == UNDO:
            if not session.undo():
                self.output("No moves to undo.")
        elif command == RESTART:
            session.reset()
        elif isinstance(command, tuple):
            try:
                session.configure(*command)
            except InvalidDimensions as e:
                self.output(f"Error: {e}")
        else:
            result = session.drop_piece(command)
            if not result.applied:
                self.output(f"Column {command + 1} is full.")
            else:
                self.after_drop(result.state)

    def after_drop(self, state) -> None:
        """Record a finished game's winner in the score file."""
        if state.status == GameStatus.WON:
            scores = self.scores.record_win(state.winner)
            self.output(self.format_scores(scores))

    def get_human_move(self, finished: bool = False):
        """
        Read one command from the user.

        Returns:
            A 0-based column, QUIT, UNDO, RESTART, a (rows, cols) tuple for a
            resize, or None if the input was invalid
        """
        cols = self.session.cols
        prompt = "Game over (r/u/size/q): " if finished else f"Your move (1-{cols}, u/r/size/q): "
        try:
            user_input = self.input(prompt).strip().lower()
        except EOFError:
            return QUIT

        if user_input == 'q':
            return QUIT
        elif user_input == 'u':
            return UNDO
        elif user_input == 'r':
            return RESTART
        elif user_input.startswith('size'):
            try:
                return parse_board_size(user_input[4:].strip())
            except InvalidDimensions as e:
                self.output(f"Error: {e}")
                return None

        if finished:
            self.output("The game is over.")
            return None
        try:
            column = int(user_input) - 1
        except ValueError:
            self.output("Invalid input. Please enter a column number or command.")
            return None
        if not 0 <= column < cols:
            self.output(f"Column must be between 1 and {cols}.")
            return None
        return column

    def describe_state(self) -> str:
        state = self.session.state
        if state.status == GameStatus.DRAW:
            return "It's a draw!"
        if state.status == GameStatus.WON:
            if state.timed_out:
                return f"{state.winner.other().name} ran out of time! {state.winner.name} wins!"
            cells = ", ".join(f"({r},{c})" for r, c in state.winning_cells)
            return f"{state.winner.name} wins! Winning line: {cells}"
        return "Game in progress"

    # Scores

    @staticmethod
    def format_scores(scores) -> str:
        return "Scores: " + ", ".join(f"{name.upper()} {count}" for name, count in scores.items())

    def show_scores(self) -> None:
        store = ScoreStore(self.args.scores_file)
        if self.args.reset:
            if store.reset():
                self.output("Scores reset.")
            else:
                self.output("Could not reset scores.")
        self.output(self.format_scores(store.load()))

    # Benchmark

    def benchmark(self) -> None:
        """Time the search on random mid-game positions."""
        rows, cols = parse_board_size(self.args.size)
        depth = SEARCH_DEPTHS[Difficulty(self.args.difficulty)]
        rng = random.Random(self.args.seed)
        self.output(f"Benchmarking depth {depth} on {rows}x{cols}, "
                    f"{self.args.iterations} positions...")

        total_time = 0.0
        total_nodes = 0
        for _ in range(self.args.iterations):
            board, player = self.random_position(rows, cols, rng)
            searcher = MinimaxPlayer(depth=depth, ai_player=player)
            start = time.perf_counter()
            searcher.get_move(board)
            total_time += time.perf_counter() - start
            total_nodes += searcher.nodes_evaluated

        iterations = max(self.args.iterations, 1)
        self.output(f"Searched {total_nodes} nodes in {total_time:.3f} seconds "
                    f"({total_time / iterations * 1000:.1f} ms per move)")

    @staticmethod
    def random_position(rows: int, cols: int, rng: random.Random) -> Tuple[Board, Player]:
        """Play a few random non-winning moves; returns the board and the side to move."""
        session = GameSession(rows=rows, cols=cols)
        for _ in range(rng.randint(2, cols * 2)):
            columns = session.board.valid_columns()
            result = session.drop_piece(rng.choice(columns))
            if result.state.is_game_over:
                session.undo()
                break
        return session.board.copy(), session.current_player


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    return cli.run(argv)


if __name__ == "__main__":
    sys.exit(main())
