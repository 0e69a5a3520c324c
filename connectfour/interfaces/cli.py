"""
cli.py - Command-line interface for playing Connect Four

This module runs a whole session over line-based text: it asks for the player
names, the board size and the number of games, then prompts each player for
moves and prints the board after every move. Input and output go through
injectable callables so a session can be driven from a script.
"""

import argparse
from typing import Callable, List, Optional

from connectfour.debug import debug, DebugLevel, LEVEL_NAMES
from connectfour.game.player import Player
from connectfour.game.session import Session
from connectfour.interfaces.parsing import parse_dimensions, parse_game_count, parse_move
from connectfour.utils import GameState, MoveError


class TextSession:
    """Plays a Connect Four session over a text interface."""

    def __init__(self, input_fn: Callable[[], str] = input,
                 output_fn: Callable[[str], None] = print):
        """
        Initialize the interface.

        Args:
            input_fn: Returns the next line typed by the user
            output_fn: Shows one message to the user
        """
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.session: Optional[Session] = None

    def run(self) -> GameState:
        """
        Run a full session, from the welcome banner to "Game over!".

        Returns:
            GameState.FINISHED if every game was played, GameState.ABORTED if
            the players stopped early or the input ran out
        """
        try:
            self.session = self.setup()
            state = self.play(self.session)
        except EOFError:
            debug.warning("Input closed before the session ended", "cli")
            if self.session is not None:
                self.session.abort()
            state = GameState.ABORTED

        self.output_fn("Game over!")
        return state

    def setup(self) -> Session:
        """Ask for the players and settings and start the session."""
        self.output_fn("Connect Four")
        self.output_fn("First player's name:")
        first = Player(self.input_fn())
        self.output_fn("Second player's name:")
        second = Player(self.input_fn())

        while True:
            dimensions = self.ask_dimensions()
            number_of_games = self.ask_game_count()
            start = Session.start(number_of_games, first, second, dimensions)
            if start.ok:
                break
            self.output_fn(start.message)

        session = start.session
        rows, cols = dimensions
        games_message = "Single game" if number_of_games == 1 else f"Total {number_of_games} games"
        self.output_fn(f"{first.name} VS {second.name}\n{rows} X {cols} board\n{games_message}")
        return session

    def ask_dimensions(self):
        while True:
            self.output_fn("Set the board dimensions (Rows x Columns)\n"
                           "Press Enter for default (6 x 7)")
            dimensions, message = parse_dimensions(self.input_fn())
            if message is None:
                return dimensions
            self.output_fn(message)

    def ask_game_count(self) -> int:
        while True:
            self.output_fn("Do you want to play single or multiple games?\n"
                           "For a single game, input 1 or press Enter\n"
                           "Input a number of games:")
            count, message = parse_game_count(self.input_fn())
            if message is None:
                return count
            self.output_fn(message)

    def play(self, session: Session) -> GameState:
        """
        Play games until the session finishes or is aborted.

        Returns:
            The final state of the session
        """
        while not session.is_over():
            if session.total_games > 1:
                self.output_fn(f"Game #{session.game_index}")
            self.output_fn(session.board.render())

            while not session.engine.is_over():
                if not self.play_turn(session):
                    session.abort()
                    return session.state
                self.output_fn(session.board.render())

            engine = session.engine
            outcome = session.finish_game()
            if outcome == GameState.WON:
                self.output_fn(f"Player {engine.winner.name} won")
            else:
                self.output_fn("It is a draw")
            self.output_fn(f"\nScore\n{session.score_line()}")

        return session.state

    def play_turn(self, session: Session) -> bool:
        """
        Prompt the current player until a move is accepted.

        Returns:
            True once a disc was dropped, False if the player asked to stop
        """
        cols = session.board.cols
        while True:
            self.output_fn(f"{session.current_player.name}'s turn:")
            move = parse_move(self.input_fn(), cols)
            if move.abort:
                debug.info(f"{session.current_player.name} ended the session", "cli")
                return False
            if move.error is not None:
                self.output_fn(move.message)
                continue

            result = session.submit_move(move.column)
            if result.ok:
                return True
            if result.error == MoveError.COLUMN_FULL:
                self.output_fn(f"Column {move.column + 1} is full")
            else:
                self.output_fn(f"The column number is out of range (1 - {cols})")


def configure_debug(args: argparse.Namespace) -> None:
    """Configure logging from the parsed command-line flags."""
    if args.debug:
        debug.configure(level=DebugLevel.DEBUG)
    else:
        debug.set_from_string(args.debug_level)
    components = [c.strip() for c in args.components.split(',') if c.strip()] if args.components else []
    debug.configure(log_file=args.log_file or "", components=components)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Two-player Connect Four played in the terminal. '
                    'Type a column number to move, or "end" to stop.')
    parser.add_argument('--debug',
        action='store_true',
        help='Enable debug mode (equivalent to --debug_level debug)')
    parser.add_argument('--debug_level',
        choices=list(LEVEL_NAMES),
        default='warning',
        help='Set debug level: none (silent), error, warning, info, debug, trace (most verbose)')
    parser.add_argument('--log_file',
        type=str,
        help='Also write log records to this file')
    parser.add_argument('--components',
        type=str,
        help='Comma-separated list of components to log (board, win, engine, session, cli)')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    args = build_parser().parse_args(argv)
    configure_debug(args)
    TextSession().run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
