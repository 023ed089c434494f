"""
cli.py - Command-line interface for Connect Four

This module provides the interactive console game (human vs human or human
vs computer) and a few tools for inspecting the computer opponent:
analyzing a position, playing computer-vs-computer matches, and timing
move selection.
"""

import argparse
import random
import sys
from typing import Callable, Dict, List, Optional, Sequence

from connectfour.debug import debug, DebugLevel
from connectfour.utils import COLS, CELLS, Difficulty, GameResult, Token
from connectfour.game.board import Board
from connectfour.game.players import ComputerPlayer, HumanPlayer, Player
from connectfour.game.rules import ConnectFourGame
from connectfour.ai.heuristic import HeuristicEngine, best_cell, candidate_moves
from connectfour.interfaces import display

QUIT_WORDS = {"Q", "QUIT"}


def parse_column_choice(raw: str, board: Board) -> Optional[int]:
    """
    Parse a human's column choice.

    Args:
        raw: Text typed by the player
        board: Current board, used to reject full columns

    Returns:
        Column index (0-indexed), or None if the player quits

    Raises:
        ValueError: If the input is not a playable column or a quit command
    """
    text = raw.strip().upper()
    if text in QUIT_WORDS:
        return None
    if not text.isdigit() or not 1 <= int(text) <= COLS:
        raise ValueError(f"Enter a column number 1-{COLS} or Q to quit.")

    column = int(text) - 1
    if not board.is_valid_move(column):
        raise ValueError(f"Column {column + 1} is full, choose another.")
    return column


def parse_moves(text: str) -> List[int]:
    """
    Parse a move list such as "4453" or "4,4,5,3" into 0-indexed columns.

    Raises:
        ValueError: If any entry is not a column number 1-7
    """
    entries = [part for part in text.replace(",", " ").split()]
    if len(entries) == 1 and len(entries[0]) > 1:
        entries = list(entries[0])

    columns = []
    for entry in entries:
        if not entry.isdigit() or not 1 <= int(entry) <= COLS:
            raise ValueError(f"Invalid column {entry!r} in move list")
        columns.append(int(entry) - 1)
    return columns


def positive_int(text: str) -> int:
    """argparse type for counts that must be at least 1."""
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def parse_position(text: str) -> Board:
    """Parse 42 comma-separated cell values into a board."""
    try:
        values = [int(part) for part in text.split(",")]
    except ValueError:
        raise ValueError("Position must be comma-separated integers") from None
    if len(values) != CELLS:
        raise ValueError(f"Position string must have {CELLS} values")
    return Board.from_cells(values)


def side_to_move(board: Board) -> int:
    """Get the token due to move, assuming token +1 moved first."""
    ones = int((board.cells == Token.ONE).sum())
    twos = int((board.cells == Token.TWO).sum())
    return Token.ONE if ones <= twos else Token.TWO


class ConnectFourCLI:
    """Command-line interface for playing and inspecting Connect Four."""

    def __init__(self, input_fn: Callable[[str], str] = input,
                 print_fn: Callable[..., None] = print):
        """
        Initialize the CLI.

        Args:
            input_fn: Reads one line of user input after showing a prompt
            print_fn: Writes output lines
        """
        self.input_fn = input_fn
        self.print_fn = print_fn
        self.args = None
        self.rng = random.Random()

    @property
    def use_color(self) -> bool:
        return not (self.args and self.args.no_color)

    def build_parser(self) -> argparse.ArgumentParser:
        """Create the argument parser with all sub-commands."""
        parser = argparse.ArgumentParser(prog="connectfour", description='Connect Four')
        parser.add_argument('--debug', action='store_true', help='Enable debug logging')
        parser.add_argument('--debug-level', default='warning',
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging level (default: warning)')
        parser.add_argument('--log-file', help='Also write log messages to this file')
        parser.add_argument('--seed', type=int, help='Seed for every random choice')
        parser.add_argument('--no-color', action='store_true', help='Disable ANSI colours')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        play_parser = subparsers.add_parser('play', help='Play an interactive game')
        play_parser.add_argument('--name', help='Name of player 1')
        play_parser.add_argument('--opponent', choices=['human', 'computer'],
                                 help='Type of player 2')
        play_parser.add_argument('--difficulty', type=int, choices=[d.value for d in Difficulty],
                                 help='Computer difficulty (0-3)')
        play_parser.add_argument('--first', type=int, choices=[1, 2],
                                 help='Player who moves first (random if omitted)')

        analyze_parser = subparsers.add_parser('analyze', help='Show computer scores for a position')
        source = analyze_parser.add_mutually_exclusive_group()
        source.add_argument('--moves', default='', help='Columns played so far, e.g. 4453')
        source.add_argument('--position', help=f'{CELLS} comma-separated cell values (-1, 0, 1)')
        analyze_parser.add_argument('--token', type=int, choices=[1, -1],
                                    help='Token to score for (default: side to move)')
        analyze_parser.add_argument('--difficulty', type=int, choices=[1, 2, 3],
                                    help='Only show this difficulty')

        match_parser = subparsers.add_parser('match', help='Play computer against computer')
        match_parser.add_argument('--first-difficulty', type=int, default=Difficulty.ADVANCED,
                                  choices=[d.value for d in Difficulty])
        match_parser.add_argument('--second-difficulty', type=int, default=Difficulty.NORMAL,
                                  choices=[d.value for d in Difficulty])
        match_parser.add_argument('--games', type=positive_int, default=10, help='Number of games')

        benchmark_parser = subparsers.add_parser('benchmark', help='Time move selection per difficulty')
        benchmark_parser.add_argument('--iterations', type=positive_int, default=200,
                                      help='Positions to evaluate per difficulty')

        return parser

    def parse_args(self, argv: Optional[Sequence[str]] = None) -> None:
        """Parse command-line arguments and apply the global options."""
        self.args = self.build_parser().parse_args(argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.debug_level)
        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

        self.rng = random.Random(self.args.seed)

    def run(self, argv: Optional[Sequence[str]] = None) -> int:
        """Run the CLI based on the parsed arguments."""
        if not self.args:
            self.parse_args(argv)

        commands = {
            'play': self.play_session,
            'analyze': self.analyze,
            'match': self.match,
            'benchmark': self.benchmark,
        }
        command = commands.get(self.args.command)
        if command is None:
            self.print_fn("Please specify a command. Use --help for options.")
            return 1

        debug.debug(f"Running command {self.args.command}", "cli")
        return command() or 0

    # ------------------------------------------------------------------
    # Interactive play

    def _ask(self, prompt: str, accept: Callable[[str], bool]) -> str:
        while True:
            answer = self.input_fn(prompt).strip()
            if answer and accept(answer):
                return answer

    def _computer_rng(self) -> random.Random:
        return random.Random(self.rng.getrandbits(32))

    def setup_players(self) -> List[Player]:
        """Create both players from the arguments, asking for anything missing."""
        args = self.args
        name_one = getattr(args, 'name', None) or self._ask("Enter name of Player 1: ", lambda s: True)
        player_one = HumanPlayer(name_one, self.ask_column)

        opponent = getattr(args, 'opponent', None)
        if opponent is None:
            prompt = display.menu_select_opponent(name_one, Token.ONE, self.use_color)
            answer = self._ask(prompt, lambda s: s[0].upper() in "HC")
            opponent = 'human' if answer[0].upper() == 'H' else 'computer'

        if opponent == 'human':
            taken = name_one.upper()

            def distinct(name: str) -> bool:
                if name.upper() == taken:
                    self.print_fn(f"Sorry, but {name} is already taken!")
                    return False
                return True

            player_two = HumanPlayer(self._ask("Enter name of Player 2: ", distinct), self.ask_column)
        else:
            difficulty = getattr(args, 'difficulty', None)
            if difficulty is None:
                answer = self._ask(display.menu_select_difficulty(), lambda s: s[0] in "0123")
                difficulty = int(answer[0])
            player_two = ComputerPlayer(Difficulty(difficulty), self._computer_rng())

        return [player_one, player_two]

    def ask_column(self, player: HumanPlayer, board: Board) -> Optional[int]:
        """Prompt a human player until they give a playable column or quit."""
        self.print_fn()
        self.print_fn(display.render_board(board, show_options=True, use_color=self.use_color))
        while True:
            raw = self.input_fn(display.message_player_turn(player.name, player.token, self.use_color))
            try:
                return parse_column_choice(raw, board)
            except ValueError as e:
                self.print_fn(str(e))

    def _report_turn(self, game: ConnectFourGame) -> None:
        if game.result == GameResult.RESIGNED:
            return
        # On a win or draw the mover stays the current player
        mover = game.current_player if game.is_game_over() else game.opponent_of(game.current_player)
        if not mover.is_human:
            self.print_fn(display.message_computer_move(mover.name, mover.token,
                                                        game.history[-1], self.use_color))

    def play_game(self, players: List[Player]) -> ConnectFourGame:
        """Play one game between two players and show the outcome."""
        first = None
        if getattr(self.args, 'first', None):
            first = players[self.args.first - 1]

        game = ConnectFourGame(players[0], players[1], first_player=first, rng=self.rng)
        self.print_fn(f"{game.current_player.name} moves first.")
        game.play(on_turn=self._report_turn)

        one, two = game.players
        self.print_fn()
        if game.result == GameResult.RESIGNED:
            loser = game.opponent_of(game.winner)
            self.print_fn(display.message_resignation(loser.name, loser.token,
                                                      game.winner.name, game.winner.token,
                                                      self.use_color))
            return game

        self.print_fn(display.render_board(game.board, show_options=False,
                                           highlight=game.get_winning_line(),
                                           use_color=self.use_color))
        if game.result == GameResult.WIN:
            self.print_fn(display.message_win(game.winner.name, game.winner.token, self.use_color))
        else:
            self.print_fn(display.message_draw(one.name, one.token, two.name, two.token,
                                               self.use_color))
        return game

    def play_session(self) -> None:
        """Play games until the user declines another."""
        self.print_fn(display.banner())
        while True:
            self.print_fn()
            players = self.setup_players()
            self.play_game(players)
            answer = self._ask("Play Again [Y/N]? ", lambda s: s[0].upper() in "YN")
            if answer[0].upper() == 'N':
                return

    # ------------------------------------------------------------------
    # Tools

    def _load_position(self) -> Board:
        if self.args.position:
            return parse_position(self.args.position)
        return Board.from_moves(parse_moves(self.args.moves))

    def analyze(self) -> int:
        """Print a position and the computer's scores for every playable column."""
        try:
            board = self._load_position()
        except ValueError as e:
            self.print_fn(f"Error: {e}")
            return 2

        token = self.args.token if self.args.token is not None else side_to_move(board)
        self.print_fn(display.render_board(board, show_options=False, use_color=self.use_color))
        self.print_fn(f"Scoring for {Token(token)} ({int(token):+d})")

        if not board.get_valid_moves():
            self.print_fn("The board is full: no move to score.")
            return 0

        levels = [Difficulty(self.args.difficulty)] if self.args.difficulty else \
            [Difficulty.EASY, Difficulty.NORMAL, Difficulty.ADVANCED]
        columns = {cell % COLS: cell for cell in candidate_moves(board)}
        header = "".join(f"{col + 1:>8}" for col in range(COLS))

        for level in levels:
            engine = HeuristicEngine(level)
            self.print_fn()
            self.print_fn(f"{level.label}:")
            self.print_fn(f"  {'column':<12}{header}")
            for name, scores in engine.breakdown(board, token):
                self.print_fn(f"  {name:<12}{self._score_row(scores, columns)}")
            totals = engine.evaluate(board, token)
            self.print_fn(f"  {'total':<12}{self._score_row(totals, columns)}")

            cell = best_cell(totals)
            if cell is None:
                self.print_fn("  No column scores above zero: plays a random column.")
            else:
                self.print_fn(f"  Plays column {cell % COLS + 1}")
        return 0

    @staticmethod
    def _score_row(scores: Dict[int, int], columns: Dict[int, int]) -> str:
        return "".join(f"{scores[columns[col]]:>8}" if col in columns else f"{'-':>8}"
                       for col in range(COLS))

    def match(self) -> None:
        """Play a series of computer-vs-computer games, alternating the first mover."""
        one = ComputerPlayer(Difficulty(self.args.first_difficulty), self._computer_rng())
        two = ComputerPlayer(Difficulty(self.args.second_difficulty), self._computer_rng())
        one.name = f"A: {one.name}"
        two.name = f"B: {two.name}"

        tally = {one.name: 0, two.name: 0, "draws": 0}
        for number in range(self.args.games):
            first = one if number % 2 == 0 else two
            game = ConnectFourGame(one, two, first_player=first, rng=self.rng)
            game.play()
            if game.result == GameResult.WIN:
                tally[game.winner.name] += 1
            else:
                tally["draws"] += 1
            outcome = game.winner.name if game.winner else "draw"
            self.print_fn(f"Game {number + 1}: {first.name} first, {len(game.history)} moves, "
                          f"winner: {outcome}")

        self.print_fn()
        self.print_fn(f"{one.name}: {tally[one.name]} wins")
        self.print_fn(f"{two.name}: {tally[two.name]} wins")
        self.print_fn(f"Draws: {tally['draws']}")

    def _random_position(self) -> Board:
        board = Board()
        token = Token.ONE
        for _ in range(self.rng.randint(4, 20)):
            column = self.rng.choice(board.get_valid_moves())
            cell = board.drop(column, token)
            if board.check_win(token, cell):
                break
            token = -token
        return board

    def benchmark(self) -> None:
        """Time move selection for each difficulty on random positions."""
        iterations = self.args.iterations

        positions = [self._random_position() for _ in range(iterations)]
        self.print_fn(f"Running benchmark on {iterations} random positions...")
        for level in Difficulty:
            engine = HeuristicEngine(level, self._computer_rng())
            debug.start_timer(f"benchmark_{level.name}")
            for board in positions:
                engine.choose_cell(board, side_to_move(board))
            elapsed = debug.end_timer(f"benchmark_{level.name}", "cli")
            self.print_fn(f"{level.label:<9} {elapsed:.4f} seconds total, "
                          f"{elapsed / iterations * 1000:.4f} ms per move")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = ConnectFourCLI()
    try:
        return cli.run(argv)
    except (KeyboardInterrupt, EOFError):
        print()
        return 130


if __name__ == "__main__":
    sys.exit(main())
