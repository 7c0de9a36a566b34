"""
Console entry point for TicTacToe.

Two people share one terminal and take turns typing moves.
Every move goes through the program layer exactly like a remote request:
the game is loaded, the mover is checked, the rules engine runs, and the
result is stored again.
"""

import logging
import secrets
import uuid
from typing import Optional, Tuple

from logic import GameError, Tile, Won
from program import ProgramConfig, TicTacToeProgram


class ConsoleMatch:
    """
    A hot-seat match between two players at the same keyboard.

    Game flow:
    1. Both players get a random identity
    2. The game account is set up and started
    3. Players alternate entering "row col" until someone wins or it's a tie
    """

    def __init__(self, program: Optional[TicTacToeProgram] = None):
        self.program = program or TicTacToeProgram()
        self.game_id = uuid.uuid4()
        self.players = (
            secrets.token_bytes(ProgramConfig.IDENTITY_LENGTH),
            secrets.token_bytes(ProgramConfig.IDENTITY_LENGTH),
        )
        self.names = {self.players[0]: "Player 1 (X)", self.players[1]: "Player 2 (O)"}

    def run(self):
        """Play until the game is over or input runs out."""
        game = self.program.setup_game(self.game_id, *self.players)

        print("\n" + "="*40)
        print("   TicTacToe")
        print("="*40)
        print("Enter moves as: row col  (e.g. 1 1 for the center)\n")

        while game.is_active():
            print(game.render())
            player = game.current_player()

            try:
                tile = self._read_tile(f"\n{self.names[player]} > ")
            except EOFError:
                print("\nNo more input, stopping.")
                return

            if tile is None:
                print("Please type two numbers, like: 0 2")
                continue

            try:
                game = self.program.play(self.game_id, player, tile)
            except GameError as e:
                print(f"Illegal move: {e}")

        print(game.render())
        if isinstance(game.state, Won):
            print(f"\n{self.names[game.state.winner]} wins!")
        else:
            print("\nIt's a tie!")

    def _read_tile(self, prompt: str) -> Optional[Tile]:
        parsed = parse_tile(input(prompt))
        if parsed is None:
            return None
        return Tile(*parsed)


def parse_tile(text: str) -> Optional[Tuple[int, int]]:
    """Parse "row col" into a pair of ints, or None if it doesn't look like one."""
    parts = text.split()
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe hot-seat match")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for the program layer"
    )

    args = parser.parse_args()
    logging.basicConfig(level=args.log_level, format=ProgramConfig.LOG_FORMAT)

    try:
        ConsoleMatch().run()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
