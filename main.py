"""
Terminal front end for El Impostor: pass the keyboard around the table.
"""

import argparse
import random
from typing import Callable, Dict, List, Optional

from impostor.core import GameSession, GamePhase, GameMode, RevealGestureController, GestureOutcome
from impostor.config.game_config import GameConfig
from impostor.config.config_loader import load_config
from impostor.config.words import get_words
from impostor.web import EventEmitter


# Synthetic drags for the keyboard: clearly past the reveal / hide thresholds
SWIPE_UP = (-60.0, 0.0)
SWIPE_DOWN = (40.0, 0.0)

CLEAR_LINES = 40

RULES = """
HOW TO PLAY

Objective: everyone gets a secret word except the Impostor, who gets
nothing and has to bluff.

Taking turns, each player says one word related to their card.
Too obvious and the Impostor works out the word; too odd and you look
like the Impostor. After a few rounds, discuss and vote.

Uncertainty mode: nobody knows how many impostors there are, from one
to almost everyone.

Victory: the players win by finding ALL the impostors. An impostor wins
by surviving the vote.
"""


class ImpostorGame:
    """Interactive terminal game controller."""

    def __init__(self, config: GameConfig, input_fn: Callable[[str], str] = input,
                 verbose: bool = False, player_names: Optional[List[str]] = None):
        self.config = config
        self.input_fn = input_fn
        self.event_emitter = EventEmitter()
        if verbose:
            self.event_emitter.register_listener(self._print_effect)

        # Generate seed if not provided
        if self.config.random_seed is None:
            self.config.random_seed = random.randint(0, 2**31 - 1)

        self.session = GameSession(
            config=self.config,
            words=get_words(self.config.words_file),
            effects=self.event_emitter
        )
        self.gestures = RevealGestureController(self.session)

        if player_names:
            self._seed_players(player_names)

    def _seed_players(self, names: List[str]) -> None:
        """Replace the default players with the given names."""
        existing = list(self.session.roster.ids())
        for name in names:
            self.session.add_player(name)
        for player_id in existing:
            self.session.remove_player(player_id)

    @staticmethod
    def _print_effect(event_type: str, data: Dict) -> None:
        if event_type == "haptic_pulse":
            print(f"  [BZZ {data['duration_ms']}ms]")
        elif event_type == "confetti":
            print("  * * * * * * * * * *")

    def run(self) -> None:
        """Run the command loop until the players quit."""
        print("=" * 60)
        print("EL IMPOSTOR")
        print("=" * 60)
        print(f"Seed: {self.config.random_seed}")
        self.print_setup()

        while True:
            try:
                line = self.input_fn(self._prompt())
            except EOFError:
                break
            if not self.handle_command(line):
                break

    def _prompt(self) -> str:
        if self.session.phase == GamePhase.PLAYING:
            return f"[{self.session.current_player.name}] h/up/down/n > "
        if self.session.phase == GamePhase.FINISHED:
            return "new/reset/quit > "
        return "setup > "

    def handle_command(self, line: str) -> bool:
        """
        Dispatch one line of input.
        Returns False when the player asked to quit or input ran out.
        """
        command, _, arg = line.strip().partition(" ")
        command = command.lower()
        arg = arg.strip()

        if command in ("quit", "q", "exit"):
            return False

        if self.session.phase == GamePhase.PLAYING:
            return self._handle_turn_command(command)
        elif self.session.phase == GamePhase.FINISHED:
            self._handle_finished_command(command)
        else:
            self._handle_setup_command(command, arg)
        return True

    def _handle_setup_command(self, command: str, arg: str) -> None:
        session = self.session
        if command == "add":
            if session.add_player(arg) is None:
                print("Name cannot be empty.")
        elif command == "rm":
            player = self._find_player(arg)
            if player is None or not session.remove_player(player.id):
                print("Cannot remove: at least 3 players are needed.")
        elif command == "rename":
            target, _, name = arg.partition(" ")
            player = self._find_player(target)
            if player is None:
                print(f"No player {target!r}.")
            else:
                session.rename_player(player.id, name)
        elif command == "shuffle":
            session.shuffle_players()
        elif command == "mode":
            try:
                session.set_mode(arg)
            except ValueError as e:
                print(e)
        elif command == "start":
            session.start_round()
            self.print_turn()
            return
        elif command == "rules":
            print(RULES)
        elif command not in ("list", ""):
            print("Commands: add NAME | rm N | rename N NAME | shuffle | mode classic|uncertainty | list | rules | start | quit")
        self.print_setup()

    def _handle_turn_command(self, command: str) -> bool:
        if command == "h":
            self.gestures.press()
            self._print_card()
            try:
                self.input_fn("Press Enter to hide...")
            except EOFError:
                # Never leave the card showing
                self.gestures.release()
                self._clear()
                return False
            self.gestures.release()
            self._clear()
        elif command == "up":
            self.gestures.drag_end(*SWIPE_UP)
            self._print_card()
            return True
        elif command == "down":
            if self.gestures.drag_end(*SWIPE_DOWN) == GestureOutcome.HIDDEN:
                self._clear()
        elif command == "n":
            self._clear()
            self.session.advance()
            if self.session.phase == GamePhase.FINISHED:
                self.print_results()
                return True
        else:
            print("h = hold to view, up = swipe up to reveal, down = swipe down to hide, n = next player")
        self.print_turn()
        return True

    def _handle_finished_command(self, command: str) -> None:
        if command == "new":
            self.session.start_round()
            self.print_turn()
        elif command == "reset":
            self.session.reset()
            self.print_setup()
        else:
            self.print_results()

    def _find_player(self, ref: str):
        """Resolve a 1-based position or an id."""
        roster = self.session.roster
        if ref.isdigit() and 1 <= int(ref) <= len(roster):
            return roster[int(ref) - 1]
        return roster.get_player(ref)

    def _clear(self) -> None:
        print("\n" * CLEAR_LINES)

    def print_setup(self) -> None:
        session = self.session
        print(f"\nPlayers ({len(session.roster)}):")
        for i, player in enumerate(session.roster, start=1):
            print(f"  {i}. {player.name}")
        description = "1 impostor." if session.mode == GameMode.CLASSIC else "Secret number of impostors (1 to N-1)."
        print(f"Mode: {session.mode.value} - {description}")

    def print_turn(self) -> None:
        session = self.session
        print(f"\nR{session.round_number} - Turn of: {session.current_player.name.upper()}")
        if session.secret_visible:
            self._print_card()
        else:
            print("  [hidden]")

    def _print_card(self) -> None:
        card = self.session.current_card()
        if card is None:
            return
        if card["is_impostor"]:
            print("  YOU ARE THE IMPOSTOR - you have no word. Find out what the others are talking about.")
        else:
            print(f"  Your secret word: {card['word'].upper()}")

    def print_results(self) -> None:
        results = self.session.results()
        if results is None:
            return
        print("\nRound over! Time to discuss and vote.")
        label = "The impostors were" if results["impostor_count"] > 1 else "The impostor was"
        print(f"{label}: {', '.join(results['impostors'])}")
        print(f"The word was: {results['word'].upper()}")
        print(f"Had the word: {', '.join(results['word_holders'])}")
        if results["mode"] == GameMode.UNCERTAINTY.value:
            print(f"Uncertainty mode: there were {results['impostor_count']} impostor(s).")


def main():
    """Entry point for playing in the terminal."""
    parser = argparse.ArgumentParser(
        description="Play El Impostor on one terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                                   # Default config, three default players
  python main.py --mode uncertainty                # Secret number of impostors
  python main.py -p Ana -p Luis -p Marta -p Pablo  # Start with these players
  python main.py --words words.txt --seed 42       # Custom word list, reproducible rounds
        """
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to YAML configuration file (default: use default config)"
    )
    parser.add_argument(
        "--seed",
        "-s",
        type=int,
        default=None,
        help="Random seed for reproducible rounds (if not provided, one is generated and shown)"
    )
    parser.add_argument(
        "--mode",
        type=str,
        choices=[m.value for m in GameMode],
        default=None,
        help="Game mode. Overrides config file setting."
    )
    parser.add_argument(
        "--words",
        "-w",
        type=str,
        default=None,
        help="Word list file (YAML list or one word per line). Overrides config file setting."
    )
    parser.add_argument(
        "--player",
        "-p",
        action="append",
        default=None,
        help="Player name (repeat for each player; at least 3 replace the defaults)"
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show haptic and confetti effects as text"
    )

    args = parser.parse_args()

    config = load_config(args.config)

    if args.seed is not None:
        config.random_seed = args.seed
    if args.mode is not None:
        config.game_mode = args.mode
    if args.words is not None:
        config.words_file = args.words

    if args.player is not None and len([n for n in args.player if n.strip()]) < 3:
        parser.error("at least 3 non-empty --player names are required")

    game = ImpostorGame(config, verbose=args.verbose, player_names=args.player)
    game.run()


if __name__ == "__main__":
    main()
