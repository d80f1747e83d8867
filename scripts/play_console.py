"""
Console scorer for a darts match.

Type commands to add players and record throws against the active player.

Usage:
    python scripts/play_console.py
    python scripts/play_console.py --config config/default_config.yaml
    python scripts/play_console.py --players Alice Bob --start 301

Commands:
    add <name>            Add a player
    remove <id>           Remove a player by id
    hit <dx> <dy> <r>     Pointer hit: offset from center and board radius
    m <sector> [mult]     Manual hit: 1-20, BULL or OB, multiplier 1-3
    undo [index]          Undo last throw (default: active player)
    next                  Next player's turn
    select <index>        Hand the turn to a player
    start                 Toggle start/pause
    score <n>             Set starting score
    reset                 Reset all scores
    quit                  Exit
"""
import sys
import argparse
from pathlib import Path
import logging

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from darts_manager.core import Config, DEFAULT_CONFIG_PATH
from darts_manager.game import GameSession

logger = logging.getLogger(__name__)


def print_table(session: GameSession) -> None:
    """Print players, scores and the active player's history."""
    print()
    for i, player in enumerate(session.players):
        marker = ">" if i == session.active_player_index else " "
        print(f" {marker} [{i}] #{player.id} {player.name:<16} {player.score:>5}")

    hit = session.last_hit
    if hit:
        print(f"   last: {hit.description} = {hit.raw_score} "
              f"(d={hit.distance:.2f}, θ={hit.angle_from_top:.2f}°, "
              f"idx={hit.sector_index}, on_board={hit.on_board})")

    player = session.state.active_player
    if player and player.history:
        events = ", ".join(f"{e.description} ({e.delta})" for e in player.history[:6])
        print(f"   history: {events}")
    print(f"   {'running' if session.running else 'idle'}")


def handle(session: GameSession, words: list) -> bool:
    """
    Execute one command.

    Returns:
        False when the user asked to quit
    """
    command, args = words[0].lower(), words[1:]

    if command in ("quit", "exit", "q"):
        return False
    elif command == "add":
        session.add_player(" ".join(args))
    elif command == "remove" and args:
        if not session.remove_player(int(args[0])):
            print(f"No player with id {args[0]}")
    elif command == "hit" and len(args) == 3:
        dx, dy, radius = (float(a) for a in args)
        if session.resolve_pointer_hit(dx, dy, radius) is None:
            print("Add a player first")
    elif command == "m" and args:
        sector = int(args[0]) if args[0].isdigit() else args[0]
        multiplier = int(args[1]) if len(args) > 1 else 1
        if session.resolve_manual_hit(sector, multiplier) is None:
            print("Add a player first")
    elif command == "undo":
        index = int(args[0]) if args else session.active_player_index
        if not session.undo_last(index):
            print("Nothing to undo")
    elif command == "next":
        session.next_turn()
    elif command == "select" and args:
        session.select_active_player(int(args[0]))
    elif command == "start":
        session.toggle_running()
    elif command == "score" and args:
        session.set_starting_score(int(args[0]))
    elif command == "reset":
        session.reset_game()
    else:
        print(__doc__.split("Commands:")[1])

    return True


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Console darts scorer")
    parser.add_argument(
        "--config",
        type=Path,
        default=DEFAULT_CONFIG_PATH,
        help="Path to config YAML"
    )
    parser.add_argument(
        "--players",
        nargs="*",
        default=[],
        help="Player names to add at start"
    )
    parser.add_argument(
        "--start",
        type=int,
        default=None,
        help="Starting score (overrides config)"
    )
    return parser.parse_args()


def main():
    """Main entry point."""
    args = parse_args()
    config = Config(args.config)

    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    session = GameSession.from_config(config)
    if args.start is not None:
        session.set_starting_score(args.start)
    for name in args.players:
        session.add_player(name)

    print_table(session)

    while True:
        try:
            line = input("darts> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not line:
            continue

        try:
            if not handle(session, line.split()):
                break
        except ValueError as e:
            print(f"Invalid input: {e}")
            continue

        print_table(session)


if __name__ == "__main__":
    main()
