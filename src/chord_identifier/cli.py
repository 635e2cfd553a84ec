import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Callable, Optional

from src.chord_identifier import identify_from_name, identify_from_notes, parse_notes
from src.chord_identifier.errors import ChordParseError, NoteParseError
from src.chord_identifier.chord_printer import print_chord

logger = logging.getLogger(__name__)

MENU = """Choose your activity
  1) Information on a known chord
  2) Create chord from notes
  3) Quit"""


@dataclass
class IdentifyConfig:
    include_ambiguous: bool
    verbose: bool

    @staticmethod
    def add_to_argparser(parser: argparse.ArgumentParser):
        parser.add_argument("--include_ambiguous", action="store_true")
        parser.add_argument("--verbose", action="store_true")

    @staticmethod
    def create_from_args(args):
        return IdentifyConfig(
            include_ambiguous=args.include_ambiguous,
            verbose=args.verbose,
        )


def identify_notes_from_chord_name(chord_name: str) -> bool:
    try:
        chord = identify_from_name(chord_name)
    except ChordParseError as e:
        print(f"caught error: {e.reason}")
        return False
    print(print_chord(chord))
    return True


def identify_chord_from_notes(notes_raw: str, config: IdentifyConfig) -> bool:
    try:
        notes = parse_notes(notes_raw)
    except NoteParseError as e:
        print(f"caught error: {e}")
        return False

    possible_chords = identify_from_notes(notes, include_ambiguous=config.include_ambiguous)
    logger.debug(f"{len(possible_chords)} readings of {notes_raw!r}")
    if len(possible_chords) == 0:
        print("No possible chords found!")
    else:
        print("Could be: ")
        for chord in possible_chords:
            print(chord.name)
    return True


def handle_menu(config: IdentifyConfig, read_line: Callable[[str], str] = input):
    while True:
        print(MENU)
        try:
            selection = read_line("> ").strip()
            if selection == "1":
                identify_notes_from_chord_name(read_line("Enter chord name: ").strip())
            elif selection == "2":
                identify_chord_from_notes(read_line("Enter notes separated by space e.g. A# B C: "), config)
            elif selection in ("3", "q", "quit"):
                print("Goodbye!")
                return
            else:
                print(f"Unknown option {selection!r}")
        except EOFError:
            print("Goodbye!")
            return
        print()


def create_argparser():
    parser = argparse.ArgumentParser(description="Identify chords from names or notes")
    IdentifyConfig.add_to_argparser(parser)

    subparsers = parser.add_subparsers(dest="command")
    name_command = subparsers.add_parser("name", help="describe a chord symbol, e.g. Gm7")
    name_command.add_argument("symbol", type=str)
    notes_command = subparsers.add_parser("notes", help="list the chords a set of notes could be")
    notes_command.add_argument("notes", type=str, nargs="+")

    return parser


def main(argv: Optional[list] = None) -> int:
    args = create_argparser().parse_args(argv)
    config = IdentifyConfig.create_from_args(args)

    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    if args.command == "name":
        return 0 if identify_notes_from_chord_name(args.symbol) else 1
    elif args.command == "notes":
        return 0 if identify_chord_from_notes(" ".join(args.notes), config) else 1

    handle_menu(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
