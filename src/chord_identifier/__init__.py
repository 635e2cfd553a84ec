import logging
from typing import List, Sequence

import lark

from src.chord_identifier.errors import ChordParseError, NoteParseError
from src.chord_identifier.pitch_class import PitchClass, parse_notes, parse_pitch_class
from src.chord_identifier.chord_model import Chord, ChordBuilder, AMBIGUOUS
from src.chord_identifier.chord_printer import print_chord_symbol
from src.chord_identifier.chord_symbol_transformer import ChordSymbolTransformer
from src.chord_identifier.interval_deriver import derive_intervals
from src.chord_identifier.quality_classifier import classify_quality
from src.chord_identifier.name_parser import build_chord_from_tokens

logger = logging.getLogger(__name__)

chord_symbol_parser = lark.Lark.open(
    "chord_symbol_grammar.lark",
    rel_to=__file__,
    parser="lalr",
    start="symbol",
    transformer=ChordSymbolTransformer(),
)


def tokenize_chord_symbol(symbol: str) -> list:
    try:
        return chord_symbol_parser.parse(symbol)
    except lark.LarkError as e:
        raise ChordParseError(str(e)) from e


def identify_from_name(symbol: str) -> Chord:
    tokens = tokenize_chord_symbol(symbol)
    logger.debug(f"{symbol}: tokens {tokens}")
    return build_chord_from_tokens(symbol, tokens)


def identify_from_notes_and_root(root: PitchClass, notes: Sequence[PitchClass]) -> Chord:
    intervals = derive_intervals(root, notes)
    chord_quality = classify_quality(intervals)
    return (
        ChordBuilder()
        .with_name(print_chord_symbol(root, chord_quality))
        .with_root(root)
        .with_notes(notes)
        .with_intervals(intervals)
        .with_chord_quality(chord_quality)
        .with_triad_quality(chord_quality.triad_quality())
        .build()
    )


def identify_from_notes(notes: Sequence[PitchClass], include_ambiguous: bool = False) -> List[Chord]:
    # every distinct note is tried as the root
    chords = [identify_from_notes_and_root(root, notes) for root in dict.fromkeys(notes)]
    if include_ambiguous:
        return chords
    return [chord for chord in chords if chord.chord_quality != AMBIGUOUS]
