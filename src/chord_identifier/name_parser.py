import logging
from typing import List, Optional, Sequence, Union

from src.chord_identifier.errors import ChordParseError
from src.chord_identifier.pitch_class import PitchClass
from src.chord_identifier.interval import Interval, note_at_interval
from src.chord_identifier.chord_model import (
    Chord,
    ChordBuilder,
    ChordQuality,
    MAJOR,
    DIMINISHED,
    MAJOR_SEVENTH,
    DOMINANT_SEVENTH,
)
from src.chord_identifier.chord_symbols import (
    quality_priority,
    quality_symbols,
    seventh_symbols,
    extended_symbols,
    add_symbols,
)
from src.chord_identifier.chord_symbol_transformer import RootToken, QualityToken, AddToken
from src.chord_identifier.quality_classifier import classify_quality

logger = logging.getLogger(__name__)

Token = Union[RootToken, QualityToken, AddToken]


def find_root(tokens: Sequence[Token]) -> RootToken:
    for token in tokens:
        if isinstance(token, RootToken):
            return token
    raise ChordParseError("no root identified")


def lookup_quality_symbol(symbol: str, degree: Optional[int]) -> ChordQuality:
    if degree == 7 and symbol in seventh_symbols:
        return seventh_symbols[symbol]
    if degree is not None and symbol in extended_symbols:
        return extended_symbols[symbol]
    try:
        return quality_symbols[symbol]
    except KeyError:
        raise ChordParseError(f"unrecognized chord quality {symbol!r}") from None


def _quality_rank(token: QualityToken) -> int:
    if token.symbol in quality_priority:
        return quality_priority.index(token.symbol)
    return len(quality_priority)


def parse_base_quality(root: RootToken, tokens: Sequence[Token]) -> ChordQuality:
    quality_tokens = [token for token in tokens if isinstance(token, QualityToken)]
    if len(quality_tokens) > 0:
        best = min(quality_tokens, key=_quality_rank)
        return lookup_quality_symbol(best.symbol, best.degree)

    # a 7 straight after the root is a dominant chord, G9 and G11 start as a major triad
    if root.degree == 7:
        return DOMINANT_SEVENTH

    # no quality subscript at all: a major triad
    return MAJOR


def find_extension(tokens: Sequence[Token]) -> Optional[int]:
    for token in tokens:
        if isinstance(token, (RootToken, QualityToken)) and token.degree is not None:
            return token.degree
    return None


def extension_intervals(degree: int, base_quality: ChordQuality) -> List[Interval]:
    """Intervals an extension numeral stacks on top of the base quality.

    The chain below the numeral follows the base quality: a diminished chord
    gets a diminished 7th and a minor 9th (Gdim11 -> bb7, b9, 11), a major
    seventh keeps its major 7th.
    """
    if base_quality == DIMINISHED:
        seventh, ninth = Interval.DIMINISHED_SEVENTH, Interval.MINOR_NINTH
    elif base_quality == MAJOR_SEVENTH:
        seventh, ninth = Interval.MAJOR_SEVENTH, Interval.MAJOR_NINTH
    else:
        seventh, ninth = Interval.MINOR_SEVENTH, Interval.MAJOR_NINTH

    if degree == 7:
        return [seventh]
    elif degree == 9:
        return [seventh, ninth]
    elif degree == 11:
        return [seventh, ninth, Interval.PERFECT_ELEVENTH]
    raise ChordParseError(f"unrecognized extension {degree!r}")


def unique_intervals(intervals: Sequence[Interval]) -> List[Interval]:
    return list(dict.fromkeys(intervals))


def find_add_interval(tokens: Sequence[Token]) -> Optional[Interval]:
    for token in tokens:
        if isinstance(token, AddToken) and token.degree is not None:
            return add_symbols[token.degree]
    return None


def notes_from_root_and_intervals(root: PitchClass, intervals: Sequence[Interval]) -> List[PitchClass]:
    return [root] + [note_at_interval(root, interval) for interval in intervals]


def build_chord_from_tokens(name: str, tokens: Sequence[Token]) -> Chord:
    root_token = find_root(tokens)
    root = root_token.pitch_class

    chord_quality = parse_base_quality(root_token, tokens)
    intervals = chord_quality.intervals()
    logger.debug(f"{name}: root {root!s}, base quality {chord_quality}")

    degree = find_extension(tokens)
    if degree is not None:
        intervals = unique_intervals(intervals + extension_intervals(degree, chord_quality))
        chord_quality = chord_quality.with_seventh()
        logger.debug(f"{name}: extension {degree}, quality {chord_quality}")

    add_interval = find_add_interval(tokens)
    if add_interval is not None and add_interval not in intervals:
        # adding can change the quality, e.g. Gadd7 is a dominant G7
        intervals.append(add_interval)
        chord_quality = classify_quality(intervals)
        logger.debug(f"{name}: add {add_interval.name}, quality {chord_quality}")

    return (
        ChordBuilder()
        .with_name(name)
        .with_root(root)
        .with_intervals(intervals)
        .with_notes(notes_from_root_and_intervals(root, intervals))
        .with_chord_quality(chord_quality)
        .with_triad_quality(chord_quality.triad_quality())
        .with_add_interval(add_interval)
        .build()
    )
