from typing import Iterable

from src.chord_identifier.pitch_class import PitchClass, natural_symbols
from src.chord_identifier.interval import Interval
from src.chord_identifier.chord_model import Chord, ChordQuality, TriadQuality, AMBIGUOUS
from src.chord_identifier.chord_symbols import quality_suffixes, quality_names, interval_names


def print_pitch_class(pitch_class: PitchClass) -> str:
    # nearest natural at or below, sharpened up to the pitch class
    natural_symbol = list(
        sorted(
            filter(lambda item: item[1] <= pitch_class, natural_symbols.items()),
            key=lambda item: pitch_class - item[1],
        )
    )[0]
    return natural_symbol[0] + "".join((pitch_class - natural_symbol[1]) * ["#"])


def print_interval(interval: Interval) -> str:
    return interval_names[interval]


def print_quality_symbol(quality: ChordQuality) -> str:
    return quality_suffixes[quality]


def print_chord_symbol(root: PitchClass, quality: ChordQuality) -> str:
    if quality == AMBIGUOUS:
        return quality_suffixes[AMBIGUOUS]
    return print_pitch_class(root) + print_quality_symbol(quality)


def print_quality(quality: ChordQuality) -> str:
    return quality_names[quality]


def print_triad_quality(triad_quality: TriadQuality) -> str:
    return triad_quality.value.capitalize()


def _join(items: Iterable[str]) -> str:
    return ", ".join(items)


def print_chord(chord: Chord) -> str:
    lines = [
        f"Information on chord {chord.name}",
        f"Root: {print_pitch_class(chord.root)}",
        f"Chord quality: {print_quality(chord.chord_quality)}",
        f"Triad quality: {print_triad_quality(chord.triad_quality)}",
        f"Intervals: {_join(print_interval(i) for i in chord.intervals)}",
        f"Notes: {_join(print_pitch_class(n) for n in chord.notes)}",
    ]
    if chord.add_interval is not None:
        lines.append(f"Added: {print_interval(chord.add_interval)}")
    return "\n".join(lines)
