from __future__ import annotations
import re
from enum import IntEnum
from typing import List

from src.chord_identifier.errors import NoteParseError

natural_symbols = {"C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 11}

modifier_symbols = {"b": -1, "#": +1}


class PitchClass(IntEnum):
    C = 0
    C_SHARP = 1
    D = 2
    D_SHARP = 3
    E = 4
    F = 5
    F_SHARP = 6
    G = 7
    G_SHARP = 8
    A = 9
    A_SHARP = 10
    B = 11

    def __str__(self) -> str:
        return self.name.replace("_SHARP", "#")


# fixed circular ordering, all distance arithmetic goes through it
OCTAVE = list(PitchClass)

_PITCH_CLASS_RE = re.compile(r"^(?P<natural>[A-G])(?P<modifier>[#b]?)$")


def position(pitch_class: PitchClass) -> int:
    return OCTAVE.index(pitch_class)


def pitch_class_at(index: int) -> PitchClass:
    return OCTAVE[index % len(OCTAVE)]


def parse_pitch_class(token: str) -> PitchClass:
    match = _PITCH_CLASS_RE.match(token)
    if match is None:
        raise NoteParseError(token)
    modifier = modifier_symbols.get(match["modifier"], 0)
    return pitch_class_at(natural_symbols[match["natural"]] + modifier)


def parse_notes(text: str) -> List[PitchClass]:
    """Parse whitespace separated note names, e.g. "A# B C".

    The whole input is rejected on the first unrecognised token.
    """
    return [parse_pitch_class(token) for token in text.split()]
