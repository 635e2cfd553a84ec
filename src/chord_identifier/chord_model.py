from __future__ import annotations
from typing import List, Optional, Tuple
from dataclasses import dataclass, field
from enum import Enum

from src.chord_identifier.pitch_class import PitchClass
from src.chord_identifier.interval import Interval


class TriadQuality(Enum):
    MAJOR = "major"
    MINOR = "minor"
    DIMINISHED = "diminished"
    AUGMENTED = "augmented"
    AMBIGUOUS = "ambiguous"


class SuspendedType(Enum):
    SUS2 = 2
    SUS4 = 4


class SeventhType(Enum):
    MINOR = "minor"
    MAJOR = "major"
    DOMINANT = "dominant"
    AUGMENTED = "augmented"
    HALF_DIMINISHED = "half_diminished"
    DIMINISHED = "diminished"
    SUSPENDED = "suspended"


class QualityKind(Enum):
    MAJOR = "major"
    MINOR = "minor"
    DIMINISHED = "diminished"
    AUGMENTED = "augmented"
    SUSPENDED = "suspended"
    SEVENTH = "seventh"
    AMBIGUOUS = "ambiguous"


@dataclass(frozen=True)
class ChordQuality:
    """Tagged variant over the chord qualities.

    ``seventh_type`` is only set for ``QualityKind.SEVENTH``, ``suspended_type``
    for ``QualityKind.SUSPENDED`` and for suspended sevenths.
    """

    kind: QualityKind
    seventh_type: Optional[SeventhType] = None
    suspended_type: Optional[SuspendedType] = None

    @staticmethod
    def suspended(suspended_type: SuspendedType) -> ChordQuality:
        return ChordQuality(QualityKind.SUSPENDED, suspended_type=suspended_type)

    @staticmethod
    def seventh(seventh_type: SeventhType, suspended_type: Optional[SuspendedType] = None) -> ChordQuality:
        if (seventh_type == SeventhType.SUSPENDED) != (suspended_type is not None):
            raise ValueError("suspended sevenths, and only they, need a suspended type")
        return ChordQuality(QualityKind.SEVENTH, seventh_type, suspended_type)

    def intervals(self) -> List[Interval]:
        # canonical interval set, a fresh list every time
        return list(quality_intervals[self])

    def triad_quality(self) -> TriadQuality:
        return triad_qualities[self]

    def with_seventh(self) -> ChordQuality:
        return seventh_promotions.get(self, self)


MAJOR = ChordQuality(QualityKind.MAJOR)
MINOR = ChordQuality(QualityKind.MINOR)
DIMINISHED = ChordQuality(QualityKind.DIMINISHED)
AUGMENTED = ChordQuality(QualityKind.AUGMENTED)
AMBIGUOUS = ChordQuality(QualityKind.AMBIGUOUS)
SUS2 = ChordQuality.suspended(SuspendedType.SUS2)
SUS4 = ChordQuality.suspended(SuspendedType.SUS4)
MINOR_SEVENTH = ChordQuality.seventh(SeventhType.MINOR)
MAJOR_SEVENTH = ChordQuality.seventh(SeventhType.MAJOR)
DOMINANT_SEVENTH = ChordQuality.seventh(SeventhType.DOMINANT)
AUGMENTED_SEVENTH = ChordQuality.seventh(SeventhType.AUGMENTED)
HALF_DIMINISHED_SEVENTH = ChordQuality.seventh(SeventhType.HALF_DIMINISHED)
DIMINISHED_SEVENTH = ChordQuality.seventh(SeventhType.DIMINISHED)
SUS2_SEVENTH = ChordQuality.seventh(SeventhType.SUSPENDED, SuspendedType.SUS2)
SUS4_SEVENTH = ChordQuality.seventh(SeventhType.SUSPENDED, SuspendedType.SUS4)

quality_intervals = {
    MAJOR: (Interval.MAJOR_THIRD, Interval.PERFECT_FIFTH),
    MINOR: (Interval.MINOR_THIRD, Interval.PERFECT_FIFTH),
    DIMINISHED: (Interval.MINOR_THIRD, Interval.DIMINISHED_FIFTH),
    AUGMENTED: (Interval.MAJOR_THIRD, Interval.AUGMENTED_FIFTH),
    SUS2: (Interval.MAJOR_SECOND, Interval.PERFECT_FIFTH),
    SUS4: (Interval.PERFECT_FOURTH, Interval.PERFECT_FIFTH),
    MINOR_SEVENTH: (Interval.MINOR_THIRD, Interval.PERFECT_FIFTH, Interval.MINOR_SEVENTH),
    MAJOR_SEVENTH: (Interval.MAJOR_THIRD, Interval.PERFECT_FIFTH, Interval.MAJOR_SEVENTH),
    DOMINANT_SEVENTH: (Interval.MAJOR_THIRD, Interval.PERFECT_FIFTH, Interval.MINOR_SEVENTH),
    AUGMENTED_SEVENTH: (Interval.MAJOR_THIRD, Interval.AUGMENTED_FIFTH, Interval.MINOR_SEVENTH),
    HALF_DIMINISHED_SEVENTH: (Interval.MINOR_THIRD, Interval.DIMINISHED_FIFTH, Interval.MINOR_SEVENTH),
    DIMINISHED_SEVENTH: (Interval.MINOR_THIRD, Interval.DIMINISHED_FIFTH, Interval.DIMINISHED_SEVENTH),
    SUS2_SEVENTH: (Interval.MAJOR_SECOND, Interval.PERFECT_FIFTH, Interval.MINOR_SEVENTH),
    SUS4_SEVENTH: (Interval.PERFECT_FOURTH, Interval.PERFECT_FIFTH, Interval.MINOR_SEVENTH),
    AMBIGUOUS: (),
}

triad_qualities = {
    MAJOR: TriadQuality.MAJOR,
    MAJOR_SEVENTH: TriadQuality.MAJOR,
    DOMINANT_SEVENTH: TriadQuality.MAJOR,
    MINOR: TriadQuality.MINOR,
    MINOR_SEVENTH: TriadQuality.MINOR,
    DIMINISHED: TriadQuality.DIMINISHED,
    HALF_DIMINISHED_SEVENTH: TriadQuality.DIMINISHED,
    DIMINISHED_SEVENTH: TriadQuality.DIMINISHED,
    AUGMENTED: TriadQuality.AUGMENTED,
    AUGMENTED_SEVENTH: TriadQuality.AUGMENTED,
    SUS2: TriadQuality.AMBIGUOUS,
    SUS4: TriadQuality.AMBIGUOUS,
    SUS2_SEVENTH: TriadQuality.AMBIGUOUS,
    SUS4_SEVENTH: TriadQuality.AMBIGUOUS,
    AMBIGUOUS: TriadQuality.AMBIGUOUS,
}

# an extension numeral turns a triad into its seventh chord
seventh_promotions = {
    MAJOR: MAJOR_SEVENTH,
    MINOR: MINOR_SEVENTH,
    DIMINISHED: DIMINISHED_SEVENTH,
    AUGMENTED: AUGMENTED_SEVENTH,
    SUS2: SUS2_SEVENTH,
    SUS4: SUS4_SEVENTH,
}


@dataclass(frozen=True)
class Chord:
    name: str
    root: PitchClass
    notes: Tuple[PitchClass, ...]
    triad_quality: TriadQuality
    chord_quality: ChordQuality
    intervals: Tuple[Interval, ...]
    add_interval: Optional[Interval] = None


@dataclass
class ChordBuilder:
    name: str = "empty"
    root: PitchClass = PitchClass.C
    notes: List[PitchClass] = field(default_factory=list)
    intervals: List[Interval] = field(default_factory=list)
    chord_quality: ChordQuality = MAJOR
    triad_quality: TriadQuality = TriadQuality.MAJOR
    add_interval: Optional[Interval] = None

    def with_name(self, name: str) -> ChordBuilder:
        self.name = name
        return self

    def with_root(self, root: PitchClass) -> ChordBuilder:
        self.root = root
        return self

    def with_notes(self, notes: List[PitchClass]) -> ChordBuilder:
        self.notes = list(notes)
        return self

    def with_intervals(self, intervals: List[Interval]) -> ChordBuilder:
        self.intervals = list(intervals)
        return self

    def with_chord_quality(self, chord_quality: ChordQuality) -> ChordBuilder:
        self.chord_quality = chord_quality
        return self

    def with_triad_quality(self, triad_quality: TriadQuality) -> ChordBuilder:
        self.triad_quality = triad_quality
        return self

    def with_add_interval(self, add_interval: Optional[Interval]) -> ChordBuilder:
        self.add_interval = add_interval
        return self

    def build(self) -> Chord:
        return Chord(
            name=self.name,
            root=self.root,
            notes=tuple(self.notes),
            triad_quality=self.triad_quality,
            chord_quality=self.chord_quality,
            intervals=tuple(self.intervals),
            add_interval=self.add_interval,
        )
