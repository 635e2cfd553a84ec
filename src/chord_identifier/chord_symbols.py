from src.chord_identifier.interval import Interval
from src.chord_identifier.chord_model import (
    MAJOR,
    MINOR,
    DIMINISHED,
    AUGMENTED,
    SUS2,
    SUS4,
    MINOR_SEVENTH,
    MAJOR_SEVENTH,
    AUGMENTED_SEVENTH,
    HALF_DIMINISHED_SEVENTH,
    DIMINISHED_SEVENTH,
    DOMINANT_SEVENTH,
    SUS2_SEVENTH,
    SUS4_SEVENTH,
    AMBIGUOUS,
)

# quality spellings, best first when a symbol contains several
quality_priority = ["m7b5", "ø", "maj", "dim", "aug", "sus2", "sus4", "m"]

quality_symbols = {
    "m7b5": HALF_DIMINISHED_SEVENTH,
    "ø": HALF_DIMINISHED_SEVENTH,
    "maj": MAJOR,
    "dim": DIMINISHED,
    "aug": AUGMENTED,
    "sus2": SUS2,
    "sus4": SUS4,
    "m": MINOR,
}

# spellings whose meaning changes when a 7 follows them directly
seventh_symbols = {
    "m": MINOR_SEVENTH,
    "aug": AUGMENTED_SEVENTH,
    "maj": MAJOR_SEVENTH,
}

# spellings whose meaning changes when any extension numeral follows them
extended_symbols = {
    "maj": MAJOR_SEVENTH,
}

add_symbols = {
    7: Interval.MINOR_SEVENTH,
    9: Interval.MAJOR_NINTH,
    11: Interval.PERFECT_ELEVENTH,
}

# suffix printed after the root for every quality
quality_suffixes = {
    MAJOR: "",
    MINOR: "m",
    DIMINISHED: "dim",
    AUGMENTED: "aug",
    SUS2: "sus2",
    SUS4: "sus4",
    MINOR_SEVENTH: "m7",
    MAJOR_SEVENTH: "maj7",
    DOMINANT_SEVENTH: "7",
    AUGMENTED_SEVENTH: "aug7",
    HALF_DIMINISHED_SEVENTH: "ø7",
    DIMINISHED_SEVENTH: "dim7",
    SUS2_SEVENTH: "7sus2",
    SUS4_SEVENTH: "7sus4",
    AMBIGUOUS: "Ambiguous",
}

quality_names = {
    MAJOR: "Major",
    MINOR: "Minor",
    DIMINISHED: "Diminished",
    AUGMENTED: "Augmented",
    SUS2: "Suspended Second",
    SUS4: "Suspended Fourth",
    MINOR_SEVENTH: "Minor 7th",
    MAJOR_SEVENTH: "Major 7th",
    DOMINANT_SEVENTH: "Dominant 7th",
    AUGMENTED_SEVENTH: "Augmented 7th",
    HALF_DIMINISHED_SEVENTH: "Half Diminished 7th",
    DIMINISHED_SEVENTH: "Diminished 7th",
    SUS2_SEVENTH: "Dominant 7th Suspended 2nd",
    SUS4_SEVENTH: "Dominant 7th Suspended 4th",
    AMBIGUOUS: "Ambiguous",
}

interval_names = {
    Interval.UNKNOWN: "Unknown",
    Interval.MAJOR_SECOND: "Major 2nd",
    Interval.MINOR_THIRD: "Minor 3rd",
    Interval.MAJOR_THIRD: "Major 3rd",
    Interval.PERFECT_FOURTH: "Perfect 4th",
    Interval.DIMINISHED_FIFTH: "Diminished 5th",
    Interval.PERFECT_FIFTH: "Perfect 5th",
    Interval.AUGMENTED_FIFTH: "Augmented 5th",
    Interval.DIMINISHED_SEVENTH: "Diminished 7th",
    Interval.MINOR_SEVENTH: "Minor 7th",
    Interval.MAJOR_SEVENTH: "Major 7th",
    Interval.MINOR_NINTH: "Minor 9th",
    Interval.MAJOR_NINTH: "Major 9th",
    Interval.PERFECT_ELEVENTH: "Perfect 11th",
}
