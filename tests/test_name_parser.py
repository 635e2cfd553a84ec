import pytest

from src.chord_identifier import identify_from_name, identify_from_notes, tokenize_chord_symbol
from src.chord_identifier.errors import ChordParseError
from src.chord_identifier.pitch_class import PitchClass
from src.chord_identifier.interval import Interval
from src.chord_identifier.chord_model import (
    ChordQuality,
    SeventhType,
    SuspendedType,
    TriadQuality,
    MAJOR,
    MINOR,
)
from src.chord_identifier.chord_symbol_transformer import RootToken, QualityToken, AddToken
from src.chord_identifier.name_parser import lookup_quality_symbol, extension_intervals

G, A, A_SHARP, B, C, C_SHARP, D, D_SHARP, E, F, G_SHARP = (
    PitchClass.G,
    PitchClass.A,
    PitchClass.A_SHARP,
    PitchClass.B,
    PitchClass.C,
    PitchClass.C_SHARP,
    PitchClass.D,
    PitchClass.D_SHARP,
    PitchClass.E,
    PitchClass.F,
    PitchClass.G_SHARP,
)


def test_tokenize_chord_symbol():
    assert tokenize_chord_symbol("G") == [RootToken(G)]
    assert tokenize_chord_symbol("A#m7") == [RootToken(A_SHARP), QualityToken("m", 7)]
    assert tokenize_chord_symbol("G7sus2add11") == [RootToken(G, 7), QualityToken("sus2"), AddToken(11)]
    assert tokenize_chord_symbol("Gmaj7") == [RootToken(G), QualityToken("maj", 7)]
    assert tokenize_chord_symbol("Gm7b5") == [RootToken(G), QualityToken("m7b5")]
    assert tokenize_chord_symbol("Gdim11") == [RootToken(G), QualityToken("dim", 11)]
    assert tokenize_chord_symbol("Bbm") == [RootToken(A_SHARP), QualityToken("m")]
    # unknown characters are skipped
    assert tokenize_chord_symbol("G 13 (xyz)") == [RootToken(G)]
    assert tokenize_chord_symbol("") == []


def test_identify_from_name_gsus2():
    chord = identify_from_name("Gsus2")
    assert chord.name == "Gsus2"
    assert chord.root == G
    assert chord.chord_quality == ChordQuality.suspended(SuspendedType.SUS2)
    assert chord.triad_quality == TriadQuality.AMBIGUOUS
    assert list(chord.intervals) == [Interval.MAJOR_SECOND, Interval.PERFECT_FIFTH]
    assert list(chord.notes) == [G, A, D]
    assert chord.add_interval is None


def test_identify_from_name_triads():
    chord = identify_from_name("Gm")
    assert chord.chord_quality == MINOR
    assert chord.triad_quality == TriadQuality.MINOR
    assert list(chord.intervals) == [Interval.MINOR_THIRD, Interval.PERFECT_FIFTH]
    assert list(chord.notes) == [G, A_SHARP, D]

    chord = identify_from_name("G")
    assert chord.chord_quality == MAJOR
    assert list(chord.notes) == [G, B, D]

    chord = identify_from_name("C#aug")
    assert chord.root == C_SHARP
    assert chord.triad_quality == TriadQuality.AUGMENTED
    assert list(chord.notes) == [C_SHARP, F, A]


def test_identify_from_name_gm7():
    chord = identify_from_name("Gm7")
    assert chord.root == G
    assert chord.chord_quality == ChordQuality.seventh(SeventhType.MINOR)
    assert chord.triad_quality == TriadQuality.MINOR
    assert list(chord.intervals) == [Interval.MINOR_THIRD, Interval.PERFECT_FIFTH, Interval.MINOR_SEVENTH]
    assert list(chord.notes) == [G, A_SHARP, D, F]


def test_identify_from_name_gaug7():
    chord = identify_from_name("Gaug7")
    assert chord.chord_quality == ChordQuality.seventh(SeventhType.AUGMENTED)
    assert chord.triad_quality == TriadQuality.AUGMENTED
    assert list(chord.intervals) == [Interval.MAJOR_THIRD, Interval.AUGMENTED_FIFTH, Interval.MINOR_SEVENTH]
    assert list(chord.notes) == [G, B, D_SHARP, F]


def test_identify_from_name_gdim7():
    chord = identify_from_name("Gdim7")
    assert chord.chord_quality == ChordQuality.seventh(SeventhType.DIMINISHED)
    assert chord.triad_quality == TriadQuality.DIMINISHED
    assert list(chord.intervals) == [Interval.MINOR_THIRD, Interval.DIMINISHED_FIFTH, Interval.DIMINISHED_SEVENTH]
    assert list(chord.notes) == [G, A_SHARP, C_SHARP, E]


def test_identify_from_name_dominant_and_major_sevenths():
    chord = identify_from_name("G7")
    assert chord.chord_quality == ChordQuality.seventh(SeventhType.DOMINANT)
    assert list(chord.notes) == [G, B, D, F]

    # only a 7 makes a bare root dominant, 9 and 11 promote the major triad
    chord = identify_from_name("G9")
    assert chord.chord_quality == ChordQuality.seventh(SeventhType.MAJOR)
    assert chord.triad_quality == TriadQuality.MAJOR
    assert list(chord.intervals) == [
        Interval.MAJOR_THIRD,
        Interval.PERFECT_FIFTH,
        Interval.MINOR_SEVENTH,
        Interval.MAJOR_NINTH,
    ]

    chord = identify_from_name("G11")
    assert chord.chord_quality == ChordQuality.seventh(SeventhType.MAJOR)
    assert list(chord.intervals) == [
        Interval.MAJOR_THIRD,
        Interval.PERFECT_FIFTH,
        Interval.MINOR_SEVENTH,
        Interval.MAJOR_NINTH,
        Interval.PERFECT_ELEVENTH,
    ]
    assert list(chord.notes) == [G, B, D, F, A, C]

    chord = identify_from_name("Gmaj7")
    assert chord.chord_quality == ChordQuality.seventh(SeventhType.MAJOR)
    assert chord.triad_quality == TriadQuality.MAJOR
    assert list(chord.notes) == [G, B, D, PitchClass.F_SHARP]

    chord = identify_from_name("Gmaj9")
    assert list(chord.intervals) == [
        Interval.MAJOR_THIRD,
        Interval.PERFECT_FIFTH,
        Interval.MAJOR_SEVENTH,
        Interval.MAJOR_NINTH,
    ]

    chord = identify_from_name("Gm7b5")
    assert chord.chord_quality == ChordQuality.seventh(SeventhType.HALF_DIMINISHED)
    assert list(chord.notes) == [G, A_SHARP, C_SHARP, F]


def test_identify_from_name_gadd7_coalesces_to_g7():
    chord = identify_from_name("Gadd7")
    assert chord.name == "Gadd7"
    assert chord.chord_quality == ChordQuality.seventh(SeventhType.DOMINANT)
    assert chord.triad_quality == TriadQuality.MAJOR
    assert list(chord.intervals) == [Interval.MAJOR_THIRD, Interval.PERFECT_FIFTH, Interval.MINOR_SEVENTH]
    assert list(chord.notes) == [G, B, D, F]
    assert chord.add_interval == Interval.MINOR_SEVENTH


def test_identify_from_name_add_already_present_is_noop():
    chord = identify_from_name("G7add7")
    assert chord.chord_quality == ChordQuality.seventh(SeventhType.DOMINANT)
    assert list(chord.intervals) == [Interval.MAJOR_THIRD, Interval.PERFECT_FIFTH, Interval.MINOR_SEVENTH]

    chord = identify_from_name("Gmadd9")
    assert chord.chord_quality == MINOR
    assert list(chord.notes) == [G, A_SHARP, D, A]


def test_identify_from_name_g7sus2():
    chord = identify_from_name("G7sus2")
    assert chord.chord_quality == ChordQuality.seventh(SeventhType.SUSPENDED, SuspendedType.SUS2)
    assert chord.triad_quality == TriadQuality.AMBIGUOUS
    assert list(chord.intervals) == [Interval.MAJOR_SECOND, Interval.PERFECT_FIFTH, Interval.MINOR_SEVENTH]
    assert list(chord.notes) == [G, A, D, F]


def test_identify_from_name_g7sus2add11():
    chord = identify_from_name("G7sus2add11")
    assert chord.chord_quality == ChordQuality.seventh(SeventhType.SUSPENDED, SuspendedType.SUS2)
    assert chord.triad_quality == TriadQuality.AMBIGUOUS
    assert list(chord.intervals) == [
        Interval.MAJOR_SECOND,
        Interval.PERFECT_FIFTH,
        Interval.MINOR_SEVENTH,
        Interval.PERFECT_ELEVENTH,
    ]
    assert list(chord.notes) == [G, A, D, F, C]


def test_identify_from_name_gdim11():
    # the chain below the numeral is diminished too: bb7 and b9
    chord = identify_from_name("Gdim11")
    assert chord.chord_quality == ChordQuality.seventh(SeventhType.DIMINISHED)
    assert chord.triad_quality == TriadQuality.DIMINISHED
    assert list(chord.intervals) == [
        Interval.MINOR_THIRD,
        Interval.DIMINISHED_FIFTH,
        Interval.DIMINISHED_SEVENTH,
        Interval.MINOR_NINTH,
        Interval.PERFECT_ELEVENTH,
    ]
    assert list(chord.notes) == [G, A_SHARP, C_SHARP, E, G_SHARP, C]


def test_identify_from_name_gaug11():
    chord = identify_from_name("Gaug11")
    assert chord.chord_quality == ChordQuality.seventh(SeventhType.AUGMENTED)
    assert chord.triad_quality == TriadQuality.AUGMENTED
    assert list(chord.intervals) == [
        Interval.MAJOR_THIRD,
        Interval.AUGMENTED_FIFTH,
        Interval.MINOR_SEVENTH,
        Interval.MAJOR_NINTH,
        Interval.PERFECT_ELEVENTH,
    ]
    assert list(chord.notes) == [G, B, D_SHARP, F, A, C]


def test_identify_from_name_errors():
    for symbol in ["", "xyz", "m7", "add9", "sus4"]:
        with pytest.raises(ChordParseError) as e:
            identify_from_name(symbol)
        assert e.value.reason == "no root identified"

    with pytest.raises(ChordParseError):
        lookup_quality_symbol("min", None)
    with pytest.raises(ChordParseError):
        extension_intervals(13, MAJOR)


def test_identify_from_name_matches_notes():
    # reading the notes of a named chord back gives the same quality
    for symbol in ["Gm7", "Gdim7", "Gaug7", "Gsus4", "Gm11", "Gdim11", "E7sus4", "Fmaj7"]:
        chord = identify_from_name(symbol)
        readings = identify_from_notes(chord.notes)
        assert chord.chord_quality in [reading.chord_quality for reading in readings if reading.root == chord.root]


def test_identify_from_notes():
    chords = identify_from_notes([C, E, G])
    assert [chord.name for chord in chords] == ["C"]
    assert list(chords[0].notes) == [C, E, G]

    chords = identify_from_notes([C, E, G], include_ambiguous=True)
    assert [chord.root for chord in chords] == [C, E, G]
    assert [chord.name for chord in chords] == ["C", "Ambiguous", "Ambiguous"]

    assert identify_from_notes([C, C_SHARP, D]) == []
    assert identify_from_notes([]) == []
