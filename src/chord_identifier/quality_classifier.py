from typing import Iterable

from src.chord_identifier.interval import Interval
from src.chord_identifier.chord_model import (
    ChordQuality,
    SuspendedType,
    SeventhType,
    MAJOR,
    MINOR,
    DIMINISHED,
    AUGMENTED,
    AMBIGUOUS,
)


def classify_quality(intervals: Iterable[Interval]) -> ChordQuality:
    """Infer the best fitting chord quality from the intervals above a root.

    Only the triad and the seventh take part in the decision; 9ths and 11ths
    are extensions and never change the result. Intervals which have no name
    (``Interval.UNKNOWN``) are ignored. The checks run in a fixed order: a chord
    with both a minor and a major third is ``AMBIGUOUS`` before any 5th or 7th is
    looked at. The 5th may be omitted from a seventh chord.
    """
    present = set(intervals)
    has_second = Interval.MAJOR_SECOND in present
    has_fourth = Interval.PERFECT_FOURTH in present
    has_minor_third = Interval.MINOR_THIRD in present
    has_major_third = Interval.MAJOR_THIRD in present
    has_diminished_fifth = Interval.DIMINISHED_FIFTH in present
    has_perfect_fifth = Interval.PERFECT_FIFTH in present
    has_augmented_fifth = Interval.AUGMENTED_FIFTH in present
    has_diminished_seventh = Interval.DIMINISHED_SEVENTH in present
    has_minor_seventh = Interval.MINOR_SEVENTH in present
    has_major_seventh = Interval.MAJOR_SEVENTH in present

    if has_minor_third and has_major_third:
        return AMBIGUOUS

    if not has_minor_third and not has_major_third:
        # suspended, or nothing we can name
        if not has_perfect_fifth:
            return AMBIGUOUS
        if has_second and has_fourth:
            return AMBIGUOUS
        for has_suspension, suspended_type in (
            (has_second, SuspendedType.SUS2),
            (has_fourth, SuspendedType.SUS4),
        ):
            if has_suspension:
                if has_minor_seventh:
                    return ChordQuality.seventh(SeventhType.SUSPENDED, suspended_type)
                return ChordQuality.suspended(suspended_type)
        return AMBIGUOUS

    if has_minor_third:
        if has_perfect_fifth:
            return ChordQuality.seventh(SeventhType.MINOR) if has_minor_seventh else MINOR
        if has_diminished_fifth and not has_augmented_fifth:
            if has_minor_seventh:
                return ChordQuality.seventh(SeventhType.HALF_DIMINISHED)
            if has_diminished_seventh:
                return ChordQuality.seventh(SeventhType.DIMINISHED)
            return DIMINISHED
        if has_minor_seventh:
            return ChordQuality.seventh(SeventhType.MINOR)
        return AMBIGUOUS

    # major third only
    if has_perfect_fifth:
        if has_minor_seventh:
            return ChordQuality.seventh(SeventhType.DOMINANT)
        if has_major_seventh:
            return ChordQuality.seventh(SeventhType.MAJOR)
        return MAJOR
    if has_augmented_fifth and not has_diminished_fifth:
        return ChordQuality.seventh(SeventhType.AUGMENTED) if has_minor_seventh else AUGMENTED
    if has_minor_seventh:
        return ChordQuality.seventh(SeventhType.DOMINANT)
    return AMBIGUOUS
