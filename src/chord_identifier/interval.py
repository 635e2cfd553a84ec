from __future__ import annotations
from enum import IntEnum

from src.chord_identifier.pitch_class import PitchClass, position, pitch_class_at


class Interval(IntEnum):
    # only the distances relevant to chord quality naming have a name
    UNKNOWN = 0
    MAJOR_SECOND = 2
    MINOR_THIRD = 3
    MAJOR_THIRD = 4
    PERFECT_FOURTH = 5
    DIMINISHED_FIFTH = 6
    PERFECT_FIFTH = 7
    AUGMENTED_FIFTH = 8
    DIMINISHED_SEVENTH = 9
    MINOR_SEVENTH = 10
    MAJOR_SEVENTH = 11
    MINOR_NINTH = 13
    MAJOR_NINTH = 14
    PERFECT_ELEVENTH = 17


_named_semitones = {interval.value: interval for interval in Interval if interval != Interval.UNKNOWN}


def interval_from_semitones(semitones: int) -> Interval:
    if semitones < 0:
        raise ValueError(f"semitone distance must be non-negative, got {semitones}")
    return _named_semitones.get(semitones, Interval.UNKNOWN)


def semitones_of(interval: Interval) -> int:
    return interval.value


def semitones_between(root: PitchClass, note: PitchClass) -> int:
    # always measured upwards from root
    return (position(note) - position(root) + 12) % 12


def find_interval(root: PitchClass, note: PitchClass) -> Interval:
    return interval_from_semitones(semitones_between(root, note))


def note_at_interval(root: PitchClass, interval: Interval) -> PitchClass:
    return pitch_class_at(position(root) + semitones_of(interval))
