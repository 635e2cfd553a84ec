import logging
from itertools import groupby
from typing import List, Sequence

import numpy as np

from src.chord_identifier.pitch_class import PitchClass
from src.chord_identifier.interval import Interval, interval_from_semitones, semitones_between

logger = logging.getLogger(__name__)


def find_register_break(semitones: np.ndarray) -> int:
    """Index of the first note whose distance from the root drops below the
    previous one, or -1 if the distances never drop."""
    drops = np.flatnonzero(np.diff(semitones) < 0)
    return int(drops[0]) + 1 if len(drops) > 0 else -1


def derive_intervals(root: PitchClass, notes: Sequence[PitchClass]) -> List[Interval]:
    """Intervals of ``notes`` above ``root``, in the order the notes were given.

    Octaves are not tracked, so the order of the notes is the only way to tell a
    2nd from a 9th: notes are assumed to be stacked upwards, and from the first
    point where the distance from the root drops every remaining note is read
    an octave higher (a 2nd after a 5th is a 9th, a 4th after a 7th an 11th).
    Adjacent repeats are collapsed afterwards.
    """
    if not isinstance(root, PitchClass):
        raise TypeError(f"root must be a PitchClass, got {root!r}")

    semitones = np.array(
        [semitones_between(root, note) for note in notes if note != root],
        dtype=int,
    )

    register_break = find_register_break(semitones)
    if register_break >= 0:
        logger.debug(f"Register break at note {register_break} above {root!s}")
        semitones[register_break:] += 12

    intervals = [interval_from_semitones(int(s)) for s in semitones]
    return [interval for interval, _ in groupby(intervals)]
