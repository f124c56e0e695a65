from dataclasses import dataclass
from enum import IntEnum
from numbers import Number
from typing import Sequence

import numpy as np

DEFAULT_GAP_MARKER = "-"

class Direction(IntEnum):
    NONE = 0
    DIAGONAL = 1
    UP = 2
    LEFT = 3

@dataclass(frozen=True)
class AlignmentParams:
    seq1: Sequence[str]
    seq2: Sequence[str]
    match_score: Number
    mismatch_score: Number
    gap_score: Number
    gap_marker: str = DEFAULT_GAP_MARKER

@dataclass(frozen=True)
class AlignmentResult:
    aligned_seq1: str
    aligned_seq2: str
    score: Number
    matrix: np.ndarray
    traceback: tuple[tuple[int, int], ...]
    directions: np.ndarray
