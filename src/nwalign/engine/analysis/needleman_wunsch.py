import logging
from numbers import Integral, Number

import numpy as np

from nwalign.engine.exceptions.alignment import TracebackInvariantViolationException
from nwalign.engine.structures.alignment import AlignmentParams, AlignmentResult, Direction

logger = logging.getLogger(__name__)

def _matrix_dtype(params: AlignmentParams):
    scores = (params.match_score, params.mismatch_score, params.gap_score)
    if not all(isinstance(score, Integral) for score in scores):
        return np.float64
    # no cell or candidate exceeds the largest score times the longest path
    bound = max(abs(int(score)) for score in scores) * (len(params.seq1) + len(params.seq2) + 1)
    if bound <= np.iinfo(np.int64).max:
        return np.int64
    return object

def choose_direction(diagonal: Number, up: Number, left: Number) -> tuple[Number, Direction]:
    """
    Returns the best of the three candidate scores and the move that produced it.
    Ties resolve left first, then diagonal, then up.
    """
    best = max(diagonal, up, left)
    if left == best:
        return best, Direction.LEFT
    if diagonal == best:
        return best, Direction.DIAGONAL
    return best, Direction.UP

def fill_matrices(params: AlignmentParams) -> tuple[np.ndarray, np.ndarray]:
    rows, cols = len(params.seq1) + 1, len(params.seq2) + 1
    matrix = np.zeros((rows, cols), dtype=_matrix_dtype(params))
    directions = np.full((rows, cols), Direction.NONE, dtype=np.int8)

    matrix[:, 0] = [i * params.gap_score for i in range(rows)]
    matrix[0, :] = [j * params.gap_score for j in range(cols)]

    for i in range(1, rows):
        for j in range(1, cols):
            if params.seq1[i - 1] == params.seq2[j - 1]:
                diagonal = matrix[i - 1, j - 1] + params.match_score
            else:
                diagonal = matrix[i - 1, j - 1] + params.mismatch_score
            up = matrix[i - 1, j] + params.gap_score
            left = matrix[i, j - 1] + params.gap_score
            matrix[i, j], directions[i, j] = choose_direction(diagonal, up, left)

    return matrix, directions

def traceback(params: AlignmentParams, directions: np.ndarray) -> tuple[str, str, tuple[tuple[int, int], ...]]:
    """
    Walks the stored directions from the bottom-right cell back to the origin.
    The returned path runs from (0, 0) to (m, n).
    """
    seq1, seq2, gap = params.seq1, params.seq2, params.gap_marker
    i, j = len(seq1), len(seq2)
    aligned_1 = []
    aligned_2 = []
    path: list[tuple[int, int]] = []

    while i > 0 or j > 0:
        path.append((i, j))
        # edges have no stored direction
        if i == 0:
            aligned_1.append(gap)
            aligned_2.append(seq2[j - 1])
            j -= 1
        elif j == 0:
            aligned_1.append(seq1[i - 1])
            aligned_2.append(gap)
            i -= 1
        else:
            direction = directions[i, j]
            if direction == Direction.DIAGONAL:
                aligned_1.append(seq1[i - 1])
                aligned_2.append(seq2[j - 1])
                i -= 1
                j -= 1
            elif direction == Direction.UP:
                aligned_1.append(seq1[i - 1])
                aligned_2.append(gap)
                i -= 1
            elif direction == Direction.LEFT:
                aligned_1.append(gap)
                aligned_2.append(seq2[j - 1])
                j -= 1
            else:
                raise TracebackInvariantViolationException(i, j, int(direction))

    path.append((0, 0))
    path.reverse()
    return "".join(reversed(aligned_1)), "".join(reversed(aligned_2)), tuple(path)

def align(params: AlignmentParams) -> AlignmentResult:
    """
    Globally aligns params.seq1 against params.seq2 with a linear gap penalty.
    """
    matrix, directions = fill_matrices(params)
    aligned_seq1, aligned_seq2, path = traceback(params, directions)
    matrix.flags.writeable = False
    directions.flags.writeable = False
    score = matrix.item(len(params.seq1), len(params.seq2))
    logger.debug("Aligned %d x %d symbols with score %s.", len(params.seq1), len(params.seq2), score)
    return AlignmentResult(
        aligned_seq1=aligned_seq1,
        aligned_seq2=aligned_seq2,
        score=score,
        matrix=matrix,
        traceback=path,
        directions=directions
    )
