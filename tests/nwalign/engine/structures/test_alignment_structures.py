from dataclasses import FrozenInstanceError

import pytest

from nwalign.engine.structures.alignment import DEFAULT_GAP_MARKER, AlignmentParams, Direction


def test_default_gap_marker_is_dash():
    params = AlignmentParams("A", "C", 1, -1, -2)
    assert params.gap_marker == DEFAULT_GAP_MARKER == "-"

def test_params_are_frozen():
    params = AlignmentParams("A", "C", 1, -1, -2)
    with pytest.raises(FrozenInstanceError):
        params.gap_score = 0 # type: ignore

def test_unset_direction_is_falsy():
    assert not Direction.NONE
    assert all(direction for direction in (Direction.DIAGONAL, Direction.UP, Direction.LEFT))
