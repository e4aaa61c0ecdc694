from __future__ import annotations

import pytest

from algoengine.encoding import (
    format_buckets,
    format_int_list,
    format_matrix,
    format_pairs,
    require_int,
)


def test_format_int_list_renders_negatives_without_spaces() -> None:
    assert format_int_list([]) == "[]"
    assert format_int_list([0, -12, 7]) == "[0,-12,7]"


def test_format_matrix_nests_rows() -> None:
    assert format_matrix([[0, 1], [1, 0]]) == "[[0,1],[1,0]]"
    assert format_matrix([]) == "[]"


def test_format_pairs_and_buckets() -> None:
    assert format_pairs([(1, -1), (-4, 2)]) == "[1:-1,-4:2]"
    assert format_buckets([[], [(3, 4)], []]) == "[[],[3:4],[]]"


def test_require_int_rejects_bools_and_floats() -> None:
    assert require_int(-3) == -3
    with pytest.raises(TypeError, match="weight must be an integer"):
        require_int(True, "weight")
    with pytest.raises(TypeError):
        require_int(2.0)
