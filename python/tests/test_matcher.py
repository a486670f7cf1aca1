"""Match detector and board scanner tests."""

from __future__ import annotations

import pytest

from backend.engine.matcher import Matcher
from backend.models.board import Board, Position
from backend.models.match import Match
from backend.models.tile import TileSource


# -- helpers ------------------------------------------------------------------


def _board(size: int, values: list[int]) -> Board:
    return Board.from_flat(size, values, TileSource(seed=0))


_COLUMN_RUN = _board(3, [
    1, 2, 3,
    1, 3, 2,
    1, 2, 3,
])

_CROSS = _board(4, [
    2, 2, 2, 1,
    2, 3, 1, 3,
    2, 1, 3, 1,
    4, 3, 1, 4,
])

_TWO_RUNS = _board(4, [
    1, 1, 1, 2,
    3, 4, 3, 4,
    2, 2, 2, 3,
    4, 3, 4, 1,
])


# -- detect -------------------------------------------------------------------


def test_vertical_run_from_middle() -> None:
    match = Matcher.detect(Position(0, 1), _COLUMN_RUN)

    assert match == Match(
        origin=Position(0, 1),
        new_value=2,
        consumed=(Position(0, 0), Position(0, 2)),
    )


def test_vertical_run_from_end() -> None:
    match = Matcher.detect(Position(0, 0), _COLUMN_RUN)

    assert match is not None
    assert match.consumed == (Position(0, 1), Position(0, 2))
    assert match.new_value == 2


def test_three_in_a_row_of_value_three_scores_sixteen() -> None:
    board = _board(3, [
        3, 3, 3,
        1, 2, 1,
        2, 1, 2,
    ])

    match = Matcher.detect(Position(1, 0), board)

    assert match is not None
    assert match.new_value == 4
    assert match.points == 16
    assert set(match.consumed) == {Position(0, 0), Position(2, 0)}


def test_run_of_four_gains_two_levels() -> None:
    board = _board(4, [
        1, 1, 1, 1,
        2, 3, 2, 3,
        3, 2, 3, 2,
        2, 3, 2, 3,
    ])

    match = Matcher.detect(Position(1, 0), board)

    assert match is not None
    assert match.consumed == (Position(0, 0), Position(2, 0), Position(3, 0))
    assert match.new_value == 3


def test_both_axes_merge_together() -> None:
    match = Matcher.detect(Position(0, 0), _CROSS)

    assert match is not None
    assert match.consumed == (
        Position(0, 1), Position(0, 2), Position(1, 0), Position(2, 0),
    )
    assert match.new_value == 2 + 4 - 1
    assert match.origin not in match.consumed


@pytest.mark.parametrize(
    "position",
    [Position(1, 0), Position(1, 1), Position(2, 2)],
    ids=str,
)
def test_no_match(position: Position) -> None:
    assert Matcher.detect(position, _COLUMN_RUN) is None


def test_pair_plus_corner_is_not_a_match() -> None:
    board = _board(3, [
        2, 2, 1,
        2, 3, 4,
        4, 1, 3,
    ])
    assert Matcher.detect(Position(0, 0), board) is None


# -- scan ---------------------------------------------------------------------


def test_scan_all_reports_every_tile_of_a_run() -> None:
    matches = Matcher.scan_all(_COLUMN_RUN)

    assert [m.origin for m in matches] == [
        Position(0, 0), Position(0, 1), Position(0, 2),
    ]


def test_unique_prefers_lowest_origin_index_on_ties() -> None:
    matches = Matcher.unique(_COLUMN_RUN)

    assert matches == [
        Match(
            origin=Position(0, 0),
            new_value=2,
            consumed=(Position(0, 1), Position(0, 2)),
        )
    ]
    assert Matcher.unique(_COLUMN_RUN) == matches


def test_unique_prefers_biggest_merge() -> None:
    matches = Matcher.unique(_CROSS)

    assert len(matches) == 1
    assert matches[0].origin == Position(0, 0)
    assert matches[0].new_value == 5


def test_unique_keeps_disjoint_matches_ordered_by_value() -> None:
    matches = Matcher.unique(_TWO_RUNS)

    assert [(m.origin, m.new_value) for m in matches] == [
        (Position(0, 2), 3),
        (Position(0, 0), 2),
    ]


def test_unique_never_claims_a_position_twice() -> None:
    for board in (_COLUMN_RUN, _CROSS, _TWO_RUNS):
        claimed = [p for m in Matcher.unique(board) for p in m.positions]
        assert len(claimed) == len(set(claimed))


def test_unique_on_empty_of_matches() -> None:
    board = _board(3, [
        1, 2, 3,
        2, 3, 1,
        3, 1, 2,
    ])
    assert Matcher.scan_all(board) == []
    assert Matcher.unique(board) == []
