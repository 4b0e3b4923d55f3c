"""Tests for the proximity heat map."""

from isoboard.board import UNVISITED, BoardMap, TerrainKind, generate_heat_map, render_heat_map


def test_single_source_heat_is_manhattan_distance():
    board = BoardMap((10, 10))
    board.occupants.set((0, 0), "scout")

    board.generate_heat_map()

    assert len(board.heat_map) == 100
    for y in range(10):
        for x in range(10):
            assert board.heat_at((x, y)) == x + y
            assert board.heat_map[x + y * 10] == x + y


def test_no_occupants_gives_all_zero():
    board = BoardMap((4, 3))

    board.generate_heat_map()

    assert board.heat_map == [0] * 12


def test_multiple_sources_take_the_nearest():
    board = BoardMap((10, 10))
    board.occupants.set((2, 2), "a")
    board.occupants.set((1, 4), "b")
    board.occupants.set((4, 5), "c")

    board.generate_heat_map()

    expected_rows = [
        [4, 3, 2, 3, 4, 5, 6, 7, 8, 9],
        [3, 2, 1, 2, 3, 4, 5, 6, 7, 8],
        [2, 1, 0, 1, 2, 3, 4, 5, 6, 7],
        [2, 1, 1, 2, 2, 3, 4, 5, 6, 7],
        [1, 0, 1, 2, 1, 2, 3, 4, 5, 6],
        [2, 1, 2, 1, 0, 1, 2, 3, 4, 5],
        [3, 2, 3, 2, 1, 2, 3, 4, 5, 6],
        [4, 3, 4, 3, 2, 3, 4, 5, 6, 7],
        [5, 4, 5, 4, 3, 4, 5, 6, 7, 8],
        [6, 5, 6, 5, 4, 5, 6, 7, 8, 9],
    ]
    assert board.heat_map == [value for row in expected_rows for value in row]


def test_heat_spreads_through_obstacles_and_water():
    # Only the board edges stop the spread
    board = BoardMap((5, 1))
    lookup = board.terrain_lookup({"lake": TerrainKind.WATER})
    board.terrain.set((2, 0), "lake")
    board.occupants.set((0, 0), "scout")
    board.occupants.set((1, 0), "wall")

    board.generate_heat_map()

    assert board.heat_map == [0, 0, 1, 2, 3]
    assert lookup.lookup((2, 0)) is TerrainKind.WATER


def test_regeneration_follows_occupant_moves():
    board = BoardMap((3, 1))
    board.occupants.set((0, 0), "scout")
    board.generate_heat_map()
    assert board.heat_map == [0, 1, 2]

    board.occupants.set((2, 0), "scout")
    board.generate_heat_map()

    assert board.heat_map == [2, 1, 0]


def test_no_cell_left_unvisited():
    heat_map = generate_heat_map((7, 5), [(6, 4)])

    assert UNVISITED not in heat_map
    assert max(heat_map) == 6 + 4


def test_render_heat_map_rows():
    text = render_heat_map([0, 1, 2, 1, 2, 3], width=3)

    assert text.splitlines() == ["0 1 2", "1 2 3"]


def test_render_heat_map_aligns_wide_values():
    text = render_heat_map([0, 10, UNVISITED, 3], width=2)

    assert text.splitlines() == [" 0 10", " ?  3"]


def test_render_empty_heat_map():
    assert render_heat_map([], width=3) == ""
