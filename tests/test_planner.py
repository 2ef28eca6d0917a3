"""Tests for constraint ranking and greedy placement."""

import copy

import pytest

from garden import (
    ArrangementError,
    BedGrid,
    ConstraintError,
    InsufficientSpaceError,
    InvalidDimensionsError,
    InvalidSelectionError,
    PlantSelection,
    get_arrangement_stats,
    validate_arrangement,
)


def _sel(*pairs):
    return [PlantSelection(plant_id, qty) for plant_id, qty in pairs]


class TestPlacementChecks:
    def test_empty_grid_is_valid(self, planner):
        assert planner.is_valid_placement("tomato", 1, 1, BedGrid(3, 3))

    def test_enemy_neighbor_is_invalid(self, planner):
        grid = BedGrid.from_matrix([["potato", None]])
        assert not planner.is_valid_placement("tomato", 0, 1, grid)

    def test_diagonal_enemy_is_invalid(self, planner):
        grid = BedGrid.from_matrix([["potato", None], [None, None]])
        assert not planner.is_valid_placement("tomato", 1, 1, grid)

    def test_distant_enemy_is_valid(self, planner):
        grid = BedGrid.from_matrix([["potato", None, None]])
        assert planner.is_valid_placement("tomato", 0, 2, grid)

    def test_one_sided_enemy_rejected_in_both_orders(self, toy_planner):
        """``a`` avoids ``c``: neither may be placed next to the other."""
        assert not toy_planner.is_valid_placement("c", 0, 1, BedGrid.from_matrix([["a", None]]))
        assert not toy_planner.is_valid_placement("a", 0, 1, BedGrid.from_matrix([["c", None]]))

    def test_count_companions(self, planner):
        grid = BedGrid.from_matrix([
            ["basil", "carrot", None],
            [None, None, "potato"],
        ])
        assert planner.count_companion_adjacencies("tomato", 1, 1, grid) == 2
        assert planner.count_companion_adjacencies("dragonfruit", 1, 1, grid) == 0


class TestConstraintRanking:
    def test_expands_quantities(self, planner):
        assert planner.sort_by_constraint_difficulty(_sel(("aloe", 3))) == ["aloe"] * 3

    def test_rounds_fractional_quantities_up(self, planner):
        assert len(planner.sort_by_constraint_difficulty(_sel(("basil", 2.25)))) == 3

    def test_most_enemies_first(self, planner):
        ranked = planner.sort_by_constraint_difficulty(
            _sel(("aloe", 1), ("basil", 1), ("tomato", 1))
        )
        assert ranked == ["tomato", "basil", "aloe"]

    def test_ties_keep_selection_order(self, planner):
        """Carrot and basil both have two enemies."""
        ranked = planner.sort_by_constraint_difficulty(_sel(("carrot", 1), ("basil", 1)))
        assert ranked == ["carrot", "basil"]

    def test_unknown_plants_dropped(self, planner):
        ranked = planner.sort_by_constraint_difficulty(
            _sel(("dragonfruit", 2), ("aloe", 1))
        )
        assert ranked == ["aloe"]

    def test_accepts_dict_selections(self, planner):
        ranked = planner.sort_by_constraint_difficulty([{"plant_id": "aloe", "quantity": 2}])
        assert ranked == ["aloe", "aloe"]


class TestFindBestPosition:
    def test_first_free_square_on_empty_grid(self, planner):
        assert planner.find_best_position("tomato", BedGrid(3, 3)) == (0, 0)

    def test_skips_occupied_squares(self, planner):
        grid = BedGrid.from_matrix([["aloe", None], [None, None]])
        assert planner.find_best_position("aloe", grid) == (0, 1)

    def test_skips_locked_squares(self, planner):
        locked = [[True, False], [False, False]]
        assert planner.find_best_position("tomato", BedGrid(2, 2), locked) == (0, 1)

    def test_prefers_companion_neighbors(self, planner):
        """Tomato goes next to basil rather than in the first free square."""
        grid = BedGrid.from_matrix([
            [None, None, None],
            [None, None, None],
            [None, None, "basil"],
        ])
        assert planner.find_best_position("tomato", grid) == (1, 1)

    def test_skips_enemy_adjacent_squares(self, planner):
        grid = BedGrid.from_matrix([["potato", None, None]])
        assert planner.find_best_position("tomato", grid) == (0, 2)

    def test_none_when_nothing_fits(self, planner):
        grid = BedGrid.from_matrix([["potato", None]])
        assert planner.find_best_position("tomato", grid) is None


class TestGenerateArrangement:
    def test_two_tomatoes_in_small_bed(self, planner, catalog):
        result = planner.generate_arrangement(2, 2, _sel(("tomato", 2)))
        assert result.success
        assert result.unplaced_plants == []
        assert len(result.placements) == 2
        assert result.grid.cells == [["tomato", "tomato"], [None, None]]
        assert get_arrangement_stats(result.grid, catalog).empty_squares == 2

    def test_enemies_in_tiny_bed_fail(self, planner):
        with pytest.raises(ConstraintError, match="Potato") as excinfo:
            planner.generate_arrangement(2, 1, _sel(("tomato", 1), ("potato", 1)))
        assert excinfo.value.unplaced_plants == ["potato"]
        assert "Could not place all plants" in str(excinfo.value)

    def test_companions_end_up_adjacent(self, planner, catalog):
        result = planner.generate_arrangement(3, 3, _sel(("tomato", 1), ("basil", 1)))
        assert validate_arrangement(result.grid, catalog).valid
        assert get_arrangement_stats(result.grid, catalog).companion_adjacencies >= 1
        assert result.placements[0].plant_id == "tomato"
        assert result.grid.get_cell(0, 1) == "basil"

    def test_enemies_separated_when_room(self, planner, catalog):
        result = planner.generate_arrangement(
            4, 4, _sel(("tomato", 2), ("cabbage", 2))
        )
        assert len(result.placements) == 4
        assert validate_arrangement(result.grid, catalog).valid
        assert result.grid.get_cell(0, 3) == "cabbage"

    def test_locked_squares_stay_empty(self, planner):
        locked = [[False] * 3 for _ in range(3)]
        locked[1][1] = True
        result = planner.generate_arrangement(3, 3, _sel(("aloe", 8)), locked)
        assert result.grid.get_cell(1, 1) is None
        assert result.grid.count_filled() == 8
        assert all((p.row, p.col) != (1, 1) for p in result.placements)

    def test_caller_mask_not_modified(self, planner):
        locked = [[False, True], [False, False]]
        snapshot = copy.deepcopy(locked)
        planner.generate_arrangement(2, 2, _sel(("aloe", 3)), locked)
        assert locked == snapshot

    def test_each_call_returns_fresh_grid(self, planner):
        first = planner.generate_arrangement(2, 2, _sel(("aloe", 1)))
        second = planner.generate_arrangement(2, 2, _sel(("aloe", 1)))
        first.grid.set_cell(1, 1, "tomato")
        assert second.grid.get_cell(1, 1) is None

    def test_count_matches_known_selections(self, planner):
        selections = _sel(("tomato", 2), ("carrot", 1.5), ("basil", 1), ("aloe", 3), ("dragonfruit", 2))
        result = planner.generate_arrangement(5, 5, selections)
        assert len(result.placements) == 2 + 2 + 1 + 3
        assert "dragonfruit" not in result.counts()

    def test_empty_selection(self, planner):
        result = planner.generate_arrangement(2, 2, [])
        assert result.success
        assert result.placements == []

    def test_dict_selections(self, planner):
        result = planner.generate_arrangement(2, 2, [{"plant_id": "aloe", "quantity": 2}])
        assert result.counts() == {"aloe": 2}

    @pytest.mark.parametrize("width, height", [(0, 3), (3, 0), (-1, 2), (None, 2), (2.5, 2), (True, 2)])
    def test_invalid_dimensions(self, planner, width, height):
        with pytest.raises(InvalidDimensionsError):
            planner.generate_arrangement(width, height, [])

    def test_invalid_dimensions_is_value_error(self, planner):
        with pytest.raises(ValueError):
            planner.generate_arrangement(0, 0, [])

    def test_mask_shape_mismatch(self, planner):
        with pytest.raises(InvalidDimensionsError):
            planner.generate_arrangement(2, 2, [], [[False, False]])

    @pytest.mark.parametrize("selections", [None, "tomato", {"plant_id": "tomato"}])
    def test_selections_must_be_list(self, planner, selections):
        with pytest.raises(InvalidSelectionError):
            planner.generate_arrangement(2, 2, selections)

    def test_bad_selection_entry(self, planner):
        with pytest.raises(TypeError):
            planner.generate_arrangement(2, 2, ["tomato"])

    def test_not_enough_space(self, planner):
        with pytest.raises(InsufficientSpaceError) as excinfo:
            planner.generate_arrangement(2, 2, _sel(("tomato", 5)))
        assert excinfo.value.required == 5
        assert excinfo.value.available == 4

    def test_locked_squares_reduce_space(self, planner):
        locked = [[True, True], [False, False]]
        with pytest.raises(InsufficientSpaceError, match="2 available squares"):
            planner.generate_arrangement(2, 2, _sel(("aloe", 3)), locked)

    def test_huge_quantity_rejected_before_expansion(self, planner):
        with pytest.raises(InsufficientSpaceError) as excinfo:
            planner.generate_arrangement(2, 2, _sel(("tomato", 1e9)))
        assert excinfo.value.required == 1_000_000_000

    @pytest.mark.parametrize("quantity", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_quantity(self, planner, quantity):
        with pytest.raises(InvalidSelectionError, match="must be finite"):
            planner.generate_arrangement(2, 2, _sel(("tomato", quantity)))

    @pytest.mark.parametrize("width, height, pairs", [
        (3, 3, [("tomato", 2), ("potato", 2)]),
        (4, 4, [("tomato", 3), ("cabbage", 3), ("basil", 2), ("strawberry", 2)]),
        (5, 3, [("onion", 4), ("bean", 4), ("pea", 3)]),
        (6, 6, [("broccoli", 4), ("tomato", 4), ("strawberry", 4), ("lettuce", 4), ("parsley", 2)]),
    ])
    def test_returned_arrangements_have_no_enemy_neighbors(self, planner, catalog, width, height, pairs):
        try:
            result = planner.generate_arrangement(width, height, _sel(*pairs))
        except ArrangementError:
            return
        assert validate_arrangement(result.grid, catalog).valid
