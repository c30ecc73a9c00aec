import random
import unittest

from seabattle.domain.board import create_grid, iter_cells
from seabattle.domain.engine import InvalidCoordinate, fire, is_game_over, new_game, reset, score, scores
from seabattle.domain.field import place_ship
from seabattle.domain.placements import find_placements
from seabattle.domain.types import CellState, Field, GameState, Mode, Orientation, Placement, Ship
from seabattle.layouts import LayoutDefinition, ShipSpec, classic_layout

TINY = LayoutDefinition("tiny", "Tiny", 4, (ShipSpec(2, "destroyer-shape", "Destroyer"),))


def tiny_state() -> GameState:
    """4x4 board with one two-cell ship on (0, 0) and (1, 0)."""
    ship = Ship(index=0, size=2, life=2, image="destroyer-shape", name="Destroyer")
    grid = place_ship(create_grid(4), ship, Placement(0, 0, Orientation.HORIZONTAL))
    return GameState(Mode.PLAYER_TURN, Field(grid, (ship,)), TINY)


class FireTests(unittest.TestCase):
    def test_sinking_the_only_ship_ends_the_game(self):
        self.assertIn(Placement(0, 0, Orientation.HORIZONTAL), find_placements(create_grid(4), 2))
        state = tiny_state()

        state = fire(state, 0, 0)
        self.assertIs(state.player.grid[0][0].state, CellState.HIT)
        self.assertEqual(state.player.grid[0][0].ship_index, 0)
        self.assertEqual(state.player.ships[0].life, 1)
        self.assertIs(state.mode, Mode.PLAYER_TURN)
        self.assertEqual(score(state), 1)

        state = fire(state, 1, 0)
        self.assertIs(state.mode, Mode.GAME_OVER)
        self.assertTrue(state.player.ships[0].sunk)
        self.assertEqual(score(state), 2)
        self.assertTrue(is_game_over(state))

    def test_miss_marks_cell_and_keeps_turn(self):
        state = tiny_state()
        after = fire(state, 3, 3)
        self.assertIs(after.player.grid[3][3].state, CellState.MISS)
        self.assertEqual(after.player.grid[3][3].ship_index, -1)
        self.assertIs(after.mode, Mode.PLAYER_TURN)
        self.assertEqual(score(after), score(state))
        self.assertEqual(after.player.ships, state.player.ships)

    def test_previous_state_is_not_mutated(self):
        state = tiny_state()
        fire(state, 0, 0)
        fire(state, 2, 2)
        self.assertIs(state.player.grid[0][0].state, CellState.SHIP)
        self.assertIs(state.player.grid[2][2].state, CellState.EMPTY)
        self.assertEqual(state.player.ships[0].life, 2)

    def test_firing_twice_is_a_no_op(self):
        state = tiny_state()
        for x, y in [(3, 3), (0, 0)]:
            once = fire(state, x, y)
            twice = fire(once, x, y)
            self.assertIs(twice, once)
            self.assertEqual(twice, fire(state, x, y))
        hit = fire(state, 0, 0)
        self.assertEqual(fire(hit, 0, 0).player.ships[0].life, 1)

    def test_out_of_range_coordinates_raise(self):
        state = tiny_state()
        for x, y in [(4, 0), (0, 4), (-1, 0), (0, -1)]:
            with self.assertRaises(InvalidCoordinate) as ctx:
                fire(state, x, y)
            self.assertEqual((ctx.exception.x, ctx.exception.y), (x, y))
            self.assertEqual(ctx.exception.board_size, 4)
        self.assertTrue(issubclass(InvalidCoordinate, IndexError))

    def test_no_ships_means_first_shot_wins(self):
        state = GameState(Mode.PLAYER_TURN, Field(create_grid(2)), TINY)
        after = fire(state, 0, 0)
        self.assertIs(after.player.grid[0][0].state, CellState.MISS)
        self.assertIs(after.mode, Mode.GAME_OVER)
        self.assertEqual(score(after), 0)


class ResetTests(unittest.TestCase):
    def test_any_action_in_game_over_starts_fresh_game(self):
        state = fire(fire(tiny_state(), 0, 0), 1, 0)
        self.assertIs(state.mode, Mode.GAME_OVER)

        fresh = fire(state, 99, -5, random.Random(4))
        self.assertIsNot(fresh, state)
        self.assertIs(fresh.mode, Mode.PLAYER_TURN)
        self.assertIs(fresh.layout, TINY)
        self.assertEqual(fresh.player.size, 4)
        self.assertEqual(score(fresh), 0)
        for cell in iter_cells(fresh.player.grid):
            self.assertIn(cell.state, (CellState.EMPTY, CellState.SHIP))
        for ship in fresh.player.ships:
            self.assertEqual(ship.life, ship.size)

    def test_reset_uses_the_layout_of_the_state(self):
        state = new_game(classic_layout(), random.Random(2))
        fresh = reset(state, random.Random(3))
        self.assertIs(fresh.mode, Mode.PLAYER_TURN)
        self.assertEqual(fresh.player.size, 10)
        self.assertEqual(len(fresh.player.ships) + len(fresh.player.unplaced), 5)


class NewGameTests(unittest.TestCase):
    def test_defaults_to_classic_layout(self):
        state = new_game(rng=random.Random(0))
        self.assertEqual(state.layout.layout_id, "classic")
        self.assertIs(state.mode, Mode.PLAYER_TURN)
        self.assertEqual(state.player.size, 10)
        self.assertEqual(sorted(s.size for s in state.player.ships), [2, 3, 3, 4, 5])

    def test_invalid_layout_is_rejected(self):
        bad = LayoutDefinition("bad", "Bad", 0, ())
        with self.assertRaises(ValueError):
            new_game(bad)


class FullGameTests(unittest.TestCase):
    def play(self, seed: int):
        rng = random.Random(seed)
        state = new_game(classic_layout(), rng)
        targets = [(c.x, c.y) for c in iter_cells(state.player.grid)]
        rng.shuffle(targets)
        history = [state]
        for x, y in targets:
            state = fire(state, x, y)
            history.append(state)
            if state.mode is Mode.GAME_OVER:
                break
        return history

    def test_life_matches_hit_cells_after_every_shot(self):
        for state in self.play(5):
            hits = {}
            for cell in iter_cells(state.player.grid):
                if cell.state is CellState.HIT:
                    hits[cell.ship_index] = hits.get(cell.ship_index, 0) + 1
            for ship in state.player.ships:
                self.assertEqual(ship.life, ship.size - hits.get(ship.index, 0))
                self.assertGreaterEqual(ship.life, 0)

    def test_game_over_exactly_when_every_ship_is_sunk(self):
        for seed in (1, 2, 3):
            history = self.play(seed)
            for state in history:
                all_sunk = all(s.life == 0 for s in state.player.ships)
                self.assertEqual(state.mode is Mode.GAME_OVER, all_sunk)
            last = history[-1]
            self.assertIs(last.mode, Mode.GAME_OVER)
            self.assertEqual(score(last), sum(s.size for s in last.player.ships))

    def test_scores_pair_player_with_zero_placeholder(self):
        last = self.play(7)[-1]
        self.assertEqual(scores(last), (score(last), 0))


if __name__ == "__main__":
    unittest.main()
