import random

from seabattle.domain.board import iter_cells
from seabattle.domain.engine import fire, is_game_over, new_game, score
from seabattle.layouts import classic_layout


def main() -> None:
    rng = random.Random(0)
    state = new_game(classic_layout(), rng)

    targets = [(c.x, c.y) for c in iter_cells(state.player.grid)]
    rng.shuffle(targets)

    shots = 0
    for x, y in targets:
        state = fire(state, x, y, rng)
        shots += 1
        if is_game_over(state):
            break
    print(f"Smoke OK: shots={shots} score={score(state)} ships={len(state.player.ships)}")


if __name__ == "__main__":
    main()
