# src/wumplus/environment/map_generator.py

import random
from ..utils.constants import (
    MAP_SIZE,
    START_POS,
    PIT_DENSITY,
    WALL_DENSITY,
    EMPTY_SYMBOL,
    WALL_SYMBOL,
    PIT_SYMBOL,
    WUMPUS_SYMBOL,
    GOLD_SYMBOL,
    SUPMUW_SYMBOL,
)


class MapGenerator:
    def __init__(self, N=MAP_SIZE, rng=None):
        self.N = N
        self.rng = rng if rng is not None else random.Random()

    def _random_empty_cell(self, game_map):
        """A random interior cell that is still empty and is not the start."""
        while True:
            x = self.rng.randrange(1, self.N - 1)
            y = self.rng.randrange(1, self.N - 1)
            if (x, y) != START_POS and game_map[x][y] == EMPTY_SYMBOL:
                return x, y

    def generate_map(self):
        """
        Generates a random N x N map, indexed game_map[x][y], one symbol per cell.

        The border is wall. Inside it go 1 to 15% of N*N pits, 1 to 10% of N*N
        extra walls, then one Wumpus, one Gold and one Supmuw. Nothing is ever
        placed on the start cell.
        """
        game_map = [[EMPTY_SYMBOL for _ in range(self.N)] for _ in range(self.N)]

        for i in range(self.N):
            game_map[i][0] = WALL_SYMBOL
            game_map[i][self.N - 1] = WALL_SYMBOL
            game_map[0][i] = WALL_SYMBOL
            game_map[self.N - 1][i] = WALL_SYMBOL

        num_pits = self.rng.randrange(max(1, int(self.N * self.N * PIT_DENSITY))) + 1
        num_walls = self.rng.randrange(max(1, int(self.N * self.N * WALL_DENSITY))) + 1
        # Leave room for the start cell and the three creatures/items.
        free_cells = (self.N - 2) * (self.N - 2) - 4
        num_pits = min(num_pits, free_cells // 2)
        num_walls = min(num_walls, free_cells - num_pits)

        for _ in range(num_pits):
            x, y = self._random_empty_cell(game_map)
            game_map[x][y] = PIT_SYMBOL

        for _ in range(num_walls):
            x, y = self._random_empty_cell(game_map)
            game_map[x][y] = WALL_SYMBOL

        for symbol in (WUMPUS_SYMBOL, GOLD_SYMBOL, SUPMUW_SYMBOL):
            x, y = self._random_empty_cell(game_map)
            game_map[x][y] = symbol

        return game_map
