# src/wumplus/environment/environment.py

from .map_generator import MapGenerator
from ..utils.actions import Action
from ..utils.constants import (
    MAP_SIZE,
    MAP_MAX_STEPS,
    START_POS,
    EMPTY_SYMBOL,
    WALL_SYMBOL,
    PIT_SYMBOL,
    WUMPUS_SYMBOL,
    GOLD_SYMBOL,
    SUPMUW_SYMBOL,
    PERCEPT_BUMP,
    PERCEPT_SMELL,
    PERCEPT_BREEZE,
    PERCEPT_MOO,
    PERCEPT_GLITTER,
    PERCEPT_DEAD,
    SCORE_MOVE,
    SCORE_DEATH,
    SCORE_SHOOT,
    SCORE_KILL,
    SCORE_GOLD,
    SCORE_FOOD,
    SCORE_MIN,
    GAME_STATE_PLAYING,
    GAME_STATE_WON,
    GAME_STATE_LOST,
    GAME_STATE_QUIT,
)


class WumplusEnvironment:
    """
    The true world: a map the agent never sees, the player's body on it,
    the score, and the rules deciding what is sensed, what kills, and who wins.
    """
    def __init__(self, N=MAP_SIZE, rng=None, game_map=None):
        self.N = N
        self.map_generator = MapGenerator(N, rng)
        self.game_map = game_map  # The true, hidden map, game_map[x][y]
        self.agent_pos = START_POS
        self.agent_arrows = 1
        self.agent_has_food = False
        self.agent_has_gold = False
        self.score = 0
        self.steps_taken = 0
        self.game_state = GAME_STATE_PLAYING
        self.bumped = False  # Set by a move into a wall, sensed on the next turn only
        self.killed_at = None  # Cell of the beast slain by the latest action
        self.supmuw_neighbors_wumpus = False

        self._initialize_game()

    @classmethod
    def from_config(cls, config):
        """
        Builds a fixed world from a testcase dictionary:
        N, walls, pit_positions, wumpus_position, gold_position, supmuw_position.
        The outer wall is always added.
        """
        try:
            N = int(config["N"])
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Testcase needs an integer N: {e}") from e
        if N < 4:
            raise ValueError(f"Map size {N} is too small, need at least 4")

        game_map = [[EMPTY_SYMBOL for _ in range(N)] for _ in range(N)]
        for i in range(N):
            game_map[i][0] = game_map[i][N - 1] = WALL_SYMBOL
            game_map[0][i] = game_map[N - 1][i] = WALL_SYMBOL

        placements = [(WALL_SYMBOL, pos) for pos in config.get("walls", [])]
        placements += [(PIT_SYMBOL, pos) for pos in config.get("pit_positions", [])]
        for symbol, key in [
            (WUMPUS_SYMBOL, "wumpus_position"),
            (GOLD_SYMBOL, "gold_position"),
            (SUPMUW_SYMBOL, "supmuw_position"),
        ]:
            if config.get(key) is not None:
                placements.append((symbol, config[key]))

        for symbol, pos in placements:
            try:
                x, y = int(pos[0]), int(pos[1])
            except (TypeError, ValueError, IndexError) as e:
                raise ValueError(f"Bad position {pos!r} for {symbol}: {e}") from e
            if not (0 < x < N - 1 and 0 < y < N - 1):
                raise ValueError(f"{symbol} at {(x, y)} is outside the playable area")
            if (x, y) == START_POS:
                raise ValueError(f"{symbol} may not be placed on the start cell {START_POS}")
            game_map[x][y] = symbol

        return cls(N, game_map=game_map)

    def _initialize_game(self):
        """Sets up a new game board and resets all state variables."""
        if self.game_map is None:
            self.game_map = self.map_generator.generate_map()
        self.agent_pos = START_POS
        self.agent_arrows = 1
        self.agent_has_food = False
        self.agent_has_gold = False
        self.score = 0
        self.steps_taken = 0
        self.game_state = GAME_STATE_PLAYING
        self.bumped = False
        self.killed_at = None
        self.supmuw_neighbors_wumpus = any(
            self.game_map[nx][ny] == WUMPUS_SYMBOL
            for x, y in self._cells_holding(SUPMUW_SYMBOL)
            for nx, ny in self._neighbors(x, y)
        )

    def _cells_holding(self, symbol):
        return [(x, y) for x in range(self.N) for y in range(self.N) if self.game_map[x][y] == symbol]

    def _neighbors(self, x, y):
        return [
            (nx, ny)
            for nx, ny in [(x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)]
            if self.in_bounds(nx, ny)
        ]

    def in_bounds(self, x, y):
        return 0 <= x < self.N and 0 <= y < self.N

    def is_wall(self, x, y):
        return not self.in_bounds(x, y) or self.game_map[x][y] == WALL_SYMBOL

    def is_deadly(self, x, y):
        cell = self.game_map[x][y]
        return cell in (PIT_SYMBOL, WUMPUS_SYMBOL) or (cell == SUPMUW_SYMBOL and self.supmuw_neighbors_wumpus)

    def percepts_at(self, x, y):
        """Everything sensed standing at (x, y), a pending bump aside."""
        percepts = set()
        around = {self.game_map[nx][ny] for nx, ny in self._neighbors(x, y)}

        if self.is_deadly(x, y):
            percepts.add(PERCEPT_DEAD)
        if WUMPUS_SYMBOL in around:
            percepts.add(PERCEPT_SMELL)
        if PIT_SYMBOL in around:
            percepts.add(PERCEPT_BREEZE)
        if SUPMUW_SYMBOL in around:
            percepts.add(PERCEPT_MOO)
            # A supmuw living next to the wumpus picks up its stench.
            if self.supmuw_neighbors_wumpus:
                percepts.add(PERCEPT_SMELL)
        if self.game_map[x][y] == GOLD_SYMBOL:
            percepts.add(PERCEPT_GLITTER)
        return percepts

    def get_percepts(self):
        """Percepts at the player's cell. A bump is reported once, then forgotten."""
        percepts = self.percepts_at(*self.agent_pos)
        if self.bumped:
            percepts.add(PERCEPT_BUMP)
            self.bumped = False
        return percepts

    def has_won(self):
        return self.agent_has_gold and self.agent_pos == START_POS

    def has_lost(self):
        return (
            self.score < SCORE_MIN
            or self.steps_taken > MAP_MAX_STEPS
            or self.is_deadly(*self.agent_pos)
        )

    def _update_game_state(self):
        if self.has_won():
            self.game_state = GAME_STATE_WON
        elif self.has_lost():
            self.game_state = GAME_STATE_LOST

    def apply_action(self, action):
        """
        Processes the player's chosen action, updates the environment state,
        and returns a message describing the outcome.
        """
        if self.game_state != GAME_STATE_PLAYING:
            return "The game is over."

        self.killed_at = None

        if action.is_move:
            message = self._move(action.direction)
        elif action.is_shoot:
            message = self._shoot(action.direction)
        elif action == Action.GRAB:
            message = self._grab()
        elif action == Action.QUIT:
            self.game_state = GAME_STATE_QUIT
            return "You gave up."
        else:
            return "Do what now? (Unknown action)"

        self._update_game_state()
        return message

    def _move(self, direction):
        self.score += SCORE_MOVE
        self.steps_taken += 1
        x2, y2 = direction.step(self.agent_pos)
        message = f"Moving {direction.name.title()} {(x2, y2)}."

        if self.is_wall(x2, y2):
            self.bumped = True
            return message + " You bumped into a wall!"

        if self.game_map[x2][y2] == SUPMUW_SYMBOL and not self.agent_has_food and not self.supmuw_neighbors_wumpus:
            self.agent_has_food = True
            self.score += SCORE_FOOD
            message += " The supmuw has gifted food to you!"

        self.agent_pos = (x2, y2)
        if self.is_deadly(x2, y2):
            self.score += SCORE_DEATH
            if self.game_map[x2][y2] == PIT_SYMBOL:
                message += " You have fallen into a pit!"
            else:
                message += " You have been consumed by the beast!"
        return message

    def _shoot(self, direction):
        if not self.agent_arrows:
            return "You are out of arrows!"

        self.score += SCORE_SHOOT
        self.agent_arrows -= 1
        x2, y2 = direction.step(self.agent_pos)
        message = f"Shooting {direction.name.title()}."

        if self.in_bounds(x2, y2) and self.game_map[x2][y2] in (WUMPUS_SYMBOL, SUPMUW_SYMBOL):
            self.score += SCORE_KILL
            self.game_map[x2][y2] = EMPTY_SYMBOL
            # Whoever died, the supmuw no longer lives next to the wumpus.
            self.supmuw_neighbors_wumpus = False
            self.killed_at = (x2, y2)
            message += " You hear a deafening scream as you slay the beast."
        return message

    def _grab(self):
        x, y = self.agent_pos
        if self.game_map[x][y] != GOLD_SYMBOL:
            return "There is nothing here to grab."
        self.score += SCORE_GOLD
        self.game_map[x][y] = EMPTY_SYMBOL
        self.agent_has_gold = True
        return "You have found gold!"

    def get_current_state(self):
        """Returns a dictionary of the current environment state for the agent."""
        return {
            "agent_pos": self.agent_pos,
            "agent_arrows": self.agent_arrows,
            "agent_has_food": self.agent_has_food,
            "agent_has_gold": self.agent_has_gold,
            "score": self.score,
            "steps_taken": self.steps_taken,
            "game_state": self.game_state,
            "killed_at": self.killed_at,
        }

    def get_true_map(self):
        return self.game_map
