# src/wumplus/utils/actions.py
from enum import Enum


class Direction(Enum):
    """Cardinal directions as (dx, dy). North is towards row 0."""
    NORTH = (0, -1)
    SOUTH = (0, 1)
    EAST = (1, 0)
    WEST = (-1, 0)
    NO_PATH = (0, 0)

    @property
    def dx(self):
        return self.value[0]

    @property
    def dy(self):
        return self.value[1]

    def step(self, pos):
        """Returns the cell reached by moving one square from `pos`."""
        return (pos[0] + self.dx, pos[1] + self.dy)


# Order in which a cell's neighbours are examined. Ties are won by the first.
NEIGHBOR_ORDER = (Direction.WEST, Direction.EAST, Direction.NORTH, Direction.SOUTH)


class Action(Enum):
    """Everything the player can do in a turn, keyed by its command letter."""
    MOVE_NORTH = "n"
    MOVE_SOUTH = "s"
    MOVE_EAST = "e"
    MOVE_WEST = "w"
    SHOOT_NORTH = "N"
    SHOOT_SOUTH = "S"
    SHOOT_EAST = "E"
    SHOOT_WEST = "W"
    GRAB = "g"
    QUIT = "q"

    @property
    def is_move(self):
        return self in _MOVES.values()

    @property
    def is_shoot(self):
        return self in _SHOTS.values()

    @property
    def direction(self):
        """Direction of a move or shot, None for the other actions."""
        for table in (_MOVES, _SHOTS):
            for direction, action in table.items():
                if action is self:
                    return direction
        return None

    @classmethod
    def move(cls, direction):
        return _MOVES[direction]

    @classmethod
    def shoot(cls, direction):
        return _SHOTS[direction]

    @classmethod
    def from_command(cls, command):
        """Parses a typed command letter, VI movement keys included. None if unknown."""
        command = VI_KEYS.get(command, command)
        try:
            return cls(command)
        except ValueError:
            return None


_MOVES = {
    Direction.NORTH: Action.MOVE_NORTH,
    Direction.SOUTH: Action.MOVE_SOUTH,
    Direction.EAST: Action.MOVE_EAST,
    Direction.WEST: Action.MOVE_WEST,
}
_SHOTS = {
    Direction.NORTH: Action.SHOOT_NORTH,
    Direction.SOUTH: Action.SHOOT_SOUTH,
    Direction.EAST: Action.SHOOT_EAST,
    Direction.WEST: Action.SHOOT_WEST,
}

VI_KEYS = {"k": "n", "j": "s", "l": "e", "h": "w"}
