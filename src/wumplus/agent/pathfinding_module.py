# src/wumplus/agent/pathfinding_module.py
from collections import deque

from ..utils.actions import Direction, NEIGHBOR_ORDER
from ..utils.constants import MAP_SIZE


class PathfindingModule:
    """
    Picks the next step towards a destination by flooding the known-safe part
    of the map outward from the destination.

    Each safe cell reached by the flood gets a weight: 1 on the destination,
    one more for every step away from it. Standing next to the flood, the agent
    only has to step onto the neighbour with the smallest weight. Cells that
    are not proven safe never get a weight, so the agent never routes through
    unknown ground.
    """
    def __init__(self, N=MAP_SIZE):
        """
        Args:
            N (int): The size of the N x N grid.
        """
        self.N = N

    def _is_valid_coord(self, x, y):
        return 0 <= x < self.N and 0 <= y < self.N

    def compute_weights(self, kb, goal_pos):
        """
        Runs the flood from `goal_pos` over the knowledge base.

        Returns:
            list[list[int]]: weights[x][y], 0 meaning unreachable or not safe.
        """
        weights = [[0] * self.N for _ in range(self.N)]
        marked = [[False] * self.N for _ in range(self.N)]

        gx, gy = goal_pos
        if not self._is_valid_coord(gx, gy):
            return weights
        weights[gx][gy] = 1
        queue = deque([goal_pos])

        while queue:
            x, y = queue.popleft()
            if kb.is_wall(x, y) or not kb.is_safe(x, y) or marked[x][y]:
                continue
            marked[x][y] = True

            new_weight = weights[x][y] + 1
            for direction in NEIGHBOR_ORDER:
                nx, ny = direction.step((x, y))
                if not self._is_valid_coord(nx, ny):
                    continue
                queue.append((nx, ny))
                if weights[nx][ny] == 0 or weights[nx][ny] > new_weight:
                    weights[nx][ny] = new_weight

        # Whatever the flood touched but could not stand on is not a way through.
        for x in range(self.N):
            for y in range(self.N):
                if kb.is_wall(x, y) or (not kb.is_safe(x, y) and not kb.is_visited(x, y)):
                    weights[x][y] = 0
        return weights

    def find_direction(self, kb, start_pos, goal_pos):
        """
        The direction of the first step from `start_pos` towards `goal_pos`.

        Returns:
            Direction: the step to take, or Direction.NO_PATH if no neighbour of
            `start_pos` is connected to the goal through safe cells.
        """
        weights = self.compute_weights(kb, goal_pos)

        best_weight = 0
        best = Direction.NO_PATH
        for direction in NEIGHBOR_ORDER:
            nx, ny = direction.step(start_pos)
            if not self._is_valid_coord(nx, ny):
                continue
            weight = weights[nx][ny]
            if weight and (best_weight == 0 or weight < best_weight):
                best_weight = weight
                best = direction
        return best
