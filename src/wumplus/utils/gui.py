import time
import sys

import pygame

from ..agent.knowledge_base import FactKind
from .constants import (
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
    START_POS,
)

# Colors of the true map contents
CELL_COLORS = {
    EMPTY_SYMBOL: (70, 60, 50),
    WALL_SYMBOL: (35, 35, 35),
    PIT_SYMBOL: (10, 10, 10),
    WUMPUS_SYMBOL: (150, 40, 40),
    GOLD_SYMBOL: (255, 215, 0),
    SUPMUW_SYMBOL: (120, 80, 160),
}

PERCEPT_COLORS = {
    PERCEPT_BUMP: (255, 100, 100),
    PERCEPT_SMELL: (100, 255, 100),
    PERCEPT_BREEZE: (100, 200, 255),
    PERCEPT_MOO: (200, 150, 255),
    PERCEPT_GLITTER: (255, 215, 0),
    PERCEPT_DEAD: (255, 50, 50),
}

# Letters drawn over a cell for what the agent has inferred there
INFERENCE_LABELS = [
    (FactKind.WUMPUS, "W?", (255, 120, 120)),
    (FactKind.PIT, "P?", (180, 180, 255)),
    (FactKind.SUPMUW, "S?", (220, 180, 255)),
]


class WumplusGUI:
    def __init__(self, N, window_width=1100, window_height=760):
        """
        Initialize the Pygame GUI.

        Args:
            N (int): Size of the grid (N x N)
            window_width (int): Width of the Pygame window
            window_height (int): Height of the Pygame window
        """
        pygame.init()
        pygame.display.set_caption("Wum+")

        self.window_width = window_width
        self.window_height = window_height
        self.screen = pygame.display.set_mode((window_width, window_height))

        # Grid sized to leave room for the info panel on the right
        self.N = N
        max_grid_height = window_height - 100
        max_grid_width = window_width - 400
        self.grid_size = min(max_grid_width // N, max_grid_height // N)
        self.grid_offset_x = 50
        self.grid_offset_y = 50

        self.paused = False
        self._step_once = False

        self.font_small = pygame.font.SysFont('Arial', 16)
        self.font_medium = pygame.font.SysFont('Arial', 20)
        self.font_large = pygame.font.SysFont('Arial', 24, True)

        self.log_messages = []
        self.max_log_messages = 100

    def display_map(self, game_map, known_map, agent_pos, destination, score, steps_taken,
                    agent_has_gold, percepts, message=""):
        """
        Draws the true map, dimmed where the agent has not been, with the
        agent's knowledge on top of it and an info panel beside it.

        Args:
            game_map: The true map, game_map[x][y]
            known_map: Per cell, the set of FactKind the agent holds
            agent_pos: Current agent position
            destination: The agent's destination or None
            score: Current score
            steps_taken: Moves made so far
            agent_has_gold: Whether the agent carries the gold
            percepts: Current percepts
            message: Message to display
        """
        if message:
            self.log_messages.append(message)
            if len(self.log_messages) > self.max_log_messages:
                self.log_messages.pop(0)

        self.screen.fill((20, 20, 20))
        self._draw_grid(game_map, known_map, agent_pos, destination)
        self._draw_info_panel(score, steps_taken, agent_has_gold, agent_pos, percepts, message)
        pygame.display.flip()

    def _cell_rect(self, x, y):
        # Row 0 is the top of the screen, as in the terminal map.
        return pygame.Rect(
            self.grid_offset_x + x * self.grid_size,
            self.grid_offset_y + y * self.grid_size,
            self.grid_size,
            self.grid_size,
        )

    def _draw_grid(self, game_map, known_map, agent_pos, destination):
        for y in range(self.N):
            for x in range(self.N):
                rect = self._cell_rect(x, y)
                kinds = known_map[x][y]

                cell = pygame.Surface((self.grid_size, self.grid_size))
                cell.fill(CELL_COLORS.get(game_map[x][y], CELL_COLORS[EMPTY_SYMBOL]))
                if FactKind.VISITED not in kinds:
                    cell.set_alpha(110)  # not seen by the agent yet
                self.screen.blit(cell, rect.topleft)

                if FactKind.SAFE in kinds and FactKind.VISITED not in kinds:
                    overlay = pygame.Surface((self.grid_size, self.grid_size), pygame.SRCALPHA)
                    overlay.fill((0, 255, 0, 50))
                    self.screen.blit(overlay, rect.topleft)

                label_y = rect.y + 2
                for kind, label, color in INFERENCE_LABELS:
                    if kind in kinds:
                        text = self.font_small.render(label, True, color)
                        self.screen.blit(text, (rect.x + 2, label_y))
                        label_y += text.get_height()

                # Clue markers along the bottom edge of visited cells
                dot_x = rect.x + self.grid_size // 6
                for kind, percept in [(FactKind.SMELL, PERCEPT_SMELL), (FactKind.BREEZE, PERCEPT_BREEZE),
                                      (FactKind.MOO, PERCEPT_MOO)]:
                    if kind in kinds:
                        pygame.draw.circle(self.screen, PERCEPT_COLORS[percept],
                                           (dot_x, rect.bottom - self.grid_size // 6), max(2, self.grid_size // 10))
                        dot_x += self.grid_size // 3

                if (x, y) == destination:
                    pygame.draw.rect(self.screen, (0, 200, 255), rect.inflate(-6, -6), 2)
                if (x, y) == START_POS:
                    pygame.draw.rect(self.screen, (255, 255, 0), rect, 3)
                else:
                    pygame.draw.rect(self.screen, (100, 100, 100), rect, 1)

                if (x, y) == agent_pos:
                    pygame.draw.circle(self.screen, (240, 240, 240), rect.center, self.grid_size // 3)

        for i in range(self.N):
            text = self.font_small.render(str(i), True, (255, 255, 255))
            self.screen.blit(text, (
                self.grid_offset_x - 25,
                self.grid_offset_y + i * self.grid_size + self.grid_size // 2 - text.get_height() // 2
            ))
            self.screen.blit(text, (
                self.grid_offset_x + i * self.grid_size + self.grid_size // 2 - text.get_width() // 2,
                self.grid_offset_y + self.N * self.grid_size + 10
            ))

    def _draw_info_panel(self, score, steps_taken, agent_has_gold, agent_pos, percepts, message):
        panel_x = self.grid_offset_x + self.N * self.grid_size + 30
        panel_y = self.grid_offset_y
        panel_width = self.window_width - panel_x - 20

        title = self.font_large.render("Wum+", True, (255, 255, 255))
        self.screen.blit(title, (panel_x, panel_y))
        panel_y += 40

        for line in [f"Score: {score}", f"Steps: {steps_taken}", f"Position: {agent_pos}",
                     f"Has Gold: {'Yes' if agent_has_gold else 'No'}"]:
            text = self.font_medium.render(line, True, (255, 255, 255))
            self.screen.blit(text, (panel_x, panel_y))
            panel_y += 28

        panel_y += 10
        header = self.font_medium.render("Current Percepts:", True, (255, 255, 255))
        self.screen.blit(header, (panel_x, panel_y))
        panel_y += 30
        if percepts:
            for percept in sorted(percepts):
                pygame.draw.circle(self.screen, PERCEPT_COLORS.get(percept, (200, 200, 200)),
                                   (panel_x + 10, panel_y + 10), 8)
                text = self.font_small.render(percept, True, (255, 255, 255))
                self.screen.blit(text, (panel_x + 25, panel_y + 2))
                panel_y += 22
        else:
            text = self.font_small.render("None", True, (200, 200, 200))
            self.screen.blit(text, (panel_x + 10, panel_y))
            panel_y += 22

        panel_y += 10
        status = self.font_medium.render("Status:", True, (255, 255, 255))
        self.screen.blit(status, (panel_x, panel_y))
        panel_y += 28
        for line in self._wrap(message, panel_width)[:3]:
            text = self.font_small.render(line, True, (200, 200, 200))
            self.screen.blit(text, (panel_x + 10, panel_y))
            panel_y += 20

        panel_y += 10
        log_header = self.font_medium.render("Log:", True, (255, 255, 255))
        self.screen.blit(log_header, (panel_x, panel_y))
        panel_y += 28
        max_lines = max(0, (self.window_height - panel_y - 40) // 20)
        for i, log_msg in enumerate(reversed(self.log_messages[-max_lines:] if max_lines else [])):
            color = (180, 180, 200) if i % 2 == 0 else (200, 200, 180)
            text = self.font_small.render(log_msg, True, color)
            self.screen.blit(text, (panel_x + 10, panel_y))
            panel_y += 20

        legend = self.font_small.render("P: pause/play   SPACE/RIGHT: step while paused", True, (200, 200, 200))
        self.screen.blit(legend, (self.window_width // 2 - legend.get_width() // 2, self.window_height - 30))

    def _wrap(self, message, width):
        lines, current_line = [], ""
        for word in message.split():
            test_line = current_line + " " + word if current_line else word
            if self.font_small.size(test_line)[0] < width - 20:
                current_line = test_line
            else:
                lines.append(current_line)
                current_line = word
        if current_line:
            lines.append(current_line)
        return lines

    def pause(self, seconds=0.5):
        """
        Waits `seconds` while handling keys. P toggles pause; while paused,
        SPACE or RIGHT lets exactly one more step run.
        """
        start_time = time.time()
        while self.paused or time.time() - start_time < seconds:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.cleanup()
                    sys.exit()
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_p:
                        self.paused = not self.paused
                    elif event.key in (pygame.K_SPACE, pygame.K_RIGHT) and self.paused:
                        # Run a single step, then pause again on the next call
                        self.paused = False
                        self._step_once = True
            if self._step_once:
                self._step_once = False
                self.paused = True
                return
            time.sleep(0.01)

    def wait_for_key(self, score=None, game_state=None):
        """Shows the final score and waits for any key."""
        if score is not None and game_state is not None:
            overlay = pygame.Surface((400, 130), pygame.SRCALPHA)
            overlay.fill((0, 0, 0, 200))
            for i, (line, font) in enumerate([("GAME OVER", self.font_large),
                                              (f"Final Score: {score}", self.font_medium),
                                              (f"Game State: {game_state}", self.font_medium),
                                              ("Press any key to exit", self.font_small)]):
                text = font.render(line, True, (255, 255, 255))
                overlay.blit(text, (200 - text.get_width() // 2, 10 + i * 28))
            self.screen.blit(overlay, (
                self.grid_offset_x + (self.grid_size * self.N) // 2 - 200,
                self.grid_offset_y + (self.grid_size * self.N) // 2 - 65,
            ))
            pygame.display.flip()

        waiting = True
        while waiting:
            for event in pygame.event.get():
                if event.type in (pygame.QUIT, pygame.KEYDOWN):
                    waiting = False
            time.sleep(0.01)

    def cleanup(self):
        pygame.quit()
