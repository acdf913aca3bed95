# src/wumplus/utils/display.py

import sys
import time

from ..agent.knowledge_base import FactKind
from .constants import (
    MAP_MAX_STEPS,
    PLAYER_SYMBOL,
    ALL_PERCEPTS,
    SCORE_MOVE,
    SCORE_DEATH,
    SCORE_SHOOT,
    SCORE_FOOD,
    SCORE_GOLD,
    SCORE_KILL,
    SCORE_MIN,
    GAME_STATE_WON,
    GAME_STATE_LOST,
)

# What the agent's view shows for a cell, first match wins
KNOWLEDGE_SYMBOLS = [
    (FactKind.BUMP, "#"),
    (FactKind.GLITTER, "G"),
    (FactKind.WUMPUS, "W"),
    (FactKind.PIT, "P"),
    (FactKind.SUPMUW, "S"),
    (FactKind.VISITED, "v"),
    (FactKind.SAFE, "+"),
]


class WumplusDisplay:
    """Plain terminal output for the game, for both the human and the agent."""
    def __init__(self, N, stream=None):
        self.N = N
        self.stream = stream if stream is not None else sys.stdout

    def _print(self, *args, **kwargs):
        print(*args, file=self.stream, **kwargs)

    def print_banner(self):
        self._print("Wum+ -- a wumpus clone with a self-solving agent")
        self._print("Scoring:")
        self._print(f" Move ({SCORE_MOVE}), Death ({SCORE_DEATH}), Shoot ({SCORE_SHOOT})")
        self._print(f" Food ({SCORE_FOOD}), Gold ({SCORE_GOLD}), Kill Wumpus({SCORE_KILL})")
        self._print(f"Available Percepts: [{','.join(ALL_PERCEPTS)}]")
        self._print(f"Losing Conditions: Score < {SCORE_MIN} or Steps > {MAP_MAX_STEPS} or Dead")
        self._print("Winning Conditions: Gold and Player in starting position (1,1).")
        self._print("Run with --agent to let the agent play")

    def print_help(self):
        self._print("Usable commands:")
        self._print(" n,s,e,w    Move in direction given (also VI keybindings)")
        self._print(" N,S,E,W    Shoot in direction given")
        self._print(" g          Grab gold")
        self._print(" q          Quit")

    def print_map(self, game_map, agent_pos):
        """The true map, row 0 at the top."""
        for y in range(self.N):
            row = ""
            for x in range(self.N):
                row += PLAYER_SYMBOL if (x, y) == agent_pos else game_map[x][y]
            self._print(row)
        self._print()

    def print_knowledge(self, known_map, agent_pos, destination=None):
        """What the agent believes, one symbol per cell, '?' where it knows nothing."""
        for y in range(self.N):
            row = ""
            for x in range(self.N):
                if (x, y) == agent_pos:
                    row += PLAYER_SYMBOL
                    continue
                if (x, y) == destination:
                    row += "*"
                    continue
                kinds = known_map[x][y]
                row += next((symbol for kind, symbol in KNOWLEDGE_SYMBOLS if kind in kinds), "?")
            self._print(row)
        self._print()

    def print_percepts(self, percepts):
        words = [p if p in percepts else "None" for p in ALL_PERCEPTS]
        self._print(f"Percepts: [{','.join(words)}]")

    def print_score(self, score, steps_taken):
        self._print(f"Score: {score:5d}\tSteps Taken: {steps_taken:3d}/{MAP_MAX_STEPS}")

    def print_message(self, message):
        if message:
            self._print(message)

    def print_final_analysis(self, game_map, agent_pos, percepts, game_state, dead, score, steps_taken):
        self._print("\nFinal Analysis of gameplay")
        self.print_map(game_map, agent_pos)
        self.print_percepts(percepts)
        if game_state == GAME_STATE_LOST:
            self._print("Apparently you are not a winner. That would make you a loser.")
        if dead:
            self._print("You have died. Indiana Jones would be ashamed.")
        if game_state == GAME_STATE_WON:
            self._print("You have won, the plantation is saved. Glory! Glory!")
        self.print_score(score, steps_taken)

    def print_kb_dump(self, facts, stream=None):
        """Numbered listing of the knowledge base, to stderr unless told otherwise."""
        stream = stream if stream is not None else sys.stderr
        print("Knowledge Base Dump", file=stream)
        for counter, (kind, x, y) in enumerate(facts, start=1):
            print(f"{counter:4d}: {kind.name:>7s}: ({x:2d}, {y:2d})", file=stream)

    def pause(self, seconds=0.5):
        """Pauses the display for a given number of seconds."""
        if seconds > 0:
            time.sleep(seconds)
