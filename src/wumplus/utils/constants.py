# src/wumplus/utils/constants.py

# --- Game Configuration Defaults ---
MAP_SIZE = 14  # Default grid size, outer wall included
MAP_MAX_STEPS = 500  # Moves allowed before the game is lost
START_POS = (1, 1)  # The agent enters (and must leave) here
DESTINATION_ANCHOR = (0, 0)  # Fixed key of the unique destination fact

# Upper bounds for random placement, as a fraction of MAP_SIZE * MAP_SIZE
PIT_DENSITY = 0.15
WALL_DENSITY = 0.10

# --- Map Symbols ---
PLAYER_SYMBOL = "@"
EMPTY_SYMBOL = "."
WALL_SYMBOL = "#"
PIT_SYMBOL = "P"
WUMPUS_SYMBOL = "W"
GOLD_SYMBOL = "G"
SUPMUW_SYMBOL = "S"

# --- Percepts ---
PERCEPT_BUMP = "Bump"
PERCEPT_SMELL = "Smell"
PERCEPT_BREEZE = "Breeze"
PERCEPT_MOO = "Moo"
PERCEPT_GLITTER = "Glitter"
PERCEPT_DEAD = "Dead"
# Display order of the percept line
ALL_PERCEPTS = [
    PERCEPT_BUMP,
    PERCEPT_SMELL,
    PERCEPT_BREEZE,
    PERCEPT_MOO,
    PERCEPT_GLITTER,
    PERCEPT_DEAD,
]

# --- Scoring ---
SCORE_MOVE = -1
SCORE_DEATH = -1000
SCORE_SHOOT = -10
SCORE_KILL = 500
SCORE_GOLD = 1000
SCORE_FOOD = 100
SCORE_MIN = -1000  # Falling below this loses the game

# --- Game States ---
GAME_STATE_PLAYING = "Playing"
GAME_STATE_WON = "Won"
GAME_STATE_LOST = "Lost"
GAME_STATE_QUIT = "Quit"
