NUM_PLAYERS = 4  # The game always seats exactly four players
PLAYER_NAME_CAPACITY = 12  # Max UTF-8 bytes the game accepts for a player name

SEED_MAX = 2**32 - 1  # Seeds are unsigned 32-bit integers

DEFAULT_INSTANCES = 100
DEFAULT_SEED = 0
DEFAULT_SETTINGS_FILE = "default.cnf"
DEFAULT_GAME_COMMAND = ("./Game",)

SEED_FLAG = "-s"

# One line per player on the game's stderr, in seating order
SCORE_LINE_PATTERN = r"player \S* got score (\d+)"

PROGRESS_DESCRIPTION = "Running games..."
