# Board defaults (classic 10x10 game)
BOARD_SIZE = 10

# Cell back-reference for water
NO_SHIP = -1

# Second scoreboard slot; there is no opponent to score against.
OPPONENT_SCORE = 0

# Debug switches (see seabattle.utils.debug)
DEBUG_ENV_VAR = "SEABATTLE_DEBUG"
DEBUG_LOG_PATH = "seabattle_debug.log"
