
CONTROL_FREQUENCY = 60
TIMESTEP = 1 / CONTROL_FREQUENCY  # interval between frames

### AUTOREF ###
AUTOREF_IDENTIFIER = "URUBots-AutoRef-Basic"
DEFAULT_DIVISION = "B"

### RULE THRESHOLDS ###
FIELD_MARGIN = 0.05  # m past a boundary line before the ball counts as out
FREE_KICK_MIN_DISTANCE = 0.5  # m, defenders must stay this far from the ball
DOUBLE_TOUCH_TIMEOUT = 0.5  # s
FREE_KICK_TIMEOUT_DIV_A = 5.0  # s
FREE_KICK_TIMEOUT_DIV_B = 10.0  # s
ROBOT_CONTACT_MARGIN = 0.09  # m, added to the ball radius
GOAL_DEPTH = 0.18  # m
BALL_MOVED_THRESHOLD = 0.05  # m, free kick counts as taken past this

### BALL ###
BALL_RADIUS = 0.0215
BALL_TELEPORT_HEIGHT = 0.02
VISION_UNITS_PER_METRE = 1000.0

### NETWORK ###
LOCAL_HOST = "localhost"
GAME_CONTROLLER_PORT = 10007
SIM_CONTROL_PORT = 10300  # IP '127.0.0.1'

