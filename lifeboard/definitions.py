"""Screen layout, timing, asset locations and colours used across the game."""

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 800

GAME_TITLE = "Conway's Game Of Life"

PATH_PRESET_GLIDER_GUN = "../assets/presets/GliderGun.txt"
PATH_PRESET_SYMMETRY_ACORN = "../assets/presets/SymmetryAcorn.txt"
PATH_PRESET_B_HEPTOMINO = "../assets/presets/B-Heptomino.txt"

PATH_MOULDY_FONT = "../assets/fonts/MouldyCheeseRegular.ttf"

PATH_MENUSTATE_BACKGROUND = "../assets/res/MenuBackground.png"
PATH_SPLASH_BACKGROUND = "../assets/res/SplashBackground.png"

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
RED = (255, 0, 0)
GREEN = (0, 255, 0)
TRANSPARENT = (0, 0, 0, 0)

GAMESTATE_BACKGROUND_COLOR = BLACK
GAMESTATE_TEXT_NORMAL_COLOR = WHITE
GAMESTATE_TEXT_ACTIVE_COLOR = RED

SPLASHSTATE_DELAY_SECONDS = 1.0

BOARD_ROWS = 50
BOARD_COLUMNS = 50
BOARD_MARGIN = 50.0

GENERATION_DELAY_SECONDS = 0.01
MAX_GENERATION_DELAY_SECONDS = 0.005
MIN_GENERATION_DELAY_SECONDS = 0.1
GENERATION_DELAY_STEP_SECONDS = 0.005

CELL_WIDTH = (SCREEN_WIDTH - 2 * BOARD_MARGIN) / BOARD_ROWS
CELL_HEIGHT = (SCREEN_HEIGHT - 2 * BOARD_MARGIN) / BOARD_COLUMNS
CELL_OUTLINE_THICKNESS = 1.0

# Fill colour of a shape that has never been coloured.
CELL_DEFAULT_FILL_COLOR = WHITE
CELL_ALIVE_FILL_COLOR = GREEN
CELL_DEAD_FILL_COLOR = BLACK
CELL_OUTLINE_COLOR = TRANSPARENT

CELL_ALIVE_RANDOM_COLORS = (
    (250, 221, 35),
    (35, 250, 232),
    (35, 250, 39),
    (35, 35, 250),
    (211, 35, 250),
    (250, 153, 35),
)

CELL_DEAD_TRAIL_SHADES = (
    (190, 0, 0),
    (150, 0, 0),
    (120, 0, 0),
    (100, 0, 0),
    (80, 0, 0),
    (70, 0, 0),
    (60, 0, 0),
    (50, 0, 0),
    (30, 0, 0),
    (15, 0, 0),
    BLACK,
)