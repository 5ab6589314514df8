# Difficulty presets: grid side length
LEVELS = {"easy": 12, "medium": 18, "hard": 26}
LEVEL_ORDER = ["easy", "medium", "hard"]
DEFAULT_LEVEL = "easy"
DEFAULT_SIZE = 12

# Timing, in milliseconds
TICK_MS = 1000
CHEER_MS = 30000
TOAST_MS = 3000

CHEERS = [
    "Keep going!",
    "You've got this!",
    "Nice focus, stay sharp!",
    "Great progress!",
]


def level_size(level):
    """Maps a level name ('easy'), or its 1-based number (2 or '2'), to a grid side length."""
    if isinstance(level, str):
        key = level.strip().lower()
        if key in LEVELS:
            return LEVELS[key]
        if key.isdigit():
            level = int(key)
    if isinstance(level, int) and not isinstance(level, bool) and 1 <= level <= len(LEVEL_ORDER):
        return LEVELS[LEVEL_ORDER[level - 1]]
    return DEFAULT_SIZE
