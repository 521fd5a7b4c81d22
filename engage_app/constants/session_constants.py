"""Session-related constants shared across the core and API layers."""

ROOM_CODE_LENGTH: int = 6
ROOM_CODE_ALPHABET: str = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"

TICK_INTERVAL_SECONDS: float = 1.0

DEFAULT_AGENDA_ITEM_MINUTES: int = 5
COUNTDOWN_BEEP_WINDOW_SECONDS: int = 5
MILESTONE_SECONDS: tuple[int, ...] = (30, 60)

WORD_CLOUD_LIMIT: int = 50
WORD_CLOUD_MIN_FONT_REM: float = 1.0
WORD_CLOUD_MAX_FONT_REM: float = 5.0

CORRECT_ANSWER_BASE_POINTS: int = 1000
POINTS_PER_SECOND_REMAINING: int = 10
QUIZ_OPTION_COUNT: int = 4
RESULT_PREVIEW_SIZE: int = 5
