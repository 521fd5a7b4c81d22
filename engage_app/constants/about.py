"""Static metadata describing EngageSphere."""

APP_NAME = "EngageSphere"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "EngageSphere is an interactive-session toolkit: run a timed agenda, live polls, "
    "a Q&A board, a word cloud and a quiz game from one room code."
)
