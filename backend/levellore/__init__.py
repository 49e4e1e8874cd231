"""LevelLore: daily XP, trivia quiz, chat and leaderboard backend."""

__version__ = "0.1.0"
