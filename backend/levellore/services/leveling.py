"""
XP to level conversion.

Clearing level k costs ``BASE_XP * k`` experience, so the thresholds form an
arithmetic progression: 100 XP leaves level 1, another 200 leaves level 2,
another 300 leaves level 3, and so on. Level is always derived from the stored
XP total and never stored on its own.
"""

from dataclasses import dataclass

BASE_XP = 100


@dataclass(frozen=True)
class LevelInfo:
    level: int
    xp_into_level: int
    xp_to_next_level: int

    @property
    def progress_percent(self) -> float:
        """Share of the current level already cleared, 0 to 100"""
        return round(self.xp_into_level / self.xp_to_next_level * 100, 2)


def compute_level(xp: int) -> LevelInfo:
    """Translate a cumulative XP total into level and progress within it"""
    if xp < 0:
        raise ValueError("xp must be non-negative")

    level = 1
    threshold = BASE_XP
    remaining = xp
    while remaining >= threshold:
        remaining -= threshold
        level += 1
        threshold += BASE_XP

    return LevelInfo(level=level, xp_into_level=remaining, xp_to_next_level=threshold)


def cumulative_xp_for_level(level: int) -> int:
    """Total XP needed to reach the start of ``level``"""
    if level < 1:
        raise ValueError("level must be at least 1")
    return BASE_XP * (level - 1) * level // 2
