"""
Experience rewards for mudcombat.

Kill rewards grow linearly with the slain character's level so that low
level targets remain worth something while stronger targets pay out more.
"""

# Reward for a level-0 target and the increment per level
_BASE_MOB_XP = 45
_MOB_XP_PER_LEVEL = 5


def mob_experience(level: int) -> int:
    """
    Experience awarded for killing a character of the given level.

    Args:
        level: Level of the slain character (0 or higher).

    Returns:
        Experience reward.

    Raises:
        ValueError: If level < 0.
    """
    if level < 0:
        raise ValueError("level must be >= 0")
    return _BASE_MOB_XP + _MOB_XP_PER_LEVEL * level


def death_experience_penalty(experience: int, percent: int) -> int:
    """
    Experience lost on death: ``floor(experience * percent / 100)``.

    Integer arithmetic keeps the result exact for any experience total.

    Args:
        experience: Current experience total.
        percent: Penalty percentage (0-100).

    Returns:
        Experience to deduct; never negative.
    """
    if experience <= 0:
        return 0
    return experience * percent // 100
