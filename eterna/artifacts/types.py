"""
Type definitions for the artifact system.
"""

from enum import Enum
from typing import Literal, Tuple, get_args

# Strictly define allowed support actions
SupportAction = Literal["vote", "stake", "interact"]
SUPPORT_ACTIONS: Tuple[str, ...] = get_args(SupportAction)

Rarity = Literal["Common", "Uncommon", "Rare", "Epic", "Legendary"]
RARITIES: Tuple[str, ...] = get_args(Rarity)


class ReactionKind(str, Enum):
    """Closed set of reactions a comment can receive."""

    THUMBS_UP = "👍"
    HEART = "❤️"
    SURPRISED = "😮"
    SAD = "😢"
    CELEBRATE = "🎉"
