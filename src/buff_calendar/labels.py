"""Display labels for buff event types."""

from __future__ import annotations

import enum
import re

_WORD_START = re.compile(r"\b\w")

DEFAULT_EVENT_TYPE = "event"


class BuffType(str, enum.Enum):
    """Known buff kinds and their display labels."""

    DOUBLE_XP = "double_xp"
    TRIPLE_XP = "triple_xp"
    QUADRUPLE_XP = "quadruple_xp"
    DOUBLE_AETHER_SHARDS = "double_aether_shards"
    DOUBLE_QUEST_POINTS = "double_quest_points"
    DOUBLE_RANDOM_ENCOUNTERS = "double_random_encounters"
    QUADRUPLE_DROP_CHANCE = "quadruple_drop_chance"
    TRIPLE_DROP_CHANCE = "triple_drop_chance"
    DOUBLE_DROP_CHANCE = "double_drop_chance"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS: dict[BuffType, str] = {
    BuffType.DOUBLE_XP: "Double XP",
    BuffType.TRIPLE_XP: "Triple XP",
    BuffType.QUADRUPLE_XP: "Quadruple XP",
    BuffType.DOUBLE_AETHER_SHARDS: "Double Shards",
    BuffType.DOUBLE_QUEST_POINTS: "Double QP",
    BuffType.DOUBLE_RANDOM_ENCOUNTERS: "Double Encounter",
    BuffType.QUADRUPLE_DROP_CHANCE: "Quadruple Drops",
    BuffType.TRIPLE_DROP_CHANCE: "Triple Drops",
    BuffType.DOUBLE_DROP_CHANCE: "Double Drops",
}


def parse_buff_type(value: str | None) -> BuffType | None:
    """Return the matching BuffType, or None for unrecognized values."""
    try:
        return BuffType(value)
    except ValueError:
        return None


def type_label(value: str | None) -> str:
    """Human label for an event type.

    Unknown types are shown with underscores as spaces and each word
    capitalized, e.g. ``mystery_box_bonus`` becomes ``Mystery Box Bonus``.
    """
    raw = value or DEFAULT_EVENT_TYPE
    buff = parse_buff_type(raw)
    if buff is not None:
        return buff.label
    return _WORD_START.sub(lambda m: m.group(0).upper(), raw.replace("_", " "))
