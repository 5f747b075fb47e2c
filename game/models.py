from enum import Enum
from typing import Dict, Optional

from config import GameConfig

# -----------------------------
# ITEMS
# -----------------------------

class ItemKind(str, Enum):
    """
    The four consumables. Values are the names clients send over the wire.
    """
    INSPECT = "mag"
    HEAL = "cigar"
    DOUBLE_DAMAGE = "saw"
    SKIP = "soda"

    @classmethod
    def parse(cls, value) -> Optional["ItemKind"]:
        """Accept wire names ("saw") and canonical names ("doubleDamage")."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        key = value.strip()
        for kind in cls:
            if key == kind.value:
                return kind
        return _ALIASES.get(key.lower().replace("_", "").replace("-", ""))


_ALIASES = {
    "inspect": ItemKind.INSPECT,
    "heal": ItemKind.HEAL,
    "doubledamage": ItemKind.DOUBLE_DAMAGE,
    "skip": ItemKind.SKIP,
}


def empty_items() -> Dict[ItemKind, int]:
    return {kind: 0 for kind in ItemKind}


# -----------------------------
# PLAYER
# -----------------------------

class Player:
    """A seat at the table and its combat state."""

    def __init__(self, player_id: str, name: str, items: Optional[Dict[ItemKind, int]] = None):
        self.id = player_id
        self.name = name
        self.hp = GameConfig.MAX_HP
        self.items = empty_items()
        if items:
            self.items.update(items)
        # Sawed-off armed: next fired shot deals double damage
        self.saw = False

    @property
    def is_alive(self) -> bool:
        return self.hp > 0

    @property
    def item_total(self) -> int:
        return sum(self.items.values())

    def take_damage(self, amount: int) -> int:
        self.hp = max(0, self.hp - amount)
        return self.hp

    def heal(self, amount: int = 1) -> int:
        self.hp = min(GameConfig.MAX_HP, self.hp + amount)
        return self.hp

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "hp": self.hp,
            "items": {kind.value: count for kind, count in self.items.items()},
            "saw": self.saw,
            "alive": self.is_alive,
        }

    def __repr__(self):
        return f"Player({self.name!r}, hp={self.hp})"


# -----------------------------
# GAME STATE
# -----------------------------

class PendingShot:
    """
    A shot that has been announced but not yet resolved. Holds player ids,
    not roster positions, so a disconnect during the delay can't redirect it.
    """

    def __init__(self, shooter_id, target_id, shell, generation):
        self.shooter_id = shooter_id
        self.target_id = target_id
        self.shell = shell
        self.generation = generation

    @property
    def is_self(self):
        return self.shooter_id == self.target_id


class GameState:
    """
    Holds mutable session flags.
    """
    def __init__(self):
        self.action_in_flight = False
        self.pending = None
        self.game_over = False
        self.winner = None
        # Bumped on restart so stale continuations drop themselves
        self.generation = 0
