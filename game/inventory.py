import random

from config import GameConfig
from game.models import ItemKind, empty_items

KINDS = list(ItemKind)


def random_items(total=GameConfig.INITIAL_ITEM_TOTAL, rng=None):
    """
    Starting inventory: `total` items, each one a uniformly random kind.
    """
    rng = rng or random
    items = empty_items()
    for _ in range(total):
        items[rng.choice(KINDS)] += 1
    return items


def grant_items(player, rng=None):
    """
    Round refill for one player. Tops the inventory up by at most
    ITEMS_PER_GRANT without going over MAX_ITEM_TOTAL in aggregate.
    Returns the kinds granted (may repeat).
    """
    rng = rng or random
    space_left = GameConfig.MAX_ITEM_TOTAL - player.item_total
    if space_left <= 0:
        return []

    granted = []
    for _ in range(min(GameConfig.ITEMS_PER_GRANT, space_left)):
        kind = rng.choice(KINDS)
        player.items[kind] += 1
        granted.append(kind)
    return granted
