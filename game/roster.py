from config import GameConfig
from game.errors import AlreadyJoined, RosterFull
from game.inventory import random_items
from game.models import Player


class Roster:
    """
    Seats in join order. Eliminated players keep their seat so indices stay
    stable for the turn pointer; only a disconnect removes one.
    """

    def __init__(self, rng=None, capacity=GameConfig.MAX_PLAYERS):
        self.rng = rng
        self.capacity = capacity
        self.players = []

    def __len__(self):
        return len(self.players)

    def __iter__(self):
        return iter(self.players)

    def __getitem__(self, index):
        return self.players[index]

    # -----------------------------
    # MEMBERSHIP
    # -----------------------------

    def add(self, name, connection_id):
        if self.index_of(connection_id) is not None:
            raise AlreadyJoined()
        if len(self.players) >= self.capacity:
            raise RosterFull()

        player = Player(connection_id, name, random_items(GameConfig.INITIAL_ITEM_TOTAL, self.rng))
        self.players.append(player)
        return player

    def remove(self, connection_id):
        """Drop a seat. Returns its former index, or None if nobody had it."""
        index = self.index_of(connection_id)
        if index is None:
            return None
        del self.players[index]
        return index

    def clear(self):
        self.players = []

    # -----------------------------
    # LOOKUPS
    # -----------------------------

    def index_of(self, connection_id):
        for i, p in enumerate(self.players):
            if p.id == connection_id:
                return i
        return None

    def get(self, connection_id):
        index = self.index_of(connection_id)
        return None if index is None else self.players[index]

    def is_living(self, index):
        return 0 <= index < len(self.players) and self.players[index].is_alive

    def living(self):
        return [p for p in self.players if p.is_alive]

    def living_count(self):
        return sum(1 for p in self.players if p.is_alive)

    def to_list(self):
        return [p.to_dict() for p in self.players]
