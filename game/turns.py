class TurnSequencer:
    """
    Owns the turn pointer: the roster index of the only player allowed to act.
    """

    def __init__(self, roster):
        self.roster = roster
        self.turn = 0

    def reset(self):
        self.turn = 0

    def current(self):
        if not self.roster.is_living(self.turn):
            return None
        return self.roster[self.turn]

    def is_turn_of(self, index):
        return index is not None and index == self.turn

    def advance(self):
        """
        Move to the next living seat. One lap at most, so a table with
        nobody alive never spins; with one survivor the pointer comes back
        to them.
        """
        size = len(self.roster)
        if size == 0 or self.roster.living_count() == 0:
            return self.turn

        for _ in range(size):
            self.turn = (self.turn + 1) % size
            if self.roster.is_living(self.turn):
                break
        return self.turn

    def ensure_living(self):
        if len(self.roster) and not self.roster.is_living(self.turn):
            self.advance()
        return self.turn

    def player_removed(self, removed_index):
        """
        Re-index after a seat was deleted from the roster. A removal at or
        before the pointer shifts it down by one, so the current actor keeps
        the turn; if the actor was the one who left, the seat before them
        picks it up.
        """
        size = len(self.roster)
        if size == 0:
            self.turn = 0
            return self.turn

        if removed_index <= self.turn:
            self.turn = max(self.turn - 1, 0)

        if self.turn >= size:
            self.turn = 0
        return self.ensure_living()
