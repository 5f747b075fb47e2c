import random

from config import GameConfig
from game.errors import DeckExhausted
from utils import safe_print

LIVE = GameConfig.SHELL_LIVE
BLANK = GameConfig.SHELL_BLANK


class ShellDeck:
    """
    The shotgun's load for one round: a shuffled run of live and blank
    shells plus the cursor of the next shell to fire.
    """

    def __init__(self, rng=None):
        self.rng = rng or random.Random()
        self.shells = []
        self.index = 0

    # -----------------------------
    # ROUND SETUP
    # -----------------------------

    def regenerate(self):
        live = GameConfig.get_random_live_count(self.rng)
        blank = GameConfig.SHELLS_PER_ROUND - live

        self.shells = [LIVE] * live + [BLANK] * blank
        self.rng.shuffle(self.shells)
        self.index = 0

        safe_print(f"New round loaded: {live} live / {blank} blank", "DECK")
        return live, blank

    def load(self, shells):
        """Load a known sequence (debug tables and tests)."""
        for shell in shells:
            if shell not in (LIVE, BLANK):
                raise ValueError(f"Unknown shell: {shell}")
        self.shells = list(shells)
        self.index = 0

    def clear(self):
        self.shells = []
        self.index = 0

    # -----------------------------
    # CURSOR
    # -----------------------------

    @property
    def exhausted(self):
        return self.index >= len(self.shells)

    @property
    def remaining(self):
        return len(self.shells) - self.index

    @property
    def live_remaining(self):
        return self.shells[self.index:].count(LIVE)

    def draw(self):
        if self.exhausted:
            raise DeckExhausted()
        shell = self.shells[self.index]
        self.index += 1
        return shell

    def peek_next(self):
        if self.exhausted:
            return None
        return self.shells[self.index]

    def discard_next(self):
        # Same cursor move as a draw; the caller just never resolves it
        return self.draw()

    def to_dict(self, reveal=False):
        data = {
            "shellIndex": self.index,
            "shellCount": len(self.shells),
            "shellsRemaining": self.remaining,
        }
        if reveal:
            data["shells"] = list(self.shells)
        return data
