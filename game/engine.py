import random
import threading

from config import GameConfig
from game.deck import ShellDeck, LIVE
from game.errors import (
    GameError, NotYourTurn, ActionInProgress, NoItem, AlreadyArmed,
    GameOver, NotJoined, InvalidTarget, UnknownItem,
)
from game.inventory import grant_items
from game.models import GameState, ItemKind, PendingShot
from game.roster import Roster
from game.rules import shot_damage, keeps_turn, find_winner
from game.scheduling import immediate_schedule
from game.turns import TurnSequencer
from utils import safe_print


def null_emit(event, payload, to=None):
    pass


class GameEngine:
    """
    The one authoritative table. Every intent goes through here, under
    ``_lock``; the shot delay is covered by ``state.action_in_flight``
    instead so observers can still be served while the lock is free.

    ``emit(event, payload, to=None)`` delivers to observers (``to`` is a
    connection id for private messages). ``schedule(delay, callback)`` runs
    the resolution half of a shot later.
    """

    def __init__(self, emit=None, schedule=None, rng=None, resolve_delay=None, reveal=False):
        self.rng = rng or random.Random()
        self.roster = Roster(rng=self.rng)
        self.deck = ShellDeck(rng=self.rng)
        self.turns = TurnSequencer(self.roster)
        self.state = GameState()
        self.ui_log = []
        self.reveal = reveal
        self.resolve_delay = GameConfig.RESOLVE_DELAY_SECONDS if resolve_delay is None else resolve_delay

        self._emit = emit or null_emit
        self._schedule = schedule or immediate_schedule
        self._lock = threading.RLock()

        safe_print("Table initialized", "ENGINE")

    # ---------------------
    # STATE HELPERS
    # ---------------------

    def get_state(self, reveal=None):
        with self._lock:
            reveal = self.reveal if reveal is None else reveal
            winner_index = self.roster.index_of(self.state.winner) if self.state.winner else None
            data = {
                "players": self.roster.to_list(),
                "turn": self.turns.turn,
                "maxHp": GameConfig.MAX_HP,
                "actionInFlight": self.state.action_in_flight,
                "gameOver": self.state.game_over,
                "winner": self.roster[winner_index].name if winner_index is not None else None,
                "winnerIndex": winner_index,
                "ui_log": list(self.ui_log),
            }
            data.update(self.deck.to_dict(reveal=reveal))
            return data

    def _broadcast_state(self):
        self._emit("state", self.get_state())

    def _log(self, msg):
        safe_print(msg, "ENGINE")
        self.ui_log.append(msg)
        del self.ui_log[:-GameConfig.UI_LOG_LIMIT]

    def _narrate(self, kind, payload, text=None, to=None):
        message = {"type": kind}
        message.update(payload)
        if text:
            message["text"] = text
            if to is None:
                self._log(text)
        self._emit("narrative", message, to=to)

    def _reject(self, connection_id, error):
        safe_print(f"Rejected {connection_id}: {error.code}", "ENGINE")
        return error.to_dict()

    def _seat_of(self, connection_id):
        index = self.roster.index_of(connection_id)
        if index is None:
            raise NotJoined()
        return index

    def _ensure_open(self):
        if self.state.game_over:
            raise GameOver()

    def _reload(self):
        """Refill items for everyone still alive, then load a fresh round."""
        for player in self.roster.living():
            granted = grant_items(player, self.rng)
            if granted:
                safe_print(f"{player.name} receives {[k.value for k in granted]}", "ENGINE")

        live, blank = self.deck.regenerate()
        self._narrate(
            "shells-regenerated",
            {"liveCount": live, "blankCount": blank},
            text=f"New round: 🔴 {live} live / ⚪ {blank} blank",
        )

    def _check_winner(self):
        if self.state.game_over:
            return
        winner_index = find_winner(self.roster)
        if winner_index is None:
            return

        winner = self.roster[winner_index]
        self.state.game_over = True
        self.state.winner = winner.id
        self._narrate(
            "gameOver",
            {"winner": winner.name, "winnerIndex": winner_index},
            text=f"{winner.name} is the last one standing",
        )
        self._broadcast_state()

    # ---------------------
    # TABLE MEMBERSHIP
    # ---------------------

    def join(self, connection_id, name=None):
        with self._lock:
            try:
                self._ensure_open()
                name = str(name).strip() if name is not None else ""
                player = self.roster.add(name or f"Player {len(self.roster) + 1}", connection_id)
            except GameError as e:
                return self._reject(connection_id, e)

            index = len(self.roster) - 1
            if self.deck.exhausted:
                self._reload()
            self.turns.ensure_living()

            self._narrate("joined", {"name": player.name, "index": index}, text=f"{player.name} joined")
            self._broadcast_state()
            return {"ok": True, "playerIndex": index, "player": player.to_dict()}

    def leave(self, connection_id):
        with self._lock:
            player = self.roster.get(connection_id)
            index = self.roster.remove(connection_id)
            if index is None:
                return {"ok": False}

            self.turns.player_removed(index)
            self._narrate("left", {"name": player.name, "index": index}, text=f"{player.name} left the table")
            self._broadcast_state()
            # A shot in the air settles the table when it lands
            if self.state.pending is None:
                self._check_winner()
            return {"ok": True, "removedIndex": index}

    def restart(self):
        with self._lock:
            generation = self.state.generation + 1
            self.roster.clear()
            self.deck.clear()
            self.turns.reset()
            self.state = GameState()
            self.state.generation = generation
            self.ui_log.clear()

            safe_print("Table restarted", "ENGINE")
            self._narrate("restarted", {})
            self._broadcast_state()
            return {"ok": True}

    # ---------------------
    # SHOOT
    # ---------------------

    def shoot(self, connection_id, target_index):
        with self._lock:
            try:
                return self._shoot(connection_id, target_index)
            except GameError as e:
                return self._reject(connection_id, e)

    def _shoot(self, connection_id, target_index):
        self._ensure_open()
        shooter_index = self._seat_of(connection_id)
        if not self.turns.is_turn_of(shooter_index):
            raise NotYourTurn()
        if self.state.action_in_flight:
            raise ActionInProgress()

        try:
            target_index = int(target_index)
        except (TypeError, ValueError):
            raise InvalidTarget()
        if not self.roster.is_living(target_index):
            raise InvalidTarget()

        shooter = self.roster[shooter_index]
        target = self.roster[target_index]

        self.state.action_in_flight = True
        if self.deck.exhausted:
            self._reload()
        shell = self.deck.draw()

        pending = PendingShot(shooter.id, target.id, shell, self.state.generation)
        self.state.pending = pending

        self._narrate("shoot-announced", {
            "from": shooter.name,
            "fromIndex": shooter_index,
            "target": target.name,
            "targetIndex": target_index,
            "shell": shell,
            "isSelf": pending.is_self,
        }, text=f"{shooter.name} aims at {'themselves' if pending.is_self else target.name}…")
        self._broadcast_state()

        self._schedule(self.resolve_delay, lambda: self.resolve(pending))
        return {"ok": True, "shell": shell, "isSelf": pending.is_self}

    def resolve(self, pending):
        """
        Second half of a shot. Players are looked up by id because seats may
        have shifted while the shot was in the air.
        """
        with self._lock:
            if pending.generation != self.state.generation or self.state.pending is not pending:
                safe_print("Dropping a shot from before the restart", "ENGINE")
                return

            self.state.pending = None
            shooter = self.roster.get(pending.shooter_id)
            target = self.roster.get(pending.target_id)

            if pending.shell == LIVE and target is not None:
                damage = shot_damage(shooter)
                target.take_damage(damage)
                self._log(f"💥 {target.name} takes {damage} damage ({target.hp} hp left)")
                if not target.is_alive:
                    self._narrate(
                        "eliminated",
                        {"index": self.roster.index_of(target.id), "name": target.name},
                        text=f"☠️ {target.name} is out",
                    )
            else:
                self._log("*click*")

            if shooter is not None:
                # The saw is spent by firing, whatever came out of the barrel
                shooter.saw = False
                if not keeps_turn(pending.shell, pending.is_self):
                    self.turns.advance()
            # A departed shooter already handed the turn on when they left
            self.turns.ensure_living()

            if self.deck.exhausted:
                self._reload()

            self.state.action_in_flight = False
            self._broadcast_state()
            self._check_winner()

    # ---------------------
    # ITEMS
    # ---------------------

    def use_item(self, connection_id, kind):
        with self._lock:
            try:
                return self._use_item(connection_id, kind)
            except GameError as e:
                return self._reject(connection_id, e)

    def _use_item(self, connection_id, kind):
        self._ensure_open()
        index = self._seat_of(connection_id)
        if not self.turns.is_turn_of(index):
            raise NotYourTurn()
        if self.state.action_in_flight:
            raise ActionInProgress()

        item = ItemKind.parse(kind)
        if item is None:
            raise UnknownItem()

        player = self.roster[index]
        if player.items[item] <= 0:
            raise NoItem()
        if item is ItemKind.DOUBLE_DAMAGE and player.saw:
            raise AlreadyArmed()

        player.items[item] -= 1
        result = {"ok": True, "item": item.value}
        used = {"kind": item.value, "actor": player.name, "actorIndex": index}

        if item is ItemKind.INSPECT:
            shell = self.deck.peek_next()
            self._narrate("reveal", {"shell": shell}, to=player.id)
            self._narrate("item-used", dict(used, effect="inspected the next shell"),
                          text=f"{player.name} checked the chamber 🔍")
            result["shell"] = shell

        elif item is ItemKind.HEAL:
            player.heal(1)
            self._narrate("item-used", dict(used, effect=f"healed to {player.hp} hp"),
                          text=f"{player.name} smoked a cigar (+1 HP)")
            result["hp"] = player.hp

        elif item is ItemKind.DOUBLE_DAMAGE:
            player.saw = True
            self._narrate("item-used", dict(used, effect="next shot deals double damage"),
                          text=f"{player.name} loaded a sawed-off… 😈")

        elif item is ItemKind.SKIP:
            if self.deck.exhausted:
                self._reload()
            shell = self.deck.discard_next()
            self._narrate("item-used", dict(used, effect=f"ejected a {shell} shell", shell=shell),
                          text=f"{player.name} drank soda… skipped a {shell} shell 🥤")
            if self.deck.exhausted:
                self._reload()
            result["shell"] = shell

        self._broadcast_state()
        self._check_winner()
        return result
