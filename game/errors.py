"""
Rejections raised by the game components.

Every error here is a local validation failure: the engine catches it at its
public boundary and turns it into an ``{"error": code}`` result. None of them
end the session.
"""


class GameError(Exception):
    code = "game_error"
    message = "Action rejected"
    # Rejections the requester is never told about
    silent = False

    def __init__(self, message=None):
        super().__init__(message or self.message)
        self.message = message or self.message

    def to_dict(self):
        data = {"error": self.code, "message": self.message}
        if self.silent:
            data["silent"] = True
        return data


class NotYourTurn(GameError):
    code = "not_your_turn"
    message = "Not your turn"


class ActionInProgress(GameError):
    code = "action_in_progress"
    message = "A shot is already being resolved"
    silent = True


class NoItem(GameError):
    code = "no_item"
    message = "You have none of that item"


class AlreadyArmed(GameError):
    code = "already_armed"
    message = "Your shotgun is already sawed off"


class RosterFull(GameError):
    code = "roster_full"
    message = "The table is full"


class DeckExhausted(GameError):
    code = "deck_exhausted"
    message = "No shells left in the deck"
    silent = True


class GameOver(GameError):
    code = "game_over"
    message = "Game is already over"


class NotJoined(GameError):
    code = "not_joined"
    message = "Join the table first"


class AlreadyJoined(GameError):
    code = "already_joined"
    message = "You already have a seat"


class InvalidTarget(GameError):
    code = "invalid_target"
    message = "Invalid target"


class UnknownItem(GameError):
    code = "unknown_item"
    message = "Unknown item"
