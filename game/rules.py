'''
[**TABLE RULES**]

1. DAMAGE:
A live shell takes 1 hp off the target, 2 if the shooter sawed off the barrel
first. The saw is spent by firing, hit or miss. Health never drops below 0.

2. KEEP THE GUN:
Shooting yourself with a blank keeps your turn. Any other outcome (a live
shell on anyone, or a blank at someone else) passes the gun to the next
living player.

3. LAST ONE STANDING:
The game ends the moment exactly one player is alive at a table of two or
more. A lone player at the table has not won anything.
'''
from config import GameConfig


def shot_damage(shooter):
    return 2 if shooter is not None and shooter.saw else 1


def keeps_turn(shell, is_self):
    return is_self and shell == GameConfig.SHELL_BLANK


def find_winner(roster):
    """Index of the sole survivor, or None while the game is still on."""
    alive = [i for i, p in enumerate(roster) if p.is_alive]
    if len(alive) == 1 and len(roster) > 1:
        return alive[0]
    return None
