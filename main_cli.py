import sys

from config import GameConfig
from controllers.cli_controller import CLIController, print_event
from game.engine import GameEngine

names = sys.argv[1:] or ["Player 1", "Player 2"]

engine = GameEngine(emit=print_event)
cli = CLIController(engine)
cli.seat_players(names[:GameConfig.MAX_PLAYERS])
cli.run()
