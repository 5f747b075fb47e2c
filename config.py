"""
Game Configuration
Centralized settings for the Buckshot Arena game
"""
import os
import random


class GameConfig:
    """Core game configuration"""

    # Roster
    MAX_PLAYERS = 8
    MAX_HP = 4

    # Shell deck
    SHELLS_PER_ROUND = 6
    MIN_LIVE = 1
    MAX_LIVE = 5

    # Items
    INITIAL_ITEM_TOTAL = 6
    MAX_ITEM_TOTAL = 6
    ITEMS_PER_GRANT = 2

    # Seconds between a shot being announced and its damage landing
    RESOLVE_DELAY_SECONDS = 0.9

    # Narrative lines kept on the engine for late observers
    UI_LOG_LIMIT = 50

    # Shell values
    SHELL_LIVE = 'live'
    SHELL_BLANK = 'blank'

    @staticmethod
    def get_random_live_count(rng=None):
        """Live shells for a fresh round, never 0 and never a full deck"""
        rng = rng or random
        return rng.randint(GameConfig.MIN_LIVE, GameConfig.MAX_LIVE)


class ServerConfig:
    """Process settings read from the environment"""

    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-buckshot-arena-secret')
    HOST = os.getenv('HOST', '0.0.0.0')
    PORT = int(os.getenv('PORT', 3000))

    REDIS_HOST = os.getenv('REDIS_HOST', 'localhost')
    REDIS_PORT = int(os.getenv('REDIS_PORT', 6379))
    REDIS_PASSWORD = os.getenv('REDIS_PASSWORD', None)

    # Debug toggle: include deck contents in state snapshots
    REVEAL_SHELLS = os.getenv('REVEAL_SHELLS', '0').lower() in ('1', 'true', 'yes')

    RESOLVE_DELAY_SECONDS = float(os.getenv('RESOLVE_DELAY_SECONDS', GameConfig.RESOLVE_DELAY_SECONDS))

    @staticmethod
    def redis_url():
        """Build a redis:// URL for the Socket.IO message queue"""
        auth = f":{ServerConfig.REDIS_PASSWORD}@" if ServerConfig.REDIS_PASSWORD else ""
        return f"redis://{auth}{ServerConfig.REDIS_HOST}:{ServerConfig.REDIS_PORT}/0"
