import redis
from flask import Flask, jsonify
from flask_socketio import SocketIO

from config import ServerConfig
from controllers.socket_controller import init_game_events, socket_emitter, socket_scheduler
from game.engine import GameEngine
from utils import safe_print


def redis_message_queue():
    """
    Use Redis as the Socket.IO message queue when a server answers, so
    emits fan out across worker processes. Falls back to in-process delivery.
    """
    try:
        client = redis.Redis(
            host=ServerConfig.REDIS_HOST,
            port=ServerConfig.REDIS_PORT,
            password=ServerConfig.REDIS_PASSWORD,
            socket_connect_timeout=2
        )
        client.ping()
        safe_print(f"Connected to Redis at {ServerConfig.REDIS_HOST}:{ServerConfig.REDIS_PORT}", "APP")
        return ServerConfig.redis_url()
    except redis.RedisError as e:
        safe_print(f"Redis connection failed: {e}. Using in-process delivery.", "APP")
        return None


def create_app(schedule=None, rng=None, use_redis=True):
    app = Flask(__name__)
    app.config['SECRET_KEY'] = ServerConfig.SECRET_KEY

    message_queue = redis_message_queue() if use_redis else None
    socketio = SocketIO(app, message_queue=message_queue, cors_allowed_origins="*")

    # -----------------------------
    # THE TABLE (one per process)
    # -----------------------------

    engine = GameEngine(
        emit=socket_emitter(socketio),
        schedule=schedule or socket_scheduler(socketio),
        rng=rng,
        resolve_delay=ServerConfig.RESOLVE_DELAY_SECONDS,
        reveal=ServerConfig.REVEAL_SHELLS,
    )
    app.extensions['game_engine'] = engine
    init_game_events(socketio, engine)

    # -----------------------------
    # ROUTES
    # -----------------------------

    @app.route("/api/state")
    def game_state():
        return jsonify(engine.get_state())

    @app.route("/api/health")
    def health():
        state = engine.get_state()
        return jsonify({
            "status": "ok",
            "players": len(state["players"]),
            "game_over": state["gameOver"],
            "message_queue": "redis" if message_queue else "memory",
        })

    return app, socketio


def main():
    app, socketio = create_app()
    safe_print(f"Server running on http://localhost:{ServerConfig.PORT}", "APP")
    socketio.run(app, host=ServerConfig.HOST, port=ServerConfig.PORT, allow_unsafe_werkzeug=True)


if __name__ == "__main__":
    main()
