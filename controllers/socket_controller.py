"""
Table Controller using Flask-SocketIO
Translates socket events into engine intents and engine output into emits
"""
from flask import request
from flask_socketio import emit

from utils import safe_print


def socket_emitter(socketio):
    """Engine broadcast primitive backed by the Socket.IO server."""
    def _emit(event, payload, to=None):
        socketio.emit(event, payload, to=to)
    return _emit


def socket_scheduler(socketio):
    """Run the shot resolution as a background task after `delay` seconds."""
    def _schedule(delay, callback):
        def _run():
            socketio.sleep(delay)
            callback()
        socketio.start_background_task(_run)
    return _schedule


def _field(data, key):
    # Clients send either the bare value or {key: value}
    if isinstance(data, dict):
        return data.get(key)
    return data


def init_game_events(socketio, engine):
    """Initialize all SocketIO event handlers"""

    def _respond(result):
        if result.get("error") and not result.get("silent"):
            emit("error", {"code": result["error"], "message": result.get("message")})
        return result

    @socketio.on("connect")
    def handle_connect():
        safe_print(f"Connected - SID: {request.sid}", "SOCKET")
        emit("connected", {"sid": request.sid})
        emit("state", engine.get_state())

    @socketio.on("disconnect")
    def handle_disconnect(reason=None):
        safe_print(f"Disconnected - SID: {request.sid}", "SOCKET")
        engine.leave(request.sid)

    @socketio.on("join")
    def handle_join(data=None):
        result = engine.join(request.sid, _field(data, "name"))
        if result.get("ok"):
            emit("seated", {"playerIndex": result["playerIndex"], "sid": request.sid})
        return _respond(result)

    @socketio.on("shoot")
    def handle_shoot(data=None):
        return _respond(engine.shoot(request.sid, _field(data, "target")))

    @socketio.on("useItem")
    def handle_use_item(data=None):
        return _respond(engine.use_item(request.sid, _field(data, "kind")))

    @socketio.on("restart")
    def handle_restart(data=None):
        safe_print(f"Restart requested by {request.sid}", "SOCKET")
        return _respond(engine.restart())

    @socketio.on("get_state")
    def handle_get_state(data=None):
        emit("state", engine.get_state())

    return socketio
