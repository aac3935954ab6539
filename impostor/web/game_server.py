"""
Web server adapter: translates browser events into session commands.
"""

from threading import Lock
from typing import Optional, Dict, Any, Callable
from flask import Flask, jsonify
from flask_socketio import SocketIO, emit

from .event_emitter import EventEmitter
from ..core import GameSession, GestureOutcome, RevealGestureController
from ..config.game_config import GameConfig, default_config


class GameServer:
    """
    Flask + Socket.IO front end for one shared device.

    Every command updates the single in-memory session and is followed by a
    broadcast of the public state. The card itself only goes back to the
    client that sent the command.
    """

    def __init__(self, config: GameConfig = default_config, session: Optional[GameSession] = None,
                 event_emitter: Optional[EventEmitter] = None):
        self.config = config
        self.host = config.host
        self.port = config.port

        self.app = Flask(__name__)
        self.socketio = SocketIO(self.app, cors_allowed_origins="*", async_mode='threading')
        self.event_emitter = event_emitter or EventEmitter()
        self.session = session or GameSession(config, effects=self.event_emitter)
        self.gestures = RevealGestureController(self.session)
        self.clients_connected = 0
        self._lock = Lock()

        # Effect requests go to every connected client
        self.event_emitter.register_listener(self._broadcast_event)

        self._setup_routes()
        self._setup_socketio()

    def _setup_routes(self):
        """Setup Flask routes."""
        @self.app.route('/')
        @self.app.route('/api/state')
        def state():
            with self._lock:
                return jsonify(self.session.public_state())

    def _setup_socketio(self):
        """Setup SocketIO event handlers."""
        @self.socketio.on('connect')
        def handle_connect():
            with self._lock:
                self.clients_connected += 1
                print(f"[SERVER] Client connected. Total clients: {self.clients_connected}")
                emit('game_state_update', {'game_state': self.session.public_state()})

        @self.socketio.on('disconnect')
        def handle_disconnect(*args):
            with self._lock:
                self.clients_connected -= 1
                print(f"[SERVER] Client disconnected. Total clients: {self.clients_connected}")

        commands: Dict[str, Callable[[Dict[str, Any]], Any]] = {
            'add_player': lambda data: self.session.add_player(str(data.get('name', ''))) is not None,
            'remove_player': lambda data: self.session.remove_player(str(data.get('id', ''))),
            'rename_player': lambda data: self.session.rename_player(str(data.get('id', '')), str(data.get('name', ''))),
            'shuffle_players': lambda data: self.session.shuffle_players(),
            'set_mode': lambda data: self.session.set_mode(data.get('mode', '')),
            'start_round': lambda data: self.session.start_round(),
            'advance': lambda data: self.session.advance(),
            'reset': lambda data: self.session.reset(),
            'press': lambda data: self.gestures.press(),
            'release': lambda data: self.gestures.release(),
            'drag_end': lambda data: self.gestures.drag_end(
                float(data.get('offset_y', 0)), float(data.get('velocity_y', 0))
            ) != GestureOutcome.IGNORED,
        }
        for event_name, command in commands.items():
            self._register_command(event_name, command)

    def _register_command(self, event_name: str, command: Callable[[Dict[str, Any]], Any]) -> None:
        """Bind a Socket.IO event to a session command."""
        def handler(data=None):
            # Payloads are objects; anything else carries no arguments
            if not isinstance(data, dict):
                data = {}
            try:
                with self._lock:
                    result = command(data)
                    game_state = self.session.public_state()
                    card = self.session.current_card()
            except (ValueError, TypeError) as e:
                print(f"[SERVER] Rejected {event_name}: {e}")
                return {'ok': False, 'error': str(e)}

            self.event_emitter.emit_game_state_update(game_state)
            emit('card', {'card': card})
            return {'ok': bool(result)}

        self.socketio.on_event(event_name, handler)

    def _broadcast_event(self, event_type: str, data: Dict[str, Any]) -> None:
        """Broadcast an event to all connected clients."""
        if self.clients_connected > 0:
            self.socketio.emit(event_type, data)

    def start(self) -> None:
        """Start the web server."""
        print(f"\n{'='*60}")
        print(f"Starting game server on http://{self.host}:{self.port}")
        print(f"{'='*60}\n")
        self.socketio.run(self.app, host=self.host, port=self.port, debug=False, allow_unsafe_werkzeug=True)
