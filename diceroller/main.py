"""Application ASGI combinée: Socket.IO autour de l'API FastAPI."""

from __future__ import annotations

import socketio

# l'import de events attache les handlers @sio.event au serveur
from .events import coordinator
from .http import create_http_app
from .sockets import sio

fastapi_app = create_http_app(coordinator)
app = socketio.ASGIApp(sio, fastapi_app)
