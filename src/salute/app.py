"""Salute application class.

Mutable during setup (route registration). Frozen at runtime when
``app.run()`` or ``__call__()`` is first invoked, after which the route
table is read-only and shared by every in-flight request.
"""

import logging
import threading

from salute._internal.asgi import Receive, Scope, Send
from salute._internal.types import Handler
from salute.config import AppConfig
from salute.errors import ConfigurationError
from salute.routing.router import Router
from salute.server.handler import handle_request

logger = logging.getLogger("salute.app")


class App:
    """The salute application: a config and a router behind an ASGI entry point.

    Thread safety:
        Registration happens single-threaded at startup. The freeze
        transition uses a Lock + double-check so exactly one worker
        performs it, even if several call ``__call__()`` on first request.
    """

    __slots__ = ("_address", "_freeze_lock", "_frozen", "config", "router")

    def __init__(self, config: AppConfig | None = None, *, router: Router | None = None) -> None:
        self.config: AppConfig = config or AppConfig()
        self.router: Router = router if router is not None else Router()
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()
        # Set by run(); announced once the server starts the app.
        self._address: tuple[str, int] | None = None

    # -- Route registration --

    def register(self, path: str, method: str, handler: Handler) -> Handler:
        """Bind *handler* to *path* and *method* on the app's router.

        A second registration for the same path and method replaces the
        first. Raises ``ConfigurationError`` once the app is serving.
        """
        self._check_not_frozen()
        self.router.register(path, method, handler)
        return handler

    # -- Server --

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Freeze the app and serve it with pounce.

        The "listening" line is logged from the lifespan startup, once the
        server is running the app, not before the server is started.

        Development configs (``debug=True``) get a single reloading worker;
        production configs get ``config.workers`` workers.
        """
        self._ensure_frozen()
        _host = host or self.config.host
        _port = port or self.config.port

        self._address = (_host, _port)
        logger.info("Starting server on port %d in %s mode.", _port, self.config.env_name)

        if self.config.debug:
            from salute.server.run import run_dev_server

            run_dev_server(self, _host, _port, reload=True)
        else:
            from salute.server.run import run_production_server

            run_production_server(
                self,
                host=_host,
                port=_port,
                workers=self.config.workers,
                log_level=self.config.log_level,
            )

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        self._ensure_frozen()
        await handle_request(scope, receive, send, router=self.router)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol, freezing routes at startup."""
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                self._ensure_frozen()
                await send({"type": "lifespan.startup.complete"})
                if self._address is not None:
                    logger.info(
                        "Server is listening on port %d in %s mode.",
                        self._address[1],
                        self.config.env_name,
                    )
            elif message["type"] == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Internal --

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _ensure_frozen(self) -> None:
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            logger.debug("Route table frozen: %s", self.router.routes)
            self._frozen = True

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = "Cannot register routes after the app has started serving."
            raise ConfigurationError(msg)
