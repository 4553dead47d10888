"""Server startup on pounce, the ASGI server salute runs under.

Development runs a single worker with auto-reload; production runs the
configured worker count. pounce is imported lazily so the library and
its tests work without it installed.
"""

from typing import Any

from salute.errors import ConfigurationError


def _load_pounce() -> tuple[Any, Any]:
    try:
        from pounce.config import ServerConfig
        from pounce.server import Server
    except ImportError as exc:
        msg = (
            "Serving requires pounce. "
            "Install it with: pip install salute[server]"
        )
        raise ConfigurationError(msg) from exc
    return ServerConfig, Server


def run_dev_server(app: object, host: str, port: int, *, reload: bool = True) -> None:
    """Start a single-worker pounce server for *app*.

    Args:
        app: ASGI callable (salute App instance).
        host: Bind host address.
        port: Bind port number.
        reload: Enable auto-reload on file changes.
    """
    server_config_cls, server_cls = _load_pounce()
    config = server_config_cls(host=host, port=port, workers=1, reload=reload)
    server_cls(config, app).run()


def run_production_server(
    app: object,
    host: str = "0.0.0.0",
    port: int = 8080,
    workers: int = 0,
    *,
    log_level: str = "info",
) -> None:
    """Start a multi-worker pounce server for *app*.

    Args:
        app: ASGI callable (salute App instance).
        host: Bind address (default: all interfaces).
        port: Bind port.
        workers: Worker count (0 = auto-detect from CPU count).
        log_level: Server log level (debug, info, warning, error, critical).
    """
    server_config_cls, server_cls = _load_pounce()
    config = server_config_cls(
        host=host,
        port=port,
        workers=workers,
        log_level=log_level,
    )
    server_cls(config, app).run()
