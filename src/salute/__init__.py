"""Salute — a minimal JSON greeting server.

One route, ``POST /hello``, answers with a greeting for the ``name`` in
the request body. Everything else is a JSON 404.

Basic usage::

    from salute import create_app

    app = create_app()
    app.run()

Custom routes::

    from salute import App, Response

    app = App()
    app.register("/ping", "get", lambda context: Response({"pong": True}))
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "ConfigurationError",
    "RequestContext",
    "Response",
    "Router",
    "SaluteError",
    "create_app",
    "load_config",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import salute`` fast while providing a clean top-level API.
    """
    if name == "App":
        from salute.app import App

        return App

    if name in ("AppConfig", "load_config"):
        from salute import config as _config

        return getattr(_config, name)

    if name == "RequestContext":
        from salute.http.request import RequestContext

        return RequestContext

    if name == "Response":
        from salute.http.response import Response

        return Response

    if name == "Router":
        from salute.routing.router import Router

        return Router

    if name == "create_app":
        from salute.main import create_app

        return create_app

    if name in ("ConfigurationError", "SaluteError"):
        from salute import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
