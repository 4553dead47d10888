"""Application wiring: build the app and its route table."""

from salute.app import App
from salute.config import AppConfig, load_config
from salute.handlers import hello


def create_app(config: AppConfig | None = None) -> App:
    """Build the app with every route registered.

    The config defaults to the one selected by ``SALUTE_ENV``.
    """
    app = App(config or load_config())
    app.register("/hello", "post", hello)
    return app
