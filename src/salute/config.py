"""Application configuration.

AppConfig is a frozen dataclass: immutable after creation, named fields
instead of string-key lookups. The running environment is picked by the
``SALUTE_ENV`` variable; anything unset or unknown means development.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

ENV_VAR = "SALUTE_ENV"
DEFAULT_ENV = "development"


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(port=9000, debug=True)
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 3000
    env_name: str = DEFAULT_ENV
    debug: bool = True

    # Production
    workers: int = 0  # 0 = auto-detect from CPU count
    log_level: str = "info"


# Port 8080 for production is for demonstration purposes only.
ENVIRONMENTS: dict[str, AppConfig] = {
    "development": AppConfig(
        port=3000,
        env_name="development",
        debug=True,
        log_level="debug",
    ),
    "production": AppConfig(
        host="0.0.0.0",
        port=8080,
        env_name="production",
        debug=False,
    ),
}


def load_config(environ: Mapping[str, str] | None = None) -> AppConfig:
    """Return the config for the environment named by ``SALUTE_ENV``.

    Args:
        environ: Mapping to read the variable from. Defaults to
            ``os.environ``.
    """
    env = os.environ if environ is None else environ
    name = env.get(ENV_VAR, "")
    return ENVIRONMENTS.get(name, ENVIRONMENTS[DEFAULT_ENV])
