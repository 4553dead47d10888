"""Salute CLI — start the greeting server.

Entry point registered as ``salute`` in ``pyproject.toml``::

    [project.scripts]
    salute = "salute.cli:main"

Takes no options: the environment comes from ``SALUTE_ENV``.
"""

import argparse
import logging

from salute.config import ENV_VAR, load_config
from salute.main import create_app


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``salute`` command."""
    parser = argparse.ArgumentParser(
        prog="salute",
        description="Salute — a JSON greeting server.",
        epilog=f"Set {ENV_VAR}=production to serve on port 8080 (default: development, port 3000).",
    )
    parser.parse_args(argv)

    config = load_config()
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = create_app(config)
    app.run()
