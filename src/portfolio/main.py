"""Application entry point for the portfolio backend server."""

import structlog

from portfolio.app import App
from portfolio.config import Config
from portfolio.logging import setup_logging
from portfolio.web.server import run_server


def main() -> None:
    config = Config()
    setup_logging(config.debug)
    structlog.get_logger(__name__).info("starting_server", host=config.host, port=config.port, debug=config.debug)
    run_server(App(config), config)


if __name__ == "__main__":
    main()
