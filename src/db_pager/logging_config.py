"""Logging setup for applications embedding the pager."""

import logging
import sys

from db_pager.config import Settings, settings

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
JSON_FORMAT = (
    '{"time":"%(asctime)s","name":"%(name)s","level":"%(levelname)s","message":"%(message)s"}'
)


def configure_logging(config: Settings | None = None) -> None:
    """
    Configure root logging from settings.

    Args:
        config: Settings to read level and format from (default: global settings)
    """
    config = config or settings
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format=TEXT_FORMAT if config.log_format == "text" else JSON_FORMAT,
        stream=sys.stderr,
        force=True,
    )
