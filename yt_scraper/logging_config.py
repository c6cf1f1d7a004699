"""Configuração de logging"""

import logging
import sys


def setup_logging(log_level: str = "INFO", verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else getattr(logging, log_level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))

    logging.basicConfig(level=level, handlers=[handler], force=True)

    logging.getLogger('aiohttp').setLevel(logging.WARNING)
