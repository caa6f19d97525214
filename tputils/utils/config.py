import logging
import os

import yaml

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = 'INFO'
DEFAULT_ABBREV_MARKER = '...'
DEFAULT_PAD_CHAR = ' '


class Config:
    def __init__(self, filename: str = 'config.yaml'):
        config = {}

        if os.path.exists(filename):
            with open(filename, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f) or {}
        else:
            logger.debug(f'Config file {filename} not found, using defaults')

        log_config = config.get('log') or {'level': DEFAULT_LOG_LEVEL}
        strings = config.get('strings') or {}
        arrays = config.get('arrays') or {}

        self.log_level: str = os.getenv(
            'LOG_LEVEL', log_config.get('level', DEFAULT_LOG_LEVEL)
        )

        # Strings
        self.abbrev_marker: str = strings.get('abbrev_marker', DEFAULT_ABBREV_MARKER)
        self.pad_char: str = strings.get('pad_char', DEFAULT_PAD_CHAR)

        # Arrays
        seed = os.getenv('SHUFFLE_SEED', arrays.get('shuffle_seed'))
        self.shuffle_seed: int | None = int(seed) if seed not in (None, '') else None


def print_config(config: Config):
    logger.debug(
        f'Config - Log Level: {config.log_level}, '
        f'Abbrev Marker: {config.abbrev_marker!r}, '
        f'Pad Char: {config.pad_char!r}, '
        f'Shuffle Seed: {config.shuffle_seed}'
    )
