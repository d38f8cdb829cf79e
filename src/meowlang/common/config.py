'''Global configuration system supporting JSON5 files and command-line overrides'''

import argparse
import logging
from pathlib import Path
from typing import Any

import json5

logger = logging.getLogger(__name__)


class Config:
    '''Global configuration singleton'''

    _instance = None
    _initialized = False

    # Default configuration values
    _defaults = {
        'encoding': 'ascii',
        'trailing_newline': True,
        'log_level': 'WARNING',
    }

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self.reset()
            self._initialized = True

    def reset(self):
        '''Drop file values and CLI overrides, back to the built-in defaults'''
        self._config = self._defaults.copy()
        self._cli_overrides = {}

    def load_file(self, filepath: str | Path) -> bool:
        '''Load configuration from JSON5 file'''
        filepath = Path(filepath)
        if not filepath.exists():
            return False

        try:
            with open(filepath, 'r', encoding = 'utf-8') as f:
                data = json5.loads(f.read())

        except (OSError, ValueError) as e:
            logger.warning('Failed to load config from %s: %s', filepath, e)
            return False

        if not isinstance(data, dict):
            logger.warning('Ignoring config %s: top level is not an object', filepath)
            return False

        self._config.update(data)
        return True

    def load_defaults(self):
        '''Load the configuration file shipped with the package'''
        self.load_file(Path(__file__).parent.parent / 'config.json5')

    def parse_args(self, args: list[str] | None = None) -> list[str]:
        '''Parse command-line arguments and override config

        Returns the arguments that were not consumed here.
        '''
        parser = argparse.ArgumentParser(
            description = 'meowlang configuration',
            add_help = False
        )

        parser.add_argument(
            '--config',
            type = str,
            help = 'Path to config file'
        )

        parser.add_argument(
            '--log-level',
            type = str.upper,
            choices = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
            help = 'Logging level'
        )

        parser.add_argument(
            '--encoding',
            type = str,
            help = 'Source file encoding'
        )

        # Parse known args, leave the rest to the caller
        parsed, rest = parser.parse_known_args(args)

        if parsed.config:
            self.load_file(parsed.config)

        if parsed.log_level:
            self._cli_overrides['log_level'] = parsed.log_level

        if parsed.encoding:
            self._cli_overrides['encoding'] = parsed.encoding

        return rest

    def get(self, key: str, default: Any = None) -> Any:
        '''Get configuration value'''
        # CLI overrides have highest priority
        if key in self._cli_overrides:
            return self._cli_overrides[key]

        if key in self._config:
            return self._config[key]

        return default

    def set(self, key: str, value: Any):
        '''Set configuration value at runtime'''
        self._config[key] = value

    @property
    def encoding(self) -> str:
        '''Get source encoding'''
        return self.get('encoding')

    @property
    def trailing_newline(self) -> bool:
        '''Whether text output ends with a newline'''
        return bool(self.get('trailing_newline'))

    @property
    def log_level(self) -> str:
        return str(self.get('log_level')).upper()


# Global config instance
_config = Config()


def get_config() -> Config:
    '''Get global config instance'''
    return _config
