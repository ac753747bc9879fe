import os
import tomllib
from pathlib import Path

# Settings key constants
SETTING_UNREADABLE = 'report.unreadable'
SETTING_SORT = 'report.sort'
SETTING_OUTPUT_DIR = 'report.output_dir'
SETTING_LOG_PATH = 'logging.path'
SETTING_LOG_LEVEL = 'logging.level'

CONFIG_ENVIRONMENT_VARIABLE = 'FILEHASHER_CONFIG'


class Settings:
    """Read-only view of the command line settings file.

    Loads a TOML document and provides access to its raw data. The class does not know the
    schema; consumers interpret and validate the values they read.

    Example:
        settings = Settings(Path('filehasher.toml'))
        policy = settings.get(SETTING_UNREADABLE, 'omit')
    """

    def __init__(self, settings_file: Path | None = None):
        """Initialize settings from a TOML file.

        If settings_file is None, all get() calls return their defaults.

        Raises:
            FileNotFoundError: settings_file does not exist
            tomllib.TOMLDecodeError: settings_file is not valid TOML
        """
        self._settings_file = settings_file
        self._settings = {}

        if settings_file is not None:
            with open(settings_file, 'rb') as f:
                self._settings = tomllib.load(f)

    @classmethod
    def locate(cls, config_path: str | os.PathLike | None = None) -> 'Settings':
        """Load settings from config_path, or from FILEHASHER_CONFIG when it is None."""
        if config_path is None:
            config_path = os.environ.get(CONFIG_ENVIRONMENT_VARIABLE) or None
        return cls(None if config_path is None else Path(config_path))

    @property
    def settings_file(self) -> Path | None:
        return self._settings_file

    def get(self, key: str, default=None):
        """Get a setting value by key with optional default.

        Dot notation accesses nested tables, e.g. 'report.sort' reads settings['report']['sort'].
        Returns default if the key path does not exist or an intermediate value is not a table.

        Examples:
            >>> settings.get(SETTING_SORT, True)
            False
            >>> settings.get('nonexistent.key', 'fallback')
            'fallback'
        """
        keys = key.split('.')
        value = self._settings

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value
