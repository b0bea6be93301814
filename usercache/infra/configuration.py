import logging
from configparser import ExtendedInterpolation, RawConfigParser
from os.path import abspath, dirname, join

from usercache.infra.singleton import Singleton

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = abspath(
    join(dirname(__file__), "..", "..", "config", "config.ini")
)


class Config(Singleton):
    """
    Process-wide access to the INI configuration.

    Every construction re-reads ``config_filename`` into the single instance.
    """

    def __init__(self, config_filename=DEFAULT_CONFIG_FILENAME):
        self.__config = RawConfigParser(
            allow_no_value=True, interpolation=ExtendedInterpolation()
        )
        with open(config_filename) as config_file:
            self.__config.read_file(config_file)
        self.config_filename = config_filename
        self._registered_entries = {"logging": {"level": self._process_log_level}}

    def _process_log_level(self):
        level = self.__config.get("logging", "level", fallback="INFO")
        level = level.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise KeyError(f"Unknown log level '{level}' in configuration")
        return level

    def get(self, section, key, fallback=None):
        if (
            section not in self._registered_entries
            or key not in self._registered_entries[section]
        ):
            return self._get(section, key, fallback)
        return self._registered_entries[section][key]()

    def _get(self, section, key, fallback=None):
        try:
            value = self.__config.get(section, key, fallback=fallback)
        except Exception as e:
            raise KeyError(
                f"Section '{section}', key '{key}' problem in configuration: '{e}'"
            )
        if value is None:
            raise KeyError(
                f"Section '{section}', key '{key}' not found in configuration"
            )

        if not isinstance(value, str) or "," not in value:
            return value

        values = [v.strip() for v in value.strip("][").split(",") if v.strip()]
        if all(v.isdigit() for v in values):
            return [int(v) for v in values]
        return values

    def set(self, section, key, value):
        if not isinstance(value, str):
            value = str(value)
            logger.warning(f"Configuration is set with a non-string-type value: {value}")
        self.__config.set(section, key, value)

    def setint(self, section, key, value):
        self.__config.set(section, key, f"{int(value)}")

    def setarray(self, section, key, value):
        if len(value) == 1:
            set_str = f"{value[0]},"
        else:
            set_str = ",".join(f"{v}" for v in value)
        self.__config.set(section, key, set_str)

    def setboolean(self, section, key, value):
        self.__config.set(section, key, "True" if value else "False")

    def getboolean(self, section, key, fallback=None):
        return self.__config.getboolean(section, key, fallback=fallback)

    def getint(self, section, key, fallback=None):
        return self.__config.getint(section, key, fallback=fallback)

    def getstr(self, section, key, fallback=None):
        return self.__config.get(section, key, fallback=fallback)

    def getarray(self, section, key, dtype=str, fallback=None):
        val = self._get(section, key, fallback=fallback)
        if isinstance(val, list):
            return [dtype(v) for v in val]
        return [dtype(val)]

    def has_option(self, section, option):
        return self.__config.has_option(section, option)
