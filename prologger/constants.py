from typing import ClassVar


class Defaults:
    DATEFORMAT = "yyyy/mm/dd H:MM:ss.l"
    CONFIG_FILE = "prologger.toml"
    CONFIG_TABLE = "logger"


class EnvVars:
    LEVELS = "PROLOGGER_LEVELS"
    NOPREFIX = "PROLOGGER_NOPREFIX"
    DATEFORMAT = "PROLOGGER_DATEFORMAT"
    TRUTHY: ClassVar[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
