from __future__ import annotations
import os
from dataclasses import dataclass

LOG_LEVEL_ENV = "PROMPTENGINE_LOG_LEVEL"
COLOR_DISABLED_ENV = "PROMPTENGINE_COLOR_DISABLED"

@dataclass
class SettingsData:
    log_level: str = "WARN"   # DEBUG, INFO, WARN, ERROR
    color: bool = True

    def normalize(self):
        self.log_level = str(self.log_level).upper()
        if self.log_level not in {"DEBUG","INFO","WARN","ERROR"}:
            self.log_level = "WARN"
        self.color = bool(self.color)

class Settings:
    def __init__(self, data: SettingsData):
        self.data = data

    @classmethod
    def load(cls) -> "Settings":
        """Build settings from the process environment."""
        data = SettingsData(
            log_level=os.environ.get(LOG_LEVEL_ENV, "WARN"),
            color=not color_disabled(),
        )
        data.normalize()
        return cls(data)

    def apply(self):
        from promptengine.core.logging import logger as global_logger
        global_logger.set_level(self.data.log_level)
        global_logger.debug("SettingsApplied", log_level=self.data.log_level, color=self.data.color)


def color_disabled() -> bool:
    if os.environ.get(COLOR_DISABLED_ENV) == '1':
        return True
    # https://no-color.org
    return bool(os.environ.get("NO_COLOR"))
