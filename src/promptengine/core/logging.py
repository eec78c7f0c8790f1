from __future__ import annotations
import sys
from datetime import datetime, timezone
from typing import Literal, Any

from colorama import Fore, Style, init as colorama_init

from promptengine.system.settings import Settings

colorama_init()

COLORS = {
    "DEBUG": Fore.BLUE,
    "INFO": Fore.GREEN,
    "WARN": Fore.YELLOW,
    "ERROR": Fore.RED,
}

Level = Literal["DEBUG","INFO","WARN","ERROR"]

class Logger:
    def __init__(self, level: Level = "WARN", stream=None):
        self.level_order = {"DEBUG":10,"INFO":20,"WARN":30,"ERROR":40}
        self.threshold = self.level_order[level]
        self._stream = stream

    def set_level(self, level: Level):
        self.threshold = self.level_order[level]

    def is_enabled(self, level: Level) -> bool:
        return self.level_order[level] >= self.threshold

    def _emit(self, level: Level, msg: str, **extra: Any):
        if not self.is_enabled(level):
            return
        stamp = datetime.now(timezone.utc).isoformat(timespec="seconds")
        extrastr = (" " + " ".join(f"{k}={v}" for k,v in extra.items())) if extra else ""
        if not Settings.load().data.color:
            color, reset = "", ""
        else:
            color, reset = COLORS[level], Style.RESET_ALL
        # resolved per call so pytest's capsys sees the records
        stream = self._stream or sys.stderr
        stream.write(f"{color}{stamp} [{level}] {msg}{extrastr}{reset}\n")

    def debug(self, msg: str, **kw): self._emit("DEBUG", msg, **kw)
    def info(self, msg: str, **kw): self._emit("INFO", msg, **kw)
    def warn(self, msg: str, **kw): self._emit("WARN", msg, **kw)
    def error(self, msg: str, **kw): self._emit("ERROR", msg, **kw)

logger = Logger(Settings.load().data.log_level)
