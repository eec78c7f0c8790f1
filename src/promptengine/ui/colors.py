from __future__ import annotations
from colorama import Fore, Style

from promptengine.system.settings import Settings

_CODES = {
    'red': Fore.RED,
    'green': Fore.GREEN,
    'yellow': Fore.YELLOW,
    'blue': Fore.BLUE,
    'magenta': Fore.MAGENTA,
    'cyan': Fore.CYAN,
    'white': Fore.WHITE,
    'bold': Style.BRIGHT,
    'reset': Style.RESET_ALL,
}

def get_color_code(name: str) -> str:
    """Get ANSI color code by name, returns empty string if colors disabled."""
    if not color_enabled():
        return ''
    return _CODES.get(name, '')

def colored_text(text: str, color: str) -> str:
    """Wrap text in color codes if colors are enabled."""
    if not color_enabled():
        return text
    return f"{get_color_code(color)}{text}{get_color_code('reset')}"

def color_enabled() -> bool:
    return Settings.load().data.color
