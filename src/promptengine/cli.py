from __future__ import annotations
import sys
from rich.console import Console
from rich.table import Table

from promptengine.core.logging import logger
from promptengine.system.settings import Settings
from promptengine.ui.input import get_bool, get_choice, get_email, get_input, get_list

FRUITS = ["Apples", "Oranges", "Bananas"]


def ask_all() -> dict:
    """Walk through every primitive once, echoing each answer."""
    name = get_input("What is your name? ")
    print(f"Hello, {name}")

    age = get_input("What is your age? ", int)
    print(f"You are {age} years old.")

    is_cool = get_bool("Are you cool? ")
    print(f"You are{'' if is_cool else ' not'} cool!")

    fruit = get_choice("What is your favorite fruit?", FRUITS)
    print(f"Your favorite fruit is: {FRUITS[fruit]}")

    names = get_list("Enter some names, separated by commas: ", ",")
    print(f"You entered: {names}")

    numbers = get_list("Enter some numbers, separated by commas: ", ",", int)
    print(f"You entered: {numbers}")

    email = get_email("Enter your email address: ")
    print(f"Your email address is: {email}")

    return {
        "name": name,
        "age": age,
        "cool": is_cool,
        "fruit": FRUITS[fruit],
        "names": names,
        "numbers": numbers,
        "email": email,
    }


def render_summary(answers: dict, console: Console | None = None):
    console = console or Console()
    table = Table(title="Your answers")
    table.add_column("Question", style="cyan")
    table.add_column("Answer")
    for key, value in answers.items():
        table.add_row(key, str(value))
    console.print(table)


def run():
    settings = Settings.load()
    settings.apply()
    logger.debug("DemoStart")
    try:
        answers = ask_all()
    except KeyboardInterrupt:
        print()
        sys.exit(130)
    render_summary(answers)
