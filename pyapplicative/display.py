"""
Rendering helpers for the tour: rich tables captured to strings
and colorama highlighting of headings
"""
from typing import Iterable, Union

from colorama import Fore, Style
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .laws import LawResult


def rich_to_str(text: Union[Text, Table], color: bool = True) -> str:
    """
    Returns directly printable string corresponding to a text
    Applies style formatting and word wrapping automatically
    """
    console = Console(color_system="standard" if color else None,
                      force_terminal=color, highlight=False, width=100)
    with console.capture() as capture:
        console.print(text)
    return capture.get()


def heading(title: str, color: bool = True) -> str:
    """
    Section heading, bright cyan when color is on
    """
    rule = "=" * len(title)
    if not color:
        return f"{title}\n{rule}\n"
    return f"{Style.BRIGHT}{Fore.CYAN}{title}{Style.RESET_ALL}\n{rule}\n"


def show(expression: str, value: object) -> str:
    """
    One line of the form: expression  ->  repr(value)
    """
    return f"  {expression}\n      -> {value!r}\n"


def law_table(container: str, results: Iterable[LawResult],
              color: bool = True) -> str:
    """
    Table of law check results for one container
    """
    table = Table(title=f"{container} laws", row_styles=['', 'dim'])
    table.add_column("law")
    table.add_column("holds")
    table.add_column("left")
    table.add_column("right")
    for result in results:
        mark = Text("yes", style="green") if result.holds \
            else Text("NO", style="bold red")
        table.add_row(result.name, mark, repr(result.left), repr(result.right))
    return rich_to_str(table, color)
