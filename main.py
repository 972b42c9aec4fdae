import sys
import time

import questionary
from questionary import Style
from rich.console import Console

from log import set_log_fn
from config import load_config, save_config, view_kwargs, CONFIG_PATH
from cells import CellType
from canvas import TerminalSurface
from matrix_view import MatrixView

console = Console()

style = Style([
    ('qmark', 'fg:#00ff00 bold'),
    ('question', 'bold'),
    ('answer', 'fg:#00ff00 bold'),
])

def ask_mode(config, path):
    choice = questionary.select(
        "Cell type?",
        choices=[m.value for m in CellType],
        default=config["mode"] if config["mode"] in [m.value for m in CellType] else None,
        qmark="📟",
        style=style,
    ).ask()
    if choice:
        config["mode"] = choice
        save_config(config, path)

def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    path = argv[0] if argv else CONFIG_PATH
    set_log_fn(console.print)

    config = load_config(path)
    if config.get("ask_mode"):
        ask_mode(config, path)

    view = MatrixView(**view_kwargs(config))
    width, height = config["viewport"]

    with TerminalSurface(width, height, view.background_color, console=console) as surface:
        view.attach_to(surface)
        view.start()
        try:
            while True:
                time.sleep(0.5)
        except KeyboardInterrupt:
            pass
        finally:
            view.stop()

    console.print("[bold green]👋 Bye![/]")

if __name__ == "__main__":
    main()
