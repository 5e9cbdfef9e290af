import os

os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"

import typer

from simon.cli.commands.run import run_command
from simon.cli.commands.svg import svg_command

app = typer.Typer()

app.command(name="run")(run_command)
app.command(name="svg")(svg_command)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
