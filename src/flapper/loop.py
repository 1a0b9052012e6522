import os

os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"

import typer

from flapper.cli.commands.run import run_command
from flapper.cli.commands.simulate import simulate_command

app = typer.Typer(help="Side-scrolling flapping game on a character grid.")

app.command(name="run")(run_command)
app.command(name="simulate")(simulate_command)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
