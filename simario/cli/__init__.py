import click

from .commands.codes import codes_command
from .commands.describe import describe_command


@click.group()
def app() -> None:
    pass


app.add_command(describe_command, name="describe")
app.add_command(codes_command, name="codes")
__all__ = ["app"]
