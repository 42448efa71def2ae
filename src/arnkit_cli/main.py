import typer
import typer_di

from arnkit.log_config import configure_logging

from .commands import build, builders, check, expand, known, parse
from .version import version_callback


app = typer_di.TyperDI(help="Parse, build, expand and check AWS ARNs.")


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        help="Show the version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Logs de debug em stderr.",
    ),
):
    configure_logging(verbose)


app.command("parse")(parse)
app.command("build")(build)
app.command("expand")(expand)
app.command("check")(check)
app.command("builders")(builders)
app.command("known")(known)


if __name__ == "__main__":
    app()
