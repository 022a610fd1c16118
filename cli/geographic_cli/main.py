from __future__ import annotations

import typer

from .commands import destinations_cmd, inspirations_cmd, meta_cmd, poi_cmd, settings_cmd
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="geographic",
        help="Geographic points-of-interest API client.",
        no_args_is_help=True,
    )

    app.add_typer(settings_cmd.app, name="settings")
    app.add_typer(poi_cmd.app, name="poi")
    app.add_typer(destinations_cmd.app, name="destinations")
    app.add_typer(inspirations_cmd.app, name="inspirations")
    app.command("languages")(meta_cmd.languages)
    app.command("version")(meta_cmd.version)

    @app.callback()
    def _main(
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
    ):
        setup_logging(verbose)

    return app


app = _build_app()
