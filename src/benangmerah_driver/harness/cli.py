"""Typer applications for running drivers from the command line."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

import typer

from benangmerah_driver.driver import DriverBase
from benangmerah_driver.harness.args import parse_cli_args
from benangmerah_driver.harness.runner import import_driver, run_driver

_PASS_THROUGH = {"allow_extra_args": True, "ignore_unknown_options": True}


def build_app(
    driver_cls: type[DriverBase] | None = None,
    options: Mapping[str, Any] | None = None,
) -> typer.Typer:
    """Build a single-command app that runs *driver_cls*.

    Without *driver_cls* the first positional argument names the driver as
    ``module.path:ClassName``. Unrecognised flags become driver options.
    """
    usage = "[OUTPUT] [--OPTION VALUE]..."
    if driver_cls is None:
        usage = "DRIVER " + usage
    app = typer.Typer(
        name="bm-driver",
        help="Run a BenangMerah driver and write its triples as RDF.",
        add_completion=False,
    )

    @app.command(context_settings=_PASS_THROUGH, options_metavar=usage)
    def run(
        ctx: typer.Context,
        output_file: str = typer.Option(
            None, "--output-file", "-o", help="Write RDF to this file"
        ),
        force: bool = typer.Option(
            False, "--force", "-f", help="Overwrite the output file if it exists"
        ),
        output_format: str = typer.Option(
            None, "--format", help="rdflib serializer name (default: turtle)"
        ),
        last_fetched: str = typer.Option(
            None, "--last-fetched", help="ISO 8601 time of the previous fetch"
        ),
        config: str = typer.Option(
            None, "--config", "-c", help="YAML file of driver options"
        ),
        log_level: str = typer.Option(None, "--log-level", help="Logging level"),
    ) -> None:
        """Fetch from the source and serialize the emitted triples."""
        positionals, cli_options = parse_cli_args(ctx.args)

        target = driver_cls
        if target is None:
            if not positionals:
                raise typer.BadParameter(
                    "Missing driver reference 'module.path:ClassName'",
                    param_hint="DRIVER",
                )
            try:
                target = import_driver(positionals.pop(0))
            except ValueError as exc:
                raise typer.BadParameter(str(exc), param_hint="DRIVER") from exc

        explicit = {
            "output_file": output_file,
            "force": True if force else None,
            "format": output_format,
            "last_fetched": last_fetched,
            "log_level": log_level,
        }
        cli_options.update({k: v for k, v in explicit.items() if v is not None})

        code = run_driver(target, options, positionals, cli_options, config_path=config)
        if code:
            raise typer.Exit(code)

    return app


def handle_cli(
    driver_cls: type[DriverBase],
    options: Mapping[str, Any] | None = None,
    args: Sequence[str] | None = None,
) -> None:
    """Run *driver_cls* with the process arguments (or *args*).

    Driver modules call this from their own ``main()`` entry point.
    """
    app = build_app(driver_cls, options)
    app(args=list(args) if args is not None else None)


def main() -> None:
    """Entry point for ``bm-driver``."""
    build_app()()
