"""eventlog CLI -- typer-based entry point.

Running ``eventlog`` with no arguments publishes one "LogEvent published"
event to the console and to ./log.txt. Every option only overrides the
loaded configuration.
"""

from __future__ import annotations

from pathlib import Path

import typer

from eventlog.cli._errors import handle_error

app = typer.Typer(
    name="eventlog",
    help="Publish a log event to the configured sinks (stdout and log.txt by default).",
    add_completion=False,
)


@app.command()
def publish(
    message: str = typer.Option(None, help="Message to publish."),
    file_path: str = typer.Option(None, help="File the file sink appends to."),
    timestamp_format: str = typer.Option(
        None, help="strftime format for the line timestamp."
    ),
    fault_policy: str = typer.Option(
        None, help="'propagate' (stop at first failing sink) or 'continue'."
    ),
    sink: list[str] = typer.Option(
        None, "--sink", help="Sink to subscribe, in delivery order. Repeatable."
    ),
    config: Path = typer.Option(None, help="YAML config file."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug diagnostics."),
) -> None:
    """Publish one log event and exit."""
    from eventlog.app import run
    from eventlog.config import ConfigError, EventlogConfig
    from eventlog.observability import DiagnosticsConfig, configure

    diag_cfg = DiagnosticsConfig.from_env()
    if verbose:
        diag_cfg.level = "DEBUG"
    try:
        configure(diag_cfg)
    except (ValueError, OSError) as e:
        handle_error(f"diagnostics: {e}")

    try:
        cfg = EventlogConfig.load(config).with_overrides(
            message=message,
            file_path=file_path,
            timestamp_format=timestamp_format,
            fault_policy=fault_policy,
            sinks=tuple(sink) if sink else None,
        )
    except ConfigError as e:
        handle_error(str(e))

    try:
        result = run(cfg)
    except ConfigError as e:
        handle_error(str(e))
    except OSError as e:
        handle_error(f"sink write failed: {e}")

    for failure in result.failures:
        typer.echo(f"Error: {failure.callback_name}: {failure.error}", err=True)
    if result.failures:
        raise typer.Exit(1)


def main() -> None:
    """Entry point for the eventlog CLI."""
    app()
