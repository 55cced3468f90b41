"""CLI entrypoint for parallel-install — typer app with a `validate` command."""

import sys
from datetime import timedelta

import structlog
import typer
from pydantic import ValidationError

from parallel_install.config.application.validator import ConfigValidator
from parallel_install.config.domain.config import InstallConfig
from parallel_install.config.infrastructure.observer import StructlogConfigObserver
from parallel_install.core.errors import ParallelInstallError

app = typer.Typer(add_completion=False)


@app.callback()
def main() -> None:
    """Parallel install/uninstall tooling."""


def _configure_structlog(log_format: str) -> None:
    """Configure structlog based on the requested format."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
    )


@app.command()
def validate(
    components_list_file: str = typer.Option(
        "", "--components-list", help="Path to the components list file"
    ),
    resource_path: str = typer.Option(
        "", "--resource-path", help="Path to the resources directory"
    ),
    crd_path: str = typer.Option("", "--crd-path", help="Path to the CRDs directory"),
    version: str = typer.Option("", "--version", help="Version being installed"),
    profile: str = typer.Option(
        "", "--profile", help="Deployment profile, e.g. 'evaluation' or 'production'"
    ),
    workers_count: int = typer.Option(4, "--workers", "-w", help="Parallel workers"),
    cancel_timeout_seconds: int = typer.Option(
        1200, "--cancel-timeout", help="Seconds before workers are cancelled"
    ),
    quit_timeout_seconds: int = typer.Option(
        1500, "--quit-timeout", help="Seconds before the operation is aborted"
    ),
    client_timeout_seconds: int = typer.Option(
        360, "--client-timeout", help="Timeout passed to the package client"
    ),
    backoff_initial_interval_seconds: int = typer.Option(
        3, "--backoff-initial-interval", help="Initial retry backoff interval"
    ),
    backoff_max_elapsed_seconds: int = typer.Option(
        300, "--backoff-max-elapsed", help="Maximum total retry duration"
    ),
    max_revision_history: int = typer.Option(
        10, "--max-revision-history", help="Revisions retained per release"
    ),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
) -> None:
    """Validate install configuration options before an install or uninstall run."""
    _configure_structlog(log_format=log_format)

    try:
        config = InstallConfig(
            workers_count=workers_count,
            cancel_timeout=timedelta(seconds=cancel_timeout_seconds),
            quit_timeout=timedelta(seconds=quit_timeout_seconds),
            client_timeout_seconds=client_timeout_seconds,
            backoff_initial_interval_seconds=backoff_initial_interval_seconds,
            backoff_max_elapsed_seconds=backoff_max_elapsed_seconds,
            max_revision_history=max_revision_history,
            profile=profile,
            components_list_file=components_list_file,
            resource_path=resource_path,
            crd_path=crd_path,
            version=version,
        )
        ConfigValidator(observer=StructlogConfigObserver()).validate(config=config)
    except ParallelInstallError as exc:
        typer.echo(str(exc))
        sys.exit(1)
    except ValidationError as exc:
        typer.echo(f"Invalid configuration: {exc}")
        sys.exit(1)
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.")
        sys.exit(1)

    typer.echo("Configuration is valid")


if __name__ == "__main__":
    app()
