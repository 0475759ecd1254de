"""Command line interface for the artifact installer."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple

import click

from . import __version__
from .bootstrap import ServiceContainer
from .logging_config import configure_logging
from .modules.installfile.domain import InstallFileError, InstallFileRequest
from .settings import Settings


@click.group()
@click.version_option(version=__version__)
@click.option("--log-level", default=None, help="Log level, defaults to INSTALLER_LOG_LEVEL or INFO")
@click.pass_context
def main(ctx: click.Context, log_level: Optional[str]) -> None:
    """artifact-installer - install files into a local Maven repository"""
    settings = Settings()
    configure_logging(log_level or settings.log_level)
    ctx.obj = settings


@main.command(name="install-file-if-not-exist")
@click.option("--group-id", "-g", "groupid", required=True, help="GroupId of the artifact")
@click.option("--artifact-id", "-a", "artifactid", required=True, help="ArtifactId of the artifact")
@click.option("--version", "-v", "version", required=True, help="Version of the artifact")
@click.option("--packaging", "-p", default=None, help="Packaging type, defaults to the file extension")
@click.option("--classifier", "-c", default=None, help="Classifier, e.g. sources or javadoc")
@click.option(
    "--file",
    "-f",
    "file",
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="File to install",
)
@click.option("--local-repository", default=None, help="Local repository base directory")
@click.option("--remote-repository", "remote_repositories", multiple=True, help="Remote repository URL (repeatable)")
@click.option("--offline/--online", default=None, help="Skip remote repository lookups")
@click.pass_obj
def install_file_if_not_exist(
    settings: Settings,
    groupid: str,
    artifactid: str,
    version: str,
    packaging: Optional[str],
    classifier: Optional[str],
    file: Path,
    local_repository: Optional[str],
    remote_repositories: Tuple[str, ...],
    offline: Optional[bool],
) -> None:
    """Install FILE unless the artifact exists locally or remotely."""
    overrides = {}
    if local_repository:
        overrides["local_repository"] = local_repository
    if remote_repositories:
        overrides["remote_repositories"] = list(remote_repositories)
    if offline is not None:
        overrides["offline"] = offline
    if overrides:
        settings = settings.model_copy(update=overrides)

    services = ServiceContainer(settings)
    try:
        result = services.install_service.run(
            InstallFileRequest(
                groupid=groupid,
                artifactid=artifactid,
                version=version,
                file=file,
                packaging=packaging,
                classifier=classifier,
            )
        )
    except InstallFileError as exc:
        raise click.ClickException(str(exc)) from exc
    finally:
        services.close()

    if result.skipped:
        click.echo(f"SKIPPED {result.artifact.coordinates}")
    else:
        click.echo(f"INSTALLED {result.artifact.coordinates} -> {result.local_path}")


if __name__ == "__main__":  # pragma: no cover
    main()
