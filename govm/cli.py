"""Command line interface."""

import asyncio
import functools

import click

from . import __version__
from .config import GovmConfig
from .errors import GovmError
from .runtime import SdkManager
from .utils import setup_logging
from .versions import parse_version


def report_errors(func):
    """Turn govm failures into a clean CLI error with exit code 1."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except GovmError as exc:
            raise click.ClickException(str(exc)) from exc
    return wrapper


@click.group()
@click.version_option(__version__, prog_name="govm")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug output.")
@click.pass_context
@report_errors
def cli(ctx: click.Context, verbose: bool):
    """Manages and installs go SDKs."""
    # an injected manager means the caller owns config and logging
    if ctx.obj is None:
        setup_logging(verbose)
        ctx.obj = SdkManager(GovmConfig.from_env())


@cli.command()
@click.argument("version")
@click.pass_obj
@report_errors
def install(manager: SdkManager, version: str):
    """Installs the provided version of the go sdk."""
    parsed = parse_version(version)
    path = asyncio.run(manager.install(parsed))
    click.echo(f"installed go {parsed} to {path}")


@cli.command()
@click.argument("version")
@click.pass_obj
@report_errors
def use(manager: SdkManager, version: str):
    """Sets a go sdk version as the system default."""
    manager.use(parse_version(version))


@cli.command("list")
@click.pass_obj
@report_errors
def list_versions(manager: SdkManager):
    """Lists installed go sdks."""
    for version in manager.list_installed():
        click.echo(str(version))


@cli.command()
@click.pass_obj
@report_errors
def current(manager: SdkManager):
    """Prints the currently used go version."""
    click.echo(str(manager.current()))


def main():
    cli(prog_name="govm")
