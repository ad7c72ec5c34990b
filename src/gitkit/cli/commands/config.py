"""Commands that show and write the gitkit configuration."""

import click

from gitkit.cli.output import machine_output, user_output
from gitkit.core.config_store import GitkitConfig
from gitkit.core.context import GitkitContext


@click.group("config")
def config_group() -> None:
    """Show or write the gitkit configuration."""


@config_group.command("show")
@click.pass_obj
def show_cmd(ctx: GitkitContext) -> None:
    """Print the effective configuration."""
    config = ctx.config
    machine_output(f"shell={config.shell}")
    machine_output(f"verbose={str(config.verbose).lower()}")
    machine_output(f"path={config.path if config.path is not None else ''}")
    machine_output(f"max_workers={config.max_workers if config.max_workers is not None else ''}")
    for key, value in sorted(config.env.items()):
        machine_output(f"env.{key}={value}")


@config_group.command("init")
@click.option("--shell", default="/bin/sh", show_default=True, help="Shell executable.")
@click.option("--verbose/--no-verbose", default=False, help="Print commands before running.")
@click.option("--path", default=None, help="Default working directory.")
@click.option(
    "--max-workers",
    type=click.IntRange(min=1),
    default=None,
    help="Background worker pool size.",
)
@click.option("--env", "env_pairs", multiple=True, help="KEY=VALUE environment variable.")
@click.option("-f", "--force", is_flag=True, help="Overwrite an existing config.")
@click.pass_obj
def init_config_cmd(
    ctx: GitkitContext,
    shell: str,
    verbose: bool,
    path: str | None,
    max_workers: int | None,
    env_pairs: tuple[str, ...],
    force: bool,
) -> None:
    """Write a configuration file."""
    store = ctx.config_store
    if store.exists() and not force:
        user_output(
            click.style("Error: ", fg="red")
            + f"Config already exists at {store.path()}. Use --force to overwrite."
        )
        raise SystemExit(1)

    env: dict[str, str] = {}
    for pair in env_pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got '{pair}'", param_hint="--env")
        env[key] = value

    store.save(
        GitkitConfig(
            shell=shell, env=env, verbose=verbose, path=path, max_workers=max_workers
        )
    )
    user_output(f"✓ Wrote {click.style(str(store.path()), fg='green')}")
