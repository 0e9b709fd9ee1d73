"""cli.py - Timestack operator commands

Usage examples
--------------
$ timestack migration run                 # apply every pending migration
$ timestack migration revert              # revert the latest migration
$ timestack migration revert --all        # back to an empty database
$ timestack migration show
$ timestack serve
"""

import logging
import sys

import click
from alembic import command

from timestack.config import load_settings
from timestack.database import create_db_engine
from timestack.migrations import alembic_config, current_revision
from timestack.utils.logger import configure_logging

logger = logging.getLogger(__name__)


def _alembic_config():
    # alembic's default stdout is the one bound at import
    return alembic_config(create_db_engine(load_settings()), stdout=sys.stdout)


@click.group()
@click.option("--log-level", default=None, help="Overrides LOG_LEVEL.")
def cli(log_level):
    """Timestack server tooling."""
    configure_logging(log_level or load_settings().log_level)


@cli.group()
def migration():
    """Apply, revert and inspect schema migrations."""


@migration.command("run")
@click.option("--target", default="head", show_default=True, help="Stop after this revision.")
def migration_run(target):
    config = _alembic_config()
    before = current_revision(config.attributes["engine"])
    command.upgrade(config, target)
    after = current_revision(config.attributes["engine"])
    if after == before:
        click.echo("nothing to apply")
    else:
        click.echo(f"database at {after}")


@migration.command("revert")
@click.option("--steps", type=int, default=1, show_default=True)
@click.option("--all", "revert_all", is_flag=True, help="Revert every applied migration.")
def migration_revert(steps, revert_all):
    if steps < 1 and not revert_all:
        raise click.BadParameter("must be at least 1", param_hint="--steps")

    config = _alembic_config()
    if current_revision(config.attributes["engine"]) is None:
        click.echo("nothing to revert")
        return

    command.downgrade(config, "base" if revert_all else f"-{steps}")
    click.echo(f"database at {current_revision(config.attributes['engine']) or 'base'}")


@migration.command("show")
def migration_show():
    """Revision history, newest first, with the current one marked."""
    command.history(_alembic_config(), indicate_current=True)


@cli.command()
@click.option("--host", default="0.0.0.0", show_default=True)
@click.option("--reload", is_flag=True)
def serve(host, reload):
    """Run the API server on SERVER_PORT."""
    import uvicorn

    port = load_settings().server_port
    logger.info("Starting server on %s:%s", host, port)
    uvicorn.run("timestack.main:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    cli()
