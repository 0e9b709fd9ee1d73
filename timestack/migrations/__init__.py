"""Alembic migrations for the ``core`` schema.

Revisions live in ``versions/`` and are chained through ``down_revision``.
Their ids are the creation timestamps, so the chain is also timestamp order.
The applied revision is kept in the ``__migrations__`` version table.
"""

from pathlib import Path
from typing import Iterable, List, Optional

from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy.engine import Engine

MIGRATIONS_DIR = Path(__file__).resolve().parent
VERSIONS_DIR = MIGRATIONS_DIR / "versions"
VERSION_TABLE = "__migrations__"


def alembic_config(engine: Optional[Engine] = None, version_locations: Iterable = (), **kwargs) -> Config:
    """Alembic config without an ini file.

    ``engine`` is handed to ``env.py``; without one it builds the engine from
    the application settings. Extra ``version_locations`` are searched after
    the packaged revisions.
    """
    config = Config(**kwargs)
    config.set_main_option("script_location", str(MIGRATIONS_DIR))
    config.set_main_option("path_separator", "space")
    locations = [str(VERSIONS_DIR)] + [str(location) for location in version_locations]
    config.set_main_option("version_locations", " ".join(locations))
    config.attributes["engine"] = engine
    return config


def current_revision(engine: Engine) -> Optional[str]:
    with engine.connect() as connection:
        context = MigrationContext.configure(connection, opts={"version_table": VERSION_TABLE})
        return context.get_current_revision()


def applied_revisions(config: Config) -> List[str]:
    """Revision ids from the first one up to the current one."""
    current = current_revision(config.attributes["engine"])
    if current is None:
        return []
    script = ScriptDirectory.from_config(config)
    return [rev.revision for rev in reversed(list(script.iterate_revisions(current, "base")))]


__all__ = [
    "MIGRATIONS_DIR",
    "VERSION_TABLE",
    "alembic_config",
    "applied_revisions",
    "current_revision",
]
