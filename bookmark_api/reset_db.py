"""Create the schema and wipe existing rows.

Usage:
    python -m bookmark_api.reset_db [--drop]
"""
import argparse
import logging

from bookmark_api.core.config import Settings
from bookmark_api.database import Database
from bookmark_api.models import bookmark, user  # noqa: F401

logger = logging.getLogger(__name__)


def reset(database: Database, drop: bool = False) -> None:
    if drop:
        database.drop_all()
        database.create_all()
        return
    database.create_all()
    database.clean()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument('--drop', action='store_true', help='drop and recreate every table')
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    settings = Settings.from_env()
    database = Database(settings.database_url, echo=settings.database_echo)
    try:
        reset(database, drop=args.drop)
    finally:
        database.dispose()
    logger.info('Database at %s reset', database.engine.url.render_as_string(hide_password=True))


if __name__ == '__main__':
    main()
