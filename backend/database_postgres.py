"""
PostgreSQL connection management for score storage.

The score server reads DATABASE_URL first and falls back to the libpq-style
PGHOST/PGPORT/PGUSER/PGPASSWORD/PGDATABASE variables. Hosted databases such
as Neon only accept TLS, so PGSSLMODE (e.g. "require") is passed through to
psycopg2 when it is set.
"""

import os
import re
import logging
import psycopg2
from psycopg2.extras import RealDictCursor
from dotenv import load_dotenv

load_dotenv()
logger = logging.getLogger(__name__)

_PASSWORD_IN_URL = re.compile(r"(://[^:/@]+:)[^@]*(@)")


def get_connection_string() -> str:
    """
    Resolve where the player_score table lives.

    DATABASE_URL wins; otherwise host, user, password and database must all
    be set (PGPORT defaults to 5432).

    Raises:
        ValueError: If neither form is configured
    """
    database_url = os.getenv('DATABASE_URL')
    if database_url:
        return database_url

    required = {name: os.getenv(name) for name in ('PGHOST', 'PGUSER', 'PGPASSWORD', 'PGDATABASE')}
    missing = [name for name, value in required.items() if not value]
    if missing:
        raise ValueError(
            "Database connection not configured. Set DATABASE_URL or "
            f"PGHOST/PGUSER/PGPASSWORD/PGDATABASE (missing: {', '.join(missing)})."
        )

    port = os.getenv('PGPORT', '5432')
    return (
        f"postgresql://{required['PGUSER']}:{required['PGPASSWORD']}"
        f"@{required['PGHOST']}:{port}/{required['PGDATABASE']}"
    )


def redact(conn_string: str) -> str:
    """Hide the password in a connection URL so it can be logged."""
    return _PASSWORD_IN_URL.sub(r"\1***\2", conn_string)


def get_connection():
    """
    Open a new connection whose cursors return rows as dictionaries.
    """
    conn_string = get_connection_string()
    options = {'cursor_factory': RealDictCursor}
    sslmode = os.getenv('PGSSLMODE')
    if sslmode:
        options['sslmode'] = sslmode

    try:
        return psycopg2.connect(conn_string, **options)
    except psycopg2.Error as e:
        logger.error(f"Failed to connect to PostgreSQL at {redact(conn_string)}: {e}")
        raise
