import pytest
from pydantic import ValidationError

from expense_api.core.settings import Settings


def make(**kwargs):
    return Settings(_env_file=None, **kwargs)


def test_url_built_from_parts_uses_asyncpg():
    s = make(DB_HOST="db", DB_PORT=6543, DB_NAME="money", DB_USER="app", DB_PASSWORD="secret")

    url = s.SQLALCHEMY_URL

    assert url.drivername == "postgresql+asyncpg"
    assert (url.host, url.port, url.database, url.username, url.password) == (
        "db", 6543, "money", "app", "secret",
    )


def test_plain_postgres_url_is_rewritten_without_query():
    s = make(DATABASE_URL="postgresql://u:p@h:5432/d?sslmode=require")

    url = s.SQLALCHEMY_URL

    assert url.drivername == "postgresql+asyncpg"
    assert url.database == "d"
    assert dict(url.query) == {}


def test_non_postgres_url_is_kept():
    s = make(DATABASE_URL="sqlite+aiosqlite:///./x.db")

    assert s.SQLALCHEMY_URL.drivername == "sqlite+aiosqlite"


def test_blank_database_url_falls_back_to_parts():
    s = make(DATABASE_URL="")

    assert s.DATABASE_URL is None
    assert s.SQLALCHEMY_URL.drivername == "postgresql+asyncpg"


@pytest.mark.parametrize("raw, expected", [("api", "/api"), ("/api/", "/api"), ("", "")])
def test_prefix_normalized(raw, expected):
    assert make(API_PREFIX=raw).API_PREFIX == expected


def test_cors_list():
    assert make(CORS_ORIGINS="*").CORS_ORIGINS_LIST == ["*"]
    assert make(CORS_ORIGINS="http://a, http://b,").CORS_ORIGINS_LIST == ["http://a", "http://b"]


def test_port_out_of_range_rejected():
    with pytest.raises(ValidationError):
        make(APP_PORT=70000)


def test_unknown_schema_mode_rejected():
    with pytest.raises(ValidationError):
        make(DB_SCHEMA_MODE="update")
