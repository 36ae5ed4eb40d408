"""
Tests for configuration, logging and role permissions
"""
import json
import logging

from cms_admin.core.config import Settings
from cms_admin.core.logging_config import (ContextualFormatter, LoggingConfig,
                                           SensitiveDataFilter)
from cms_admin.core.permissions import (ROLE_PERMISSIONS, STAFF_ROLES,
                                        Permission, is_staff)


def _record(msg, *args, **extra):
    record = logging.LogRecord("cms_admin.test", logging.INFO, __file__, 1, msg, args, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_database_url_prefers_db_url():
    """Test an explicit URL wins over the postgres settings"""
    settings = Settings(db_url="sqlite:///tmp.db", postgres_host="db.local")

    assert settings.database_url == "sqlite:///tmp.db"


def test_database_url_from_postgres_settings():
    """Test the postgres URL is assembled from its parts"""
    settings = Settings(
        db_url=None,
        postgres_host="db.local",
        postgres_user="cms",
        postgres_password="pw",
        postgres_db="content",
    )

    assert settings.database_url == "postgresql://cms:pw@db.local:5432/content"


def test_database_url_sqlite_fallback():
    """Test a local SQLite file is used when nothing is configured"""
    settings = Settings(db_url=None, postgres_host=None)

    assert settings.database_url.startswith("sqlite:///")
    assert settings.database_url.endswith("cms.db")


def test_allowed_origins_list():
    settings = Settings(allowed_origins="http://a.test, http://b.test,")

    assert settings.allowed_origins_list == ["http://a.test", "http://b.test"]


def test_sensitive_data_masked():
    """Test passwords and session tokens never reach the log output"""
    record = _record("login password=hunter2 cookie session_token=abc123")

    SensitiveDataFilter().filter(record)

    assert "hunter2" not in record.msg
    assert "abc123" not in record.msg


def test_sensitive_filter_disabled():
    record = _record("password=hunter2")

    SensitiveDataFilter(enabled=False).filter(record)

    assert "hunter2" in record.msg


def test_contextual_formatter_includes_context_and_extra():
    """Test JSON lines carry the request context and extra fields"""
    LoggingConfig.set_context(request_id="req-1", path="/posts")
    try:
        line = ContextualFormatter().format(_record("Error fetching %s", "posts", reader="posts"))
    finally:
        LoggingConfig.clear_context()

    data = json.loads(line)
    assert data["message"] == "Error fetching posts"
    assert data["request_id"] == "req-1"
    assert data["path"] == "/posts"
    assert data["reader"] == "posts"
    assert data["level"] == "INFO"


def test_staff_roles():
    assert STAFF_ROLES == ("admin", "author")
    assert is_staff("admin") and is_staff("author")
    assert not is_staff("reader")
    assert not is_staff(None)


def test_role_permissions_table():
    """Test the declared permissions per role"""
    assert Permission.MANAGE_USERS in ROLE_PERMISSIONS["admin"]
    assert ROLE_PERMISSIONS["author"] == ROLE_PERMISSIONS["admin"]
    assert Permission.MANAGE_USERS not in ROLE_PERMISSIONS["reader"]
    assert ROLE_PERMISSIONS["banned"] == []
