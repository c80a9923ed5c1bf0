import ssl

from robot_logs.core.config import DatabaseSettings, ServerSettings, Settings


def test_database_url_is_built_from_environment(monkeypatch):
    monkeypatch.setenv("DB_HOST", "db.internal")
    monkeypatch.setenv("DB_USER", "robot")
    monkeypatch.setenv("DB_PASSWORD", "s3cret")
    monkeypatch.setenv("DB_NAME", "telemetry")
    monkeypatch.setenv("DB_PORT", "25060")
    monkeypatch.delenv("DB_URL", raising=False)

    url = Settings().database_url

    assert url.drivername == "postgresql+asyncpg"
    assert url.host == "db.internal"
    assert url.username == "robot"
    assert url.password == "s3cret"
    assert url.database == "telemetry"
    assert url.port == 25060


def test_explicit_url_wins(monkeypatch):
    monkeypatch.setenv("DB_HOST", "ignored")
    monkeypatch.setenv("DB_URL", "sqlite+aiosqlite:///./logs.db")

    assert DatabaseSettings().build_url() == "sqlite+aiosqlite:///./logs.db"


def test_listen_port_defaults_to_3000(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    assert ServerSettings().port == 3000


def test_listen_port_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    assert Settings().port == 8080


def test_tls_is_off_by_default(monkeypatch):
    monkeypatch.delenv("DB_SSL", raising=False)
    assert DatabaseSettings().connect_args() == {}


def test_tls_verifies_certificates_unless_disabled(monkeypatch):
    monkeypatch.delenv("DB_SSL_NO_VERIFY", raising=False)
    context = DatabaseSettings(ssl=True).connect_args()["ssl"]

    assert context.verify_mode == ssl.CERT_REQUIRED
    assert context.check_hostname is True


def test_tls_without_verification_requires_explicit_flag(monkeypatch):
    monkeypatch.setenv("DB_SSL", "true")
    monkeypatch.setenv("DB_SSL_NO_VERIFY", "true")

    context = DatabaseSettings().connect_args()["ssl"]

    assert context.verify_mode == ssl.CERT_NONE
    assert context.check_hostname is False
