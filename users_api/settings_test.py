import pytest

from users_api.settings import Settings

DB_ENV_VARS = [
    'DB_HOST',
    'DB_PORT',
    'DB_USER',
    'DB_PASSWORD',
    'DB_NAME',
    'DATABASE_URL',
    'PORT',
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in DB_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = Settings(_env_file=None)

    assert settings.DB_HOST == 'mysql'
    assert settings.DB_PORT == 3306
    assert settings.DB_USER == 'docker_user'
    assert settings.DB_PASSWORD == 'docker_pass'
    assert settings.DB_NAME == 'docker_demo'
    assert settings.PORT == 3000
    assert settings.DATABASE_POOL_SIZE == 10
    assert settings.EXPOSE_ERROR_DETAILS is True


def test_environment_overrides(clean_env):
    clean_env.setenv('DB_HOST', 'db.example.com')
    clean_env.setenv('DB_PORT', '3307')
    clean_env.setenv('DB_NAME', 'people')
    clean_env.setenv('PORT', '8080')

    settings = Settings(_env_file=None)

    assert settings.DB_HOST == 'db.example.com'
    assert settings.DB_PORT == 3307
    assert settings.DB_NAME == 'people'
    assert settings.PORT == 8080


def test_database_url_from_parts(clean_env):
    settings = Settings(_env_file=None)

    url = settings.database_url

    assert url.drivername == 'mysql+pymysql'
    assert url.username == 'docker_user'
    assert url.password == 'docker_pass'
    assert url.host == 'mysql'
    assert url.port == 3306
    assert url.database == 'docker_demo'


def test_database_url_escapes_credentials(clean_env):
    clean_env.setenv('DB_PASSWORD', 'p@ss:w/rd')

    url = Settings(_env_file=None).database_url

    assert url.password == 'p@ss:w/rd'
    assert 'p%40ss%3Aw%2Frd' in url.render_as_string(hide_password=False)


def test_database_url_override(clean_env):
    clean_env.setenv('DATABASE_URL', 'sqlite:///users.db')

    url = Settings(_env_file=None).database_url

    assert url.drivername == 'sqlite'
    assert url.database == 'users.db'


def test_env_file(clean_env, tmp_path):
    env_file = tmp_path / '.env'
    env_file.write_text('DB_USER=reader\nPORT=4000\n')

    settings = Settings(_env_file=env_file)

    assert settings.DB_USER == 'reader'
    assert settings.PORT == 4000
