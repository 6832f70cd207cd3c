import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL, make_url

ROOT_DIR = Path(__file__).parent.parent
ENV_FILE_PATH = ROOT_DIR / '.env'
ENV_LOCAL_FILE_PATH = ROOT_DIR / '.env.local'


def get_setting_env_file():
    if 'PYTEST_VERSION' in os.environ:
        # Tests configure everything explicitly
        return None

    return [ENV_FILE_PATH, ENV_LOCAL_FILE_PATH]


class Settings(BaseSettings):
    HOST: str = '0.0.0.0'
    PORT: int = 3000

    DB_HOST: str = 'mysql'
    DB_PORT: int = 3306
    DB_USER: str = 'docker_user'
    DB_PASSWORD: str = 'docker_pass'
    DB_NAME: str = 'docker_demo'

    # Full SQLAlchemy URL, takes precedence over the DB_* parts when set
    DATABASE_URL: str | None = None
    DATABASE_DRIVER: str = 'mysql+pymysql'

    # Database connection pooling settings
    DATABASE_POOL_SIZE: int = 10
    DATABASE_POOL_RECYCLE: int = 3600
    DATABASE_POOL_PRE_PING: bool = True

    LOG_LEVEL: str = 'INFO'

    # Return the raw store error text in 500 responses
    EXPOSE_ERROR_DETAILS: bool = True

    ENVIRONMENT: str = 'development'
    API_SENTRY_DSN: str | None = None

    model_config = SettingsConfigDict(
        env_file=get_setting_env_file(),
        extra='ignore',
    )

    @property
    def database_url(self) -> URL:
        if self.DATABASE_URL:
            return make_url(self.DATABASE_URL)
        return URL.create(
            self.DATABASE_DRIVER,
            username=self.DB_USER,
            password=self.DB_PASSWORD,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
        )


settings = Settings()  # type: ignore
