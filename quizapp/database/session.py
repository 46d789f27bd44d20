from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from quizapp.config import Settings, settings


def build_sqlalchemy_database_url_from_settings(_settings: Settings) -> str:
    """
    Builds a SQLAlchemy URL based on the provided settings.

    An explicit DATABASE_URL wins over the POSTGRES_* parts. Plain
    postgres:// and postgresql:// URLs are pointed at the psycopg driver.

    Parameters:
        _settings (Settings): An instance of the Settings class
        containing the PostgreSQL connection details.

    Returns:
        str: The generated SQLAlchemy URL.
    """
    if _settings.DATABASE_URL:
        url = _settings.DATABASE_URL
        for prefix in ("postgres://", "postgresql://"):
            if url.startswith(prefix):
                return "postgresql+psycopg://" + url[len(prefix):]
        return url
    return (
        f"postgresql+psycopg://{_settings.POSTGRES_USER}:{_settings.POSTGRES_PASSWORD}"
        f"@{_settings.POSTGRES_HOST}:{_settings.POSTGRES_PORT}/{_settings.POSTGRES_DB}"
    )


def get_engine(database_url: str, echo=False, **kwargs) -> Engine:
    """
    Creates and returns a SQLAlchemy Engine object for connecting to a database.

    Parameters:
        database_url (str): The URL of the database to connect to.
        echo (bool): Whether or not to enable echoing of SQL statements.
        Defaults to False.

    Returns:
        Engine: A SQLAlchemy Engine object representing the database connection.
    """
    return create_engine(database_url, echo=echo, future=True, **kwargs)


def get_local_session(engine: Engine) -> sessionmaker:
    """
    Create and return a sessionmaker object for a local database session.

    Parameters:
        engine (Engine): The engine the sessions should use. The caller
        owns it and is responsible for disposing it.

    Returns:
        sessionmaker: A sessionmaker object configured for the local database session.
    """
    return sessionmaker(autocommit=False, autoflush=False, bind=engine, future=True)


SQLALCHEMY_DATABASE_URL = build_sqlalchemy_database_url_from_settings(settings)
