"""
Configuration Management

This module handles all configuration settings, environment variables,
and initialization of external service clients.
"""

import os
from dotenv import load_dotenv
from openai import OpenAI
import replicate

# Load environment variables
load_dotenv()


def _env_flag(name, default):
    return os.environ.get(name, default).lower() in ("true", "1", "yes")


class Config:
    """Base configuration class."""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = _env_flag("FLASK_DEBUG", "0")
    TESTING = False
    APP_ENV = os.environ.get("APP_ENV", "development")

    # Server settings
    HOST = "0.0.0.0"
    PORT = os.environ.get("PORT", "8080")
    TLS_PORT = os.environ.get("TLS_PORT", "4443")

    # TLS material, either base64 PEM in the environment or files on disk
    TLS_KEY = os.environ.get("TLS_KEY")
    TLS_CERT = os.environ.get("TLS_CERT")
    TLS_KEY_PATH = os.environ.get("TLS_KEY_PATH", "certs/localhost-key.pem")
    TLS_CERT_PATH = os.environ.get("TLS_CERT_PATH", "certs/localhost.pem")

    # Request filter settings
    FORCE_HTTPS = _env_flag("FORCE_HTTPS", "true")

    # Logging
    LOG_LEVEL = os.environ.get("LOG_LEVEL")

    # Outbound HTTP settings
    FETCH_TIMEOUT_SECONDS = float(os.environ.get("FETCH_TIMEOUT_SECONDS", "15"))
    USER_AGENT = os.environ.get("USER_AGENT", "alt-text-generator/1.0.0")
    MAX_IMAGE_BYTES = int(os.environ.get("MAX_IMAGE_BYTES", str(10 * 1024 * 1024)))

    # Replicate settings
    REPLICATE_API_TOKEN = os.getenv("REPLICATE_API_TOKEN")
    REPLICATE_API_ENDPOINT = os.getenv("REPLICATE_API_ENDPOINT")
    REPLICATE_USER_AGENT = os.getenv("REPLICATE_USER_AGENT", "alt-text-generator/1.0.0")
    REPLICATE_MODEL_VERSION = os.getenv(
        "REPLICATE_MODEL_VERSION",
        "9a34a6339872a03f45236f114321fb51fc7aa8269d38ae0ce5334969981e4cd8",
    )
    REPLICATE_POLL_INTERVAL_SECONDS = float(os.getenv("REPLICATE_POLL_INTERVAL_SECONDS", "1"))
    REPLICATE_TIMEOUT_SECONDS = float(os.getenv("REPLICATE_TIMEOUT_SECONDS", "120"))

    # OpenAI settings
    OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
    OPENAI_VISION_MODEL = os.getenv("OPENAI_VISION_MODEL", "gpt-4o-mini")

    @classmethod
    def is_production(cls):
        return cls.APP_ENV == "production"

    @classmethod
    def log_level(cls):
        """Level name for the application logger."""
        if cls.LOG_LEVEL:
            return cls.LOG_LEVEL.upper()
        return "INFO" if cls.is_production() else "DEBUG"

    @classmethod
    def validate_env_vars(cls):
        """Validate that the server ports are numbers."""
        for name in ("PORT", "TLS_PORT"):
            value = str(getattr(cls, name))
            if not value.isdigit():
                raise ValueError(f'Config validation error: "{name}" must be a number, got {value!r}')


class TestingConfig(Config):
    """Configuration used by the test suite."""

    TESTING = True
    FORCE_HTTPS = False
    LOG_LEVEL = "DEBUG"
    REPLICATE_POLL_INTERVAL_SECONDS = 0
    REPLICATE_TIMEOUT_SECONDS = 5


class ClientManager:
    """Manages initialization of external service clients."""

    def __init__(self, config=Config):
        self.config = config
        self._replicate_client = None
        self._openai_client = None

    @property
    def replicate_client(self):
        """Lazy-loaded Replicate client."""
        if self._replicate_client is None:
            if not self.config.REPLICATE_API_TOKEN:
                raise ValueError("Please set REPLICATE_API_TOKEN in your .env file")
            self._replicate_client = replicate.Client(
                api_token=self.config.REPLICATE_API_TOKEN,
                base_url=self.config.REPLICATE_API_ENDPOINT or None,
                headers={"User-Agent": self.config.REPLICATE_USER_AGENT},
            )
        return self._replicate_client

    @property
    def openai_client(self):
        """Lazy-loaded OpenAI client."""
        if self._openai_client is None:
            if not self.config.OPENAI_API_KEY:
                raise ValueError("Please set OPENAI_API_KEY in your .env file")
            self._openai_client = OpenAI(api_key=self.config.OPENAI_API_KEY)
        return self._openai_client
