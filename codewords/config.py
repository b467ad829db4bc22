"""Dynaconf configuration file."""

import os

from dotenv import load_dotenv
from dynaconf import Dynaconf, Validator  # type: ignore[import-untyped]

load_dotenv()
os.environ.setdefault("CODEWORDS_ENV", "production")

WORDNET_URL = "http://wordnetcode.princeton.edu/wn3.1.dict.tar.gz"

BUILD_DEFAULTS = [
    Validator("WORDNET_URL", default=WORDNET_URL),
    Validator("CACHE_DIR", default="."),
    Validator("OUTPUT_DIR", default=""),
    Validator("MIN_WORD_LEN", default=4, is_type_of=int),
    Validator("MAX_WORD_LEN", default=15, is_type_of=int),
    Validator("DOWNLOAD_TIMEOUT", default=60.0),
    Validator("EXCLUDED_WORDS", default=[], is_type_of=list),
]

LOGGING_DEFAULTS = [
    Validator("DEBUG", default=False),
    Validator("LOG_LEVEL", default="INFO"),
    Validator("LOG_HANDLER_CLASS", default="rich.logging.RichHandler"),
    Validator("LOG_SHOW_TIME", default=False),
    Validator("LOG_RICH_TRACEBACKS", default=True),
    Validator("LOG_TRACEBACKS_SHOW_LOCALS", default=False),
    Validator("LOG_HANDLERS", default=["console"]),
    Validator("LOG_FILE", default="codewords.log"),
]

SENTRY_DEFAULTS = [
    Validator("SENTRY_DSN", default=""),
    Validator("SENTRY_INTEGRATIONS", default=["logging", "argv"]),
    Validator("SENTRY_IGNORED_LOGGERS", default=[]),
    Validator("SENTRY_TRACES_SAMPLE_RATE", default=0.0),
]

settings = Dynaconf(
    envvar_prefix="CODEWORDS",
    settings_files=["settings.toml", ".secrets.toml"],
    environments=True,
    env_switcher="CODEWORDS_ENV",
    validators=[*BUILD_DEFAULTS, *LOGGING_DEFAULTS, *SENTRY_DEFAULTS],
)
