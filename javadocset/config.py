"""
Run configuration for the docset indexer.

Values come from keyword arguments (the CLI flags), then from JAVADOCSET_*
environment variables, then from the defaults below.  The CLI loads a .env
file first, so the same variables can live there.
"""

import logging
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Name of the javadoc overview page, also used to find the javadoc root
OVERVIEW_SUMMARY = "overview-summary.html"

# Upper bound on filesystem entries visited while looking for the javadoc root
DEFAULT_WALK_LIMIT = 10000

ENV_PREFIX = "JAVADOCSET_"


class IndexerConfig(BaseSettings):
    """Settings shared by the builder, document loader and indexer."""
    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX)

    parser: Literal["html5lib", "lxml"] = "html5lib"   # BeautifulSoup tree builder
    walk_limit: int = Field(default=DEFAULT_WALK_LIMIT, gt=0)
    log_level: int = logging.INFO
    log_file: Optional[str] = None

    @field_validator("log_level", mode="before")
    @classmethod
    def _parse_log_level(cls, value):
        # Accept "DEBUG"/"info" as well as numeric levels
        if isinstance(value, str) and not value.isdigit():
            level = logging.getLevelName(value.upper())
            if not isinstance(level, int):
                raise ValueError(f"unknown log level: {value}")
            return level
        return value
