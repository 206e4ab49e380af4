"""
Part source configuration

We read configuration from 2 sources, in order of precedence (higher is more priority)
- Environment variables
- A .env file, either in the current working directory or in a location specified
  by the PARTSOURCE_ENV_FILE environment variable
"""

import functools
from pathlib import Path
from typing import Annotated

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from partsource.source import MAX_PART_SIZE

ENV_PREFIX = "partsource_"


class Settings(BaseSettings):
    env_file: Annotated[
        Path,
        Field(
            description="Location of a .env file (if used) relative to working directory",
        ),
    ] = Path(".env")

    root_path: Annotated[
        str | None,
        Field(
            description="Directory containing the part files served by the API",
        ),
    ] = None

    options: Annotated[
        str,
        Field(
            description="Options for the part source, e.g. 'useVersioning' to serve only revisioned parts",
        ),
    ] = ""

    max_part_size: Annotated[int, Field(description="Largest part file that will be read, in bytes")] = MAX_PART_SIZE

    host: Annotated[str, Field(description="Address the API is served at")] = "0.0.0.0"
    port: Annotated[int, Field(description="Port the API is served at")] = 5000

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX)


@functools.lru_cache()
def get_settings() -> Settings:
    temp = Settings()
    load_dotenv(temp.env_file, override=False)
    return Settings()


if __name__ == "__main__":
    # Echo the settings
    for k, v in get_settings().model_dump().items():
        print(f"{ENV_PREFIX.upper()}{k.upper()}={v}")
