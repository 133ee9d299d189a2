"""Library configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    svgmodel_log_level: str = "info"

    # Significant digits written by the number printer
    svgmodel_number_precision: int = 6

    # Indentation for svg_to_string / write_svg ("" = no pretty printing)
    svgmodel_indent: str = "  "

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
