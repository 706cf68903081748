from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from docprops.exceptions import ConfigError

# registration order; the aggregator always runs extractors in this order
EXTRACTOR_NAMES = ("package_properties", "embedded_xmp", "raw_pdf_xmp")

LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


class ExtractionConfig(BaseModel):
    enabled_extractors: list[str] = list(EXTRACTOR_NAMES)
    log_level: str = "INFO"
    log_file: Optional[str] = None
    default_input: str = "sample.pdf"
    wait_for_keypress: bool = True
    debug: bool = False

    @field_validator("enabled_extractors")
    @classmethod
    def check_extractors(cls, v):
        for name in v:
            if name not in EXTRACTOR_NAMES:
                raise ValueError(f"Unsupported extractor: {name}. Allowed: {EXTRACTOR_NAMES}")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def check_log_level(cls, v):
        if isinstance(v, str) and v.upper() in LOG_LEVELS:
            return v.upper()
        raise ValueError(f"Invalid log level: {v}")


def load_config(path: Union[str, Path]) -> ExtractionConfig:
    try:
        with open(path) as f:
            raw = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    section = raw.get("docprops") if isinstance(raw, dict) else None
    try:
        return ExtractionConfig(**(section or {}))  # unpack
    except ValidationError as e:
        raise ConfigError(f"Invalid config file {path}: {e}") from e
