# src/blocksplit/processing/config.py

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError

from blocksplit.exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_PRE_SENTINEL = "--- PRE ---"
DEFAULT_POST_SENTINEL = "--- POST ---"


class ProcessorConfig(BaseModel):
    """Configuration for a processing run.

    Values not given in the YAML file keep their defaults.
    """

    pre_sentinel: str = DEFAULT_PRE_SENTINEL
    post_sentinel: str = DEFAULT_POST_SENTINEL
    encoding: str = "utf-8"

    pre_label: str = "PRE-BLOCK"
    central_label: str = "CENTRAL-BLOCK"
    post_label: str = "POST-BLOCK"

    class Config:
        extra = "forbid"


def load_config(path: str | Path) -> ProcessorConfig:
    logger.debug("Loading config from %s", path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        logger.error("Cannot read config file: %s", path)
        raise ConfigError(f"Cannot read config file '{path}': {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file '{path}' must contain a mapping")

    try:
        return ProcessorConfig(**data)
    except ValidationError as exc:
        logger.error("Invalid config file: %s", path)
        raise ConfigError(f"Invalid config file '{path}': {exc}") from exc
