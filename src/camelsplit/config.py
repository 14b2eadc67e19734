"""Configuration management for camelsplit."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".camelsplit"


@dataclass
class SplitConfig:
    """Configuration for splitting "CamelCase" strings.

    Attributes:
        no_split_words: Words that must never be split, e.g. product names
            such as ``Tls2`` or ``HttpCommunication``.
    """
    no_split_words: list[str] = field(default_factory=list)


def load_split_config(root: Path | None = None) -> SplitConfig:
    """Load split configuration from the .camelsplit file in ``root``.

    Args:
        root: Directory holding the configuration file. If None, uses current directory.

    Returns:
        SplitConfig object with loaded or default values.

    Notes:
        If the file doesn't exist or can't be parsed, returns default config.
        Entries of ``no_split_words`` that aren't strings are ignored.
        Expected YAML structure:

        ```yaml
        split:
          no_split_words:
            - Tls2
            - HttpCommunication
        ```
    """
    if root is None:
        root = Path.cwd()

    config_path = root / CONFIG_FILE_NAME

    if not config_path.exists():
        return SplitConfig()

    try:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            return SplitConfig()

        split_config = data.get("split", {})
        if not isinstance(split_config, dict):
            return SplitConfig()

        words = split_config.get("no_split_words", [])
        if not isinstance(words, list):
            logger.warning(f"Ignoring no_split_words in {config_path}: expected a list")
            return SplitConfig()

        return SplitConfig(
            no_split_words=[word for word in words if isinstance(word, str)],
        )
    except (yaml.YAMLError, OSError, TypeError, ValueError) as e:
        logger.warning(f"Failed to load {config_path} ({e}), using defaults")
        return SplitConfig()
