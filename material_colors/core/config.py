"""User configuration: copy formats and extra catalog colours.

Read from ~/.materialcolorsapp.json, or from the path in the
MATERIAL_COLORS_CONFIG environment variable, or from an explicit path:

    {
      "copyFormats": [
        {"format": "$HUE $VALUE", "transform": "Xx"},
        {"format": "@color/$HUE_$VALUE", "transform": "_x"}
      ],
      "extraColors": {"brand": {"500": {"hex": "#1a73e8"}}}
    }

The first copy format is the click-to-copy default; the rest are offered as
alternatives, in file order. A missing file means defaults. A broken file
is logged and also means defaults: configuration never stops the app.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from material_colors.core.catalog import ColorCatalog
from material_colors.core.formatter import DEFAULT_COPY_FORMAT
from material_colors.core.types import FormatTemplate

logger = logging.getLogger(__name__)

CONFIG_FILENAME = '.materialcolorsapp.json'
CONFIG_ENV_VAR = 'MATERIAL_COLORS_CONFIG'


@dataclass
class AppConfig:
    """Parsed user configuration."""

    copy_formats: list[FormatTemplate] = field(default_factory=list)
    extra_colors: ColorCatalog = field(default_factory=ColorCatalog)
    path: Path | None = None  # file the config was read from

    @property
    def effective_copy_formats(self) -> list[FormatTemplate]:
        """Configured formats, or the default one when none are configured."""
        return list(self.copy_formats) or [DEFAULT_COPY_FORMAT]

    @property
    def click_format(self) -> FormatTemplate:
        return self.effective_copy_formats[0]


def default_config_path() -> Path:
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return Path.home() / CONFIG_FILENAME


def _parse_copy_formats(raw: Any) -> list[FormatTemplate]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ValueError('copyFormats must be a list')
    formats = []
    for i, item in enumerate(raw):
        if not isinstance(item, dict):
            raise ValueError(f'copyFormats[{i}] must be an object')
        pattern = item.get('format', item.get('pattern'))
        if not isinstance(pattern, str):
            raise ValueError(f'copyFormats[{i}] needs a "format" string')
        transform = item.get('transform')
        formats.append(FormatTemplate(pattern=pattern, transform=transform if isinstance(transform, str) else None))
    return formats


def parse_config(raw: Any, path: Path | None = None) -> AppConfig:
    """Build an AppConfig from decoded JSON. Raises ValueError on bad shapes."""
    if not isinstance(raw, dict):
        raise ValueError('config must be a JSON object')
    extra = raw.get('extraColors')
    return AppConfig(
        copy_formats=_parse_copy_formats(raw.get('copyFormats')),
        extra_colors=ColorCatalog.from_dict(extra) if extra else ColorCatalog(),
        path=path,
    )


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load the user config. Never raises: problems are logged and defaults returned."""
    config_path = Path(path) if path else default_config_path()
    if not config_path.is_file():
        logger.debug('No config file at %s', config_path)
        return AppConfig()

    try:
        raw = json.loads(config_path.read_text(encoding='utf-8'))
        config = parse_config(raw, path=config_path)
    except (OSError, ValueError) as e:
        # bad JSON and bad catalog data are both ValueErrors
        logger.warning('Error reading config file %s: %s', config_path, e)
        return AppConfig()

    logger.debug('Loaded config from %s (%d copy formats)', config_path, len(config.copy_formats))
    return config
