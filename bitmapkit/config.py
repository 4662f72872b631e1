from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

LOG_LEVEL_ENV_VAR = "BITMAPKIT_LOG_LEVEL"
PREVIEW_ENV_VAR = "BITMAPKIT_PREVIEW"
DEFAULT_LOG_LEVEL = "WARNING"

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    preview: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        environ = os.environ if environ is None else environ
        settings = cls()
        level = environ.get(LOG_LEVEL_ENV_VAR)
        if level:
            settings.log_level = level.strip().upper()
        preview = environ.get(PREVIEW_ENV_VAR)
        if preview:
            settings.preview = preview.strip().lower() in _TRUE_VALUES
        return settings

    def configure_logging(self) -> None:
        level = logging.getLevelName(self.log_level)
        if not isinstance(level, int):
            level = logging.WARNING
        logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
