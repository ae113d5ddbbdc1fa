# reply_drafter/config.py

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from .locales import DEFAULT_LOCALE, get_locale

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class DrafterConfig:
    """
    Runtime settings for the drafter shells.

    delay_seconds is the cosmetic "thinking" pause before a draft is shown;
    0 disables it.
    """

    locale: str = DEFAULT_LOCALE
    delay_seconds: float = 0.0
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        self.locale = get_locale(self.locale).code
        if self.delay_seconds < 0:
            raise ValueError(f"delay_seconds must be >= 0, got {self.delay_seconds}")
        self.log_level = (self.log_level or "INFO").upper()
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(
                f"Unknown log level {self.log_level!r}. Use one of: {', '.join(_LOG_LEVELS)}"
            )


def load_config(locale: Optional[str] = None) -> DrafterConfig:
    """
    Build a DrafterConfig from the environment (and .env if present).
    An explicit locale wins over REPLY_DRAFTER_LOCALE.

    REPLY_DRAFTER_LOCALE, REPLY_DRAFTER_DELAY_SECONDS, REPLY_DRAFTER_LOG_LEVEL
    """
    load_dotenv(find_dotenv(usecwd=True))

    raw_delay = os.getenv("REPLY_DRAFTER_DELAY_SECONDS", "0")
    try:
        delay = float(raw_delay)
    except ValueError:
        raise ValueError(
            f"REPLY_DRAFTER_DELAY_SECONDS must be a number, got {raw_delay!r}"
        ) from None

    return DrafterConfig(
        locale=locale or os.getenv("REPLY_DRAFTER_LOCALE", DEFAULT_LOCALE),
        delay_seconds=delay,
        log_level=os.getenv("REPLY_DRAFTER_LOG_LEVEL", "INFO"),
    )
