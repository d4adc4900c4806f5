"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import dotenv

from src.domain.constants import DEFAULT_TIMEZONE
from src.infrastructure.logging.logger import get_app_logger


_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for the ledger application.

    Attributes:
        owner_email: Email of the owner whose data is shown and written.
        timezone: IANA name of the reference zone for month bucketing.
        currency_code: Display currency code.
        require_login: Whether the dashboard requires a signed-in user.
        history_limit: Number of recent transactions in the ledger history.
    """

    owner_email: str = "owner@example.com"
    timezone: str = DEFAULT_TIMEZONE
    currency_code: str = "KRW"
    require_login: bool = False
    history_limit: int = 100

    @property
    def zone(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        defaults = cls()
        owner_email = (
            os.getenv("LEDGER_OWNER_EMAIL", "").strip() or defaults.owner_email
        )
        timezone = cls._normalize_timezone(
            os.getenv("LEDGER_TIMEZONE", "").strip() or defaults.timezone,
            logger=logger,
        )
        currency_code = (
            os.getenv("LEDGER_CURRENCY", "").strip().upper()
            or defaults.currency_code
        )
        require_login = (
            os.getenv("LEDGER_REQUIRE_LOGIN", "false").strip().lower()
            in _TRUE_VALUES
        )
        history_limit = cls._parse_positive_int(
            os.getenv("LEDGER_HISTORY_LIMIT"),
            defaults.history_limit,
            logger=logger,
        )
        return cls(
            owner_email=owner_email,
            timezone=timezone,
            currency_code=currency_code,
            require_login=require_login,
            history_limit=history_limit,
        )

    @staticmethod
    def _normalize_timezone(raw_zone: str, logger) -> str:
        """Return raw_zone when it is a known zone, else the default.

        Args:
            raw_zone: Zone name from the environment.
            logger: Logger used for warnings.

        Returns:
            str: Usable IANA zone name.
        """
        try:
            ZoneInfo(raw_zone)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning(
                f"Unknown timezone '{raw_zone}'; using {DEFAULT_TIMEZONE}"
            )
            return DEFAULT_TIMEZONE
        return raw_zone

    @staticmethod
    def _parse_positive_int(raw_value: str | None, default: int, logger) -> int:
        if not raw_value:
            return default
        try:
            value = int(raw_value)
        except ValueError:
            logger.warning(
                f"Invalid integer '{raw_value}'; using default {default}"
            )
            return default
        if value <= 0:
            logger.warning(
                f"Expected a positive integer, got {value}; "
                f"using default {default}"
            )
            return default
        return value


__all__ = ["LedgerSettings"]
