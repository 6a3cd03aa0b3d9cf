"""Settings helpers for the fin account core."""

from dataclasses import dataclass
import os

import dotenv

from src.domain.policies.decimal_policy import DecimalPolicy
from src.infrastructure.logging.logger import get_app_logger

DEFAULT_DECIMALS = 2
DEFAULT_ROUNDING = "HALF_EVEN"
DEFAULT_CODE_LENGTH = 20


@dataclass(frozen=True)
class FinAccountSettings:
    """Process-wide fin account configuration, read once at startup.

    Attributes:
        decimals: Fractional digits of monetary results.
        rounding: Rounding mode name (e.g. HALF_EVEN or ROUND_HALF_UP).
        code_length: Default length of generated account codes.
    """

    decimals: int = DEFAULT_DECIMALS
    rounding: str = DEFAULT_ROUNDING
    code_length: int = DEFAULT_CODE_LENGTH

    @classmethod
    def from_env(cls) -> "FinAccountSettings":
        """Build settings from environment variables.

        Returns:
            FinAccountSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        decimals = cls._read_int(
            "FINACCOUNT_DECIMALS",
            DEFAULT_DECIMALS,
            logger=logger,
        )
        rounding = (
            os.getenv("FINACCOUNT_ROUNDING", DEFAULT_ROUNDING).strip()
            or DEFAULT_ROUNDING
        )
        code_length = cls._read_int(
            "FINACCOUNT_CODE_LENGTH",
            DEFAULT_CODE_LENGTH,
            logger=logger,
        )
        return cls(decimals=decimals, rounding=rounding, code_length=code_length)

    def to_decimal_policy(self) -> DecimalPolicy:
        """Return the decimal policy described by these settings."""
        return DecimalPolicy.from_names(self.decimals, self.rounding)

    @staticmethod
    def _read_int(name: str, default: int, logger) -> int:
        """Read a non-negative integer variable, falling back to default.

        Args:
            name: Environment variable name.
            default: Value used when the variable is unset or invalid.
            logger: Logger used for warnings.

        Returns:
            int: Parsed value or the default.
        """
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw.strip())
        except ValueError:
            logger.warning(f"Invalid integer for {name}: {raw!r}; using {default}")
            return default
        if value < 0:
            logger.warning(f"Negative value for {name}: {value}; using {default}")
            return default
        return value


__all__ = ["FinAccountSettings"]
