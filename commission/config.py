"""
Commission settings.

Loads rate configuration from environment variables using pydantic-settings.
Defaults are the fixed program rates; module-level calculator functions
always use the defaults regardless of these settings.
"""

from decimal import Decimal
from functools import lru_cache

from loguru import logger
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from commission.constants import CASHBACK_RATE, COMMISSION_RATES
from commission.core.models import CommissionRates


LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class CommissionSettings(BaseSettings):
    """Commission settings loaded from environment variables."""

    # Referral cascade
    level1_rate: Decimal = Field(default=COMMISSION_RATES[1], ge=0, le=1, decimal_places=10)
    level2_rate: Decimal = Field(default=COMMISSION_RATES[2], ge=0, le=1, decimal_places=10)
    level3_rate: Decimal = Field(default=COMMISSION_RATES[3], ge=0, le=1, decimal_places=10)
    cashback_rate: Decimal = Field(default=CASHBACK_RATE, ge=0, le=1, decimal_places=10)

    # Logging
    log_level: str = "INFO"
    log_file: str | None = None

    model_config = SettingsConfigDict(
        env_prefix="COMMISSION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Expected one of {', '.join(LOG_LEVELS)}")
        return level

    @model_validator(mode="after")
    def validate_rates(self) -> "CommissionSettings":
        """Reject rates handing out more than the fee; warn about overrides."""
        share = self.level1_rate + self.level2_rate + self.level3_rate + self.cashback_rate
        if share > 1:
            raise ValueError(f"Combined rates {share} exceed 100% of fees")

        if self.rates != CommissionRates():
            logger.warning(
                "Non-default commission rates configured",
                extra={
                    "level1": str(self.level1_rate),
                    "level2": str(self.level2_rate),
                    "level3": str(self.level3_rate),
                    "cashback": str(self.cashback_rate),
                },
            )
        return self

    @property
    def rates(self) -> CommissionRates:
        """Configured rates as a calculator input."""
        return CommissionRates(
            level1=self.level1_rate,
            level2=self.level2_rate,
            level3=self.level3_rate,
            cashback=self.cashback_rate,
        )


@lru_cache(maxsize=1)
def get_settings() -> CommissionSettings:
    """Cached settings instance."""
    return CommissionSettings()
