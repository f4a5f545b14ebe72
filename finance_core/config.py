"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from finance_core.domain.models import DEFAULT_INTEREST_RATES, InterestRates


class Settings(BaseSettings):
    """Library configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "finance-core"
    log_level: str = "INFO"

    # Fallback rate snapshot (annual %), used when the rate index quotes are unusable
    fallback_ipca_rate: float = DEFAULT_INTEREST_RATES.ipca
    fallback_selic_rate: float = DEFAULT_INTEREST_RATES.selic
    fallback_cdi_rate: float = DEFAULT_INTEREST_RATES.cdi

    # Breakdown labels
    default_locale: str = "pt_BR"

    def fallback_rates(self) -> InterestRates:
        return InterestRates(
            ipca=self.fallback_ipca_rate,
            selic=self.fallback_selic_rate,
            cdi=self.fallback_cdi_rate,
        )


settings = Settings()
