"""Environment-driven settings for the iyzipay connection.

Loaded from ``IYZIPAY_*`` environment variables or a ``.env`` file.
"""

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from gateway_core.application.config import ConnectionOptions, GatewayConfig
from gateway_core.domain.value_objects import Locale

SANDBOX_BASE_URL = "sandbox-api.iyzipay.com"


class GatewaySettings(BaseSettings):
    """Typed view of the processor configuration."""

    api_key: SecretStr
    secret_key: SecretStr
    base_url: str = SANDBOX_BASE_URL
    locale: Locale = Locale.TR
    client_ip: str = "127.0.0.1"
    log_level: str = "INFO"
    model_config = SettingsConfigDict(env_prefix="IYZIPAY_", env_file=".env", extra="ignore")

    def to_gateway_config(self) -> GatewayConfig:
        return GatewayConfig(
            locale=self.locale.value,
            options=ConnectionOptions(
                api_key=self.api_key.get_secret_value(),
                secret_key=self.secret_key.get_secret_value(),
                base_url=self.base_url,
            ),
        )
