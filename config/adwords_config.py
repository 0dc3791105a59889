import os
from dataclasses import dataclass, replace

from dotenv import load_dotenv

from core.metadata import SERVICE_NAME, VERSION

# Source: https://developers.google.com/adwords/api/docs/reference/v201806/CampaignService
DEFAULT_API_VERSION = "v201806"
DEFAULT_BASE_URL = "https://adwords.google.com"


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class AdWordsConfig:
    """Immutable settings shared by the transport and the services."""

    developer_token: str = ""
    client_customer_id: str = ""
    user_agent: str = f"{SERVICE_NAME}/{VERSION}"

    # Either a static access token or the refresh-token triple below.
    access_token: str = ""
    oauth_client_id: str = ""
    oauth_client_secret: str = ""
    oauth_refresh_token: str = ""

    api_version: str = DEFAULT_API_VERSION
    base_url: str = DEFAULT_BASE_URL

    # Unknown xsi:type values raise instead of being skipped.
    strict_mode: bool = False
    validate_only: bool = False
    partial_failure: bool = False

    timeout_seconds: float = 60.0
    max_attempts: int = 3
    retry_base_delay: float = 2.0

    @property
    def namespace(self) -> str:
        return f"https://adwords.google.com/api/adwords/cm/{self.api_version}"

    def service_url(self, service_name: str) -> str:
        return f"{self.base_url}/api/adwords/cm/{self.api_version}/{service_name}"

    def with_overrides(self, **changes) -> "AdWordsConfig":
        return replace(self, **changes)

    @classmethod
    def from_env(cls) -> "AdWordsConfig":
        load_dotenv(override=False)
        return cls(
            developer_token=os.getenv("ADWORDS_DEVELOPER_TOKEN", ""),
            client_customer_id=os.getenv("ADWORDS_CLIENT_CUSTOMER_ID", ""),
            user_agent=os.getenv("ADWORDS_USER_AGENT", f"{SERVICE_NAME}/{VERSION}"),
            access_token=os.getenv("ADWORDS_ACCESS_TOKEN", ""),
            oauth_client_id=os.getenv("ADWORDS_CLIENT_ID", ""),
            oauth_client_secret=os.getenv("ADWORDS_CLIENT_SECRET", ""),
            oauth_refresh_token=os.getenv("ADWORDS_REFRESH_TOKEN", ""),
            api_version=os.getenv("ADWORDS_API_VERSION", DEFAULT_API_VERSION),
            base_url=os.getenv("ADWORDS_BASE_URL", DEFAULT_BASE_URL),
            strict_mode=_env_bool("ADWORDS_STRICT_MODE"),
            validate_only=_env_bool("ADWORDS_VALIDATE_ONLY"),
            partial_failure=_env_bool("ADWORDS_PARTIAL_FAILURE"),
            timeout_seconds=float(os.getenv("ADWORDS_TIMEOUT", "60")),
            max_attempts=int(os.getenv("ADWORDS_MAX_ATTEMPTS", "3")),
            retry_base_delay=float(os.getenv("ADWORDS_RETRY_BASE_DELAY", "2")),
        )
