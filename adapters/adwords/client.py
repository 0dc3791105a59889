import asyncio
import time
import xml.etree.ElementTree as ET

import httpx
import structlog

from adapters.adwords.soap import build_envelope, is_fault, parse_envelope
from config.adwords_config import AdWordsConfig
from core.infrastructure.http_client import http_request
from core.models.common import RequestHeader
from exceptions.custom_exceptions import (
    AdWordsApiException,
    AdWordsAuthException,
)

logger = structlog.get_logger(__name__)

GOOGLE_TOKEN_URL = "https://oauth2.googleapis.com/token"


class AdWordsClient:
    """Shared SOAP transport for the AdWords cm services.

    Each call wraps a request body in an envelope carrying the RequestHeader,
    POSTs it to the service URL and returns the first child of the response
    Body (``<getResponse>``, ``<mutateResponse>``...).
    """

    def __init__(self, config: AdWordsConfig | None = None) -> None:
        self.config = config or AdWordsConfig.from_env()
        self._access_token: str | None = self.config.access_token or None
        self._access_token_expiry: float = float("inf") if self._access_token else 0
        self._token_lock = asyncio.Lock()

    @property
    def namespace(self) -> str:
        return self.config.namespace

    @property
    def strict_mode(self) -> bool:
        return self.config.strict_mode

    async def request(self, service_name: str, action: str, body: ET.Element) -> ET.Element:
        url = self.config.service_url(service_name)
        access_token = await self._get_access_token()
        payload = build_envelope(body, self._build_request_header(), self.namespace)

        logger.debug("AdWords request", service=service_name, action=action, url=url)
        response = await http_request(
            "POST",
            url,
            content=payload,
            headers=self._build_auth_headers(access_token, action),
            timeout=self.config.timeout_seconds,
            max_attempts=self.config.max_attempts,
            base_delay=self.config.retry_base_delay,
            error_handler=_raise_adwords_error,
            retry_if=lambda r: not is_fault(r.content),
        )

        response_header, content = parse_envelope(response.content)
        logger.info(
            "AdWords request completed",
            service=service_name,
            action=action,
            request_id=response_header.request_id if response_header else None,
            response_time=response_header.response_time if response_header else None,
        )
        return content

    def _build_request_header(self) -> RequestHeader:
        if not self.config.developer_token:
            raise AdWordsAuthException(
                message="Missing AdWords developer token",
                details={"has_developer_token": False},
            )
        return RequestHeader(
            client_customer_id=self.config.client_customer_id or None,
            developer_token=self.config.developer_token,
            user_agent=self.config.user_agent,
            validate_only=self.config.validate_only or None,
            partial_failure=self.config.partial_failure or None,
        )

    def _build_auth_headers(self, access_token: str, action: str) -> dict:
        return {
            "Authorization": f"Bearer {access_token}",
            "Content-Type": "text/xml; charset=utf-8",
            "SOAPAction": action,
        }

    async def _get_access_token(self) -> str:
        if self._token_is_fresh():
            return self._access_token
        async with self._token_lock:
            # Another request may have refreshed it while this one waited
            if self._token_is_fresh():
                return self._access_token
            return await self._refresh_access_token()

    def _token_is_fresh(self) -> bool:
        return bool(self._access_token) and time.time() < self._access_token_expiry

    async def _refresh_access_token(self) -> str:
        if not self.config.oauth_refresh_token:
            raise AdWordsAuthException(
                message="Missing AdWords credentials",
                details={
                    "has_access_token": bool(self.config.access_token),
                    "has_refresh_token": False,
                },
            )

        try:
            response = await http_request(
                "POST",
                GOOGLE_TOKEN_URL,
                data={
                    "grant_type": "refresh_token",
                    "refresh_token": self.config.oauth_refresh_token,
                    "client_id": self.config.oauth_client_id,
                    "client_secret": self.config.oauth_client_secret,
                },
                max_attempts=self.config.max_attempts,
                base_delay=self.config.retry_base_delay,
            )
        except httpx.HTTPStatusError as e:
            error_body = e.response.text
            logger.error(
                "OAuth token refresh failed",
                component="adwords-auth",
                status=e.response.status_code,
                error=error_body,
            )
            raise AdWordsAuthException(
                message="OAuth token refresh failed. Check ADWORDS_REFRESH_TOKEN, ADWORDS_CLIENT_ID and ADWORDS_CLIENT_SECRET",
                details={"status": e.response.status_code, "error": error_body},
            )

        token_data = response.json()
        self._access_token = token_data["access_token"]
        self._access_token_expiry = time.time() + token_data.get("expires_in", 3600) - 60
        logger.info("OAuth token refreshed", component="adwords-auth")
        return self._access_token


def _raise_adwords_error(response: httpx.Response) -> None:
    """Turn a failed HTTP response into a structured exception."""
    if response.status_code in (401, 403):
        raise AdWordsAuthException(
            message=f"AdWords authentication failed: {response.status_code}",
            details={"status_code": response.status_code, "response_text": response.text},
        )
    if is_fault(response.content):
        # Raises AdWordsApiException carrying the parsed ApiErrors
        parse_envelope(response.content)
    raise AdWordsApiException(
        message=f"AdWords API failed: {response.status_code}",
        status_code=response.status_code,
        details={"status_code": response.status_code, "response_text": response.text},
    )
