"""
Business directory API client. One GET per call; every failure is classified
into an ApiError and returned as Err. No caching, retries or deduplication.
"""

from __future__ import annotations

from typing import Any

import requests

from bizdir.domains.business.models import (
    ApiError,
    BusinessApiError,
    BusinessData,
    Err,
    ErrorKind,
    Ok,
    Result,
)
from bizdir.utils.config import api_base_url, api_timeout
from bizdir.utils.logger import get_logger

logger = get_logger()

BUSINESS_PATH = "/api/ApplicationUser/business/{id}"

REQUEST_HEADERS = {
    "Content-Type": "application/json",
    # Skips the interstitial page of ngrok-style development tunnels.
    "ngrok-skip-browser-warning": "true",
}

NETWORK_ERROR_MESSAGE = "Network error - could not connect to server"
NOT_FOUND_MESSAGE = "Business not found"
DEFAULT_SERVER_ERROR_MESSAGE = "Failed to fetch business data"
UNKNOWN_ERROR_MESSAGE = "Unknown error occurred"


def _read_error_body(response: requests.Response) -> str:
    try:
        return response.text or ""
    except Exception as e:
        logger.debug("Could not read error response body: %s", e)
        return ""


def _fail(error: ApiError) -> Err:
    logger.warning("Business request failed (%s, status=%s): %s", error.kind.value, error.status, error.message)
    return Err(error)


class BusinessClient:
    """
    Fetches business profiles from the directory API.

    The base URL is read once at construction and fixed afterwards. The client
    holds no other state, so one instance can serve concurrent callers.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self._base_url = (base_url if base_url is not None else api_base_url()).rstrip("/")
        self._timeout = timeout if timeout is not None else api_timeout()

    @property
    def base_url(self) -> str:
        return self._base_url

    def business_url(self, business_id: str) -> str:
        return self._base_url + BUSINESS_PATH.format(id=business_id)

    def get_business_by_id(self, business_id: str) -> Result[BusinessData]:
        """
        Fetch a business profile.

        Args:
            business_id: Identifier timestamp as a string. Not validated here;
                malformed ids surface as the server's error response.

        Returns:
            Ok(BusinessData) on a 2xx JSON object response, otherwise Err(ApiError):
            status 0 for network or unexpected failures, 404 for a missing
            business, the HTTP status for any other error response.
        """
        url = self.business_url(business_id)
        logger.info("Fetching business data from: %s", url)

        kwargs: dict[str, Any] = {"headers": dict(REQUEST_HEADERS)}
        if self._timeout is not None:
            kwargs["timeout"] = self._timeout

        try:
            response = requests.get(url, **kwargs)
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            logger.debug("No response from %s: %s", url, e)
            return _fail(ApiError(NETWORK_ERROR_MESSAGE, 0, ErrorKind.NETWORK))
        except requests.exceptions.RequestException as e:
            return _fail(ApiError(str(e) or UNKNOWN_ERROR_MESSAGE, 0, ErrorKind.UNEXPECTED))

        status = response.status_code
        logger.info("Business API responded with status: %s", status)

        if status == 404:
            return _fail(ApiError(NOT_FOUND_MESSAGE, 404, ErrorKind.NOT_FOUND))

        if not 200 <= status < 300:
            message = _read_error_body(response) or DEFAULT_SERVER_ERROR_MESSAGE
            return _fail(ApiError(message, status, ErrorKind.SERVER))

        try:
            data = response.json()
            business = BusinessData.from_dict(data)
        except Exception as e:
            return _fail(ApiError(str(e) or UNKNOWN_ERROR_MESSAGE, 0, ErrorKind.UNEXPECTED))

        logger.debug("Fetched business %s (%s)", business.id.timestamp, business.business_name)
        return Ok(business)

    def fetch_business(self, business_id: str) -> BusinessData:
        """
        Same as get_business_by_id, but raises instead of returning Err.

        Raises:
            BusinessApiError: Carrying the classified ApiError.
        """
        result = self.get_business_by_id(business_id)
        if isinstance(result, Err):
            raise BusinessApiError(result.error)
        return result.value
