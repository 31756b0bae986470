# services/destination.py

"""
Country metadata (currency code, flag emoji) from the REST Countries API.
Only the console shell uses this; trip and budget logic never depend on it.
"""

from __future__ import annotations
from typing import Optional
from urllib.parse import quote

import requests

from core.config import Settings, load_settings
from core.exceptions import DestinationLookupError
from core.log import get_logger
from core.models import DestinationInfo

logger = get_logger(__name__)


def _parse(payload) -> DestinationInfo:
    country = payload[0]
    currency = next(iter(country["currencies"]))
    return DestinationInfo(currency=currency, flag=country["flag"])


def fetch_destination_info(
    country: str,
    *,
    session: Optional[requests.Session] = None,
    settings: Optional[Settings] = None,
) -> DestinationInfo:
    """
    Look up `country` by name and return its first currency and its flag.
    Any network, HTTP or payload problem raises DestinationLookupError.
    """
    settings = settings or load_settings()
    http = session or requests
    url = f"{settings.restcountries_base_url}/name/{quote(country.strip())}"

    try:
        r = http.get(url, timeout=settings.http_timeout)
        r.raise_for_status()
        return _parse(r.json())
    except (requests.RequestException, ValueError, KeyError, IndexError, TypeError, StopIteration) as exc:
        logger.warning("destination lookup failed", country=country, error=str(exc))
        raise DestinationLookupError(country) from exc
