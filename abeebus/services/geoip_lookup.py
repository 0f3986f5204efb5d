"""
GeoIP lookup implementation (IPinfo.io)
"""

import logging
from typing import Callable, Dict, Iterable, Optional

from abeebus.core.config import Config
from abeebus.core.exceptions import CredentialError, LookupError
from abeebus.core.models import GeoRecord, Notice, Severity
from abeebus.services import GeoIPService
from abeebus.utils.network import NetworkUtils
from abeebus.utils.network_client import APIConfig, NetworkClient
from abeebus.utils.validation import Validator

logger = logging.getLogger(__name__)

class IPInfoLookupService(GeoIPService):
    """GeoIP lookups against an IPinfo-compatible JSON endpoint"""

    def __init__(self, config: Config, token: Optional[str] = None, client: Optional[NetworkClient] = None):
        """
        Initialize the lookup service

        Args:
            config: Configuration object
            token: API token, overrides the configured one
            client: NetworkClient instance (optional)
        """
        self.config = config
        self.token = token or config.ipinfo_token
        self.client = client or NetworkClient(APIConfig(timeout=config.request_timeout))

    @property
    def authenticated(self) -> bool:
        return bool(self.token)

    def close(self) -> None:
        self.client.close()

    def lookup(self, address: str) -> GeoRecord:
        Validator.validate_ipv4(address)

        cleaned = NetworkUtils.normalize_address(address)
        url = f"{self.config.api_base_url}/{cleaned}/json"
        params = {"token": self.token} if self.token else None

        data = self.client.get_json(url, params=params)
        return GeoRecord.from_api(data)

    def resolve_all(
        self,
        addresses: Iterable[str],
        notify: Callable[[Notice], None],
        on_progress: Optional[Callable[[int, int], None]] = None,
    ) -> Dict[str, GeoRecord]:
        """
        Look up every address once, in order

        Without a token a failed address is reported and skipped. With a
        token the first failure aborts the whole run.

        Args:
            addresses: Unique addresses to look up
            notify: Receives a notice for each skipped address
            on_progress: Called with (done, total) before each request

        Returns:
            Records keyed by the address as extracted, for successful lookups only

        Raises:
            CredentialError: If a lookup fails while a token is in use
        """
        addresses = list(addresses)
        total = len(addresses)
        records = {}

        for index, address in enumerate(addresses, start=1):
            if on_progress:
                on_progress(index, total)

            try:
                records[address] = self.lookup(address)
            except LookupError as e:
                if self.authenticated:
                    logger.debug(f"Lookup for {address} failed with a token in use: {e}")
                    raise CredentialError() from e
                logger.debug(f"Skipping {address}: {e}")
                notify(Notice(f"Error parsing address: {address}", Severity.ERROR))

        return records
