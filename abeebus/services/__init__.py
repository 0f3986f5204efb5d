"""
Abeebus service interfaces
"""

from abc import ABC, abstractmethod

from abeebus.core.models import GeoRecord

class GeoIPService(ABC):
    """Interface for GeoIP lookup services"""

    @abstractmethod
    def lookup(self, address: str) -> GeoRecord:
        """
        Look up GeoIP information for one address

        Args:
            address: Dotted-quad address as extracted from the input

        Returns:
            GeoRecord for the address

        Raises:
            ValidationError: If the address is not a dotted quad
            LookupError: If the request or response decoding fails
        """
        pass

    @property
    @abstractmethod
    def authenticated(self) -> bool:
        """True when requests carry an API token"""
        pass

    def close(self) -> None:
        """Release any held connections"""
        pass
