"""
Network utility functions for Abeebus
"""

import ipaddress
import re
from typing import List
from urllib.parse import urlparse

# Dotted quad with octets 0-255, leading zeros allowed
OCTET_REGEX = r'(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)'
IPV4_REGEX = rf'\b(?:{OCTET_REGEX}\.){{3}}{OCTET_REGEX}\b'
IPV4_PATTERN = re.compile(IPV4_REGEX)

# Blocks that are never sent for lookup
EXCLUDED_NETWORKS = tuple(ipaddress.IPv4Network(cidr) for cidr in (
    "0.0.0.0/8",        # 'this' network
    "10.0.0.0/8",       # rfc1918
    "127.0.0.0/8",      # loopback
    "169.254.0.0/16",   # link-local
    "172.16.0.0/12",    # rfc1918
    "192.168.0.0/16",   # rfc1918
    "224.0.0.0/4",      # multicast
    "240.0.0.0/4",      # reserved, broadcast
))

_LEADING_ZEROS = re.compile(r'\b0*([1-9][0-9]*|0)\b')

class NetworkUtils:
    """Networking utility functions"""

    @staticmethod
    def is_ipv4(ip: str) -> bool:
        """
        Check if the string is a valid IPv4 address

        Args:
            ip: String to check

        Returns:
            True if valid IPv4 address, False otherwise
        """
        try:
            ipaddress.IPv4Address(ip)
            return True
        except ValueError:
            return False

    @staticmethod
    def is_url(input_str: str) -> bool:
        """
        Check if the string is an http(s) URL

        Args:
            input_str: String to check

        Returns:
            True if a URL, False otherwise
        """
        try:
            result = urlparse(input_str)
            return result.scheme in ("http", "https") and bool(result.netloc)
        except ValueError:
            return False

    @staticmethod
    def normalize_address(ip: str) -> str:
        """
        Strip leading zeros from each octet ("008.008.008.008" -> "8.8.8.8")

        Args:
            ip: Dotted-quad address as found in the input

        Returns:
            Address suitable for the lookup URL
        """
        return _LEADING_ZEROS.sub(r'\1', ip)

    @staticmethod
    def is_excluded(ip: str) -> bool:
        """
        Check if a dotted quad falls in a private or reserved block

        Args:
            ip: Dotted-quad address, leading zeros allowed

        Returns:
            True if the address must not be looked up
        """
        address = ipaddress.IPv4Address(NetworkUtils.normalize_address(ip))
        return any(address in network for network in EXCLUDED_NETWORKS)

    @staticmethod
    def extract_ipv4_addresses(text: str) -> List[str]:
        """
        Extract publicly routable IPv4 addresses from text

        Args:
            text: Text to extract addresses from

        Returns:
            Addresses in order of appearance, duplicates preserved
        """
        return [
            match.group(0)
            for match in IPV4_PATTERN.finditer(text)
            if not NetworkUtils.is_excluded(match.group(0))
        ]
