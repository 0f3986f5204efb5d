"""
Input validation utilities for Abeebus
"""

from typing import Any, Union

from abeebus.core.exceptions import ValidationError
from abeebus.utils.network import NetworkUtils

class Validator:
    """Input validation utilities"""

    @staticmethod
    def validate_ipv4(ip: str) -> None:
        """
        Validate an IPv4 address

        Args:
            ip: IPv4 address to validate (leading zeros allowed)

        Raises:
            ValidationError: If the address is not a dotted quad
        """
        if not NetworkUtils.is_ipv4(NetworkUtils.normalize_address(ip)):
            raise ValidationError(f"Invalid IP address: {ip}")

    @staticmethod
    def validate_url(url: str) -> None:
        """
        Validate a URL

        Args:
            url: URL to validate

        Raises:
            ValidationError: If URL is invalid
        """
        if not isinstance(url, str) or not NetworkUtils.is_url(url):
            raise ValidationError(f"Invalid URL: {url}")

    @staticmethod
    def validate_integer_range(value: Union[str, int], name: str, min_value: int, max_value: int) -> None:
        """
        Validate an integer within a range

        Args:
            value: Value to validate
            name: Name of the value for error messages
            min_value: Minimum allowed value
            max_value: Maximum allowed value

        Raises:
            ValidationError: If value is not an integer or outside the range
        """
        try:
            int_value = int(value)
        except (TypeError, ValueError):
            raise ValidationError(f"{name} must be an integer: {value}")
        if int_value < min_value or int_value > max_value:
            raise ValidationError(f"{name} must be between {min_value} and {max_value}: {value}")

    @staticmethod
    def validate_positive_number(value: Any, name: str) -> None:
        """
        Validate a strictly positive int or float

        Raises:
            ValidationError: If value is not a number greater than zero
        """
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
            raise ValidationError(f"{name} must be a positive number: {value}")
