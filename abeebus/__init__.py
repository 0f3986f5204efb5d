"""
Abeebus - GeoIP report for the public IPv4 addresses found in text files
"""

__version__ = "1.0.0"
