"""
Unit tests for NetworkUtils
"""

import unittest

from abeebus.utils.network import NetworkUtils

class TestNetworkUtils(unittest.TestCase):
    """Test NetworkUtils class"""

    def test_is_ipv4(self):
        """Test is_ipv4 method"""
        self.assertTrue(NetworkUtils.is_ipv4("8.8.8.8"))
        self.assertTrue(NetworkUtils.is_ipv4("255.255.255.255"))

        self.assertFalse(NetworkUtils.is_ipv4("256.0.0.1"))
        self.assertFalse(NetworkUtils.is_ipv4("192.168.1"))
        self.assertFalse(NetworkUtils.is_ipv4("2001:db8::1"))

    def test_is_url(self):
        """Test is_url method"""
        self.assertTrue(NetworkUtils.is_url("https://ipinfo.io"))
        self.assertTrue(NetworkUtils.is_url("http://example.com/path?query=value"))

        self.assertFalse(NetworkUtils.is_url("example.com"))
        self.assertFalse(NetworkUtils.is_url("8.8.8.8"))

    def test_normalize_address(self):
        """Test leading zeros are stripped per octet"""
        self.assertEqual(NetworkUtils.normalize_address("008.008.008.008"), "8.8.8.8")
        self.assertEqual(NetworkUtils.normalize_address("1.000.010.100"), "1.0.10.100")
        self.assertEqual(NetworkUtils.normalize_address("8.8.4.4"), "8.8.4.4")

    def test_is_excluded(self):
        """Test private and reserved blocks"""
        excluded = [
            "10.0.0.1", "10.255.255.255",
            "172.16.0.1", "172.31.255.255",
            "192.168.1.1",
            "169.254.10.10",
            "127.0.0.1",
            "0.1.2.3",
            "224.0.0.1", "239.255.255.255", "240.0.0.1", "255.255.255.255",
            "010.0.0.1",
        ]
        for ip in excluded:
            self.assertTrue(NetworkUtils.is_excluded(ip), ip)

        public = ["8.8.8.8", "172.15.255.255", "172.32.0.1", "192.169.0.1",
                  "169.253.1.1", "11.0.0.1", "223.255.255.255", "1.1.1.1"]
        for ip in public:
            self.assertFalse(NetworkUtils.is_excluded(ip), ip)

    def test_extract_ipv4_addresses(self):
        """Test extract_ipv4_addresses method"""
        text = "visit 8.8.8.8 and 10.0.0.1 and 8.8.8.8 again"
        self.assertEqual(NetworkUtils.extract_ipv4_addresses(text), ["8.8.8.8", "8.8.8.8"])

    def test_extract_ipv4_addresses_boundaries(self):
        """Test word boundaries and out-of-range octets"""
        text = """
        src=1.1.1.1,dst=9.9.9.9;
        bad 256.1.1.1 and 1.2.3.999 and a8.8.4.4
        (4.2.2.2) "208.67.222.222"
        log: 1.2.3.4:443 192.168.0.1 224.0.0.251
        """
        self.assertEqual(
            NetworkUtils.extract_ipv4_addresses(text),
            ["1.1.1.1", "9.9.9.9", "4.2.2.2", "208.67.222.222", "1.2.3.4"],
        )

    def test_extract_keeps_leading_zeros(self):
        """Test the address is reported as written"""
        self.assertEqual(NetworkUtils.extract_ipv4_addresses("x 008.008.008.008 y"), ["008.008.008.008"])

if __name__ == "__main__":
    unittest.main()
