"""
Unit tests for NetworkClient
"""

import unittest
from unittest.mock import MagicMock, patch

import requests

from abeebus.core.exceptions import APIError, DataParsingError, NetworkError
from abeebus.utils.network_client import APIConfig, NetworkClient

def make_response(status_code=200, json_data=None, json_error=None):
    response = MagicMock()
    response.status_code = status_code
    if json_error:
        response.json.side_effect = json_error
    else:
        response.json.return_value = json_data
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status_code} Client Error", response=response
        )
    return response

class TestNetworkClient(unittest.TestCase):
    """Test NetworkClient class"""

    def setUp(self):
        self.client = NetworkClient(APIConfig(timeout=7))

    def tearDown(self):
        self.client.close()

    def test_no_retries_mounted(self):
        """Test each request is attempted once"""
        adapter = self.client.session.get_adapter("https://ipinfo.io/8.8.8.8/json")
        self.assertEqual(adapter.max_retries.total, 0)

    @patch.object(requests.Session, "get")
    def test_get_json(self, mock_get):
        """Test a successful request"""
        mock_get.return_value = make_response(json_data={"ip": "8.8.8.8"})

        data = self.client.get_json("https://ipinfo.io/8.8.8.8/json", params={"token": "abc"})

        self.assertEqual(data, {"ip": "8.8.8.8"})
        mock_get.assert_called_once_with(
            "https://ipinfo.io/8.8.8.8/json",
            params={"token": "abc"},
            headers=None,
            timeout=7,
            verify=True,
        )

    @patch.object(requests.Session, "get")
    def test_http_error(self, mock_get):
        """Test 4xx responses raise APIError"""
        mock_get.return_value = make_response(status_code=403)

        with self.assertRaises(APIError) as ctx:
            self.client.get_json("https://ipinfo.io/8.8.8.8/json")
        self.assertEqual(ctx.exception.status_code, 403)
        self.assertEqual(ctx.exception.service, "IPINFO")

    @patch.object(requests.Session, "get")
    def test_connection_error(self, mock_get):
        """Test connection failures raise NetworkError"""
        mock_get.side_effect = requests.exceptions.ConnectionError("refused")

        with self.assertRaises(NetworkError):
            self.client.get_json("https://ipinfo.io/8.8.8.8/json")
        self.assertEqual(mock_get.call_count, 1)

    @patch.object(requests.Session, "get")
    def test_timeout(self, mock_get):
        """Test timeouts raise NetworkError"""
        mock_get.side_effect = requests.exceptions.Timeout("slow")

        with self.assertRaises(NetworkError):
            self.client.get_json("https://ipinfo.io/8.8.8.8/json")

    @patch.object(requests.Session, "get")
    def test_invalid_json(self, mock_get):
        """Test a non-JSON body raises DataParsingError"""
        mock_get.return_value = make_response(json_error=ValueError("Expecting value"))

        with self.assertRaises(DataParsingError):
            self.client.get_json("https://ipinfo.io/8.8.8.8/json")

    @patch.object(requests.Session, "get")
    def test_json_not_an_object(self, mock_get):
        """Test a JSON array raises DataParsingError"""
        mock_get.return_value = make_response(json_data=["8.8.8.8"])

        with self.assertRaises(DataParsingError):
            self.client.get_json("https://ipinfo.io/8.8.8.8/json")

if __name__ == "__main__":
    unittest.main()
