"""ABOUTME: Tests for IP-based location lookup."""

import httpx
import pytest

from conftest import make_response
from weather_mcp.errors import ERROR_IP_LOCATION, IpLocationUnavailableError
from weather_mcp.ip_locator import IP_API_FIELDS, IpLocator
from weather_mcp.models import Coordinate

MODULE = "weather_mcp.ip_locator"


class TestIpLocator:
    """Tests for IpLocator.current_location."""

    @pytest.mark.asyncio
    async def test_success(self, stub_http, mock_ip_location):
        mock = stub_http(MODULE, return_value=make_response(mock_ip_location))

        location = await IpLocator(base_url="http://ip.test").current_location()

        assert location.display_address == "Berlin, Germany"
        assert location.coordinate == Coordinate(52.52, 13.405)
        assert location.city == "Berlin"
        assert location.country == "Germany"
        assert location.timezone == "Europe/Berlin"

        args, kwargs = mock.call_args
        assert args[0] == "http://ip.test/json/"
        assert kwargs["params"] == {"fields": IP_API_FIELDS}

    @pytest.mark.asyncio
    async def test_fail_status_carries_upstream_message(self, stub_http):
        stub_http(MODULE, return_value=make_response({"status": "fail", "message": "reserved range"}))

        with pytest.raises(IpLocationUnavailableError) as exc_info:
            await IpLocator().current_location()

        assert exc_info.value.code == ERROR_IP_LOCATION
        assert "reserved range" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_transport_failure(self, stub_http):
        stub_http(MODULE, side_effect=httpx.ReadTimeout("timed out"))

        with pytest.raises(IpLocationUnavailableError) as exc_info:
            await IpLocator().current_location()

        assert "timed out" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_success_without_coordinates(self, stub_http):
        stub_http(MODULE, return_value=make_response({"status": "success", "city": "Berlin"}))

        with pytest.raises(IpLocationUnavailableError):
            await IpLocator().current_location()
