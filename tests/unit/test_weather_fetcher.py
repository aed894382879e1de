"""OpenWeatherFetcherのテスト"""

import copy
from urllib.parse import parse_qs, urlparse

import pytest
import requests

from tests.payloads import API_KEY, WEATHER_PAYLOAD, WEATHER_URL
from weather_chat.features.geocoding.domain.models import Coordinate
from weather_chat.features.weather.domain.models import WeatherReport
from weather_chat.features.weather.formatters.report_formatter import format_report
from weather_chat.features.weather.providers.openweather_fetcher import OpenWeatherFetcher
from weather_chat.shared.exceptions.errors import DecodeError, NetworkError, UpstreamStatusError


def test_fetch_current_parses_report(requests_mock, fetcher: OpenWeatherFetcher) -> None:
    """レスポンスをWeatherReportに変換する（ケルビンのまま）"""
    requests_mock.get(WEATHER_URL, json=WEATHER_PAYLOAD)

    report = fetcher.fetch_current(Coordinate(21.2380912, 81.6336993))

    assert report == WeatherReport(
        temperature=300.12,
        feels_like=299.5,
        temp_max=301.0,
        temp_min=298.0,
        humidity=55,
        pressure=1013,
        description="clear sky",
    )


def test_coordinates_are_sent_with_five_decimals(
    requests_mock, fetcher: OpenWeatherFetcher
) -> None:
    """緯度・経度は小数点以下5桁で送信する"""
    requests_mock.get(WEATHER_URL, json=WEATHER_PAYLOAD)

    fetcher.fetch_current(Coordinate(21.2380912, -81.6336993))

    query = parse_qs(urlparse(requests_mock.last_request.url).query)
    assert query == {"lat": ["21.23809"], "lon": ["-81.63370"], "appid": [API_KEY]}


def test_empty_weather_list_gives_no_description(
    requests_mock, fetcher: OpenWeatherFetcher
) -> None:
    """weatherが空の場合、descriptionはNone"""
    payload = copy.deepcopy(WEATHER_PAYLOAD)
    payload["weather"] = []
    requests_mock.get(WEATHER_URL, json=payload)

    assert fetcher.fetch_current(Coordinate(0.0, 0.0)).description is None


def test_report_is_immutable(requests_mock, fetcher: OpenWeatherFetcher) -> None:
    """WeatherReportは生成後に変更できない"""
    requests_mock.get(WEATHER_URL, json=WEATHER_PAYLOAD)
    report = fetcher.fetch_current(Coordinate(0.0, 0.0))

    with pytest.raises(AttributeError):
        report.temperature = 0.0  # type: ignore[misc]


@pytest.mark.parametrize(
    "body",
    [
        "{malformed",
        "",
        '["not", "an", "object"]',
        '{"weather": []}',
        '{"main": {"temp": "hot"}, "weather": []}',
        '{"main": {"temp": 1, "feels_like": 1, "temp_max": 1, "temp_min": 1, "humidity": 1}}',
    ],
)
def test_malformed_payload_raises_decode_error(
    requests_mock, fetcher: OpenWeatherFetcher, body: str
) -> None:
    """不正なペイロードはゼロ埋めのレポートではなくDecodeErrorになる"""
    requests_mock.get(WEATHER_URL, text=body)

    with pytest.raises(DecodeError):
        fetcher.fetch_current(Coordinate(0.0, 0.0))


def test_invalid_api_key_raises_upstream_status_error(
    requests_mock, fetcher: OpenWeatherFetcher
) -> None:
    """APIキー不正は専用の例外ではなくUpstreamStatusError"""
    requests_mock.get(WEATHER_URL, status_code=401, text="{malformed")

    with pytest.raises(UpstreamStatusError) as exc_info:
        fetcher.fetch_current(Coordinate(0.0, 0.0))

    assert exc_info.value.status_code == 401


def test_timeout_raises_network_error(requests_mock, fetcher: OpenWeatherFetcher) -> None:
    """タイムアウトはNetworkError"""
    requests_mock.get(WEATHER_URL, exc=requests.exceptions.ReadTimeout)

    with pytest.raises(NetworkError):
        fetcher.fetch_current(Coordinate(0.0, 0.0))


@pytest.mark.parametrize(
    "conditions",
    [
        [{"main": "Clear"}],
        [{"main": "Clear", "description": None}],
        [{"main": "Clear", "description": ""}],
    ],
)
def test_missing_description_is_none(
    requests_mock, fetcher: OpenWeatherFetcher, conditions: list[dict[str, object]]
) -> None:
    """descriptionがない・空の場合はNone（空行を表示しない）"""
    payload = copy.deepcopy(WEATHER_PAYLOAD)
    payload["weather"] = conditions
    requests_mock.get(WEATHER_URL, json=payload)

    report = fetcher.fetch_current(Coordinate(0.0, 0.0))

    assert report.description is None
    assert "Description" not in format_report(report)


@pytest.mark.parametrize(
    "body",
    [
        '{"main": {"temp": 1, "feels_like": 1, "temp_max": 1, "temp_min": 1,'
        ' "humidity": 1, "pressure": 1}, "weather": [{"description": 42}]}',
        '{"main": {"temp": NaN, "feels_like": 1, "temp_max": 1, "temp_min": 1,'
        ' "humidity": 1, "pressure": 1}, "weather": []}',
        '{"main": {"temp": 1, "feels_like": Infinity, "temp_max": 1, "temp_min": 1,'
        ' "humidity": 1, "pressure": 1}, "weather": []}',
        '{"main": {"temp": 1, "feels_like": 1, "temp_max": 1, "temp_min": 1,'
        ' "humidity": 55.7, "pressure": 1}, "weather": []}',
        '{"main": {"temp": 1, "feels_like": 1, "temp_max": 1, "temp_min": 1,'
        ' "humidity": 55, "pressure": 1013.4}, "weather": []}',
    ],
)
def test_invalid_values_raise_decode_error(
    requests_mock, fetcher: OpenWeatherFetcher, body: str
) -> None:
    """文字列以外の説明・非有限値・小数の湿度/気圧はDecodeError"""
    requests_mock.get(WEATHER_URL, text=body)

    with pytest.raises(DecodeError):
        fetcher.fetch_current(Coordinate(0.0, 0.0))


def test_integral_float_humidity_is_accepted(requests_mock, fetcher: OpenWeatherFetcher) -> None:
    """55.0のような整数値の浮動小数点は受け付ける"""
    payload = copy.deepcopy(WEATHER_PAYLOAD)
    payload["main"]["humidity"] = 55.0
    requests_mock.get(WEATHER_URL, json=payload)

    assert fetcher.fetch_current(Coordinate(0.0, 0.0)).humidity == 55
