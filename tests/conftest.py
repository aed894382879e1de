"""共通フィクスチャ"""

from typing import Iterator

import pytest

from weather_chat.features.geocoding.providers.openweather_geocoder import OpenWeatherGeocoder
from weather_chat.features.weather.providers.openweather_fetcher import OpenWeatherFetcher
from weather_chat.features.weather.services.forecast_service import ForecastService
from weather_chat.shared.http.client import HTTPClient

from tests.payloads import API_KEY, GEO_URL, WEATHER_URL


@pytest.fixture
def http_client() -> Iterator[HTTPClient]:
    with HTTPClient(timeout=5) as client:
        yield client


@pytest.fixture
def geocoder(http_client: HTTPClient) -> OpenWeatherGeocoder:
    return OpenWeatherGeocoder(API_KEY, http_client, base_url=GEO_URL)


@pytest.fixture
def fetcher(http_client: HTTPClient) -> OpenWeatherFetcher:
    return OpenWeatherFetcher(API_KEY, http_client, base_url=WEATHER_URL)


@pytest.fixture
def service(geocoder: OpenWeatherGeocoder, fetcher: OpenWeatherFetcher) -> ForecastService:
    return ForecastService(geocoder, fetcher)
