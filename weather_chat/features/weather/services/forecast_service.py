"""天気予報サービス（ジオコーディング -> 天気取得 -> 整形）"""

from typing import Any, Optional

from ..formatters.report_formatter import format_report
from ..providers.openweather_fetcher import OpenWeatherFetcher
from ...geocoding.providers.openweather_geocoder import OpenWeatherGeocoder
from ....infrastructure.config.settings import Settings
from ....shared.exceptions.errors import (
    DecodeError,
    NotFoundError,
    UpstreamStatusError,
    WeatherChatError,
)
from ....shared.http.client import HTTPClient
from ....shared.logging.config import get_logger

logger = get_logger(__name__)

NETWORK_ERROR_MESSAGE = "Could not fetch Weather Forecast"
DECODE_ERROR_MESSAGE = "Error decoding weather data"


class ForecastService:
    """
    都市名1件分の天気予報テキストを作成するサービス

    エラーはすべて短いメッセージに変換し、呼び出し元へ例外を投げない
    """

    def __init__(
        self,
        geocoder: OpenWeatherGeocoder,
        fetcher: OpenWeatherFetcher,
        http_client: Optional[HTTPClient] = None,
    ) -> None:
        """
        Args:
            geocoder: ジオコーダー
            fetcher: 天気取得
            http_client: close()でクローズするHTTPクライアント（所有する場合のみ）
        """
        self.geocoder = geocoder
        self.fetcher = fetcher
        self.http_client = http_client

    @classmethod
    def from_settings(cls, settings: Settings) -> "ForecastService":
        """設定からサービスを構築"""
        if not settings.has_api_key:
            logger.warning("OPENWEATHER_API_KEY is not set; requests will be rejected upstream")

        http_client = HTTPClient(timeout=settings.request_timeout, user_agent=settings.user_agent)
        geocoder = OpenWeatherGeocoder(
            settings.openweather_api_key, http_client, base_url=settings.geocoding_url
        )
        fetcher = OpenWeatherFetcher(
            settings.openweather_api_key, http_client, base_url=settings.weather_url
        )

        logger.info(
            f"ForecastService initialized: timeout={settings.request_timeout}s, "
            f"geocoding_url={settings.geocoding_url}, weather_url={settings.weather_url}"
        )
        return cls(geocoder, fetcher, http_client=http_client)

    def get_forecast(self, city_name: str) -> str:
        """
        都市名の天気予報テキストを取得

        Args:
            city_name: 都市名

        Returns:
            str: 地点名の見出し + 天気レポート、またはエラーメッセージ
        """
        try:
            candidate = self.geocoder.lookup(city_name)
            report = self.fetcher.fetch_current(candidate.coordinate)
        except WeatherChatError as e:
            logger.warning(f"Forecast failed for {city_name!r}: {type(e).__name__}: {e}")
            return self.describe_error(e, city_name)

        header = candidate.display_name or city_name
        return f"{header}\n{format_report(report)}"

    @staticmethod
    def describe_error(error: WeatherChatError, city_name: str) -> str:
        """例外を表示用の短いメッセージに変換"""
        if isinstance(error, NotFoundError):
            return f'No location found for "{city_name}"'
        if isinstance(error, UpstreamStatusError):
            return f"Weather service returned an error (HTTP {error.status_code})"
        if isinstance(error, DecodeError):
            return DECODE_ERROR_MESSAGE
        # NetworkErrorおよびその他
        return NETWORK_ERROR_MESSAGE

    def close(self) -> None:
        """所有しているHTTPクライアントをクローズ"""
        if self.http_client:
            self.http_client.close()

    def __enter__(self) -> "ForecastService":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
