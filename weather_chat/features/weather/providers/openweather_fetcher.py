"""OpenWeather Current Weather API実装"""

from ..domain.models import WeatherReport
from ...geocoding.domain.models import Coordinate
from ....shared.exceptions.errors import DecodeError
from ....shared.http.client import HTTPClient
from ....shared.logging.config import get_logger

logger = get_logger(__name__)

DEFAULT_WEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"


class OpenWeatherFetcher:
    """OpenWeather Current Weather API実装（座標 -> 現在の天気）"""

    def __init__(
        self,
        api_key: str,
        http_client: HTTPClient,
        base_url: str = DEFAULT_WEATHER_URL,
    ) -> None:
        """
        Args:
            api_key: OpenWeather APIキー
            http_client: HTTPクライアント
            base_url: current weather APIのエンドポイント
        """
        self.api_key = api_key
        self.http_client = http_client
        self.base_url = base_url

    def fetch_current(self, coord: Coordinate) -> WeatherReport:
        """
        座標の現在の天気を取得

        緯度・経度は小数点以下5桁に整形して送信する

        Args:
            coord: 座標

        Returns:
            WeatherReport: 現在の天気

        Raises:
            NetworkError: 通信に失敗した場合
            UpstreamStatusError: ステータスが2xx以外の場合（APIキー不正を含む）
            DecodeError: レスポンスが想定の形式でない場合
        """
        latitude, longitude = coord.to_tuple()
        params = {
            "lat": f"{latitude:.5f}",
            "lon": f"{longitude:.5f}",
            "appid": self.api_key,
        }
        logger.debug(f"Fetching current weather: ({params['lat']}, {params['lon']})")

        payload = self.http_client.get_json(self.base_url, params=params)

        try:
            report = WeatherReport.from_api_dict(payload)
        except (TypeError, ValueError) as e:
            raise DecodeError(f"Unexpected weather response: {e}") from e

        logger.debug(f"Current weather: {report}")
        return report
