"""OpenWeather Geocoding API実装"""
from typing import Any

from ..domain.models import Coordinate, LocationCandidate
from ....shared.exceptions.errors import DecodeError, NotFoundError
from ....shared.http.client import HTTPClient
from ....shared.logging.config import get_logger

logger = get_logger(__name__)

DEFAULT_GEOCODING_URL = "http://api.openweathermap.org/geo/1.0/direct"


class OpenWeatherGeocoder:
    """OpenWeather Geocoding API実装（都市名 -> 座標）"""

    def __init__(
        self,
        api_key: str,
        http_client: HTTPClient,
        base_url: str = DEFAULT_GEOCODING_URL,
    ) -> None:
        """
        Args:
            api_key: OpenWeather APIキー
            http_client: HTTPクライアント
            base_url: ジオコーディングAPIのエンドポイント
        """
        self.api_key = api_key
        self.http_client = http_client
        self.base_url = base_url

    def lookup(self, city_name: str) -> LocationCandidate:
        """
        都市名から最初の地点候補を取得

        都市名は検証せずそのまま送信する（空文字列も送る）

        Args:
            city_name: 都市名

        Returns:
            LocationCandidate: 先頭の候補

        Raises:
            NetworkError: 通信に失敗した場合
            UpstreamStatusError: ステータスが2xx以外の場合
            DecodeError: レスポンスが想定の形式でない場合
            NotFoundError: 候補が0件の場合
        """
        logger.debug(f"Geocoding city: {city_name!r}")

        params = {"q": city_name, "limit": 1, "appid": self.api_key}
        payload = self.http_client.get_json(self.base_url, params=params)

        candidates = self._parse_candidates(payload)

        # 候補が0件の場合はインデックスアクセスしない
        if not candidates:
            logger.info(f"No geocoding results for city: {city_name!r}")
            raise NotFoundError(f"No location found for {city_name!r}")

        # 最初の結果を使用
        candidate = candidates[0]
        logger.debug(
            f"Geocoded: {city_name!r} -> {candidate.display_name} "
            f"({candidate.coordinate.latitude}, {candidate.coordinate.longitude})"
        )
        return candidate

    def resolve(self, city_name: str) -> Coordinate:
        """都市名を座標に変換"""
        return self.lookup(city_name).coordinate

    def _parse_candidates(self, payload: Any) -> list[LocationCandidate]:
        if not isinstance(payload, list):
            raise DecodeError(
                f"Geocoding response must be a JSON array, got {type(payload).__name__}"
            )

        try:
            return [LocationCandidate.from_api_dict(item) for item in payload]
        except (TypeError, ValueError) as e:
            raise DecodeError(f"Unexpected geocoding response: {e}") from e
