"""カスタム例外定義"""

from typing import Optional


class WeatherChatError(Exception):
    """weather-chat基底例外"""

    pass


class HTTPError(WeatherChatError):
    """HTTP関連のエラー"""

    pass


class NetworkError(HTTPError):
    """接続失敗・タイムアウトなどの通信エラー"""

    pass


class UpstreamStatusError(HTTPError):
    """上流サービスが2xx以外のステータスを返した"""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class DecodeError(WeatherChatError):
    """JSON解析・スキーマ不一致エラー"""

    pass


class NotFoundError(WeatherChatError):
    """ジオコーディング結果が0件"""

    pass


class ConfigurationError(WeatherChatError):
    """設定エラー"""

    pass
