"""アプリケーション設定（Pydantic Settings）"""
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """アプリケーション設定"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # OpenWeather
    openweather_api_key: str = Field(
        default="",
        description="OpenWeather APIキー（未設定の場合は上流で401になる）",
    )
    geocoding_url: str = Field(
        default="http://api.openweathermap.org/geo/1.0/direct",
        description="ジオコーディングAPIのエンドポイント",
    )
    weather_url: str = Field(
        default="https://api.openweathermap.org/data/2.5/weather",
        description="現在の天気APIのエンドポイント",
    )

    # HTTP
    request_timeout: float = Field(
        default=10.0,
        gt=0,
        description="リクエストのタイムアウト（秒）",
    )
    user_agent: str = Field(
        default="weather-chat/1.0",
        description="HTTPリクエストのUser-Agent",
    )

    # Chat
    input_char_limit: int = Field(
        default=30,
        gt=0,
        description="都市名入力の最大文字数",
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="ログレベル (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_file: Optional[str] = Field(
        default=None,
        description="ログファイルのパス（未設定の場合はstderr）",
    )

    @property
    def has_api_key(self) -> bool:
        """APIキーが設定されているかどうか"""
        return bool(self.openweather_api_key.strip())
