"""天気機能のドメインモデル"""
import math
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class WeatherReport:
    """
    現在の天気

    気温はAPIが返すケルビン値のまま保持する（単位変換しない）
    """

    temperature: float  # 現在の気温 (K)
    feels_like: float  # 体感温度 (K)
    temp_max: float  # 最高気温 (K)
    temp_min: float  # 最低気温 (K)
    humidity: int  # 湿度 (%)
    pressure: int  # 気圧 (hPa)
    description: Optional[str] = None  # 天気の説明（weatherが空の場合はNone）

    @classmethod
    def from_api_dict(cls, data: Any) -> "WeatherReport":
        """
        current weather APIのレスポンスから生成

        Raises:
            TypeError, ValueError: スキーマが想定と異なる場合
        """
        if not isinstance(data, dict):
            raise TypeError(f"weather response must be an object, got {type(data).__name__}")

        main = data.get("main")
        if not isinstance(main, dict):
            raise TypeError("weather response is missing the 'main' object")

        conditions = data.get("weather") or []
        if not isinstance(conditions, list):
            raise TypeError("'weather' must be an array")

        description = None
        if conditions:
            first = conditions[0]
            if not isinstance(first, dict):
                raise TypeError("weather condition entry must be an object")
            raw_description = first.get("description")
            if raw_description is not None and not isinstance(raw_description, str):
                raise TypeError("weather description must be a string")
            # 空の説明は「説明なし」として扱う
            description = raw_description or None

        return cls(
            temperature=_number(main, "temp"),
            feels_like=_number(main, "feels_like"),
            temp_max=_number(main, "temp_max"),
            temp_min=_number(main, "temp_min"),
            humidity=_integer(main, "humidity"),
            pressure=_integer(main, "pressure"),
            description=description,
        )


def _number(main: dict[str, Any], key: str) -> float:
    value = main.get(key)
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        raise ValueError(f"main.{key} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ValueError(f"main.{key} must be finite, got {value!r}")
    return float(value)


def _integer(main: dict[str, Any], key: str) -> int:
    value = _number(main, key)
    if not value.is_integer():
        raise ValueError(f"main.{key} must be an integer, got {value!r}")
    return int(value)
