"""ジオコーディング機能のドメインモデル"""
import math
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Coordinate:
    """地理座標"""

    latitude: float  # 緯度
    longitude: float  # 経度

    def to_tuple(self) -> tuple[float, float]:
        """(緯度, 経度)のタプルとして返す"""
        return (self.latitude, self.longitude)


@dataclass(frozen=True)
class LocationCandidate:
    """ジオコーディングAPIが返す地点候補"""

    name: str
    coordinate: Coordinate
    country: str = ""
    region: str = ""  # APIの"state"
    local_names: dict[str, str] = field(default_factory=dict)  # ロケール -> 地名

    @classmethod
    def from_api_dict(cls, data: Any) -> "LocationCandidate":
        """
        APIレスポンスの1要素から生成

        Raises:
            TypeError, ValueError: スキーマが想定と異なる場合
        """
        if not isinstance(data, dict):
            raise TypeError(f"location entry must be an object, got {type(data).__name__}")

        lat = data.get("lat")
        lon = data.get("lon")
        if not _is_number(lat) or not _is_number(lon):
            raise ValueError("location entry is missing numeric lat/lon")

        local_names = data.get("local_names") or {}
        if not isinstance(local_names, dict):
            raise TypeError("local_names must be an object")

        return cls(
            name=str(data.get("name") or ""),
            coordinate=Coordinate(latitude=float(lat), longitude=float(lon)),
            country=str(data.get("country") or ""),
            region=str(data.get("state") or ""),
            local_names={str(k): str(v) for k, v in local_names.items()},
        )

    @property
    def display_name(self) -> str:
        """「地名, 地域, 国」形式の表示名（空の要素は省略）"""
        return ", ".join(part for part in (self.name, self.region, self.country) if part)


def _is_number(value: Any) -> bool:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    return math.isfinite(value)
