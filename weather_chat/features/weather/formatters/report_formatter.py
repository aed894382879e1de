"""天気レポートの整形"""

from ..domain.models import WeatherReport

# ラベル列の幅（値の開始位置をそろえる）
LABEL_WIDTH = 18


def format_report(report: WeatherReport) -> str:
    """
    WeatherReportを固定幅の複数行テキストに整形

    行の順序: 気温, 体感温度, 説明（ある場合のみ）, 最高気温, 最低気温, 湿度, 気圧

    Args:
        report: 天気レポート

    Returns:
        str: 整形済みテキスト
    """
    rows: list[tuple[str, str]] = [
        ("Temperature:", _kelvin(report.temperature)),
        ("Feels like:", _kelvin(report.feels_like)),
    ]
    if report.description is not None:
        rows.append(("Description:", report.description))
    rows.extend(
        [
            ("Max temperature:", _kelvin(report.temp_max)),
            ("Min temperature:", _kelvin(report.temp_min)),
            ("Humidity:", f"{report.humidity}%"),
            ("Pressure:", f"{report.pressure} hPa"),
        ]
    )

    return "\n".join(f"{label:<{LABEL_WIDTH}}{value}" for label, value in rows)


def _kelvin(value: float) -> str:
    return f"{value:.2f} K"
