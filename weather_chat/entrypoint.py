"""CLIエントリーポイント"""
import argparse
import sys
from typing import Optional

from pydantic import ValidationError

from .features.chat.terminal.runner import ChatTerminal
from .features.weather.services.forecast_service import ForecastService
from .infrastructure.config.settings import Settings
from .shared.exceptions.errors import ConfigurationError
from .shared.logging.config import get_logger, setup_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """引数パーサーを作成"""
    parser = argparse.ArgumentParser(
        prog="weather-chat",
        description="都市名を入力して現在の天気を表示するターミナルチャット",
    )

    parser.add_argument(
        "--city",
        type=str,
        help="指定した都市の天気を1回だけ表示して終了",
    )

    parser.add_argument(
        "--env-file",
        type=str,
        default=".env",
        help="環境変数ファイルのパス（デフォルト: .env）",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="ログレベル",
    )

    return parser


def load_settings(env_file: str) -> Settings:
    """
    設定を読み込み

    Raises:
        ConfigurationError: 設定値が不正な場合
    """
    try:
        return Settings(_env_file=env_file)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def main(argv: Optional[list[str]] = None) -> int:
    """
    メインエントリーポイント

    Returns:
        int: 終了コード（0: 成功, 1: 失敗, 130: 中断）
    """
    args = build_parser().parse_args(argv)

    try:
        # 設定を読み込み
        settings = load_settings(args.env_file)

        # ログレベルを上書き
        if args.log_level:
            settings.log_level = args.log_level

        # ロガーを設定
        setup_logging(level=settings.log_level, log_file=settings.log_file)

        with ForecastService.from_settings(settings) as service:
            if args.city is not None:
                logger.info(f"Running one-shot forecast for: {args.city!r}")
                print(service.get_forecast(args.city))
                return 0

            terminal = ChatTerminal(service, char_limit=settings.input_char_limit)
            return terminal.run()

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 130  # SIGINT
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logger.error(f"Application failed: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
