"""ターミナル上のチャット画面（rich）"""

from typing import Optional, Protocol, TextIO

from rich.console import Console
from rich.text import Text

from ..domain.state import (
    SENDER_PREFIX,
    ChatState,
    Command,
    Event,
    FetchForecast,
    ForecastReceived,
    InputChanged,
    Quit,
    QuitRequested,
    Submitted,
    update,
)
from ....shared.logging.config import get_logger

logger = get_logger(__name__)

PROMPT = "┃ "
PLACEHOLDER = "Enter a city name..."
SENDER_STYLE = "magenta"


class ForecastProvider(Protocol):
    """都市名から表示用テキストを返すもの（ForecastService）"""

    def get_forecast(self, city_name: str) -> str: ...


class ChatTerminal:
    """
    行入力ベースのチャット画面

    入力をイベントとして状態遷移関数に渡し、
    返ってきたコマンド（天気取得・終了）を実行する
    """

    def __init__(
        self,
        forecast_provider: ForecastProvider,
        console: Optional[Console] = None,
        input_stream: Optional[TextIO] = None,
        char_limit: int = 30,
    ) -> None:
        """
        Args:
            forecast_provider: 天気予報テキストの取得元
            console: 出力先のConsole（Noneの場合は標準出力）
            input_stream: 入力元（Noneの場合は標準入力）
            char_limit: 入力の最大文字数
        """
        self.forecast_provider = forecast_provider
        self.console = console or Console()
        self.input_stream = input_stream
        self.state = ChatState(char_limit=char_limit)
        self._rendered = 0

    def run(self) -> int:
        """
        チャットを実行（終了操作まで戻らない）

        Returns:
            int: 終了コード
        """
        self._render()
        self.console.print(Text(PLACEHOLDER, style="dim"))

        while True:
            try:
                line = self._read_line()
            except (KeyboardInterrupt, EOFError):
                command = self.dispatch(QuitRequested())
            else:
                self.dispatch(InputChanged(line))
                command = self.dispatch(Submitted())

            if isinstance(command, Quit):
                # プロンプトの行を閉じてから出力
                self.console.line()
                self.console.print(Text(command.last_input))
                logger.info("Chat terminated by user")
                return 0

    def dispatch(self, event: Event) -> Optional[Command]:
        """
        イベントを適用し、天気取得コマンドはその場で実行する

        Returns:
            Optional[Command]: 呼び出し側で処理すべきコマンド（Quit）
        """
        self.state, command = update(self.state, event)

        if isinstance(command, FetchForecast):
            self._render()
            with self.console.status("Fetching weather..."):
                text = self.forecast_provider.get_forecast(command.city_name)
            self.state, command = update(self.state, ForecastReceived(text))

        self._render()
        return command

    def _read_line(self) -> str:
        prompt = Text(PROMPT, style=SENDER_STYLE)
        line = self.console.input(prompt, stream=self.input_stream)
        if self.input_stream is not None and line == "":
            raise EOFError
        return line.rstrip("\r\n")

    def _render(self) -> None:
        """まだ表示していない履歴行を出力"""
        for entry in self.state.transcript[self._rendered :]:
            if entry.startswith(SENDER_PREFIX):
                self.console.print(
                    Text.assemble((SENDER_PREFIX, SENDER_STYLE), entry[len(SENDER_PREFIX) :])
                )
            else:
                self.console.print(Text(entry))
        self._rendered = len(self.state.transcript)
