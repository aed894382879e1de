"""チャット画面の状態遷移

update() は純粋関数で、ネットワークI/Oは行わない。
天気の取得は FetchForecast コマンドとして呼び出し側に返す。
"""
from dataclasses import dataclass, field, replace
from typing import Optional, Union

WELCOME_MESSAGE = "Welcome to the weather forecast!"
SENDER_PREFIX = "You: "
DEFAULT_CHAR_LIMIT = 30


@dataclass(frozen=True)
class ChatState:
    """チャット画面の状態（表示履歴と入力バッファのみ）"""

    transcript: tuple[str, ...] = (WELCOME_MESSAGE,)
    input_buffer: str = ""
    char_limit: int = field(default=DEFAULT_CHAR_LIMIT, compare=False)


# イベント


@dataclass(frozen=True)
class InputChanged:
    """入力欄の内容が変わった"""

    text: str


@dataclass(frozen=True)
class Submitted:
    """Enterが押された"""


@dataclass(frozen=True)
class ForecastReceived:
    """天気予報テキストが届いた"""

    text: str


@dataclass(frozen=True)
class QuitRequested:
    """終了操作（Esc / Ctrl+C / EOF）"""


Event = Union[InputChanged, Submitted, ForecastReceived, QuitRequested]


# コマンド


@dataclass(frozen=True)
class FetchForecast:
    """都市名の天気予報を取得する"""

    city_name: str


@dataclass(frozen=True)
class Quit:
    """終了する（入力中の文字列、なければ最後に送信した都市名を出力）"""

    last_input: str


Command = Union[FetchForecast, Quit]


def update(state: ChatState, event: Event) -> tuple[ChatState, Optional[Command]]:
    """
    イベントを適用して新しい状態と実行すべきコマンドを返す

    Args:
        state: 現在の状態
        event: イベント

    Returns:
        tuple[ChatState, Optional[Command]]: 新しい状態とコマンド（なければNone）
    """
    if isinstance(event, InputChanged):
        return replace(state, input_buffer=event.text[: state.char_limit]), None

    if isinstance(event, Submitted):
        city_name = state.input_buffer.strip()
        if not city_name:
            # 空のメッセージは送信しない
            return state, None
        new_state = replace(
            state,
            transcript=state.transcript + (SENDER_PREFIX + city_name,),
            input_buffer="",
        )
        return new_state, FetchForecast(city_name)

    if isinstance(event, ForecastReceived):
        return replace(state, transcript=state.transcript + (event.text,)), None

    if isinstance(event, QuitRequested):
        return state, Quit(last_input=state.input_buffer or last_submitted(state))

    raise TypeError(f"Unknown chat event: {event!r}")


def last_submitted(state: ChatState) -> str:
    """履歴中で最後に送信された都市名（なければ空文字列）"""
    for entry in reversed(state.transcript):
        if entry.startswith(SENDER_PREFIX):
            return entry[len(SENDER_PREFIX) :]
    return ""
