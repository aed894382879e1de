"""HTTPクライアント（タイムアウト付き・リトライなし）"""

from typing import Any, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..exceptions.errors import DecodeError, NetworkError, UpstreamStatusError
from ..logging.config import get_logger

logger = get_logger(__name__)


class HTTPClient:
    """
    JSON APIを呼び出すHTTPクライアント

    Features:
    - タイムアウト設定（応答しないサーバーで固まらない）
    - リトライなし（最初の失敗で終了）
    - セッション管理
    - requestsの例外をアプリケーション例外に変換
    """

    def __init__(
        self,
        timeout: float = 10.0,
        user_agent: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Args:
            timeout: リクエストタイムアウト（秒）
            user_agent: User-Agentヘッダー
            session: 既存のセッション（テスト用。Noneの場合は新規作成）
        """
        self.timeout = timeout
        self.user_agent = user_agent or "weather-chat/1.0"

        self.session = session or self._create_session()

    def _create_session(self) -> requests.Session:
        """セッションを作成"""
        session = requests.Session()

        # リトライ無効（接続エラー・ステータスエラーとも即座に失敗させる）
        retry_strategy = Retry(total=0, raise_on_status=False)

        adapter = HTTPAdapter(max_retries=retry_strategy)
        session.mount("http://", adapter)
        session.mount("https://", adapter)

        # デフォルトヘッダー
        session.headers.update({"User-Agent": self.user_agent, "Accept": "application/json"})

        return session

    def get_json(self, url: str, params: Optional[dict[str, Any]] = None) -> Any:
        """
        GETリクエストを送信し、レスポンスボディをJSONとして返す

        ステータスが2xx以外の場合はボディを解析しない。
        レスポンスはどの経路でも読み切ってクローズする。

        Args:
            url: リクエストURL
            params: クエリパラメータ

        Returns:
            デコード済みのJSON

        Raises:
            NetworkError: 送信失敗・接続失敗・タイムアウト
            UpstreamStatusError: ステータスが2xx以外
            DecodeError: ボディが正しいJSONでない
        """
        # クエリにAPIキーが含まれるため、ログにはパラメータを出さない
        logger.debug(f"GET request to {url}")

        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"GET request failed: {url} - {type(e).__name__}")
            raise NetworkError(f"Failed to GET {url}: {type(e).__name__}") from e

        with response:
            # 1xx・3xx（リダイレクト先なし）も含め、2xx以外はすべてエラー
            if not 200 <= response.status_code < 300:
                logger.error(f"GET request returned status {response.status_code}: {url}")
                raise UpstreamStatusError(
                    f"{url} returned HTTP {response.status_code}",
                    status_code=response.status_code,
                )

            try:
                body = response.content
            except requests.RequestException as e:
                logger.error(f"Failed to read response body: {url} - {type(e).__name__}")
                raise NetworkError(f"Failed to read response from {url}") from e

            logger.debug(
                f"GET request successful: {url} (status={response.status_code}, bytes={len(body)})"
            )

            try:
                return response.json()
            except ValueError as e:
                raise DecodeError(f"Invalid JSON from {url}: {e}") from e

    def close(self) -> None:
        """セッションをクローズ"""
        if self.session:
            self.session.close()
            logger.debug("HTTP session closed")

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
