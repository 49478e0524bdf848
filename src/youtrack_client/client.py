import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Union

import httpx
from dotenv import load_dotenv

from .core.body import JSON_CONTENT_TYPE, MultipartForm
from .core.request import RequestDescriptor
from .core.uri import join_url
from .observability import log_call


class YouTrackClientError(Exception):
    """Base error for client failures."""


class YouTrackHTTPError(YouTrackClientError):
    def __init__(
        self,
        *,
        status_code: int,
        method: str,
        url: str,
        message: str,
        response_json: Optional[Dict[str, Any]] = None,
        response_text: Optional[str] = None,
    ):
        super().__init__(f"{status_code} {method} {url}: {message}")
        self.status_code = status_code
        self.method = method
        self.url = url
        self.response_json = response_json
        self.response_text = response_text


class YouTrackParseError(YouTrackClientError):
    pass


@dataclass(frozen=True)
class RetryConfig:
    max_retries: int = 2  # total extra attempts
    backoff_base_seconds: float = 0.3  # 0.3, 0.6, 1.2...
    retry_statuses: frozenset[int] = frozenset({502, 503, 504})
    retry_on_429: bool = False


def _multipart_kwargs(form: MultipartForm) -> Dict[str, Any]:
    data: Dict[str, Union[str, List[str]]] = {}
    for name, value in form.fields:
        if name in data:
            existing = data[name]
            data[name] = (
                existing + [value] if isinstance(existing, list) else [existing, value]
            )
        else:
            data[name] = value

    files: List[Tuple[str, Tuple[str, Any, str]]] = [
        (
            name,
            (f.filename, f.content, f.content_type or "application/octet-stream"),
        )
        for name, f in form.files
    ]
    return {"data": data or None, "files": files or None}


class YouTrackClient:
    """
    Async transport for request descriptors built by youtrack_client.core.
    - Handles auth, base URL, timeouts, retries
    - Returns parsed JSON (objects or arrays)
    - No request construction; resources own that through RequestBuilder
    """

    def __init__(
        self,
        *,
        base_url: str,
        token: str,
        timeout_seconds: float = 10.0,
        retry: Optional[RetryConfig] = None,
        logger: Optional[logging.Logger] = None,
        http: Optional[httpx.AsyncClient] = None,
    ):
        base_url = (base_url or "").rstrip("/")
        token = token or ""

        if not base_url:
            raise ValueError("base_url must be provided.")
        if not token:
            raise ValueError("token must be provided.")

        self.base_url = base_url
        self.timeout_seconds = timeout_seconds
        self.retry = retry if retry is not None else RetryConfig()
        self.log = logger or logging.getLogger("youtrack_client.client")

        # Content-Type is set per request so multipart uploads get their boundary.
        self._owns_http = http is None
        self.http = http or httpx.AsyncClient(
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": "application/json",
            },
            timeout=timeout_seconds,
        )

    @classmethod
    def from_env(cls, **kwargs) -> "YouTrackClient":
        from .config import load_env_config

        base_url, token = load_env_config()
        return cls(base_url=base_url, token=token, **kwargs)

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    async def __aenter__(self) -> "YouTrackClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    def _absolute_url(self, url: str) -> str:
        if url.startswith(("http://", "https://")):
            return url
        return join_url(self.base_url, url)

    async def fetch(
        self, descriptor: RequestDescriptor, *, tool: Optional[str] = None
    ) -> Any:
        """
        Send one request descriptor.
        - Retries on transient failures (network/timeouts + 502/503/504; optionally 429)
        - Multipart uploads are never retried to avoid duplicate uploads
        - Raises YouTrackHTTPError on non-2xx HTTP responses
        - Raises YouTrackClientError on network/timeout errors after retries
        - Raises YouTrackParseError if the response isn't valid JSON
        """
        method = descriptor.http_method
        url = self._absolute_url(descriptor.url)
        headers = dict(descriptor.headers or {})
        kwargs: Dict[str, Any] = {}

        if isinstance(descriptor.body, MultipartForm):
            # httpx writes the multipart Content-Type together with its boundary.
            headers.pop("Content-Type", None)
            kwargs.update(_multipart_kwargs(descriptor.body))
            max_retries = 0
        else:
            if descriptor.body is not None:
                headers.setdefault("Content-Type", JSON_CONTENT_TYPE)
                kwargs["content"] = descriptor.body
            max_retries = self.retry.max_retries

        start = time.perf_counter()
        try:
            resp = await self._send(
                method, url, headers, kwargs, max_retries=max_retries, tool=tool
            )
        except YouTrackClientError as exc:
            log_call(
                tool=tool,
                method=method,
                url=descriptor.url,
                status="exception",
                started=start,
                error_type=type(exc.__cause__ or exc).__name__,
            )
            raise

        log_call(
            tool=tool,
            method=method,
            url=descriptor.url,
            status=resp.status_code,
            started=start,
        )

        if resp.status_code < 200 or resp.status_code >= 300:
            raise self._to_http_error(resp, method=method)

        return self._safe_json(resp)

    async def _send(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        kwargs: Dict[str, Any],
        *,
        max_retries: int,
        tool: Optional[str],
    ) -> httpx.Response:
        start = time.perf_counter()
        attempt = 0

        while True:
            try:
                resp = await self.http.request(method, url, headers=headers, **kwargs)
                duration_ms = int((time.perf_counter() - start) * 1000)

                # structured-ish log without secrets
                self.log.debug(
                    "yt.request",
                    extra={
                        "tool": tool,
                        "method": method,
                        "url": str(resp.request.url),
                        "status": resp.status_code,
                        "duration_ms": duration_ms,
                        "attempt": attempt,
                    },
                )

                # Retry certain status codes
                if resp.status_code in self.retry.retry_statuses or (
                    self.retry.retry_on_429 and resp.status_code == 429
                ):
                    if attempt < max_retries:
                        await asyncio.sleep(
                            self.retry.backoff_base_seconds * (2**attempt)
                        )
                        attempt += 1
                        continue

                return resp

            except (httpx.ConnectError, httpx.ReadTimeout, httpx.ConnectTimeout) as exc:
                if attempt < max_retries:
                    await asyncio.sleep(self.retry.backoff_base_seconds * (2**attempt))
                    attempt += 1
                    continue
                raise YouTrackClientError(
                    f"Network/timeout error calling {method} {url}: {exc}"
                ) from exc

            except httpx.HTTPError as exc:
                # Other httpx exceptions (rare) - do not blindly retry
                raise YouTrackClientError(
                    f"HTTPX error calling {method} {url}: {exc}"
                ) from exc

    def _safe_json(self, resp: httpx.Response) -> Any:
        # Handle empty responses (204 No Content, etc.)
        if not resp.content:
            return {}

        try:
            return resp.json()
        except ValueError as exc:
            snippet = (resp.text or "")[:500]
            raise YouTrackParseError(
                f"Expected JSON from {resp.request.method} "
                f"{resp.request.url}, got non-JSON body snippet: "
                f"{snippet!r}"
            ) from exc

    def _to_http_error(self, resp: httpx.Response, *, method: str) -> YouTrackHTTPError:
        url = str(resp.request.url)
        # Try JSON first; fall back to text snippet.
        response_json: Optional[Dict[str, Any]] = None
        response_text: Optional[str] = None
        message = resp.reason_phrase or "request failed"

        try:
            parsed = resp.json()
        except ValueError:
            response_text = (resp.text or "")[:500]
        else:
            if isinstance(parsed, dict):
                response_json = parsed
                # YouTrack errors carry "error" and a readable "error_description"
                message = (
                    parsed.get("error_description") or parsed.get("error") or message
                )

        return YouTrackHTTPError(
            status_code=resp.status_code,
            method=method,
            url=url,
            message=message,
            response_json=response_json,
            response_text=response_text,
        )
