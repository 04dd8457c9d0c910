"""HTTP fetching of feed documents with retries."""

from dataclasses import dataclass

import httpx
import structlog
from tenacity import retry, retry_if_exception, stop_after_attempt, wait_exponential

from feedlens.config import settings

logger = structlog.get_logger()

USER_AGENT = "feedlens/0.1 (+https://github.com/feedlens/feedlens)"
FEED_ACCEPT = "application/atom+xml, application/rss+xml, application/rdf+xml, application/xml;q=0.9, text/xml;q=0.8"


@dataclass(frozen=True)
class FetchResult:
    """Result of fetching a feed URL."""

    final_url: str
    status_code: int
    content: bytes | None
    content_type: str | None = None
    error: str | None = None
    elapsed_ms: int | None = None


def _is_retryable_http_status(status_code: int) -> bool:
    return status_code in {408, 425, 429, 500, 502, 503, 504}


def _should_retry(exc: BaseException) -> bool:
    if isinstance(exc, httpx.RequestError):
        return True
    if isinstance(exc, httpx.HTTPStatusError):
        return _is_retryable_http_status(exc.response.status_code)
    return False


@retry(
    stop=stop_after_attempt(3),
    wait=wait_exponential(min=2, max=30),
    retry=retry_if_exception(_should_retry),
    reraise=True,
)
def _request(url: str, *, timeout: float, headers: dict[str, str]) -> httpx.Response:
    with httpx.Client(timeout=timeout, follow_redirects=True, headers=headers) as client:
        response = client.get(url)

    if response.status_code >= 400:
        if _is_retryable_http_status(response.status_code):
            logger.warning("Retryable HTTP error", url=url, status=response.status_code)
        raise httpx.HTTPStatusError(
            f"HTTP {response.status_code}",
            request=response.request,
            response=response,
        )
    return response


def fetch_feed(
    url: str,
    *,
    timeout_seconds: float | None = None,
    max_bytes: int | None = None,
) -> FetchResult:
    """Fetch a feed URL, returning the raw body so the XML declaration decides the encoding.

    Transient failures are retried; whatever is left after the last attempt
    is reported through ``FetchResult.error`` rather than raised.
    """
    timeout = settings.fetch_timeout_seconds if timeout_seconds is None else timeout_seconds
    limit = settings.fetch_max_bytes if max_bytes is None else max_bytes
    headers = {"User-Agent": USER_AGENT, "Accept": FEED_ACCEPT}

    try:
        response = _request(url, timeout=timeout, headers=headers)
    except httpx.HTTPStatusError as e:
        status_code = e.response.status_code
        logger.warning("HTTP error", url=url, status=status_code)
        return FetchResult(
            final_url=str(e.response.url),
            status_code=status_code,
            content=None,
            error=f"HTTP {status_code}",
        )
    except httpx.RequestError as e:
        logger.error("Request error", url=url, error=str(e))
        return FetchResult(
            final_url=url,
            status_code=0,
            content=None,
            error=str(e),
        )

    elapsed_ms = int(response.elapsed.total_seconds() * 1000)
    content = response.content
    if limit and len(content) > limit:
        logger.warning("Feed too large", url=url, limit_bytes=limit, size=len(content))
        return FetchResult(
            final_url=str(response.url),
            status_code=response.status_code,
            content=None,
            error=f"Feed exceeds {limit} bytes",
            elapsed_ms=elapsed_ms,
        )

    return FetchResult(
        final_url=str(response.url),
        status_code=response.status_code,
        content=content,
        content_type=response.headers.get("content-type"),
        elapsed_ms=elapsed_ms,
    )
