"""HTTP transport: one authenticated GET, classified as success or failure."""

import logging
from typing import Any, NamedTuple, TypeVar

import requests
import requests.auth
from pydantic import TypeAdapter

from ghfetch.adapters.base import GitHubError
from ghfetch.adapters.credentials import CredentialProvider, env_credentials

logger = logging.getLogger(__name__)

# Bytes of an error response body kept in the exception message
ERROR_BODY_LIMIT = 1024

T = TypeVar("T")


class Page(NamedTuple):
    """Decoded response body and its raw Link header ("" if absent)."""

    items: Any
    link: str


class AnonymousAuth(requests.auth.AuthBase):
    """Leaves the request without an Authorization header.

    Passing auth=None lets requests fall back to ~/.netrc ($NETRC).
    """

    def __call__(self, r: requests.PreparedRequest) -> requests.PreparedRequest:
        return r


ANONYMOUS = AnonymousAuth()


def _read_excerpt(resp: requests.Response) -> str:
    try:
        chunk = next(resp.iter_content(chunk_size=ERROR_BODY_LIMIT), b"")
    except requests.RequestException:
        return ""
    return chunk[:ERROR_BODY_LIMIT].decode(resp.encoding or "utf-8", errors="replace")


class Transport:
    """Sends GET requests with optional Basic auth and decodes JSON bodies.

    Credentials are asked from the provider on every request; when it
    returns None the request is sent without an Authorization header.
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        credentials: CredentialProvider = env_credentials,
        timeout: float | None = 30.0,
    ) -> None:
        self._session = session or requests.Session()
        self._credentials = credentials
        self._timeout = timeout

    def get(self, url: str) -> requests.Response:
        """Send GET and return the streamed response (caller closes it).

        Raises:
            GitHubError: On network errors or a status outside 100-299. The
                message carries the status line and up to 1024 bytes of body.
        """
        creds = self._credentials()
        auth = (creds.username, creds.token) if creds else ANONYMOUS
        logger.debug("GET %s (%s)", url, "basic auth" if creds else "anonymous")
        try:
            resp = self._session.request("GET", url, auth=auth, timeout=self._timeout, stream=True)
        except requests.RequestException as e:
            raise GitHubError(f"GET {url}: {e}") from e
        if not 100 <= resp.status_code <= 299:
            try:
                excerpt = _read_excerpt(resp)
            finally:
                resp.close()
            raise GitHubError(
                f"GET {url}: {resp.status_code} {resp.reason} ({excerpt})",
                status_code=resp.status_code,
            )
        return resp

    def fetch_page(self, url: str, shape: TypeAdapter[T]) -> Page:
        """GET url and decode its JSON body into shape, keeping the Link header.

        The response is closed on every path, including decode failures.

        Raises:
            GitHubError: Transport, HTTP status or decode failure.
        """
        resp = self.get(url)
        try:
            items = shape.validate_python(resp.json())
        except ValueError as e:
            # requests' JSONDecodeError and pydantic's ValidationError
            raise GitHubError(f"GET {url}: decode: {e}") from e
        except requests.RequestException as e:
            raise GitHubError(f"GET {url}: {e}") from e
        finally:
            resp.close()
        return Page(items, resp.headers.get("Link", ""))

    def get_json(self, url: str, shape: TypeAdapter[T]) -> T:
        """GET url and return its body decoded into shape."""
        return self.fetch_page(url, shape).items

    def close(self) -> None:
        """Release pooled connections."""
        self._session.close()
