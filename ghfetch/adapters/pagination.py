"""Link-header pagination over the transport.

GitHub splits collections into pages and points to the following one with
a Link header:

    Link: <https://api.github.com/repos/o/r/issues?page=2>; rel="next",
          <https://api.github.com/repos/o/r/issues?page=5>; rel="last"
"""

import logging
import re
from functools import lru_cache
from typing import Iterator, List, Type, TypeVar

from pydantic import TypeAdapter

from ghfetch.adapters.base import GitHubError
from ghfetch.adapters.transport import Transport

logger = logging.getLogger(__name__)

T = TypeVar("T")


def parse_rel(link: str, rel: str = "next") -> str:
    """Return the URL of the Link entry with relation rel, or "" if absent."""
    match = re.search(r'<([^>]+)>;\s*rel="' + re.escape(rel) + '"', link or "")
    return match.group(1) if match else ""


@lru_cache(maxsize=None)
def page_adapter(model: Type[T]) -> TypeAdapter[List[T]]:
    """TypeAdapter decoding one page (a JSON array) into a list of model."""
    return TypeAdapter(List[model])  # type: ignore[valid-type]


def iter_pages(
    transport: Transport,
    url: str,
    model: Type[T],
    max_pages: int | None = None,
) -> Iterator[List[T]]:
    """Yield each page of a collection as a list of model, in server order.

    Follows rel="next" until a page has none. Each page is fetched only when
    the previous one has been consumed. max_pages (None: unbounded) stops the
    iteration early with a warning.

    Raises:
        GitHubError: On the first failed page; nothing more is fetched.
    """
    shape = page_adapter(model)
    link = url
    fetched = 0
    while link:
        if max_pages is not None and fetched >= max_pages:
            logger.warning("Stopped after %d pages, next page was %s", fetched, link)
            return
        page = transport.fetch_page(link, shape)
        fetched += 1
        logger.debug("Page %d of %s: %d items", fetched, url, len(page.items))
        yield page.items
        link = parse_rel(page.link, "next")


def load_all(
    transport: Transport,
    url: str,
    model: Type[T],
    max_pages: int | None = None,
) -> List[T]:
    """Fetch every page of a collection and return the concatenated items.

    Raises:
        GitHubError: On the first failure, with partial set to the items of
            the pages fetched before it (the failing page adds nothing).
    """
    items: List[T] = []
    try:
        for page in iter_pages(transport, url, model, max_pages=max_pages):
            items.extend(page)
    except GitHubError as e:
        e.partial = items
        raise
    return items
