"""Page URL construction.

Builds the link template used by every renderer: the configured URL plus a
query string in which the page parameter carries the literal ``{page}``
placeholder. Renderers substitute a concrete page number with
:func:`replace_page_token`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote, urlencode

PAGE_TOKEN: str = "{page}"
ENCODED_PAGE_TOKEN: str = quote(PAGE_TOKEN, safe="")


def build_page_url(
    url_template: str | None,
    params: Mapping[str, Any],
    page_param_name: str,
    fragment: str | None = None,
) -> str:
    """
    Return the URL template with the query string and fragment attached.

    Parameters
    ----------
    url_template:
        Base URL. May already contain ``{page}`` (e.g. ``/posts/{page}``), in
        which case the page parameter is left out of the query string.
    params:
        Extra query parameters. An entry named *page_param_name* is dropped.
    page_param_name:
        Query parameter that carries the page number.
    fragment:
        Optional anchor appended as ``#fragment``.
    """

    url = url_template or ""
    # None values are left out; booleans are written as 1/0.
    query: dict[str, Any] = {
        k: int(v) if isinstance(v, bool) else v
        for k, v in params.items()
        if k != page_param_name and v is not None
    }
    if PAGE_TOKEN not in url:
        query[page_param_name] = PAGE_TOKEN

    separator = "&" if "?" in url else "?"
    built = url + separator + urlencode(query, doseq=True)

    if fragment:
        built += "#" + fragment
    return built


def replace_page_token(url: str, page: int | str) -> str:
    """Substitute both the raw and the percent-encoded page token."""
    return url.replace(ENCODED_PAGE_TOKEN, str(page)).replace(PAGE_TOKEN, str(page))
