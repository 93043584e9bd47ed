"""Collection of page URLs from a Shopify store's sitemaps."""

from __future__ import annotations

from urllib.parse import urlsplit
from xml.etree.ElementTree import ParseError

import requests
from defusedxml import ElementTree as SafeElementTree

from .console import cprint, cprint_error, print_blank_line
from .indexnow import post_to_indexnow

BANNER = r"""
  _____ ___   ___  _      __ __         _   ____ _  __ ___   ____ _  __ _  __ ____  _      __
 / ___// _ \ / _ || | /| / // /    ___ ( ) /  _// |/ // _ \ / __/| |/_// |/ // __ \| | /| / /
/ /__ / , _// __ || |/ |/ // /__  / _ \|/ _/ / /    // // // _/ _>  < /    // /_/ /| |/ |/ /
\___//_/|_|/_/ |_||__/|__//____/ /_//_/  /___//_/|_//____//___//_/|_|/_/|_/ \____/ |__/|__/

"""

_FETCH_TIMEOUT_SECONDS = 60


def _local_name(tag) -> str:
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def extract_locations(xml_text, parent_tag: str) -> list[str]:
    """Return the text of every ``loc`` child of ``parent_tag`` elements.

    Namespaces are ignored. Raises ``ValueError`` if the document is not XML.
    """
    data = xml_text.encode("utf-8") if isinstance(xml_text, str) else xml_text
    try:
        root = SafeElementTree.fromstring(data)
    except ParseError as exc:
        raise ValueError(f"invalid XML: {exc}") from exc
    return [
        "".join(loc.itertext()).strip()
        for parent in root.iter()
        if _local_name(parent.tag) == parent_tag
        for loc in parent
        if _local_name(loc.tag) == "loc"
    ]


def is_allowed(url: str, domain: str) -> bool:
    """Tell whether ``url`` points at exactly ``domain``."""
    host = urlsplit(url).hostname
    return host is not None and host == domain.lower()


def _fetch(url: str, domain: str, visited: set[str]) -> bytes:
    if not is_allowed(url, domain):
        raise ValueError("Forbidden domain")
    if url in visited:
        raise ValueError("URL already visited")
    visited.add(url)
    response = requests.get(url, timeout=_FETCH_TIMEOUT_SECONDS)
    response.raise_for_status()
    return response.content


def get_shopify_urls(domain: str) -> list[str]:
    """Read the store's sitemap index, then every sitemap it lists.

    Failures are reported on stderr; whatever was gathered is returned.
    """
    sitemaps: list[str] = []
    try:
        content = _fetch(f"https://{domain}/sitemap.xml", domain, set())
        sitemaps = extract_locations(content, "sitemap")
    except (requests.RequestException, ValueError) as exc:
        cprint_error("error visiting main sitemap: ", exc)

    cprint("Total of Sitemaps: ", len(sitemaps))
    for url in sitemaps:
        cprint("\t", url)
    print_blank_line()

    page_urls: list[str] = []
    visited: set[str] = set()
    for sitemap_url in sitemaps:
        try:
            page_urls.extend(extract_locations(_fetch(sitemap_url, domain, visited), "url"))
        except (requests.RequestException, ValueError) as exc:
            cprint_error("error visiting Sitemaps URLs: ", exc)

    cprint("List of all page URLs found")
    for url in page_urls:
        cprint("\t", url)
    print_blank_line()

    return page_urls


def execute(domain: str, key: str) -> None:
    """Gather the store's URLs and submit them to IndexNow."""
    print(BANNER)

    if not domain:
        raise ValueError("domain is required to execute this command")
    if not key:
        raise ValueError("indexNowKey is required to execute this command")

    urls = get_shopify_urls(domain)

    cprint("Sending", len(urls), "URLs to IndexNow...")
    code, body = "", ""
    try:
        result = post_to_indexnow(domain, key, urls)
        code, body = result.status, result.body
    except requests.RequestException as exc:
        cprint_error(exc)

    cprint("Code     :", code)
    cprint("Response :", body)