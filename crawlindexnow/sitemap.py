"""Collection of page URLs from a website's sitemap."""

from __future__ import annotations

import io
from xml.etree.ElementTree import ParseError

import requests
from defusedxml import ElementTree as SafeElementTree

from .console import cprint, cprint_error, print_blank_line
from .indexnow import post_to_indexnow
from .shopify import BANNER

FIRST_TEN = 10
_FETCH_TIMEOUT_SECONDS = 60


def _local_name(tag) -> str:
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def parse_urlset(xml_text):
    """Yield the location of each ``url`` entry as it is parsed.

    Entries read before a syntax error are yielded before ``ValueError``
    is raised.
    """
    data = xml_text.encode("utf-8") if isinstance(xml_text, str) else xml_text
    try:
        for _event, element in SafeElementTree.iterparse(io.BytesIO(data), events=("end",)):
            if _local_name(element.tag) != "url":
                continue
            location = next(
                (
                    "".join(child.itertext()).strip()
                    for child in element
                    if _local_name(child.tag) == "loc"
                ),
                "",
            )
            element.clear()
            yield location
    except ParseError as exc:
        raise ValueError(f"invalid XML: {exc}") from exc


def get_sitemap_urls(domain: str) -> list[str]:
    """Fetch ``https://<domain>/sitemap.xml`` and return every page URL in it.

    Failures are reported on stderr; whatever was gathered is returned.
    """
    page_urls: list[str] = []
    try:
        response = requests.get(f"https://{domain}/sitemap.xml", timeout=_FETCH_TIMEOUT_SECONDS)
        for location in parse_urlset(response.content):
            page_urls.append(location)
    except (requests.RequestException, ValueError) as exc:
        cprint_error("error parsing Sitemap URLs: ", exc)

    cprint("Total of Sitemap URLs: ", len(page_urls))
    print_blank_line()

    cprint("List of first 10 page URLs found")
    for url in page_urls[: FIRST_TEN + 1]:
        cprint("\t", url)
    print_blank_line()

    return page_urls


def execute(domain: str, key: str) -> None:
    """Gather the website's sitemap URLs and submit them to IndexNow."""
    print(BANNER)

    if not domain:
        raise ValueError("domain is required to execute this command")
    if not key:
        raise ValueError("indexNowKey is required to execute this command")

    urls = get_sitemap_urls(domain)

    cprint("Sending", len(urls), "URLs to IndexNow...")
    code, body = "", ""
    try:
        result = post_to_indexnow(domain, key, urls)
        code, body = result.status, result.body
    except requests.RequestException as exc:
        cprint_error(exc)

    cprint("Code     :", code)
    cprint("Response :", body)