"""Request payload sent to the IndexNow API."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

# Characters that the reference encoder escapes so the JSON is safe inside HTML.
_HTML_SAFE_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


@dataclass(frozen=True)
class IndexNowRequest:
    """A batch of URLs for one host, with the key that proves ownership."""

    host: str
    key: str
    key_location: str
    url_list: tuple[str, ...] | None = None

    @classmethod
    def for_site(cls, domain: str, key: str, url_list) -> "IndexNowRequest":
        """Build a request whose key file lives at the root of ``domain``."""
        urls = None if url_list is None else tuple(url_list)
        return cls(
            host=domain,
            key=key,
            key_location=f"https://{domain}/{key}.txt",
            url_list=urls,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the payload with the field names the API expects."""
        return {
            "host": self.host,
            "key": self.key,
            "keyLocation": self.key_location,
            "urlList": None if self.url_list is None else list(self.url_list),
        }

    def to_json(self) -> str:
        """Serialise the payload as compact, HTML-safe JSON."""
        text = json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)
        for char, escape in _HTML_SAFE_ESCAPES.items():
            text = text.replace(char, escape)
        return text