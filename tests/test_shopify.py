import json

import pytest
import responses

from crawlindexnow.shopify import (
    BANNER,
    execute,
    extract_locations,
    get_shopify_urls,
    is_allowed,
)

DOMAIN = "shop.example.com"
ENDPOINT = "https://api.indexnow.org/IndexNow"
PRODUCTS = f"https://{DOMAIN}/sitemap_products_1.xml"
PAGES = f"https://{DOMAIN}/sitemap_pages_1.xml"

SITEMAP_INDEX = f"""<?xml version="1.0" encoding="UTF-8"?>
<sitemapindex xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">
  <sitemap><loc>{PRODUCTS}</loc></sitemap>
  <sitemap><loc>{PAGES}</loc></sitemap>
</sitemapindex>"""

PRODUCT_URLS = [f"https://{DOMAIN}/products/hat", f"https://{DOMAIN}/products/scarf"]
PAGE_URLS = [f"https://{DOMAIN}/pages/about"]


def urlset(urls):
    entries = "".join(f"<url><loc>{u}</loc></url>" for u in urls)
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        f'<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">{entries}</urlset>'
    )


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


def register_store(rsps):
    rsps.add(responses.GET, f"https://{DOMAIN}/sitemap.xml", body=SITEMAP_INDEX)
    rsps.add(responses.GET, PRODUCTS, body=urlset(PRODUCT_URLS))
    rsps.add(responses.GET, PAGES, body=urlset(PAGE_URLS))


def test_extract_sitemap_locations_in_order():
    assert extract_locations(SITEMAP_INDEX, "sitemap") == [PRODUCTS, PAGES]


def test_extract_url_locations_ignores_other_parents():
    assert extract_locations(SITEMAP_INDEX, "url") == []
    assert extract_locations(urlset(PRODUCT_URLS).encode(), "url") == PRODUCT_URLS


def test_extract_rejects_malformed_xml():
    with pytest.raises(ValueError):
        extract_locations("<urlset><url>", "url")


@pytest.mark.parametrize(
    "url, expected",
    [
        (f"https://{DOMAIN}/sitemap.xml", True),
        (f"https://{DOMAIN}:8443/a", True),
        ("https://other.example.org/sitemap.xml", False),
        (f"https://cdn.{DOMAIN}/a", False),
    ],
)
def test_is_allowed(url, expected):
    assert is_allowed(url, DOMAIN) is expected


def test_get_shopify_urls_collects_all_pages(mocked, capsys):
    register_store(mocked)
    result = get_shopify_urls(DOMAIN)
    assert result == PRODUCT_URLS + PAGE_URLS
    out = capsys.readouterr().out
    for url in result:
        assert f"[-] \t {url}" in out


def test_off_domain_sitemap_is_forbidden(mocked, capsys):
    foreign = "https://other.example.org/sitemap_products_1.xml"
    index = f"<sitemapindex><sitemap><loc>{foreign}</loc></sitemap></sitemapindex>"
    mocked.add(responses.GET, f"https://{DOMAIN}/sitemap.xml", body=index)
    assert get_shopify_urls(DOMAIN) == []
    assert "Forbidden domain" in capsys.readouterr().err
    assert len(mocked.calls) == 1


def test_duplicate_sitemap_is_visited_once(mocked, capsys):
    index = (
        f"<sitemapindex><sitemap><loc>{PAGES}</loc></sitemap>"
        f"<sitemap><loc>{PAGES}</loc></sitemap></sitemapindex>"
    )
    mocked.add(responses.GET, f"https://{DOMAIN}/sitemap.xml", body=index)
    mocked.add(responses.GET, PAGES, body=urlset(PAGE_URLS))
    assert get_shopify_urls(DOMAIN) == PAGE_URLS
    assert "URL already visited" in capsys.readouterr().err


def test_missing_main_sitemap_is_reported(mocked, capsys):
    mocked.add(responses.GET, f"https://{DOMAIN}/sitemap.xml", status=404)
    assert get_shopify_urls(DOMAIN) == []
    assert "error visiting main sitemap" in capsys.readouterr().err


def test_execute_requires_domain():
    with pytest.raises(ValueError, match="domain is required"):
        execute("", "placeholder")


def test_execute_requires_key():
    with pytest.raises(ValueError, match="indexNowKey is required"):
        execute(DOMAIN, "")


def test_execute_posts_collected_urls(mocked, capsys):
    register_store(mocked)
    mocked.add(responses.POST, ENDPOINT, body="", status=200)
    key = "placeholder"
    execute(DOMAIN, key)

    sent = json.loads(mocked.calls[-1].request.body)
    assert sent["host"] == DOMAIN
    assert sent["keyLocation"] == f"https://{DOMAIN}/{key}.txt"
    assert sent["urlList"] == PRODUCT_URLS + PAGE_URLS

    out = capsys.readouterr().out
    assert BANNER in out
    assert "Code     : 200 OK" in out


def test_execute_reports_post_failure(mocked, capsys):
    execute(DOMAIN, "placeholder")
    captured = capsys.readouterr()
    assert "Sending 0 URLs to IndexNow..." in captured.out
    assert "[-] Code     : \n" in captured.out
    assert "error posting data:" in captured.err