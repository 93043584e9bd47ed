# crawlindexnow

A small command-line tool that finds the pages of your website through its
sitemaps and submits them all to the IndexNow API
(`https://api.indexnow.org/IndexNow`). Search engines that take part in IndexNow
then learn about new and changed pages sooner.

## Installation

```
pip install .
```

This installs the `crawl-n-indexnow` command.

## Before you start

IndexNow needs a key that proves you own the site. Generate a key, then serve it
as a text file at the root of your domain:

```
https://<your-domain>/<key>.txt
```

The tool sends this location as the `keyLocation` of each submission.

## Usage

### Shopify stores

Shopify publishes a sitemap index at `/sitemap.xml` that points to several child
sitemaps. The `shopify` command reads the index, visits every child sitemap whose
host is exactly the given domain, and submits every page URL it finds:

```
crawl-n-indexnow shopify --domain shop.example.com --key placeholder
```

Sitemaps that cannot be fetched or parsed are reported on stderr and skipped;
the URLs gathered from the others are still submitted.

### Any website with a sitemap

The `sitemap` command reads `https://<domain>/sitemap.xml`, collects the `<loc>`
of every `<url>` entry in it, prints the total and the first few URLs, and
submits them all:

```
crawl-n-indexnow sitemap --domain www.example.com --key placeholder
```

### Output

Both commands print a banner, the URLs they found, and then the HTTP status line
and body of the IndexNow response. Common status codes:

| Code | Meaning                                                    |
|------|------------------------------------------------------------|
| 200  | URLs submitted successfully                                |
| 400  | Invalid format                                             |
| 403  | Key not valid (not found, or the key file does not match)  |
| 422  | URLs do not belong to the host, or the key does not match  |
| 429  | Too many requests (potential spam)                         |

If the submission itself fails (for example, the network is down), the error is
printed on stderr and the status and response are shown empty.

`--domain` and `--key` are both required. If either is missing the command stops
with an error and exit status 1. Running `crawl-n-indexnow` with no command
prints the help, and `crawl-n-indexnow --version` (or `-v`) prints the version.

## What it does not do

- The `sitemap` command reads a single sitemap. It does not follow a sitemap
  index to its child sitemaps; use the `shopify` command for sites whose
  `/sitemap.xml` is an index.
- Neither command crawls HTML pages or follows links; only URLs listed in
  sitemaps are submitted.
- All URLs are sent in one request; large lists are not split into batches.

## Using it from Python

```python
from crawlindexnow.indexnow import post_to_indexnow
from crawlindexnow.sitemap import get_sitemap_urls

urls = get_sitemap_urls("www.example.com")
result = post_to_indexnow("www.example.com", "placeholder", urls)
print(result.status, result.body)
```

Other pieces are available too:

- `crawlindexnow.shopify.get_shopify_urls(domain)` gathers page URLs through a
  sitemap index.
- `crawlindexnow.shopify.extract_locations(xml_text, parent_tag)` returns the
  `<loc>` texts under every `parent_tag` element.
- `crawlindexnow.sitemap.parse_urlset(xml_text)` yields the location of each
  `<url>` entry.
- `crawlindexnow.models.IndexNowRequest` builds the JSON payload
  (`for_site`, `to_dict`, `to_json`).

`post_to_indexnow` re-raises network errors from `requests` after reporting them
on stderr. The parsing functions raise `ValueError` on malformed XML.

## Running the tests

```
pip install ".[test]"
pytest
```