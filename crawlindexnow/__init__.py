"""Collect a website's URLs from its sitemaps and submit them to IndexNow."""

__version__ = "0.1.0"