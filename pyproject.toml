[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crawlindexnow"
version = "0.1.0"
description = "Collect a website's URLs from its sitemaps and submit them to IndexNow."
requires-python = ">=3.10"
keywords = ["indexnow", "sitemap", "shopify", "seo", "search", "crawler"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Indexing/Search",
]
dependencies = [
    "requests>=2.28",
    "defusedxml>=0.7",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "responses>=0.23",
]

[project.scripts]
crawl-n-indexnow = "crawlindexnow.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["crawlindexnow"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
