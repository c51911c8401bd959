"""Static build report schema.

A build writes one directory tree:

    {output_dir}/
    ├── index.html              # redirect to the default locale
    ├── robots.txt
    ├── sitemap-index.xml
    ├── sitemap-{locale}.xml
    ├── build-report.json       # BuildReport
    └── {locale}/
        ├── index.html
        └── {articles segment}/{slug}/index.html
"""

from typing import Literal

from pydantic import BaseModel


class BuildFile(BaseModel):
    """A file written by the builder.

    Attributes:
        path: Path relative to the output directory, with forward slashes
        kind: What the file is
        locale: Locale of the page, None for site-wide files
    """

    path: str
    kind: Literal["redirect", "homepage", "article", "robots", "sitemap_index", "sitemap", "fallback"]
    locale: str | None = None


class BuildReport(BaseModel):
    """Summary of one static build.

    Attributes:
        output_dir: Directory the site was written to
        base_url: Public base URL used for robots.txt and sitemaps
        locales: Locales that were rendered
        files: Every file written, in write order
        errors: Pages that could not be rendered, one message each
        status: "complete" when every page rendered, "partial" when some
            failed, "fallback" when website data was unavailable
    """

    output_dir: str
    base_url: str = ""
    locales: list[str] = []
    files: list[BuildFile] = []
    errors: list[str] = []
    status: Literal["complete", "partial", "fallback"] = "complete"
