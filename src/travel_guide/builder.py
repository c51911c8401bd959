"""Static site builder.

Renders every locale homepage and article page to HTML files, plus
robots.txt and the XML sitemaps, and records what was written in a
BuildReport.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path

from schemas import Article, BuildFile, BuildReport, Tag, Website

from .cms import CmsService
from .i18n import build_localized_url
from .pages import (
    ArticlePageResult,
    HomepageLoadResult,
    generate_static_paths,
    load_homepage,
    pick_related_articles,
    render_locale_sitemap,
    render_robots_txt,
    render_sitemap_index,
    resolve_base_url,
    site_locales,
)
from .pages.seo import DEFAULT_SITEMAP_LOCALES
from .rendering import PageRenderer

logger = logging.getLogger(__name__)

REPORT_FILENAME = "build-report.json"


class SiteBuilder:
    """Write the whole site for the configured website to a directory.

    Each page is rendered independently; a page that fails is logged and
    listed in the report's errors while the rest of the build continues.

    Attributes:
        service: CMS service supplying website, article and tag data
        renderer: Page renderer producing the HTML documents
        output_dir: Root directory of the generated site
        site_url: Public base URL used when the CMS does not provide one
    """

    def __init__(
        self,
        service: CmsService,
        renderer: PageRenderer,
        output_dir: Path,
        site_url: str | None = None,
    ):
        self.service = service
        self.renderer = renderer
        self.output_dir = Path(output_dir)
        self.site_url = site_url

    def build(self, now: datetime | None = None) -> BuildReport:
        """Render and write the site.

        Args:
            now: Timestamp used for sitemap lastmod values (default: current UTC time)

        Returns:
            BuildReport listing written files and per-page errors
        """
        now = now or datetime.now(timezone.utc)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        report = BuildReport(output_dir=str(self.output_dir))

        root = load_homepage(self.service)
        website = root.website_data
        report.base_url = resolve_base_url(website, self.site_url)

        if website is None:
            logger.warning("Website data unavailable; writing fallback site")
            report.status = "fallback"
            self._write(report, "index.html", "fallback", self.renderer.render_homepage(root))
        else:
            self._write(report, "index.html", "redirect", self.renderer.render_redirect(root.redirect))

        rendered: dict[str, HomepageLoadResult] = {}
        for path in generate_static_paths(self.service):
            locale = path["params"]["lang"]
            try:
                result = self._build_locale(report, locale)
            except Exception as e:
                logger.error(f"Failed to build homepage for {locale}: {e}")
                report.errors.append(f"Homepage {locale}: {e}")
                continue
            if result is not None:
                rendered[locale] = result

        report.locales = list(rendered)
        self._write_seo(report, website, rendered, now)

        if report.errors and report.status == "complete":
            report.status = "partial"
        self._write_report(report)

        logger.info(
            f"Built {len(report.files)} files for {len(report.locales)} locales "
            f"in {self.output_dir} ({len(report.errors)} errors)"
        )
        return report

    def _build_locale(self, report: BuildReport, locale: str) -> HomepageLoadResult | None:
        """Write one locale's homepage and articles; None when it redirects away."""
        result = load_homepage(self.service, locale)

        if result.redirect:
            logger.info(f"Locale {locale} redirects to {result.redirect}")
            self._write(report, f"{locale}/index.html", "redirect", self.renderer.render_redirect(result.redirect), locale)
            return None

        if result.website_data is None:
            self._write(report, f"{locale}/index.html", "fallback", self.renderer.render_homepage(result), locale)
            return None

        html = self.renderer.render_homepage(result, requests=self.service.get_http_requests())
        self._write(report, f"{locale}/index.html", "homepage", html, locale)

        for article in result.articles:
            try:
                self._build_article(report, result, article)
            except Exception as e:
                logger.error(f"Failed to build article {article.slug} ({locale}): {e}")
                report.errors.append(f"Article {locale}/{article.slug}: {e}")
        return result

    def _build_article(self, report: BuildReport, homepage: HomepageLoadResult, article: Article) -> None:
        locale = homepage.active_locale
        page = ArticlePageResult(
            website_data=homepage.website_data,
            article=article,
            related_articles=pick_related_articles(article, homepage.articles),
            supported_locales=homepage.supported_locales,
            active_locale=locale,
        )
        url = build_localized_url(locale, ["articles", ":slug"], {"slug": article.slug})
        relative_path = f"{url.strip('/')}/index.html"
        html = self.renderer.render_article_page(page, requests=self.service.get_http_requests())
        self._write(report, relative_path, "article", html, locale)

    def _write_seo(
        self,
        report: BuildReport,
        website: Website | None,
        rendered: dict[str, HomepageLoadResult],
        now: datetime,
    ) -> None:
        """Write robots.txt, the sitemap index and one sitemap per locale."""
        base_url = report.base_url
        locales = site_locales(website) if website else DEFAULT_SITEMAP_LOCALES

        self._write(report, "robots.txt", "robots", render_robots_txt(base_url, fallback=website is None))
        self._write(report, "sitemap-index.xml", "sitemap_index", render_sitemap_index(base_url, locales, now))

        for locale in locales:
            result = rendered.get(locale)
            articles: list[Article] = result.articles if result else []
            tags: list[Tag] = result.tags if result else []
            self._write(
                report,
                f"sitemap-{locale}.xml",
                "sitemap",
                render_locale_sitemap(base_url, locale, articles, tags, now),
                locale,
            )

    def _write(
        self,
        report: BuildReport,
        relative_path: str,
        kind: str,
        content: str | bytes,
        locale: str | None = None,
    ) -> None:
        path = self.output_dir / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        report.files.append(BuildFile(path=relative_path, kind=kind, locale=locale))
        logger.debug(f"Wrote {path}")

    def _write_report(self, report: BuildReport) -> None:
        """Write the build report as JSON next to the site."""
        path = self.output_dir / REPORT_FILENAME
        path.write_text(report.model_dump_json(indent=2), encoding="utf-8")
        logger.debug(f"Wrote build report to {path}")
