"""Command-line interface for travel-guide."""

import argparse
import logging
import sys
from pathlib import Path

from travel_guide.builder import SiteBuilder
from travel_guide.cms import CmsService
from travel_guide.config import SiteConfig
from travel_guide.pages import site_locales
from travel_guide.rendering import PageRenderer

DEFAULT_OUTPUT_DIR = Path("./dist")


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def build_site(args: argparse.Namespace) -> int:
    """Execute the build command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    config = SiteConfig.from_env()
    if args.site_url:
        config = config.model_copy(update={"site_url": args.site_url})

    output_dir = args.output
    output_dir.mkdir(parents=True, exist_ok=True)

    try:
        with CmsService(config) as service:
            builder = SiteBuilder(service, PageRenderer(config), output_dir, site_url=config.site_url)
            report = builder.build()

        logger.info(f"Built site: {output_dir}")
        logger.info(f"  Locales: {', '.join(report.locales) or 'none'}")
        logger.info(f"  Files: {len(report.files)}")
        logger.info(f"  Status: {report.status}")

        if report.errors:
            logger.warning(f"  Errors: {len(report.errors)}")
            for error in report.errors:
                logger.warning(f"    - {error}")

        return 0 if report.status == "complete" else 1

    except Exception as e:
        logger.error(f"Failed to build site: {e}")
        return 1


def check_cms(args: argparse.Namespace) -> int:
    """Execute the check command.

    Fetches the configured website and prints a short summary.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 when the website loads, 1 otherwise)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    config = SiteConfig.from_env()
    if not config.cms_url or not config.website_api_name:
        logger.error("CMS_URL and WEBSITE_API_NAME must be set")
        return 1

    with CmsService(config) as service:
        website = service.get_website_data()
        if website is None:
            logger.error(f"Website {config.website_api_name!r} is not available from {config.cms_url}")
            return 1

        locales = site_locales(website)
        articles = service.get_articles(website.locale)
        tags = service.get_tags(website.locale)

    print(f"Website: {website.name} ({website.api_name})")
    print(f"  Default locale: {website.default_locale}")
    print(f"  Locales: {', '.join(locales)}")
    print(f"  Articles ({website.locale}): {len(articles)}")
    print(f"  Tags ({website.locale}): {len(tags)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="travel-guide",
        description="Build a multi-locale travel guide site from a headless CMS",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    build_parser = subparsers.add_parser(
        "build",
        help="Render the site to static files",
        description="Render every locale homepage, article page, robots.txt and sitemap to a directory.",
    )
    build_parser.add_argument(
        "--output",
        type=Path,
        default=DEFAULT_OUTPUT_DIR,
        help=f"Output directory for the site (default: {DEFAULT_OUTPUT_DIR})",
    )
    build_parser.add_argument(
        "--site-url",
        type=str,
        default=None,
        help="Public base URL used when the CMS website has no baseUrl (default: SITE_URL)",
    )
    build_parser.set_defaults(func=build_site)

    check_parser = subparsers.add_parser(
        "check",
        help="Check that the configured website loads from the CMS",
        description="Fetch the configured website and print a summary of its locales, articles and tags.",
    )
    check_parser.set_defaults(func=check_cms)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
