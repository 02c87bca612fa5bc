# === FILE: site_indexer/cli.py ===
#!/usr/bin/env python3
"""
Command-line entry point for SiteIndexer.

Commands:
  crawl URL         Crawl every page of URL's domain and write Markdown output
  generate DOMAIN   Rebuild llms-full.txt from output/DOMAIN without network access
  config            Show the effective configuration

Common options:
  --config PATH       YAML/JSON config file (default: configs/default.yaml if present)
  --log-level LEVEL   Logging level (DEBUG, INFO, ...)
  --log-file PATH     Log file (stdout only when omitted)
  --log-format FORMAT Logging format string
  --log-stderr        Console logs go to stderr

crawl options:
  --output-dir DIR    Root output directory (override output_dir)
  --concurrency INT   Pages fetched at once (override concurrency)

Also:
  --version, -v       Show the SiteIndexer version

Example:
  site-indexer crawl https://docs.example.com/guide/ --concurrency 8
"""
import asyncio
import sys
from pathlib import Path

import click

from site_indexer import __version__
from site_indexer.config import load_config
from site_indexer.engine import rebuild_corpus, start_crawl
from site_indexer.logger import init_logging

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg="red", err=True)
    sys.exit(1)


def _override(cfg, **changes):
    updates = {key: value for key, value in changes.items() if value is not None}
    return cfg.model_copy(update=updates) if updates else cfg


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, "--version", "-v", message="SiteIndexer, version %(version)s")
@click.option(
    "--config", "-c", "config_path",
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to a YAML or JSON config file.",
)
@click.option(
    "--log-level", "log_level",
    default="INFO", show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    help="Logging level",
)
@click.option(
    "--log-file", "log_file",
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help="Log file path (stdout only when omitted)",
)
@click.option(
    "--log-format", "log_format",
    default="%(asctime)s %(levelname)s %(message)s",
    show_default=True,
    help="Logging format string",
)
@click.option(
    "--log-stderr", "log_stderr",
    is_flag=True,
    help="Write console logs to stderr instead of stdout",
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format, log_stderr):
    """Index a website's content as Markdown."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format,
        stream=sys.stderr if log_stderr else None,
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f"Failed to load configuration: {e}")
    ctx.ensure_object(dict)
    ctx.obj["config"] = cfg


@cli.command("crawl", context_settings=CONTEXT_SETTINGS)
@click.argument("url")
@click.option(
    "--output-dir", "-o", "output_dir",
    default=None,
    type=click.Path(file_okay=False, path_type=Path),
    help="Root output directory",
)
@click.option(
    "--concurrency", "-n", "concurrency",
    type=click.IntRange(min=1),
    default=None,
    help="Pages fetched concurrently",
)
@click.pass_context
def crawl(ctx, url, output_dir, concurrency):
    """Crawl a website and generate markdown files.

    Crawling starts at URL itself, not at the site root: for
    https://docs.example.com/guide/ the first page fetched is /guide/, and
    other pages of the domain are reached only through links.
    """
    cfg = _override(ctx.obj["config"], output_dir=output_dir, concurrency=concurrency)
    try:
        report = asyncio.run(start_crawl(url, cfg))
    except Exception as e:
        print_error(f"Crawl failed: {e}")

    if report.failures_path:
        click.secho(f"Failed URLs saved to: {report.failures_path}", fg="yellow")
    click.secho(
        f"Indexing complete! Processed {report.visited} pages "
        f"({report.successful} successful, {report.failed} failed)",
        fg="green",
    )
    click.secho(f"Full content saved to: {report.corpus_path}", fg="cyan")


@cli.command("generate", context_settings=CONTEXT_SETTINGS)
@click.argument("domain")
@click.option(
    "--output-dir", "-o", "output_dir",
    default=None,
    type=click.Path(file_okay=False, path_type=Path),
    help="Root output directory",
)
@click.pass_context
def generate(ctx, domain, output_dir):
    """Generate llms-full.txt from existing markdown files."""
    cfg = _override(ctx.obj["config"], output_dir=output_dir)
    try:
        path = rebuild_corpus(domain, cfg)
    except Exception as e:
        print_error(f"Error generating llms-full.txt: {e}")
    click.secho(f"Successfully generated {path}", fg="green")


@cli.command("config", context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Show the current configuration as JSON."""
    cfg = ctx.obj["config"]
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
