"""chaincss CLI entry point."""

from __future__ import annotations

import logging
import sys

import click

from chaincss import __version__
from chaincss.config import DEFAULT_BROWSERS, CompilerConfig, PrefixConfig, PrefixerMode
from chaincss.errors import ChainCSSError
from chaincss.pipeline import Pipeline
from chaincss.watch import Watcher


def _browsers(value: str | None) -> tuple[str, ...]:
    if not value:
        return DEFAULT_BROWSERS
    return tuple(q.strip() for q in value.split(",") if q.strip())


@click.command()
@click.version_option(version=__version__, prog_name="chaincss")
@click.argument("input_file", type=click.Path(dir_okay=False))
@click.argument("output_file", type=click.Path(dir_okay=False))
@click.option("--watch", is_flag=True, help="Recompile whenever the input changes")
@click.option("--no-prefix", is_flag=True, help="Disable vendor prefixing")
@click.option(
    "--prefixer-mode",
    type=click.Choice([m.value for m in PrefixerMode]),
    default=PrefixerMode.AUTO.value,
    show_default=True,
    help="Prefixing strategy",
)
@click.option("--browsers", default=None, help="Comma-separated browserslist queries")
@click.option("--no-source-map", is_flag=True, help="Do not generate a source map")
@click.option("--source-map-inline", is_flag=True, help="Embed the source map in the CSS")
@click.option(
    "--caniuse-data",
    type=click.Path(dir_okay=False),
    default=None,
    help="caniuse JSON data for lightweight prefixing",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output")
def cli(
    input_file: str,
    output_file: str,
    watch: bool,
    no_prefix: bool,
    prefixer_mode: str,
    browsers: str | None,
    no_source_map: bool,
    source_map_inline: bool,
    caniuse_data: str | None,
    verbose: bool,
) -> None:
    """Compile a .jcss INPUT_FILE into plain CSS at OUTPUT_FILE."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    config = CompilerConfig(
        prefix=PrefixConfig(
            enabled=not no_prefix,
            browsers=_browsers(browsers),
            mode=PrefixerMode(prefixer_mode),
            source_map=not no_source_map,
            source_map_inline=source_map_inline,
            caniuse_path=caniuse_data,
        )
    )
    pipeline = Pipeline(config)

    try:
        pipeline.run(input_file, output_file)
    except ChainCSSError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(f"Compiled {input_file} -> {output_file}")

    if not watch:
        return
    watcher = Watcher(input_file, output_file, pipeline, interval=config.watch_interval)
    watcher.start()
    try:
        watcher.wait()
    except KeyboardInterrupt:
        click.echo("Stopped watching.")
    finally:
        watcher.stop(timeout=5)
