"""Codewords CLI component."""
import click
from pydantic import ValidationError


@click.group(name="codewords")
@click.option("-v", "--verbose", is_flag=True, help="Log debug messages.")
def cli(verbose: bool):
    """Generate memorable <adjective>-<noun> codewords."""
    if verbose:
        from codewords import logging

        logging.configure("DEBUG")


@cli.command(name="generate")
@click.option(
    "-n", "--count", type=click.IntRange(min=0), default=1, show_default=True
)
@click.option("--seed", type=int, default=None, help="Seed for repeatable output.")
def generate(count: int, seed: int | None):
    """Print random codewords, one per line."""
    from codewords.generator import new_generator

    generator = new_generator(seed=seed)
    for codeword in generator.generate_many(count):
        click.echo(codeword)


@cli.command(name="build")
@click.option("--url", default=None, help="Where to download WordNet from.")
@click.option(
    "--cache-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory searched for a local copy of the archive.",
)
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory the word list modules are written to.",
)
@click.option("--min-len", type=int, default=None, help="Shortest word kept.")
@click.option("--max-len", type=int, default=None, help="Longest word kept.")
@click.option(
    "--timeout", type=float, default=None, help="Download timeout in seconds."
)
@click.option(
    "--save/--no-save",
    default=False,
    show_default=True,
    help="Keep the downloaded archive in the cache directory.",
)
def build(url, cache_dir, output_dir, min_len, max_len, timeout, save):
    """Rebuild the word lists from the WordNet database."""
    from codewords import logging
    from codewords.config import settings
    from codewords.dictionary import BuildOptions, build_dictionary
    from codewords.errors import CodewordsError
    from codewords.sentry import setup_sentry

    setup_sentry(settings)
    try:
        options = BuildOptions.from_settings(
            settings,
            url=url,
            cache_dir=cache_dir,
            output_dir=output_dir,
            min_len=min_len,
            max_len=max_len,
            timeout=timeout,
            save=save,
        )
    except ValidationError as e:
        raise click.UsageError(str(e)) from e

    try:
        result = build_dictionary(options)
    except (CodewordsError, OSError) as e:
        logging.error(f"Dictionary build failed: {e}")
        raise click.ClickException(str(e)) from e

    for name, path in result.paths.items():
        click.echo(f"{name}: {result.kept_counts[name]} words -> {path}")
    click.echo(f"{result.combinations} possible codewords")
