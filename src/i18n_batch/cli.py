"""CLI entry point for the batch translator."""

from pathlib import Path
from typing import Optional

import click

from . import __version__
from .config import LANGUAGE_NAMES, TranslationConfig
from .core import InvalidInputError, TranslationService
from .lines import LineKind, LineSplitter
from .translation import LineProgress, PassResult, PassStatus


@click.group()
@click.version_option(version=__version__)
def cli():
    """Translate plain-text files line by line through a web translation UI."""
    pass


@cli.command(context_settings={"ignore_unknown_options": True})
@click.argument('file', required=False, type=click.Path(path_type=Path))
@click.argument('extra', nargs=-1, type=click.UNPROCESSED)
@click.option('--languages', '-l', default='es', help='Comma-separated target language codes')
@click.option('--all-languages', is_flag=True, help='Translate into every supported language')
@click.option('--output-dir', '-o', default='Results', type=click.Path(path_type=Path), help='Directory for <code>.txt output files')
@click.option('--browser', type=click.Choice(['firefox', 'chrome']), default='firefox', help='Browser to drive')
@click.option('--headless', is_flag=True, help='Run the browser without a window')
@click.option('--lowercase', is_flag=True, help='Lower-case each segment before sending it')
@click.option('--settle', default=1.0, type=float, help='Seconds to wait before reading a result')
@click.option('--timeout', default=15.0, type=float, help='Seconds to wait for a result')
@click.option('--parallel', default=0, type=int, help='Run this many languages at once, each in its own browser')
@click.option('--skip-check', is_flag=True, help='Do not check that the translation page is reachable first')
@click.option('--verbose', '-v', is_flag=True, help='Verbose output')
def translate(
    file: Optional[Path],
    extra: tuple[str, ...],
    languages: str,
    all_languages: bool,
    output_dir: Path,
    browser: str,
    headless: bool,
    lowercase: bool,
    settle: float,
    timeout: float,
    parallel: int,
    skip_check: bool,
    verbose: bool
):
    """Translate every line of FILE into the target languages.

    FILE is a plain text (.txt) file; any further arguments are ignored.
    Lines containing '#' are translated in separate segments and joined
    back with '#'.
    """
    if all_languages:
        target_langs = list(LANGUAGE_NAMES)
    else:
        target_langs = [lang.strip() for lang in languages.split(',') if lang.strip()]

    config = TranslationConfig(
        target_languages=target_langs,
        output_dir=output_dir,
        browser=browser,
        headless=headless,
        lowercase_input=lowercase,
        settle_seconds=settle,
        response_timeout=timeout,
        parallel_languages=parallel,
        verbose=verbose
    )

    service = TranslationService(config=config)

    try:
        source_file = service.validate_input(file)
    except InvalidInputError as e:
        click.secho(f"Error: {e}", fg='red', err=True)
        raise SystemExit(2)

    if config.verbose and extra:
        click.echo(f"Ignoring extra arguments: {' '.join(extra)}")

    try:
        if not skip_check:
            ready, message = service.is_ready()
            if not ready:
                click.secho(f"Error: {message}", fg='red', err=True)
                raise SystemExit(1)

        click.echo(f"Translating {source_file}")
        click.echo(
            "Target languages: "
            + ", ".join(f"{config.get_language_name(lang)} ({lang})" for lang in target_langs)
        )
        click.echo()

        report = service.translate_file(
            source_file,
            progress_callback=_echo_line(config.verbose),
            on_pass_complete=_echo_pass(config)
        )
    except Exception as e:
        click.secho(f"The program crashed. Sorry. {e}", fg='red', err=True)
        raise SystemExit(1)

    result = report.batch_result
    click.echo()
    click.echo(
        f"Translation complete ({len(report.languages)} languages): "
        f"{result.completed} completed, "
        f"{result.skipped} skipped, "
        f"{result.failed} failed"
    )

    if report.unsupported_languages:
        click.secho(
            f"Unsupported language codes: {', '.join(report.unsupported_languages)} "
            f"(run 'i18n-batch languages' for the supported list)",
            fg='yellow',
            err=True
        )

    if report.files_written:
        click.echo("\nFiles written:")
        for path in report.files_written:
            click.secho(f"  {path}", fg='green')


def _echo_line(verbose: bool):
    def progress_callback(progress: LineProgress):
        if verbose:
            click.echo(
                f"  [{progress.language} {progress.line_number}/{progress.total_lines}] "
                f"{progress.source_text} --> {progress.translated_text}"
            )
        else:
            click.echo(f"{progress.source_text} --> {progress.translated_text}")
    return progress_callback


def _echo_pass(config: TranslationConfig):
    def on_pass_complete(result: PassResult):
        name = config.get_language_name(result.language)
        if result.status == PassStatus.COMPLETED:
            click.secho(
                f"[{result.language}] {name}: {result.lines_written} lines -> "
                f"{result.output_path} ({result.elapsed_formatted})",
                fg='green'
            )
        elif result.status == PassStatus.SKIPPED:
            click.secho(f"[{result.language}] skipped: {result.error}", fg='yellow', err=True)
        else:
            click.secho(f"[{result.language}] {name} failed: {result.error}", fg='red', err=True)
    return on_pass_complete


@cli.command()
@click.argument('file', type=click.Path(exists=True, path_type=Path))
@click.option('--delimiter', '-d', default='#', help='Segment delimiter')
def split(file: Path, delimiter: str):
    """Show how each line of FILE is split into segments.

    FILE is the path to the plain text file to analyze.
    """
    splitter = LineSplitter(delimiter)
    lines = splitter.read_file(file)

    if not lines:
        click.secho("No lines found.", fg='yellow')
        return

    click.echo(f"Lines ({len(lines)} total):\n")

    for number, line in enumerate(lines, 1):
        record = splitter.classify(line)
        if record.is_empty:
            click.secho(f"{number:>4}  (empty)", fg='cyan')
        elif record.kind == LineKind.SIMPLE:
            click.echo(f"{number:>4}  {record.first}")
        else:
            color = 'green' if record.kind == LineKind.PAIRED else 'yellow'
            parts = " | ".join(f'"{s}"' for s in record.segments)
            click.secho(f"{number:>4}  {record.kind.value}: {parts}", fg=color)


@cli.command()
def languages():
    """List the supported target language codes."""
    click.echo(f"Supported languages ({len(LANGUAGE_NAMES)} total):\n")
    for code, name in LANGUAGE_NAMES.items():
        click.echo(f"  {code:<6} {name}")


@cli.command()
def check():
    """Check if the translation page is reachable."""
    config = TranslationConfig()
    service = TranslationService(config=config)

    ready, message = service.is_ready()

    if ready:
        click.secho("Translation page is reachable!", fg='green')
        click.echo(f"  URL: {config.provider_url}")
        click.echo(f"  Browser: {config.browser}")
    else:
        click.secho(f"Error: {message}", fg='red')
        click.echo("\nTo fix this:")
        click.echo("  1. Check your network connection")
        click.echo(f"  2. Open {config.provider_url} in a browser")
        raise SystemExit(1)


if __name__ == '__main__':
    cli()
