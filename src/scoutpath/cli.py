"""Command-line interface for scoutpath."""
import sys
import logging
from typing import List, Optional

import click
from rich.markup import escape
from .core.errors import PathError
from .core.models import CanonicalPath, Config
from .core.platform import Platform
from .core.report import PathReport
from .core.scanner import DirectoryScanner
from .utils.console import ConsoleManager, THEMES


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbose flag."""
    level = logging.DEBUG if verbose else logging.WARNING
    format_string = '[%(levelname)s] %(name)s: %(message)s' if verbose else '[%(levelname)s] %(message)s'

    logging.basicConfig(
        level=level,
        format=format_string,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


def _resolve_config(platform: Optional[str], root: Optional[str]) -> Config:
    config = Config()
    if platform:
        config.platform = Platform.parse(platform)
    if root is not None:
        config.root_dir = root
    return config


platform_option = click.option(
    '--platform', '-p', type=click.Choice([p.value for p in Platform], case_sensitive=False),
    help='Rule set to apply (default: SCOUTPATH_PLATFORM or the host platform)')
theme_option = click.option(
    '--theme', '-t', type=click.Choice(sorted(THEMES)), default='manhattan', help='Terminal color theme')
verbose_option = click.option('--verbose', '-v', is_flag=True, help='Enable debug logging and tracebacks')


@click.group()
@click.version_option(package_name='scoutpath')
def main() -> None:
    """
    Validate and decompose absolute paths.

    Examples:

        scoutpath check C:/projects/game/assets/hero.png --root game --platform windows

        scoutpath check /srv/site/static/app.js --root site --json

        scoutpath scan ./assets --root assets --progress
    """


@main.command()
@click.argument('paths', nargs=-1, required=True)
@click.option('--root', '-r', help='Root directory name anchoring relative paths (default: SCOUTPATH_ROOT_DIR)')
@platform_option
@click.option('--json', 'as_json', is_flag=True, help='Print one JSON report per line')
@click.option('--exists', 'check_exists', is_flag=True, help='Also report whether each path exists')
@theme_option
@verbose_option
def check(paths: List[str], root: Optional[str], platform: Optional[str], as_json: bool,
          check_exists: bool, theme: str, verbose: bool) -> None:
    """Check one or more absolute PATHS."""
    setup_logging(verbose)
    console = ConsoleManager(theme=theme)

    try:
        config = _resolve_config(platform, root)
        reports = []
        for raw in paths:
            try:
                path = CanonicalPath.create(raw, config.root_dir, config.platform)
                reports.append(PathReport.from_path(raw, path, check_exists=check_exists))
            except PathError as e:
                reports.append(PathReport.from_error(raw, config.platform, e))

        if as_json:
            for report in reports:
                click.echo(report.model_dump_json())
        else:
            console.print_reports(reports)

        rejected = [r for r in reports if not r.ok]
        if rejected:
            if not as_json:
                console.print_error(f"{len(rejected)} of {len(reports)} paths rejected")
            sys.exit(1)
        if not as_json:
            console.print_success(f"{len(reports)} paths accepted ({config.platform.value} rules)")

    except Exception as e:
        console.print_error(f"CRITICAL ERROR: {str(e)}")
        if verbose:
            console.print_exception()
        sys.exit(1)


@main.command()
@click.argument('directory', type=click.Path(exists=True, file_okay=False))
@click.option('--root', '-r', help='Root directory name anchoring relative paths (default: the scanned folder name)')
@platform_option
@click.option('--json', 'as_json', is_flag=True, help='Print one JSON report per line')
@click.option('--progress', is_flag=True, help='Show a progress bar')
@click.option('--max-files', type=int, help='Maximum number of files to scan (default: 5000)')
@theme_option
@verbose_option
def scan(directory: str, root: Optional[str], platform: Optional[str], as_json: bool,
         progress: bool, max_files: Optional[int], theme: str, verbose: bool) -> None:
    """Check every file below DIRECTORY."""
    setup_logging(verbose)
    console = ConsoleManager(theme=theme)

    try:
        config = _resolve_config(platform, root)
        if max_files is not None:
            config.max_files = max_files

        result = DirectoryScanner(config).scan(directory, show_progress=progress)

        if as_json:
            for raw, path in result.accepted:
                click.echo(PathReport.from_path(raw, path).model_dump_json())
            for raw, error in result.rejected:
                click.echo(PathReport.from_error(raw, config.platform, error).model_dump_json())
        else:
            console.print(f"[info]ROOT:[/info] [path]{escape(result.root_dir)}[/path]")
            console.print(f"[info]FILES SCANNED:[/info] [number]{result.total_files}[/number]")
            console.print(f"[info]ACCEPTED:[/info] [number]{len(result.paths)}[/number]")
            for raw, error in result.rejected:
                console.print_warning(f"{raw}: [{error.kind.value}] {error.message}")

        if result.has_errors():
            if not as_json:
                console.print_error(f"{len(result.rejected)} paths rejected")
            sys.exit(1)
        if not as_json:
            console.print_success("All paths are clean")

    except Exception as e:
        console.print_error(f"CRITICAL ERROR: {str(e)}")
        if verbose:
            console.print_exception()
        sys.exit(1)


if __name__ == '__main__':
    main()
