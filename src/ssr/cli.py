"""Command-line entry point: recover secrets from share-set JSON files."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from ssr.errors import ReconstructionError, ShareFileError
from ssr.interpolation import DivisionMode
from ssr.loader import dump_results, load_share_set
from ssr.recovery import recover_all
from ssr.report import BANNER, format_case, format_summary

logger = logging.getLogger(__name__)

DEFAULT_PATTERN = "testcase*.json"


def _choose_files(directory: Path) -> list[Path]:
    """Numbered menu over the share files found in ``directory``."""
    candidates = sorted(directory.glob(DEFAULT_PATTERN))
    if not candidates:
        raise click.UsageError(
            f"No share files given and none matching {DEFAULT_PATTERN} in {directory}"
        )
    if len(candidates) == 1:
        return candidates

    click.echo("\nSelect which test case to run:")
    for i, path in enumerate(candidates, 1):
        click.echo(f"{i}. {path.stem}")
    everything = len(candidates) + 1
    click.echo(f"{everything}. All test cases")

    choice = click.prompt(
        "\nEnter your choice", type=click.IntRange(1, everything)
    )
    if choice == everything:
        return candidates
    return [candidates[choice - 1]]


@click.command(context_settings={"auto_envvar_prefix": "SSR"})
@click.argument(
    "files",
    nargs=-1,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default="output.json",
    show_default=True,
    help="Where to write the recovered secrets.",
)
@click.option("--no-output", is_flag=True, help="Do not write a results file.")
@click.option(
    "--mode",
    type=click.Choice([m.value for m in DivisionMode]),
    default=DivisionMode.EXACT.value,
    show_default=True,
    help="exact: sum terms as rationals. termwise: truncate each term (legacy).",
)
@click.option("-q", "--quiet", is_flag=True, help="Only print the summary.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(
    files: tuple[Path, ...],
    output: Path,
    no_output: bool,
    mode: str,
    quiet: bool,
    verbose: bool,
) -> None:
    """Recover Shamir secrets from FILES (share-set JSON documents).

    Only shares numbered 1..n are read from each file; higher-numbered
    shares are ignored. The first k of them are interpolated.

    With no FILES, offers a menu of testcase*.json files in the current
    directory.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not quiet:
        click.echo("\n".join([""] + BANNER))
    paths = list(files) if files else _choose_files(Path.cwd())
    logger.debug("processing %d share file(s) in %s mode", len(paths), mode)

    try:
        share_sets = [load_share_set(p) for p in paths]
        results = recover_all(share_sets, mode=DivisionMode(mode))
    except (ReconstructionError, ShareFileError) as exc:
        raise click.ClickException(str(exc)) from exc

    if not quiet:
        for result in results:
            click.echo("\n".join(format_case(result)))
    click.echo("\n".join(format_summary(results)))

    if not no_output:
        dump_results(results, output)
        click.echo(f"\nResults saved to {output}")
