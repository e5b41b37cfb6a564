"""Command-line interface for citemap.

Provides commands to check, round-trip, and convert citation documents.
"""

import importlib.metadata
import logging
import sys
from pathlib import Path
from typing import TextIO

import click

from citemap.errors import CodecError
from citemap.utils.logging import configure_logging

__all__ = ["cli"]

try:
    __version__ = importlib.metadata.version("citemap")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.1.0"  # Fallback for development

CSL_SUFFIXES = {".json"}
CFF_SUFFIXES = {".cff", ".yaml", ".yml"}


def _detect_format(path: Path, text: str) -> str:
    """Return ``"csl"`` or ``"cff"`` from the file suffix, else from content."""
    suffix = path.suffix.lower()
    if suffix in CSL_SUFFIXES:
        return "csl"
    if suffix in CFF_SUFFIXES:
        return "cff"
    return "csl" if text.lstrip().startswith("[") else "cff"


def _setup_logging(verbose: bool) -> None:
    configure_logging(level=logging.DEBUG if verbose else logging.WARNING, force=True)


@click.group()
@click.version_option(version=__version__, prog_name="citemap")
def cli() -> None:
    """Read, write and convert CITATION.cff and CSL-JSON documents.

    Use 'citemap COMMAND --help' for command-specific help.
    """


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)
def check(input_path: str, verbose: bool) -> None:
    """Decode INPUT_PATH and report what it contains.

    Format is detected from the suffix (.cff/.yaml/.yml or .json), falling
    back to the content.

    Examples
    --------
        citemap check CITATION.cff
        citemap check library.json
    """
    from citemap.api import load_cff, load_csl
    from citemap.parse.base import read_document_text

    _setup_logging(verbose)
    path = Path(input_path)

    try:
        text = read_document_text(path)
        if _detect_format(path, text) == "csl":
            items = load_csl(text)
            click.secho(f"✓ {path.name}: CSL-JSON document with {len(items)} items", fg="green")
        else:
            cff = load_cff(text)
            click.secho(
                f"✓ {path.name}: CFF {cff.cff_version} document with "
                f"{len(cff.authors)} authors and {len(cff.references)} references",
                fg="green",
            )
    except (CodecError, OSError) as e:
        click.secho(f"✗ {path.name}: {e}", fg="red", err=True)
        sys.exit(1)


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output file path (default: stdout)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)
def roundtrip(input_path: str, output: str | None, verbose: bool) -> None:
    """Decode INPUT_PATH and encode it again in the same format.

    Unknown fields are kept; empty fields are dropped.

    Examples
    --------
        citemap roundtrip CITATION.cff
        citemap roundtrip library.json -o normalized.json
    """
    from citemap.api import dump_cff, dump_csl, load_cff, load_csl
    from citemap.parse.base import read_document_text

    _setup_logging(verbose)
    path = Path(input_path)

    try:
        text = read_document_text(path)
        if _detect_format(path, text) == "csl":
            result = dump_csl(load_csl(text))
        else:
            result = dump_cff(load_cff(text))

        if output is None:
            click.echo(result, nl=False)
        else:
            output_path = Path(output)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(result, encoding="utf-8")
            click.secho(f"✓ Wrote {output}", fg="green", err=True)
    except (CodecError, OSError) as e:
        click.secho(f"✗ {path.name}: {e}", fg="red", err=True)
        sys.exit(1)


@cli.command()
@click.argument("input_file", type=click.File("r", encoding="utf-8"))
@click.option(
    "--insert",
    "insert_target",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    metavar="TARGET",
    help="Append converted references to the references of TARGET",
)
@click.option(
    "--replace",
    "replace_target",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    metavar="TARGET",
    help="Replace the references of TARGET with the converted references",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)
def csl2cff(
    input_file: TextIO,
    insert_target: str | None,
    replace_target: str | None,
    verbose: bool,
) -> None:
    """Convert the CSL-JSON bibliography INPUT_FILE to CFF references.

    INPUT_FILE may be - to read stdin. Without a target, the references are
    printed as a YAML list.

    Examples
    --------
        citemap csl2cff library.json
        citemap csl2cff library.json --insert CITATION.cff
        cat library.json | citemap csl2cff - --replace CITATION.cff
    """
    from citemap.api import csl_to_cff_references, dump_cff, load_csl, read_cff
    from citemap.convert import MergeMode, merge_references
    from citemap.write.cff_writer import format_references

    if insert_target and replace_target:
        raise click.UsageError("--insert and --replace are mutually exclusive")

    _setup_logging(verbose)

    try:
        references = csl_to_cff_references(load_csl(input_file.read()))
        if verbose:
            click.echo(f"Converted {len(references)} references", err=True)

        target = replace_target or insert_target
        if target is None:
            click.echo(format_references(references), nl=False)
            return

        mode = MergeMode.REPLACE if replace_target else MergeMode.INSERT
        cff = merge_references(read_cff(target), references, mode)
        Path(target).write_text(dump_cff(cff), encoding="utf-8")
        verb = "Replaced" if mode is MergeMode.REPLACE else "Inserted"
        click.secho(f"✓ {verb} {len(references)} references in {target}", fg="green")
    except (CodecError, OSError) as e:
        click.secho(f"✗ Error: {e}", fg="red", err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()
