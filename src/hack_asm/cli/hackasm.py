"""
hackasm - Hack Assembler Command-Line Interface
===============================================

This module implements the command-line interface for the Hack assembler.

Usage Examples
--------------
Basic assembly (writes Max.hack next to Max.asm):
    $ hackasm Max.asm

With output file:
    $ hackasm Max.asm -o build/Max.hack

Generate symbol and listing files:
    $ hackasm Max.asm -s Max.sym -l Max.lst

Verbose mode:
    $ hackasm -v Max.asm

Exit Codes
----------
0 - Success
1 - Assembly error (malformed source line)
2 - Invalid arguments, missing or unreadable/unwritable file
3 - Internal error
"""

import logging
from pathlib import Path
from typing import Optional

import click

from hack_asm import __version__
from hack_asm.assembler import Assembler
from hack_asm.cli.errors import handle_cli_exception

logger = logging.getLogger(__name__)

SOURCE_SUFFIX = ".asm"
OUTPUT_SUFFIX = ".hack"


def _validate_source(ctx: click.Context, param: click.Parameter, value: Path) -> Path:
    if value.suffix != SOURCE_SUFFIX:
        raise click.BadParameter(f"'{value}' does not end in {SOURCE_SUFFIX}")
    return value


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    callback=_validate_source,
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output .hack file (default: input with .hack suffix)",
)
@click.option(
    "-s", "--symbols",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Generate symbol file (labels and variables)",
)
@click.option(
    "-l", "--listing",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Generate listing file",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="hackasm")
def main(
    input_file: Path,
    output: Optional[Path],
    symbols: Optional[Path],
    listing: Optional[Path],
    verbose: bool,
) -> None:
    """
    Assemble Hack assembly source into Hack machine code.

    INPUT_FILE is the assembly source file (.asm) to assemble.

    The output is a text file with one 16-character binary word per
    instruction. Nothing is written if the source contains an error.

    \b
    Examples:
        hackasm Max.asm              # Outputs Max.hack
        hackasm Max.asm -o out.hack  # Specify output file
        hackasm Max.asm -s Max.sym   # Also write the symbol table
    """
    setup_logging(verbose)
    output_file = output if output is not None else input_file.with_suffix(OUTPUT_SUFFIX)
    logger.debug(f"Assembling {input_file} -> {output_file}")

    asm = Assembler(verbose=verbose)

    try:
        words = asm.assemble_file(input_file)
        asm.write_hack(output_file)

        if listing:
            asm.write_listing(listing)

        if symbols:
            asm.write_symbols(symbols)

        if verbose:
            table = asm.get_symbol_table()
            click.echo(
                f"Assembly complete: {len(words)} words, "
                f"{len(table.labels())} labels, {len(table.variables())} variables"
            )

    except Exception as e:
        handle_cli_exception(e, verbose=verbose, error_type="Assembly")


if __name__ == "__main__":
    main()
