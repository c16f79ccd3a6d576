"""
hackdisasm - Hack Disassembler Command-Line Interface
=====================================================

This module implements the command-line interface for the Hack
disassembler. It reads a .hack file and prints the equivalent assembly.

Usage Examples
--------------
Disassemble to stdout:
    $ hackdisasm Max.hack

Output to file (can be fed back to hackasm):
    $ hackdisasm Max.hack -o Max.dis.asm

With ROM addresses and raw words:
    $ hackdisasm Max.hack --addresses
"""

import sys
from pathlib import Path
from typing import Optional

import click

from hack_asm import __version__
from hack_asm.cli.errors import ExitCode, handle_cli_exception
from hack_asm.disassembler import HackDisassembler


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (default: stdout)",
)
@click.option(
    "--addresses/--no-addresses",
    default=False,
    help="Prefix each line with its ROM address and raw word",
)
@click.option(
    "-c", "--count",
    type=int,
    default=None,
    help="Maximum number of instructions to disassemble (default: all)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="hackdisasm")
def main(
    input_file: Path,
    output: Optional[Path],
    addresses: bool,
    count: Optional[int],
    verbose: bool,
) -> None:
    """
    Disassemble Hack machine code.

    INPUT_FILE is a .hack file with one 16-bit binary word per line.

    Without --addresses the output is plain assembly that hackasm accepts.

    Examples:

        # Print the program
        hackdisasm Max.hack

        # First 10 instructions with addresses
        hackdisasm Max.hack --addresses --count 10
    """
    try:
        lines = input_file.read_text(encoding="utf-8").splitlines()
        instructions = HackDisassembler().disassemble(lines, count=count)
    except Exception as e:
        handle_cli_exception(e, verbose=verbose, error_type="Disassembly")

    if verbose:
        click.echo(f"Input file: {input_file} ({len(lines)} lines)", err=True)

    if addresses:
        output_lines = [str(instr) for instr in instructions]
    else:
        output_lines = [instr.text for instr in instructions]
    result = "".join(f"{line}\n" for line in output_lines)

    if output:
        try:
            output.write_text(result, encoding="utf-8")
        except OSError as e:
            click.echo(f"Error writing {output}: {e}", err=True)
            sys.exit(ExitCode.INVALID_ARGS)
        if verbose:
            click.echo(f"Output written to: {output}", err=True)
    else:
        click.echo(result, nl=False)

    if verbose:
        click.echo(f"Instructions disassembled: {len(instructions)}", err=True)


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    main()
