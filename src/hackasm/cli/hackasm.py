"""
hackasm - Hack Assembler Command-Line Interface
===============================================

This module implements the command-line interface for the Hack assembler.

Usage Examples
--------------
Basic assembly (writes Max.hack next to the source):
    $ hackasm Max.asm

With output file:
    $ hackasm Max.asm -o build/Max.hack

Also write the labels and variables:
    $ hackasm Pong.asm -s Pong.sym

Verbose mode:
    $ hackasm -v Pong.asm
"""

import logging
from pathlib import Path
from typing import Optional

import click

from hackasm import __version__
from hackasm.assembler import Assembler
from hackasm.cli.errors import handle_cli_exception
from hackasm.config import AssemblerConfig


def validate_source(ctx: click.Context, param: click.Parameter, value: Path) -> Path:
    """Reject source files that do not carry the assembly suffix."""
    config: AssemblerConfig = ctx.ensure_object(AssemblerConfig)
    if not config.has_input_suffix(value):
        raise click.BadParameter(
            f"source file must have a '{config.input_suffix}' suffix",
            ctx=ctx,
            param=param,
        )
    return value


def setup_logging(config: AssemblerConfig, verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else config.level
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "source",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    callback=validate_source,
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (default: SOURCE with .hack suffix)",
)
@click.option(
    "-s", "--symbols",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write labels and variables to a symbol file",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="hackasm")
@click.pass_context
def main(
    ctx: click.Context,
    source: Path,
    output: Optional[Path],
    symbols: Optional[Path],
    verbose: bool,
) -> None:
    """
    Assemble Hack assembly into Hack machine code.

    SOURCE is the assembly file (.asm) to assemble. The output has one line
    of 16 binary digits per instruction.

    \b
    Examples:
        hackasm Max.asm              # Outputs Max.hack
        hackasm Max.asm -o out.hack  # Specify output file
    """
    config: AssemblerConfig = ctx.ensure_object(AssemblerConfig)
    setup_logging(config, verbose)

    asm = Assembler(config)
    output_file = output if output is not None else config.derive_output_path(source)

    try:
        if verbose:
            click.echo(f"Assembling {source}...")

        asm.assemble_file(source, output_file)

        if symbols:
            asm.write_symbols(symbols)
            if verbose:
                click.echo(f"Wrote symbols to {symbols}")

        if verbose:
            word_count = len(asm.get_words())
            click.echo(f"Wrote {word_count} instructions to {output_file}")

    except Exception as e:
        handle_cli_exception(e, verbose=verbose, error_type="Assembly")


def run() -> None:
    """Console-script entry point, with configuration read from the environment."""
    main(obj=AssemblerConfig.from_env())


if __name__ == "__main__":
    run()
