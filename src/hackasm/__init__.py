"""
hackasm - Assembler for the Hack Computer
=========================================

This package translates programs written in Hack assembly language into
the binary text format loaded by the Hack CPU emulator: one line of 16
``0``/``1`` characters per machine instruction.

Main Components
---------------
- **assembler**: Parser, symbol table, encoder and the two-pass Assembler
- **cpu**: Hack instruction encoding tables and memory-map constants
- **cli**: The ``hackasm`` command-line tool

Quick Start
-----------
Assemble a file:
    >>> from hackasm import Assembler
    >>> asm = Assembler()
    >>> asm.assemble_file("Max.asm")      # writes Max.hack
    PosixPath('Max.hack')

Or use the command-line tool:
    $ hackasm Max.asm
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from hackasm.assembler import Assembler, SymbolTable, assemble, assemble_file
from hackasm.config import AssemblerConfig
from hackasm.errors import (
    HackError,
    AssemblerError,
    AssemblySyntaxError,
    UnknownMnemonicError,
    DuplicateSymbolError,
    AddressRangeError,
)

__all__ = [
    "__version__",
    # Assembler
    "Assembler",
    "SymbolTable",
    "assemble",
    "assemble_file",
    # Configuration
    "AssemblerConfig",
    # Exception hierarchy
    "HackError",
    "AssemblerError",
    "AssemblySyntaxError",
    "UnknownMnemonicError",
    "DuplicateSymbolError",
    "AddressRangeError",
]
