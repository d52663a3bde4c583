"""
Hack Assembler
==============

This package translates Hack assembly language into Hack machine code: one
16-bit word per real instruction, written as a line of ``0``/``1``
characters.

Main Components
---------------
- **Assembler**: Main class that runs the two passes
- **Parser**: Reads instruction records from a text stream
- **SymbolTable**: Labels, variables and predefined symbols
- **encoder**: Pure functions producing bit fields and instruction words

Assembly Process
----------------
1. **Pass 1**: bind every ``(LABEL)`` to the index of the next real
   instruction.
2. **Pass 2**: resolve ``@symbol`` operands (numbers, labels, new variables
   from address 16 upwards) and emit encoded words in source order.

Example Usage
-------------
>>> from hackasm.assembler import assemble
>>> print(assemble("@2\\nD=A\\n"), end="")
0000000000000010
1110110000010000
"""

from hackasm.assembler.assembler import Assembler, assemble, assemble_file
from hackasm.assembler.parser import (
    Parser,
    Instruction,
    AddressInstruction,
    ComputeInstruction,
    LabelInstruction,
    parse_line,
    parse_source,
)
from hackasm.assembler.symbols import SymbolTable
from hackasm.assembler.encoder import (
    encode_dest,
    encode_comp,
    encode_jump,
    encode_compute_word,
    encode_address_word,
    decode_compute_word,
    format_word,
)

__all__ = [
    # Main class and functions
    "Assembler",
    "assemble",
    "assemble_file",
    # Parser
    "Parser",
    "Instruction",
    "AddressInstruction",
    "ComputeInstruction",
    "LabelInstruction",
    "parse_line",
    "parse_source",
    # Symbol table
    "SymbolTable",
    # Encoder
    "encode_dest",
    "encode_comp",
    "encode_jump",
    "encode_compute_word",
    "encode_address_word",
    "decode_compute_word",
    "format_word",
]
