"""
Hack Assembler - Main Interface
===============================

This module provides the main Assembler class, which drives the parser,
symbol table and encoder to turn Hack assembly into ``.hack`` machine code.

Assembly Process
----------------
Pass 1 (Label Resolution)
-------------------------
- Walk every instruction with a program counter starting at -1
- Address and compute instructions advance the counter
- Each label is bound to the index of the next real instruction

Pass 2 (Code Generation)
------------------------
- Resolve address symbols: decimal literal, known symbol, or new variable
- New variables are bound to RAM addresses 16, 17, 18, ... in first-use order
- Encode every real instruction and write it as 16 binary digits per line

Between the passes a seekable input stream is rewound to where the run
started reading it. A stream that
cannot seek is read into a list once and both passes walk the list.

Example Usage
-------------
>>> from hackasm.assembler import Assembler
>>> asm = Assembler()
>>> print(asm.assemble_string('''
... (LOOP)
...     @LOOP
...     0;JMP
... '''), end="")
0000000000000000
1110101010000111
"""

import io
import logging
from pathlib import Path
from typing import Iterable, Optional, TextIO

from hackasm.assembler.encoder import (
    encode_address_word,
    encode_compute_word,
    format_word,
)
from hackasm.assembler.parser import (
    AddressInstruction,
    ComputeInstruction,
    Instruction,
    LabelInstruction,
    Parser,
)
from hackasm.assembler.symbols import SymbolTable
from hackasm.config import AssemblerConfig
from hackasm.cpu import FIRST_VARIABLE_ADDRESS


logger = logging.getLogger(__name__)


class Assembler:
    """
    Two-pass Hack assembler.

    Each call to one of the ``assemble_*`` methods is a complete, independent
    run with its own symbol table. The results of the most recent run stay
    available through :meth:`get_symbols` and :meth:`get_words`.

    Attributes:
        config: File suffix and logging settings
    """

    def __init__(self, config: Optional[AssemblerConfig] = None):
        """
        Initialize the assembler.

        Args:
            config: File handling settings. Defaults to AssemblerConfig().
        """
        self.config = config or AssemblerConfig()
        self._symbols = SymbolTable()
        self._words: list[int] = []
        self._next_variable = FIRST_VARIABLE_ADDRESS

    # =========================================================================
    # Assembly Methods
    # =========================================================================

    def assemble_stream(self, input_stream: TextIO, output_stream: TextIO) -> int:
        """
        Assemble from one text stream into another.

        The streams are neither opened nor closed here. A seekable input is
        rewound to the position it was at when the run began.

        Args:
            input_stream: Readable stream of Hack assembly
            output_stream: Writable stream for the binary text

        Returns:
            Number of instruction words written

        Raises:
            AssemblerError: If the source violates the instruction format
        """
        self._symbols = SymbolTable()
        self._words = []
        self._next_variable = FIRST_VARIABLE_ADDRESS

        parser = Parser(input_stream)
        instructions: Iterable[Instruction]

        if input_stream.seekable():
            self._pass1(parser)
            parser.rewind()
            instructions = parser
        else:
            instructions = list(parser)
            self._pass1(instructions)

        self._pass2(instructions, output_stream)
        return len(self._words)

    def assemble_string(self, source: str) -> str:
        """
        Assemble source code held in a string.

        Args:
            source: Hack assembly source

        Returns:
            Machine code, one 16-digit line per instruction
        """
        output = io.StringIO()
        self.assemble_stream(io.StringIO(source), output)
        return output.getvalue()

    def assemble_file(
        self,
        filepath: str | Path,
        output_path: str | Path | None = None,
    ) -> Path:
        """
        Assemble a source file into a ``.hack`` file.

        Args:
            filepath: Path to the assembly source
            output_path: Where to write machine code. Defaults to the source
                         path with its suffix replaced by the output suffix.

        Returns:
            Path of the file written

        Raises:
            AssemblerError: If assembly fails
            FileNotFoundError: If the source file does not exist
        """
        filepath = Path(filepath)
        if output_path is None:
            output_path = self.config.derive_output_path(filepath)
        output_path = Path(output_path)

        logger.info(f"Assembling {filepath} -> {output_path}")

        buffer = io.StringIO()
        with open(filepath, "r", encoding="utf-8") as source:
            self.assemble_stream(source, buffer)

        # Only reached on success, so a failed run leaves no partial output
        with open(output_path, "w", encoding="utf-8", newline="\n") as target:
            target.write(buffer.getvalue())

        return output_path

    # =========================================================================
    # Passes
    # =========================================================================

    def _pass1(self, instructions: Iterable[Instruction]) -> None:
        """Bind every label to the index of the instruction following it."""
        pc = -1
        labels = 0

        for instruction in instructions:
            if isinstance(instruction, LabelInstruction):
                self._symbols.insert(instruction.symbol, pc + 1)
                labels += 1
            else:
                pc += 1

        logger.debug(f"Pass 1: {pc + 1} instructions, {labels} labels")

    def _pass2(self, instructions: Iterable[Instruction], output: TextIO) -> None:
        """Encode every real instruction and write it out in source order."""
        for instruction in instructions:
            if isinstance(instruction, AddressInstruction):
                word = encode_address_word(self._resolve(instruction))
            elif isinstance(instruction, ComputeInstruction):
                word = encode_compute_word(
                    instruction.dest, instruction.comp, instruction.jump
                )
            else:
                continue

            self._words.append(word)
            output.write(format_word(word) + "\n")

        logger.debug(
            f"Pass 2: {len(self._words)} words, "
            f"{self._next_variable - FIRST_VARIABLE_ADDRESS} variables"
        )

    def _resolve(self, instruction: AddressInstruction) -> int:
        """
        Resolve the value an address instruction loads.

        Decimal literals are used as-is and never touch the table. Any other
        symbol not yet in the table becomes a variable at the next free
        RAM address.
        """
        symbol = instruction.symbol
        if instruction.is_numeric:
            return int(symbol)

        if not self._symbols.contains(symbol):
            self._symbols.insert(symbol, self._next_variable)
            logger.debug(f"Allocated variable '{symbol}' at {self._next_variable}")
            self._next_variable += 1

        return self._symbols.lookup(symbol)

    # =========================================================================
    # Output Methods
    # =========================================================================

    def get_symbols(self) -> dict[str, int]:
        """
        Get the symbol table of the last run.

        Returns:
            Dictionary mapping symbol names to addresses, predefined included
        """
        return self._symbols.as_dict()

    def get_words(self) -> list[int]:
        """
        Get the instruction words of the last run.

        Returns:
            Encoded words in source order
        """
        return list(self._words)

    def get_symbol_listing(self) -> str:
        """
        Format the labels and variables of the last run.

        One ``NAME ADDRESS`` line per symbol, sorted by address then name.
        Predefined symbols are left out.
        """
        entries = sorted(
            self._symbols.user_symbols().items(),
            key=lambda item: (item[1], item[0]),
        )
        return "".join(f"{name} {address}\n" for name, address in entries)

    def write_symbols(self, filepath: str | Path) -> None:
        """
        Write the symbol listing to a file.

        Args:
            filepath: Output file path
        """
        Path(filepath).write_text(self.get_symbol_listing(), encoding="utf-8")
        logger.info(f"Wrote symbols to {filepath}")


# =============================================================================
# Convenience Functions
# =============================================================================

def assemble(source: str) -> str:
    """
    Convenience function to assemble source code.

    Args:
        source: Hack assembly source

    Returns:
        Machine code text

    Raises:
        AssemblerError: If assembly fails
    """
    return Assembler().assemble_string(source)


def assemble_file(filepath: str | Path, output_path: str | Path | None = None) -> Path:
    """
    Convenience function to assemble a file.

    Args:
        filepath: Path to source file
        output_path: Optional output path (defaults to the ``.hack`` sibling)

    Returns:
        Path of the file written

    Raises:
        AssemblerError: If assembly fails
    """
    return Assembler().assemble_file(filepath, output_path)
