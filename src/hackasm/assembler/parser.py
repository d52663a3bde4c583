"""
Hack Assembly Language Parser
=============================

This module turns raw source text into structured instruction records.
Hack assembly has one instruction per physical line, so the parser works
line by line straight off a text stream; there is no separate lexer.

Instruction Types
-----------------
The parser produces three kinds of records:

1. **AddressInstruction**: load a value into the A register
   ```asm
   @21             // decimal literal
   @LOOP           // label
   @sum            // variable
   ```

2. **ComputeInstruction**: ALU operation with optional destination and jump
   ```asm
   D=M             // dest=comp
   D;JGT           // comp;jump
   AM=M-1;JNE      // dest=comp;jump
   ```

3. **LabelInstruction**: pseudo-instruction naming the next real instruction
   ```asm
   (LOOP)
   ```

Whitespace and Comments
-----------------------
All whitespace is insignificant and is removed from a line before it is
classified, so ``D = D + A`` and ``D=D+A`` parse identically.

A comment starts at the first ``/`` on a line and runs to the end of the
line. A single ``/`` is enough; the second one of ``//`` is not checked.
Lines that are blank or comment-only produce no instruction.

Mnemonics are not validated here. ``D=Q`` parses into a ComputeInstruction
with ``comp="Q"`` and is rejected later by the encoder.
"""

import io
import logging
from dataclasses import dataclass
from typing import Iterator, Optional, TextIO

from hackasm.errors import AssemblySyntaxError


logger = logging.getLogger(__name__)

COMMENT_CHAR = "/"


# =============================================================================
# Instruction Data Classes
# =============================================================================

@dataclass(frozen=True)
class Instruction:
    """
    Base class for all parsed instructions.

    Instructions are immutable; each one is built for a single source line
    and dropped once the pass that read it has handled it.
    """


@dataclass(frozen=True)
class AddressInstruction(Instruction):
    """
    Address instruction (``@symbol``).

    Attributes:
        symbol: Label name, variable name, or decimal literal
    """
    symbol: str

    @property
    def is_numeric(self) -> bool:
        """True if the symbol is a decimal literal rather than a name."""
        return is_decimal(self.symbol)


@dataclass(frozen=True)
class ComputeInstruction(Instruction):
    """
    Compute instruction (``[dest=]comp[;jump]``).

    Attributes:
        comp: Computation mnemonic (always present)
        dest: Destination mnemonic, or None when the line has no ``=``
        jump: Jump mnemonic, or None when the line has no ``;``
    """
    comp: str
    dest: Optional[str] = None
    jump: Optional[str] = None


@dataclass(frozen=True)
class LabelInstruction(Instruction):
    """
    Label pseudo-instruction (``(symbol)``). Emits no code.

    Attributes:
        symbol: Label name, without the parentheses
    """
    symbol: str


# =============================================================================
# Line Helpers
# =============================================================================

def is_decimal(text: str) -> bool:
    """Check if text is a non-empty run of ASCII digits."""
    return bool(text) and all("0" <= ch <= "9" for ch in text)


def strip_whitespace(text: str) -> str:
    """Remove every whitespace character from text."""
    return "".join(text.split())


def clean_line(line: str) -> str:
    """
    Reduce a raw source line to its instruction text.

    Removes all whitespace, then drops everything from the first comment
    character onwards.

    Args:
        line: One physical source line, with or without its terminator

    Returns:
        The instruction text, or an empty string for blank/comment lines
    """
    text = strip_whitespace(line)
    comment = text.find(COMMENT_CHAR)
    if comment >= 0:
        text = text[:comment]
    return text


def classify(text: str) -> Instruction:
    """
    Build an instruction record from cleaned instruction text.

    Classification is by first character: ``@`` is an address instruction,
    ``(`` a label, anything else a compute instruction.

    Args:
        text: Non-empty instruction text with whitespace and comments removed

    Returns:
        The parsed instruction

    Raises:
        AssemblySyntaxError: If a label is empty or not closed
    """
    if text.startswith("@"):
        return AddressInstruction(text[1:])

    if text.startswith("("):
        if not text.endswith(")") or len(text) < 3:
            raise AssemblySyntaxError(
                f"malformed label '{text}'",
                hint="labels are written as (NAME)",
            )
        return LabelInstruction(text[1:-1])

    dest: Optional[str] = None
    jump: Optional[str] = None

    rest = text
    if "=" in rest:
        dest, rest = rest.split("=", 1)
    comp = rest
    if ";" in comp:
        comp, jump = comp.split(";", 1)

    return ComputeInstruction(comp=comp, dest=dest, jump=jump)


def parse_line(line: str) -> Optional[Instruction]:
    """
    Parse a single source line.

    Args:
        line: One physical source line

    Returns:
        The instruction on the line, or None if the line is blank or a comment
    """
    text = clean_line(line)
    if not text:
        return None
    return classify(text)


# =============================================================================
# Parser Class
# =============================================================================

class Parser:
    """
    Reads instructions one at a time from a text stream.

    The parser only ever calls ``readline()`` on the stream, plus ``tell()``
    and ``seek()`` on a seekable one so that :meth:`rewind` can return to the
    position the parser started at. Opening and closing the stream is left
    to the caller.

    Example:
        >>> parser = Parser(io.StringIO("@2\\nD=A\\n"))
        >>> parser.next_instruction()
        AddressInstruction(symbol='2')
    """

    def __init__(self, stream: TextIO):
        self._stream = stream
        self._start = stream.tell() if stream.seekable() else 0
        self._line_number = 0

    @property
    def line_number(self) -> int:
        """Number of physical lines consumed so far."""
        return self._line_number

    def next_instruction(self) -> Optional[Instruction]:
        """
        Read the next instruction, skipping blank and comment lines.

        Returns:
            The next instruction, or None once the stream is exhausted
        """
        while True:
            line = self._stream.readline()
            if not line:
                return None
            self._line_number += 1

            instruction = parse_line(line)
            if instruction is not None:
                return instruction

    def rewind(self) -> None:
        """Reposition the stream where this parser started, for another pass."""
        self._stream.seek(self._start)
        self._line_number = 0

    def __iter__(self) -> Iterator[Instruction]:
        while True:
            instruction = self.next_instruction()
            if instruction is None:
                return
            yield instruction


# =============================================================================
# Convenience Functions
# =============================================================================

def parse_source(source: str) -> list[Instruction]:
    """
    Parse complete source text into a list of instructions.

    Args:
        source: Hack assembly source

    Returns:
        Instructions in source order
    """
    instructions = list(Parser(io.StringIO(source)))
    logger.debug(f"Parsed {len(instructions)} instructions")
    return instructions
