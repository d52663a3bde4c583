"""
Hack Assembler Error Hierarchy
==============================

This module defines the exception hierarchy for the Hack assembler.
All exceptions inherit from HackError, allowing callers to catch all
assembler-related errors with a single except clause if desired.

Exception Hierarchy
-------------------
HackError (base)
└── AssemblerError (assembler-related)
    ├── AssemblySyntaxError - line cannot be split into instruction fields
    ├── UnknownMnemonicError - comp or jump mnemonic not in the tables
    ├── DuplicateSymbolError - symbol bound more than once
    └── AddressRangeError - address outside the 15-bit range

Design Philosophy
-----------------
The source format is a closed, author-controlled subset of Hack assembly
that is assumed to be well-formed. These exceptions exist so that a
precondition violation fails loudly instead of producing a silently wrong
word. The assembler never tries to recover from them.

Error messages follow this format:
    error: description
    hint: suggestion for fixing (when available)
"""

from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class HackError(Exception):
    """
    Base exception for all Hack assembler errors.

    All exceptions in the package inherit from this class, allowing callers
    to catch all assembler errors with a single except clause:

        try:
            assembler.assemble_file("Prog.asm")
        except HackError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Assembler Exceptions
# =============================================================================

class AssemblerError(HackError):
    """
    Base exception for all assembler-related errors.

    Attributes:
        message: The error description
        hint: A suggestion for fixing the error (optional)
    """

    def __init__(self, message: str, hint: Optional[str] = None):
        self.message = message
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with an optional hint line.

        Example output:
            error: unknown computation mnemonic 'D+2'
            hint: valid computations are 0, 1, -1, D, A, ...
        """
        parts = [f"error: {self.message}"]
        if self.hint:
            parts.append(f"hint: {self.hint}")
        return "\n".join(parts)


class AssemblySyntaxError(AssemblerError):
    """
    Line that cannot be split into instruction fields.

    Raised by the parser for the few shapes it can detect without
    validating mnemonics, such as an empty label ``()`` or a label
    missing its closing parenthesis.
    """
    pass


class UnknownMnemonicError(AssemblerError):
    """
    Computation or jump mnemonic not present in the encoding tables.

    Attributes:
        field: Which instruction field was being encoded ("comp" or "jump")
        mnemonic: The offending mnemonic text
    """

    def __init__(self, field: str, mnemonic: str, valid: Optional[list[str]] = None):
        self.field = field
        self.mnemonic = mnemonic

        hint = None
        if valid:
            hint = f"valid {field} mnemonics: {', '.join(valid)}"

        super().__init__(f"unknown {field} mnemonic '{mnemonic}'", hint=hint)


class DuplicateSymbolError(AssemblerError):
    """
    Symbol bound more than once.

    Raised when a label is defined twice, or when a label reuses the
    name of a predefined symbol such as ``R0`` or ``SCREEN``.
    """

    def __init__(self, symbol: str, existing: Optional[int] = None):
        self.symbol = symbol
        self.existing = existing

        hint = None
        if existing is not None:
            hint = f"'{symbol}' is already bound to address {existing}"

        super().__init__(f"duplicate symbol '{symbol}'", hint=hint)


class AddressRangeError(AssemblerError):
    """
    Address does not fit in the 15 value bits of an address instruction.

    Address instructions keep bit 15 clear, so the largest value that
    can be loaded into the A register is 32767.
    """

    def __init__(self, value: int):
        self.value = value
        super().__init__(
            f"address {value} is out of range",
            hint="address instructions accept values from 0 to 32767",
        )
