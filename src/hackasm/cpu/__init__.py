"""
Hack CPU Package
================

This package contains the Hack machine architecture definitions used by
the assembler: word layout, the computation and jump tables, and the
predefined symbols of the memory map.

Modules:
    hack: Encoding tables, bit offsets and memory-map constants.

Usage:
    from hackasm.cpu import (
        COMP_TABLE,
        JUMP_TABLE,
        PREDEFINED_SYMBOLS,
    )
"""

# =============================================================================
# Public API Exports
# =============================================================================

from hackasm.cpu.hack import (
    # Word layout
    WORD_SIZE,
    ADDRESS_BITS,
    MAX_ADDRESS,
    COMPUTE_PREFIX,
    COMPUTE_PREFIX_SHIFT,
    COMP_SHIFT,
    DEST_SHIFT,
    JUMP_SHIFT,
    COMP_MASK,
    DEST_MASK,
    JUMP_MASK,
    # Memory map
    FIRST_VARIABLE_ADDRESS,
    SCREEN_ADDRESS,
    KBD_ADDRESS,
    PREDEFINED_SYMBOLS,
    # Encoding tables
    COMP_TABLE,
    JUMP_TABLE,
    DEST_BITS,
    # Lookup functions
    is_predefined_symbol,
)

__all__ = [
    "WORD_SIZE",
    "ADDRESS_BITS",
    "MAX_ADDRESS",
    "COMPUTE_PREFIX",
    "COMPUTE_PREFIX_SHIFT",
    "COMP_SHIFT",
    "DEST_SHIFT",
    "JUMP_SHIFT",
    "COMP_MASK",
    "DEST_MASK",
    "JUMP_MASK",
    "FIRST_VARIABLE_ADDRESS",
    "SCREEN_ADDRESS",
    "KBD_ADDRESS",
    "PREDEFINED_SYMBOLS",
    "COMP_TABLE",
    "JUMP_TABLE",
    "DEST_BITS",
    "is_predefined_symbol",
]
