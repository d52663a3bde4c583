"""
Hack Instruction Encoder
========================

Pure functions that map symbolic instruction fields to their bit patterns
and compose complete 16-bit instruction words.

Word Layout
-----------
```
Compute:  1 1 1 a c c c c c c d d d j j j
          |___| |___________| |___| |___|
          prefix  comp (<<6)  dest  jump
                              (<<3)

Address:  0 v v v v v v v v v v v v v v v
```

None of these functions keep state. The tables they read live in
``hackasm.cpu.hack``.
"""

from typing import Optional

from hackasm.cpu import (
    WORD_SIZE,
    MAX_ADDRESS,
    COMPUTE_PREFIX,
    COMPUTE_PREFIX_SHIFT,
    COMP_SHIFT,
    DEST_SHIFT,
    JUMP_SHIFT,
    COMP_MASK,
    DEST_MASK,
    JUMP_MASK,
    COMP_TABLE,
    JUMP_TABLE,
    DEST_BITS,
)
from hackasm.errors import AddressRangeError, UnknownMnemonicError


# =============================================================================
# Field Encoders
# =============================================================================

def encode_dest(name: Optional[str]) -> int:
    """
    Encode a destination mnemonic into its 3-bit field.

    Each register letter present in the name sets its own bit, so the
    order of letters does not matter.

    Args:
        name: Destination such as "AM", or None when absent

    Returns:
        3-bit destination field (0 when absent)
    """
    if not name:
        return 0

    bits = 0
    for register, bit in DEST_BITS.items():
        if register in name:
            bits |= bit
    return bits


def encode_jump(name: Optional[str]) -> int:
    """
    Encode a jump mnemonic into its 3-bit field.

    Args:
        name: Jump condition such as "JGT", or None when absent

    Returns:
        3-bit jump field (0 when absent)

    Raises:
        UnknownMnemonicError: If the mnemonic is not a jump condition
    """
    if name is None:
        return 0
    try:
        return JUMP_TABLE[name]
    except KeyError:
        raise UnknownMnemonicError("jump", name, list(JUMP_TABLE)) from None


def encode_comp(name: str) -> int:
    """
    Encode a computation mnemonic into its 7-bit field.

    The returned field includes the ``a`` bit (bit 6), which is set for
    the forms that read M instead of A.

    Args:
        name: Computation such as "D+M"

    Returns:
        7-bit computation field

    Raises:
        UnknownMnemonicError: If the mnemonic is not one of the 28 computations
    """
    try:
        return COMP_TABLE[name]
    except KeyError:
        raise UnknownMnemonicError("comp", name, list(COMP_TABLE)) from None


# =============================================================================
# Word Encoders
# =============================================================================

def encode_compute_word(dest: Optional[str], comp: str, jump: Optional[str]) -> int:
    """
    Compose a compute instruction word.

    Args:
        dest: Destination mnemonic or None
        comp: Computation mnemonic
        jump: Jump mnemonic or None

    Returns:
        16-bit instruction word with the ``111`` prefix
    """
    word = COMPUTE_PREFIX << COMPUTE_PREFIX_SHIFT
    word |= encode_comp(comp) << COMP_SHIFT
    word |= encode_dest(dest) << DEST_SHIFT
    word |= encode_jump(jump) << JUMP_SHIFT
    return word


def encode_address_word(value: int) -> int:
    """
    Compose an address instruction word.

    Args:
        value: Address or constant, 0 to 32767

    Returns:
        16-bit instruction word with bit 15 clear

    Raises:
        AddressRangeError: If value does not fit in 15 bits
    """
    if not 0 <= value <= MAX_ADDRESS:
        raise AddressRangeError(value)
    return value


def decode_compute_word(word: int) -> tuple[int, int, int, int]:
    """
    Split a compute word back into its raw fields.

    Args:
        word: 16-bit instruction word

    Returns:
        Tuple of (prefix, comp, dest, jump) fields
    """
    return (
        (word >> COMPUTE_PREFIX_SHIFT) & 0b111,
        (word >> COMP_SHIFT) & COMP_MASK,
        (word >> DEST_SHIFT) & DEST_MASK,
        (word >> JUMP_SHIFT) & JUMP_MASK,
    )


# =============================================================================
# Output Formatting
# =============================================================================

def format_word(word: int) -> str:
    """Render a word as 16 binary digits, most significant bit first."""
    return format(word & 0xFFFF, f"0{WORD_SIZE}b")
