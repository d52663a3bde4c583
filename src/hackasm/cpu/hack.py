"""
Hack Machine Instruction Set Definition
=======================================

This module defines the fixed encoding tables and memory-map constants of
the Hack machine, a 16-bit register machine with two user registers (A and
D) and a memory-addressed pseudo-register M (RAM[A]).

Instruction Formats
-------------------
The Hack machine has exactly two real instruction formats, both one
16-bit word wide:

1. **Address instruction** (``@value``)
   ```
   bit  15 14 .............. 0
         0  v  v  v ... v  v  v      value: 15-bit address or constant
   ```

2. **Compute instruction** (``dest=comp;jump``)
   ```
   bit  15 14 13 12 11 ... 6  5 4 3  2 1 0
         1  1  1  a  c ... c  d d d  j j j
   ```
   - ``a c c c c c c``: 7-bit computation field; the ``a`` bit selects
     M (RAM[A]) instead of A as the ALU's second operand.
   - ``d d d``: destination registers A, D, M.
   - ``j j j``: jump condition on the ALU output.

Predefined Symbols
------------------
| Symbol            | Address |
|-------------------|---------|
| R0 .. R15         | 0 .. 15 |
| SP LCL ARG THIS THAT | 0 .. 4 |
| SCREEN            | 16384   |
| KBD               | 24576   |

Reference
---------
- Nisan & Schocken, "The Elements of Computing Systems", chapter 6
"""


# =============================================================================
# Word Layout
# =============================================================================

WORD_SIZE = 16
"""Width of every instruction word in bits."""

ADDRESS_BITS = 15
MAX_ADDRESS = (1 << ADDRESS_BITS) - 1  # 32767

COMPUTE_PREFIX = 0b111
COMPUTE_PREFIX_SHIFT = 13
COMP_SHIFT = 6
DEST_SHIFT = 3
JUMP_SHIFT = 0

COMP_MASK = 0x7F
DEST_MASK = 0x7
JUMP_MASK = 0x7


# =============================================================================
# Memory Map
# =============================================================================

FIRST_VARIABLE_ADDRESS = 16
"""First RAM address handed out to symbolic variables."""

SCREEN_ADDRESS = 16384
KBD_ADDRESS = 24576

PREDEFINED_SYMBOLS: dict[str, int] = {
    **{f"R{n}": n for n in range(16)},
    "SP": 0,
    "LCL": 1,
    "ARG": 2,
    "THIS": 3,
    "THAT": 4,
    "SCREEN": SCREEN_ADDRESS,
    "KBD": KBD_ADDRESS,
}


# =============================================================================
# Computation Table
# =============================================================================
# Key: comp mnemonic as written in source (whitespace removed)
# Value: 7-bit field "a c1 c2 c3 c4 c5 c6"
#
# The M forms are the A forms with the a bit (0x40) set.
# =============================================================================

COMP_TABLE: dict[str, int] = {
    # Constants
    "0": 0x2A,      # 0 101010
    "1": 0x3F,      # 0 111111
    "-1": 0x3A,     # 0 111010

    # Unary over a single register
    "D": 0x0C,      # 0 001100
    "A": 0x30,      # 0 110000
    "M": 0x70,      # 1 110000
    "!D": 0x0D,     # 0 001101
    "!A": 0x31,     # 0 110001
    "!M": 0x71,     # 1 110001
    "-D": 0x0F,     # 0 001111
    "-A": 0x33,     # 0 110011
    "-M": 0x73,     # 1 110011
    "D+1": 0x1F,    # 0 011111
    "A+1": 0x37,    # 0 110111
    "M+1": 0x77,    # 1 110111
    "D-1": 0x0E,    # 0 001110
    "A-1": 0x32,    # 0 110010
    "M-1": 0x72,    # 1 110010

    # Binary over D and A/M
    "D+A": 0x02,    # 0 000010
    "D+M": 0x42,    # 1 000010
    "D-A": 0x13,    # 0 010011
    "D-M": 0x53,    # 1 010011
    "A-D": 0x07,    # 0 000111
    "M-D": 0x47,    # 1 000111
    "D&A": 0x00,    # 0 000000
    "D&M": 0x40,    # 1 000000
    "D|A": 0x15,    # 0 010101
    "D|M": 0x55,    # 1 010101
}


# =============================================================================
# Jump Table
# =============================================================================

JUMP_TABLE: dict[str, int] = {
    "JGT": 0b001,
    "JEQ": 0b010,
    "JGE": 0b011,
    "JLT": 0b100,
    "JNE": 0b101,
    "JLE": 0b110,
    "JMP": 0b111,
}


# =============================================================================
# Destination Bits
# =============================================================================
# Destinations are encoded by membership rather than by table lookup, so
# "MD" and "DM" both produce 011.
# =============================================================================

DEST_BITS: dict[str, int] = {
    "A": 0b100,
    "D": 0b010,
    "M": 0b001,
}


# =============================================================================
# Lookup Functions
# =============================================================================

def is_predefined_symbol(name: str) -> bool:
    """
    Check if a name is bound before assembly starts.

    Args:
        name: Symbol name (case-sensitive)

    Returns:
        True for registers, VM pointers and I/O symbols
    """
    return name in PREDEFINED_SYMBOLS
