"""
Hack Symbol Table
=================

Mapping from symbol name to 16-bit address for a single assembly run.

The table starts out holding the predefined symbols of the Hack memory map
and only ever grows:

- Pass 1 adds each label, bound to the index of the instruction after it.
- Pass 2 adds each new variable, bound to the next free RAM address.

Names are case-sensitive. Nothing is ever removed; an Assembler builds a
fresh table for every run and drops it afterwards.
"""

import logging
from typing import Iterator, Optional

from hackasm.cpu import PREDEFINED_SYMBOLS, is_predefined_symbol
from hackasm.errors import DuplicateSymbolError


logger = logging.getLogger(__name__)


class SymbolTable:
    """
    Name to address mapping, pre-seeded with the Hack predefined symbols.

    Example:
        >>> table = SymbolTable()
        >>> table.lookup("SCREEN")
        16384
        >>> table.insert("LOOP", 4)
        >>> "LOOP" in table
        True
    """

    def __init__(self):
        self._symbols: dict[str, int] = dict(PREDEFINED_SYMBOLS)

    def insert(self, name: str, address: int) -> None:
        """
        Bind a new symbol.

        Args:
            name: Symbol name
            address: Address to bind it to

        Raises:
            DuplicateSymbolError: If the name is already bound
        """
        if name in self._symbols:
            raise DuplicateSymbolError(name, self._symbols[name])
        self._symbols[name] = address
        logger.debug(f"Bound symbol '{name}' = {address}")

    def contains(self, name: str) -> bool:
        """Check whether a symbol is bound."""
        return name in self._symbols

    def lookup(self, name: str) -> Optional[int]:
        """
        Look up a symbol.

        Returns:
            The bound address, or None if the symbol is not in the table
        """
        return self._symbols.get(name)

    def as_dict(self) -> dict[str, int]:
        """Return a copy of the table as a plain dictionary."""
        return dict(self._symbols)

    def user_symbols(self) -> dict[str, int]:
        """Return only the symbols added during assembly."""
        return {
            name: address
            for name, address in self._symbols.items()
            if not is_predefined_symbol(name)
        }

    def __contains__(self, name: object) -> bool:
        return name in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def __repr__(self) -> str:
        return f"SymbolTable({len(self._symbols)} symbols)"
