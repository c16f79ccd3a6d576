"""
Hack Symbol Table
=================

Maps textual symbols to 16-bit addresses. The table is seeded with the
predefined architectural symbols, receives labels during the label pass and
hands out RAM addresses to variables during parsing.

Symbol Kinds
------------
- **PREDEFINED**: SP, LCL, ARG, THIS, THAT, R0-R15, SCREEN, KBD
- **LABEL**: ``(NAME)`` declarations, mapped to a ROM address
- **VARIABLE**: any other ``@name``, mapped to a RAM address from 16 upward

Usage sites only go through contains(), get(), add() and allocate(); the
underlying dictionary is never exposed for mutation.

Example Usage
-------------
>>> table = SymbolTable()
>>> table.get("SCREEN")
16384
>>> table.allocate("i")
16
>>> table.allocate("sum")
17
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, Optional
import logging

from hack_asm.cpu import PREDEFINED_SYMBOLS, VARIABLE_BASE
from hack_asm.errors import SourceLocation, UndefinedSymbolError

logger = logging.getLogger(__name__)


class SymbolKind(Enum):
    """How a symbol entered the table."""
    PREDEFINED = auto()
    LABEL = auto()
    VARIABLE = auto()

    def __str__(self) -> str:
        return self.name.lower()


@dataclass
class Symbol:
    """
    Symbol table entry.

    Attributes:
        name: Symbol name as written in source
        value: Resolved address
        kind: Predefined, label or variable
        location: Where the symbol was introduced (None for predefined)
    """
    name: str
    value: int
    kind: SymbolKind
    location: Optional[SourceLocation] = None


class SymbolTable:
    """
    Symbol table for one assembly run.

    Attributes:
        next_variable: Address the next allocate() call will hand out
    """

    def __init__(self):
        self._symbols: dict[str, Symbol] = {}
        self._next_variable = VARIABLE_BASE

        for name, value in PREDEFINED_SYMBOLS.items():
            self._symbols[name] = Symbol(name, value, SymbolKind.PREDEFINED)

    # =========================================================================
    # Core Operations
    # =========================================================================

    def contains(self, name: str) -> bool:
        """Return True if the symbol resolves."""
        return name in self._symbols

    def get(self, name: str) -> int:
        """
        Return the address stored for a symbol.

        Raises:
            UndefinedSymbolError: If the symbol is not in the table
        """
        symbol = self._symbols.get(name)
        if symbol is None:
            raise UndefinedSymbolError(name)
        return symbol.value

    def add(
        self,
        name: str,
        address: int,
        kind: SymbolKind = SymbolKind.LABEL,
        location: Optional[SourceLocation] = None,
    ) -> None:
        """
        Insert or overwrite a symbol.

        Overwriting is unconditional, including predefined symbols; duplicate
        label detection is the caller's responsibility.
        """
        self._symbols[name] = Symbol(name, address, kind, location)

    def allocate(self, name: str, location: Optional[SourceLocation] = None) -> int:
        """
        Assign the next free variable address to a symbol and return it.

        This is the only operation that advances next_variable, so the N-th
        variable allocated receives address 16 + N - 1.
        """
        address = self._next_variable
        self._symbols[name] = Symbol(name, address, SymbolKind.VARIABLE, location)
        self._next_variable += 1
        logger.debug(f"Allocated variable '{name}' at RAM[{address}]")
        return address

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def next_variable(self) -> int:
        return self._next_variable

    def lookup(self, name: str) -> Optional[Symbol]:
        """Return the full entry for a symbol, or None."""
        return self._symbols.get(name)

    def labels(self) -> list[Symbol]:
        """Labels in declaration order."""
        return [s for s in self._symbols.values() if s.kind is SymbolKind.LABEL]

    def variables(self) -> list[Symbol]:
        """Variables in allocation order."""
        return [s for s in self._symbols.values() if s.kind is SymbolKind.VARIABLE]

    def as_dict(self) -> dict[str, int]:
        """Return a name -> address snapshot of the whole table."""
        return {name: sym.value for name, sym in self._symbols.items()}

    def __contains__(self, name: str) -> bool:
        return self.contains(name)

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[Symbol]:
        return iter(list(self._symbols.values()))
