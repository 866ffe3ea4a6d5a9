from __future__ import annotations


class Symbol:
    """An identifier, keyword or boolean literal read from source.

    Symbols are interned: constructing one with a name already seen returns
    the existing instance, so equality and hashing are by identity.
    """

    __slots__ = ("name",)

    _table: dict[str, Symbol] = {}

    def __new__(cls, name: str) -> Symbol:
        sym = cls._table.get(name)
        if sym is None:
            sym = super().__new__(cls)
            sym.name = name
            cls._table[name] = sym
        return sym

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name
