"""
TypedString - a string known to satisfy a named contract.

Tag handlers often escape their dynamic values. A value that a tag has
already produced, say a well-formed CSV fragment, must not be escaped a
second time. Wrapping it marks it as safe for that context:

    class CsvContent(TypedString, contract="text/csv"):
        pass

    satisfies(CsvContent("a,b"), "text/csv")   # True

Checks go through the contract identifier rather than the class, so two
copies of the same module loaded side by side still agree.
"""

from typing import Any, ClassVar, Optional


class TypedString:
    """
    Immutable wrapper around a content string.

    Subclasses must declare a contract identifier, either as a class
    keyword or by inheriting one.
    """

    __slots__ = ("_content",)

    contract: ClassVar[Optional[str]] = None

    def __init_subclass__(cls, contract: Optional[str] = None, **kwargs):
        super().__init_subclass__(**kwargs)
        if contract is not None:
            cls.contract = contract
        if not cls.contract:
            raise TypeError(f"{cls.__name__} must declare a contract identifier")

    def __init__(self, content: Any):
        if type(self).contract is None:
            raise TypeError("TypedString must be subclassed with a contract")
        object.__setattr__(self, "_content", str(content))

    @property
    def content(self) -> str:
        """The wrapped string."""
        return self._content

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __str__(self) -> str:
        return self._content

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._content!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypedString):
            return NotImplemented
        return self.contract == other.contract and self._content == other._content

    def __hash__(self) -> int:
        return hash((self.contract, self._content))


def satisfies(value: Any, contract: str) -> bool:
    """
    True iff value is a typed string declaring the given contract.

    Usage:
        if not satisfies(value, CsvContent.contract):
            value = escape_csv(str(value))
    """
    return isinstance(getattr(value, "content", None), str) and (
        getattr(type(value), "contract", None) == contract
    )
