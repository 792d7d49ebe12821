"""
record.py - Minimal enrichable record model.

Defines the FieldAccessible protocol the enrichment engine works against, and
Record, a small concrete implementation holding ordered, repeatable field
values that may themselves be nested records.

Module: geo_enrich.record
"""
from __future__ import annotations

__all__ = ['FieldAccessible', 'Record', 'is_record']

import copy
import logging
import uuid
from typing import Any, Dict, Iterable, List, Optional, Protocol, Tuple, runtime_checkable

logger = logging.getLogger(__name__)

@runtime_checkable
class FieldAccessible(Protocol):
    """
    Protocol for records that can be enriched field by field.

    Methods:
        get(name) -> list: Ordered values held by a field.
        set(name, values) -> None: Replace a field's values.
        supports(name) -> bool: Whether the record's schema declares the field.
        all_field_names() -> tuple: Every declared field name, in declaration order.
    """
    def get(self, name: str) -> List[Any]:
        ...

    def set(self, name: str, values: Iterable[Any]) -> None:
        ...

    def supports(self, name: str) -> bool:
        ...

    def all_field_names(self) -> Tuple[str, ...]:
        ...

def is_record(value: Any) -> bool:
    """Check whether a value satisfies the FieldAccessible protocol."""
    return isinstance(value, FieldAccessible)

class Record:
    """
    A mutable entity with a fixed identity and a declared set of repeatable fields.

    Subclasses declare their schema in FIELDS. Values are kept as lists; a
    field that was never set reads as an empty list.

    Attributes:
        uri (Optional[str]): Identity URI, or None for an anonymous node.
        node_id (str): Identity for anonymous nodes ('_:b<hex>').
    """
    FIELDS: Tuple[str, ...] = ()

    def __init__(self, uri: Optional[str] = None, **values: Any) -> None:
        self._uri = uri
        self._node_id = None if uri else f"_:b{uuid.uuid4().hex}"
        self._values: Dict[str, List[Any]] = {}
        for name, value in values.items():
            self.set(name, value)

    @property
    def uri(self) -> Optional[str]:
        return self._uri

    @property
    def node_id(self) -> Optional[str]:
        return self._node_id

    @property
    def identity(self) -> str:
        """The URI, or the anonymous node id when there is no URI."""
        return self._uri or self._node_id

    @property
    def is_anonymous(self) -> bool:
        return self._uri is None

    def supports(self, name: str) -> bool:
        return name in self.FIELDS

    def all_field_names(self) -> Tuple[str, ...]:
        return tuple(self.FIELDS)

    def get(self, name: str) -> List[Any]:
        """
        Get the ordered values of a field.

        Raises:
            KeyError: If the field is not declared.
        """
        self._check_field(name)
        return list(self._values.get(name, []))

    def set(self, name: str, values: Any) -> None:
        """
        Replace the values of a field. A single non-list value is stored as a
        one-element list; None clears the field.

        Raises:
            KeyError: If the field is not declared.
        """
        self._check_field(name)
        if values is None:
            values = []
        elif not isinstance(values, (list, tuple)):
            values = [values]
        self._values[name] = list(values)

    def clone(self) -> "Record":
        """
        Deep copy of this record, nested records included. Identity is kept.
        """
        return copy.deepcopy(self)

    def as_dict(self) -> Dict[str, List[Any]]:
        """Non-empty fields as a dict, nested records converted recursively."""
        result = {}
        for name in self.FIELDS:
            values = self._values.get(name)
            if values:
                result[name] = [v.as_dict() if isinstance(v, Record) else v for v in values]
        return result

    def _check_field(self, name: str) -> None:
        if not self.supports(name):
            raise KeyError(f"{self.__class__.__name__} has no field '{name}'")

    def __eq__(self, other):
        if not isinstance(other, Record) or type(self) is not type(other):
            return NotImplemented
        return self.identity == other.identity and self.as_dict() == other.as_dict()

    __hash__ = None

    def __repr__(self):
        return f"{self.__class__.__name__}({self.identity!r}, {self.as_dict()!r})"
