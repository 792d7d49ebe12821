"""
field_chain.py - Normalization of field specifications into field paths.

A field specification names the field an enrichment applies to. It may be:
    - a bare field name:            'spatial'
    - an ordered path of names:     ['sourceResource', 'spatial']
    - a single-branch mapping:      {'sourceResource': {'spatial': 'label'}}

All three normalize to a FieldChain, the ordered names from the top-level
record down to the leaf field.

Module: geo_enrich.field_chain
"""
from __future__ import annotations

__all__ = ['FieldChain', 'FieldSpecError', 'FieldSpec']

from dataclasses import dataclass
from typing import Any, List, Mapping, Sequence, Tuple, Union

FieldSpec = Union[str, Sequence[str], Mapping[str, Any], 'FieldChain']

class FieldSpecError(ValueError):
    """Raised when a field specification is empty or ambiguous."""

@dataclass(frozen=True)
class FieldChain:
    """
    Ordered, non-empty path of field names, parent to child.

    Attributes:
        names (Tuple[str, ...]): The field names.
    """
    names: Tuple[str, ...]

    def __post_init__(self):
        if not self.names:
            raise FieldSpecError("Field chain must contain at least one field name")
        for name in self.names:
            if not isinstance(name, str) or not name:
                raise FieldSpecError(f"Invalid field name {name!r} in chain {self.names!r}")

    @classmethod
    def from_spec(cls, spec: FieldSpec) -> "FieldChain":
        """
        Normalize a field specification into a FieldChain.

        Args:
            spec: A field name, an ordered list of names, a single-branch
                nested mapping, or an existing FieldChain.

        Returns:
            FieldChain: The normalized chain.

        Raises:
            FieldSpecError: If the spec is empty, a mapping branches, or a name
                is not a non-empty string.
        """
        if isinstance(spec, FieldChain):
            return spec
        return cls(tuple(_flatten_spec(spec)))

    @property
    def head(self) -> str:
        return self.names[0]

    @property
    def tail(self) -> "FieldChain":
        """The chain below the head. Only valid for non-leaf chains."""
        if self.is_leaf:
            raise FieldSpecError(f"Leaf chain '{self}' has no tail")
        return FieldChain(self.names[1:])

    @property
    def is_leaf(self) -> bool:
        return len(self.names) == 1

    def __len__(self):
        return len(self.names)

    def __str__(self):
        return '.'.join(self.names)

def _flatten_spec(spec: Any) -> List[str]:
    if isinstance(spec, str):
        if not spec:
            raise FieldSpecError("Field name must not be empty")
        return [spec]
    if isinstance(spec, Mapping):
        if len(spec) != 1:
            raise FieldSpecError(
                f"Nested field spec must have exactly one key per level, got {list(spec.keys())!r}"
            )
        (key, child), = spec.items()
        return _flatten_spec(key) + _flatten_spec(child)
    if isinstance(spec, (list, tuple)):
        if not spec:
            raise FieldSpecError("Field path must not be empty")
        names = []
        for part in spec:
            if not isinstance(part, str):
                raise FieldSpecError(f"Field path elements must be names, got {part!r}")
            names.extend(_flatten_spec(part))
        return names
    raise FieldSpecError(f"Unsupported field spec type {type(spec).__name__}: {spec!r}")
