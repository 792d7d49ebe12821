from __future__ import annotations

import copy
import logging
from collections.abc import Iterable, Mapping
from typing import Any, List, Optional, Protocol, runtime_checkable

from geo_enrich.app_hooks import AppHooks
from geo_enrich.field_chain import FieldChain, FieldSpec
from geo_enrich.record import FieldAccessible, is_record

logger = logging.getLogger(__name__)

ALL_FIELDS = "all"

@runtime_checkable
class ValueTransform(Protocol):
    """
    Protocol for per-value enrichments.

    A transform maps one field value to zero or more replacement values.
    Returning an empty list removes the value; returning several expands it.
    Any iterable other than a string, mapping or record counts as several values.
    """
    def transform(self, value: Any) -> List[Any]:
        ...

class FieldEnrichment:
    """
    Applies a value transform to selected fields of a record.

    Fields are addressed by field specs (see FieldChain.from_spec). Chains
    longer than one name are followed through nested records; the transform
    runs on the values of the last field in the chain and its results replace
    that field's values.

    Attributes:
        transform (ValueTransform): The per-value enrichment.
        app_hooks (Optional[AppHooks]): Optional progress reporting hooks.
    """
    def __init__(self, transform: ValueTransform, app_hooks: Optional['AppHooks'] = None) -> None:
        self.transform = transform
        self.app_hooks = app_hooks

    def enrich(self, record: FieldAccessible, *field_specs: FieldSpec) -> FieldAccessible:
        """
        Enrich a copy of record on the given fields.

        With no field specs, or the single spec "all", every field the
        record declares is enriched.

        Example:
            >>> enrichment.enrich(record, {'sourceResource': 'spatial'})
            >>> enrichment.enrich(record)

        Args:
            record: The record to enrich. It is not modified.
            *field_specs: Field names, paths or single-branch mappings.

        Returns:
            The enriched copy.

        Raises:
            FieldSpecError: If a field spec is empty or ambiguous.
        """
        if not field_specs or field_specs == (ALL_FIELDS,):
            return self.enrich_all(copy.deepcopy(record))

        chains = [FieldChain.from_spec(spec) for spec in field_specs]
        record = copy.deepcopy(record)
        self._report_step(info=f"Enriching {len(chains)} field(s)", target=len(chains), reset_counter=True, plus_step=0)
        for chain in chains:
            self.enrich_field(record, chain)
            self._report_step(info=f"Enriched field '{chain}'", plus_step=1)
        return record

    def enrich_field(self, record: FieldAccessible, chain: FieldChain) -> FieldAccessible:
        """
        Enrich one field chain of record in place.

        Unsupported fields are skipped. At the leaf, each value is replaced by
        the transform's results; above the leaf, each nested record is
        enriched with the rest of the chain.

        Returns:
            The same record.
        """
        field = chain.head
        if not record.supports(field):
            logger.debug(f"Skipping unsupported field '{field}' on {record.__class__.__name__}")
            return record
        values = record.get(field)

        if chain.is_leaf:
            record.set(field, self._transform_values(values))
        else:
            tail = chain.tail
            for value in values:
                if is_record(value):
                    self.enrich_field(value, tail)
        return record

    def enrich_all(self, record: FieldAccessible) -> FieldAccessible:
        """
        Enrich every declared field of record in place, in declaration order.
        """
        names = record.all_field_names()
        self._report_step(info=f"Enriching all {len(names)} fields", target=len(names), reset_counter=True, plus_step=0)
        for name in names:
            self.enrich_field(record, FieldChain.from_spec(name))
            self._report_step(info=f"Enriched field '{name}'", plus_step=1)
        return record

    def _transform_values(self, values: List[Any]) -> List[Any]:
        new_values = []
        for value in values:
            results = self.transform.transform(value)
            if results is None:
                continue
            if not _is_multi_value(results):
                results = [results]
            for result in results:
                if result is None or _is_empty_sequence(result):
                    continue
                new_values.append(result)
        return new_values

    def _report_step(self, info: str = "", target: Optional[int] = None, reset_counter: bool = False, plus_step: int = 0) -> None:
        """
        Report a step via app hooks if available. (Private method)
        """
        if self.app_hooks and callable(getattr(self.app_hooks, "report_step", None)):
            self.app_hooks.report_step(info=info, target=target, reset_counter=reset_counter, plus_step=plus_step)
        else:
            logger.debug(info)

def _is_multi_value(results: Any) -> bool:
    return (
        isinstance(results, Iterable)
        and not isinstance(results, (str, bytes, Mapping))
        and not is_record(results)
    )

def _is_empty_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple)) and not value
