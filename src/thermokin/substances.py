"""Read-only table of standard reference properties keyed by formula."""

from __future__ import annotations

import math
from numbers import Real
from types import MappingProxyType
from typing import Iterator, Mapping

from thermokin.errors import InvalidInput, UnknownSubstance
from thermokin.models import SubstanceRecord

# Field names of the reference data file, mapped onto SubstanceRecord attributes.
FIELDS = {"delta_Hf": "delta_hf", "S": "entropy", "delta_Gf": "delta_gf"}


def _field_value(formula: str, entry: Mapping[str, object], key: str) -> float:
    if key not in entry:
        raise InvalidInput(f"Substance {formula!r} is missing field {key!r}")
    value = entry[key]
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInput(f"Field {key!r} of substance {formula!r} is not numeric: {value!r}")
    value = float(value)
    if not math.isfinite(value):
        raise InvalidInput(f"Field {key!r} of substance {formula!r} is not finite: {value!r}")
    return value


class SubstanceTable:
    """Immutable mapping from formula to :class:`SubstanceRecord`.

    Callers wanting different data build a complete replacement table; there
    is no API for editing a table after construction.
    """

    def __init__(self, records: Mapping[str, SubstanceRecord]):
        self._records = MappingProxyType(dict(records))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Mapping[str, object]]) -> SubstanceTable:
        """Validate decoded reference data and build a table from it.

        ``data`` has the shape ``{formula: {"delta_Hf": .., "S": .., "delta_Gf": ..}}``.
        """
        if not isinstance(data, Mapping):
            raise InvalidInput("Reference data must be an object keyed by formula")
        records = {}
        for formula, entry in data.items():
            if not isinstance(entry, Mapping):
                raise InvalidInput(f"Entry for substance {formula!r} must be an object")
            values = {attr: _field_value(formula, entry, key) for key, attr in FIELDS.items()}
            records[formula] = SubstanceRecord(formula=formula, **values)
        return cls(records)

    def lookup(self, formula: str) -> SubstanceRecord:
        try:
            return self._records[formula]
        except KeyError:
            raise UnknownSubstance(formula) from None

    def get_substance_data(self, formula: str) -> dict[str, float]:
        return self.lookup(formula).to_dict()

    @property
    def records(self) -> Mapping[str, SubstanceRecord]:
        return self._records

    def __contains__(self, formula: object) -> bool:
        return formula in self._records

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"SubstanceTable({len(self._records)} substances)"
