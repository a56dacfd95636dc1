from __future__ import annotations

"""
Filterable Record Data Model.

Records are immutable, flat collections of named string fields. Equality
and hashing stay identity based: two records holding the same values are
still distinct entries.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional


@dataclass(frozen=True, eq=False)
class Record:
    """
    Immutable set of named string fields.

    Attributes:
        fields: Read-only mapping of field name to value.
    """
    fields: Mapping[str, str]

    def __post_init__(self) -> None:
        if not isinstance(self.fields, Mapping):
            raise TypeError(
                f"Record fields must be a mapping, received {type(self.fields).__name__}."
            )
        for key, value in self.fields.items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise TypeError(f"Record field '{key}' must map str to str.")

        # Detach from the caller's mapping and freeze
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    @classmethod
    def of(cls, **fields: str) -> Record:
        """Build a record from keyword arguments."""
        return cls(fields)

    def get(self, field_name: str) -> Optional[str]:
        """Return the value of a field, or None if the record lacks it."""
        return self.fields.get(field_name)
