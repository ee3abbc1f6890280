import logging
from dataclasses import dataclass, fields
from typing import Any, Dict, List, Mapping

logger = logging.getLogger(__name__)


@dataclass
class Record:
    """A base dataclass for flat records read from or written to tabular sources."""

    def __repr__(self) -> str:
        field_strings = [f"{f.name}={getattr(self, f.name)!r}" for f in fields(self)]
        return f"{type(self).__name__}({', '.join(field_strings)})"

    @classmethod
    def fields(cls) -> List[str]:
        """
        Get a list of field names for this record, in declaration order.
        """
        return [f.name for f in fields(cls)]

    @classmethod
    def _build_alias_mapping(cls) -> Dict[str, str]:
        """Build a mapping from field aliases to field names."""
        return {f.metadata['alias']: f.name for f in fields(cls) if f.metadata.get('alias')}

    def as_dict(self, use_aliases: bool = False) -> Dict[str, Any]:
        """
        Convert this record to a dictionary.

        Args:
            use_aliases (bool): Key the result by each field's alias where one is declared.

        Returns:
            Dict[str, Any]: A dictionary representation of this record.
        """
        result = {}
        for f in fields(self):
            key = (f.metadata.get('alias') or f.name) if use_aliases else f.name
            result[key] = getattr(self, f.name)
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Record":
        """
        Load a record from a mapping keyed by field names or aliases.
        Unknown keys are ignored.
        """
        alias_to_field = cls._build_alias_mapping()
        field_names = cls.fields()
        clean_data = {}
        for key, value in data.items():
            name = alias_to_field.get(key, key)
            if name not in field_names:
                logger.debug("Ignoring unknown key %s for %s.", key, cls.__name__)
                continue
            clean_data[name] = value
        return cls(**clean_data)
