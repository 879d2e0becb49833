"""
Base monitor class that all monitor variants inherit from.

A monitor travels over the wire as a flat JSON object whose ``type`` key
selects the variant. Each variant is a dataclass declaring only the fields
that are meaningful for it; the camelCase wire name and expected JSON type of
every field are carried in the dataclass field metadata.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Dict, Optional

from mackerel_client.errors import DecodeError


class MonitorType(Enum):
    """Monitor type discriminator"""
    CONNECTIVITY = "connectivity"
    HOST = "host"
    SERVICE = "service"
    EXTERNAL = "external"


def wire_field(json_name: str, kind: type) -> Any:
    """
    Declare a monitor field.

    Args:
        json_name: Key used in the JSON representation
        kind: Expected value type (str, int, float or list of str)

    Returns:
        dataclasses.Field with a None default (empty list for list fields)
    """
    metadata = {'json': json_name, 'kind': kind}
    if kind is list:
        return field(default_factory=list, metadata=metadata)
    return field(default=None, metadata=metadata)


def _is_empty(value: Any) -> bool:
    """Zero values are left out of the JSON representation"""
    if value is None:
        return True
    if isinstance(value, (str, list)):
        return len(value) == 0
    return value == 0


def _decode_value(key: str, value: Any, kind: type) -> Any:
    """Check a decoded JSON value against the declared field type"""
    if kind is str:
        if isinstance(value, str):
            return value
    elif kind is list:
        if isinstance(value, list) and all(isinstance(item, str) for item in value):
            return list(value)
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        if kind is float:
            return float(value)
        # integral fields may arrive as 3.0
        if isinstance(value, int) or value.is_integer():
            return int(value)

    raise DecodeError(
        f"Field '{key}' has invalid value {value!r} (expected {kind.__name__})"
    )


@dataclass
class Monitor(ABC):
    """
    Base class for the four monitor variants.

    ``id`` is assigned by the service on creation and is required for
    update and delete. Subclasses set the ``type`` class attribute.

    Empty scalar values (zero, empty string) are stored as None, since
    they are not sent over the wire and would come back as None anyway.
    """

    id: Optional[str] = wire_field('id', str)

    @property
    @abstractmethod
    def type(self) -> MonitorType:
        """Discriminator sent as the ``type`` key"""
        pass

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if f.metadata['kind'] is not list and _is_empty(value):
                setattr(self, f.name, None)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert monitor to its JSON representation.

        Fields holding None, zero, an empty string or an empty list are
        omitted; ``type`` is always present.

        Returns:
            Dictionary keyed by wire field names
        """
        data: Dict[str, Any] = {'type': self.type.value}

        for f in fields(self):
            value = getattr(self, f.name)
            if _is_empty(value):
                continue
            data[f.metadata['json']] = list(value) if isinstance(value, list) else value

        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Monitor":
        """
        Build a monitor of this variant from its JSON representation.

        Keys that do not belong to the variant are ignored and JSON nulls
        are treated as absent. Called on Monitor itself, the variant is
        chosen from the ``type`` key.

        Args:
            data: Decoded JSON object

        Returns:
            Monitor instance

        Raises:
            DecodeError: If data is not an object, its type names another
                variant, or a field holds a value of the wrong type
        """
        if cls is Monitor:
            from mackerel_client.monitors import monitor_from_dict
            return monitor_from_dict(data)

        if not isinstance(data, dict):
            raise DecodeError(f"Monitor must be a JSON object, got {type(data).__name__}")

        declared = data.get('type')
        if declared is not None and declared != cls.type.value:
            raise DecodeError(
                f"Cannot decode '{declared}' monitor as {cls.__name__}"
            )

        kwargs = {}
        for f in fields(cls):
            key = f.metadata['json']
            value = data.get(key)
            if value is None:
                continue
            kwargs[f.name] = _decode_value(key, value, f.metadata['kind'])

        return cls(**kwargs)
