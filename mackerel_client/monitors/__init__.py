"""
Monitor variants and discriminated decoding.
"""

from typing import Any, Dict, Type

from mackerel_client.errors import DecodeError
from mackerel_client.monitors.base import Monitor, MonitorType
from mackerel_client.monitors.connectivity import ConnectivityMonitor
from mackerel_client.monitors.external import ExternalMonitor
from mackerel_client.monitors.host import HostMonitor
from mackerel_client.monitors.service import ServiceMonitor

MONITOR_CLASSES: Dict[str, Type[Monitor]] = {
    MonitorType.CONNECTIVITY.value: ConnectivityMonitor,
    MonitorType.HOST.value: HostMonitor,
    MonitorType.SERVICE.value: ServiceMonitor,
    MonitorType.EXTERNAL.value: ExternalMonitor,
}


def monitor_from_dict(data: Any) -> Monitor:
    """
    Decode a monitor, choosing the variant from its ``type`` key.

    Args:
        data: Decoded JSON object

    Returns:
        Instance of the matching Monitor subclass

    Raises:
        DecodeError: If data is not an object or its type is missing or unknown
    """
    if not isinstance(data, dict):
        raise DecodeError(f"Monitor must be a JSON object, got {type(data).__name__}")

    monitor_type = data.get('type')
    monitor_class = MONITOR_CLASSES.get(monitor_type) if isinstance(monitor_type, str) else None
    if monitor_class is None:
        raise DecodeError(
            f"Unknown monitor type {monitor_type!r}. "
            f"Valid types: {', '.join(MONITOR_CLASSES)}"
        )

    return monitor_class.from_dict(data)


__all__ = [
    'Monitor',
    'MonitorType',
    'ConnectivityMonitor',
    'HostMonitor',
    'ServiceMonitor',
    'ExternalMonitor',
    'MONITOR_CLASSES',
    'monitor_from_dict',
]
