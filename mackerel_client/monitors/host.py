"""
Host metric monitor.
"""

from dataclasses import dataclass
from typing import ClassVar, List, Optional

from mackerel_client.monitors.base import Monitor, MonitorType, wire_field


@dataclass
class HostMonitor(Monitor):
    """
    Threshold check on a host metric.

    The check fires when the metric compared with ``operator`` crosses
    ``warning`` or ``critical`` over ``duration`` minutes, for hosts matched
    by ``scopes`` and not matched by ``exclude_scopes``.
    """
    type: ClassVar[MonitorType] = MonitorType.HOST

    name: Optional[str] = wire_field('name', str)
    metric: Optional[str] = wire_field('metric', str)
    operator: Optional[str] = wire_field('operator', str)
    warning: Optional[float] = wire_field('warning', float)
    critical: Optional[float] = wire_field('critical', float)
    duration: Optional[int] = wire_field('duration', int)
    scopes: List[str] = wire_field('scopes', list)
    exclude_scopes: List[str] = wire_field('excludeScopes', list)
    max_check_attempts: Optional[int] = wire_field('maxCheckAttempts', int)
