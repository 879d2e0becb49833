"""
Service metric monitor.
"""

from dataclasses import dataclass
from typing import ClassVar, Optional

from mackerel_client.monitors.base import Monitor, MonitorType, wire_field


@dataclass
class ServiceMonitor(Monitor):
    """Threshold check on a metric posted to a service"""
    type: ClassVar[MonitorType] = MonitorType.SERVICE

    name: Optional[str] = wire_field('name', str)
    service: Optional[str] = wire_field('service', str)
    metric: Optional[str] = wire_field('metric', str)
    operator: Optional[str] = wire_field('operator', str)
    warning: Optional[float] = wire_field('warning', float)
    critical: Optional[float] = wire_field('critical', float)
    duration: Optional[int] = wire_field('duration', int)
