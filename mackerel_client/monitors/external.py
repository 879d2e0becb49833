"""
External HTTP monitor.
"""

from dataclasses import dataclass
from typing import ClassVar, Optional

from mackerel_client.monitors.base import Monitor, MonitorType, wire_field


@dataclass
class ExternalMonitor(Monitor):
    """
    URL checked from outside by the monitoring service.

    The response time thresholds are optional; when set, the check also
    fires if the average response time (milliseconds) over
    ``response_time_duration`` minutes exceeds them.
    """
    type: ClassVar[MonitorType] = MonitorType.EXTERNAL

    name: Optional[str] = wire_field('name', str)
    url: Optional[str] = wire_field('url', str)
    response_time_warning: Optional[float] = wire_field('responseTimeWarning', float)
    response_time_critical: Optional[float] = wire_field('responseTimeCritical', float)
    response_time_duration: Optional[int] = wire_field('responseTimeDuration', int)
