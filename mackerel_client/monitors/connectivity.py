"""
Host connectivity monitor.
"""

from dataclasses import dataclass
from typing import ClassVar, List

from mackerel_client.monitors.base import Monitor, MonitorType, wire_field


@dataclass
class ConnectivityMonitor(Monitor):
    """
    Alerts when hosts stop posting metrics.

    Has no metric or thresholds; only the set of hosts it covers.
    """
    type: ClassVar[MonitorType] = MonitorType.CONNECTIVITY

    scopes: List[str] = wire_field('scopes', list)
    exclude_scopes: List[str] = wire_field('excludeScopes', list)
