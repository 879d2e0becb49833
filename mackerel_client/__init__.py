"""
Python client for the Mackerel monitors API.
"""

from mackerel_client.client import MonitorClient
from mackerel_client.config import ClientConfig, config_from_env, load_config
from mackerel_client.errors import (
    ConfigError, DecodeError, MackerelError, RequestConstructionError,
    TransportError, UnexpectedStatusError
)
from mackerel_client.monitors import (
    ConnectivityMonitor, ExternalMonitor, HostMonitor, Monitor, MonitorType,
    ServiceMonitor, monitor_from_dict
)
from mackerel_client.transport import HTTPTransport, Transport

__version__ = "0.1.0"

__all__ = [
    'MonitorClient',
    'ClientConfig',
    'config_from_env',
    'load_config',
    'ConfigError',
    'DecodeError',
    'MackerelError',
    'RequestConstructionError',
    'TransportError',
    'UnexpectedStatusError',
    'Monitor',
    'MonitorType',
    'ConnectivityMonitor',
    'HostMonitor',
    'ServiceMonitor',
    'ExternalMonitor',
    'monitor_from_dict',
    'HTTPTransport',
    'Transport',
]
