"""
Pulumi modules for the web cluster
Simple function-based approach, one package per concern
"""

from .vpc import create_vpc_resources
from .security import create_web_security_group
from .compute import create_compute_resources
from .loadbalancer import create_load_balancer_resources

__all__ = [
    "create_vpc_resources",
    "create_web_security_group",
    "create_compute_resources",
    "create_load_balancer_resources"
]
