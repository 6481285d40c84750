"""
Load Balancer Module
Application load balancer in front of the web servers
"""

from .functions import (
    create_target_group,
    attach_instances,
    create_application_load_balancer,
    create_http_listener,
    create_load_balancer_resources,
)

__all__ = [
    "create_target_group",
    "attach_instances",
    "create_application_load_balancer",
    "create_http_listener",
    "create_load_balancer_resources"
]
