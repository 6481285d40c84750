"""
Compute Module
Apache web servers on Ubuntu 22.04
"""

from .functions import get_ubuntu_ami, render_user_data, create_web_instances, create_compute_resources

__all__ = [
    "get_ubuntu_ami",
    "render_user_data",
    "create_web_instances",
    "create_compute_resources"
]
