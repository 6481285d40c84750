"""
Security Module
Web security group for instances and load balancer
"""

from .functions import create_web_security_group

__all__ = ["create_web_security_group"]
