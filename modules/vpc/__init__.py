"""
VPC Module
Public network with two subnets in distinct availability zones
"""

from .functions import (
    create_vpc,
    create_internet_gateway,
    create_public_subnets,
    create_public_route_table,
    create_vpc_resources,
)

__all__ = [
    "create_vpc",
    "create_internet_gateway",
    "create_public_subnets",
    "create_public_route_table",
    "create_vpc_resources"
]
