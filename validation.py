"""
Topology validation for the web-cluster stack
Fails the Pulumi program before any resource is declared
"""

import ipaddress
from typing import List

import pulumi

MIN_SUBNETS = 2


def parse_network(cidr: str, label: str) -> ipaddress.IPv4Network:
    try:
        return ipaddress.IPv4Network(cidr, strict=True)
    except ValueError as e:
        raise pulumi.RunError(f"{label} '{cidr}' is not a valid IPv4 CIDR block: {e}")


def validate_subnets(vpc_cidr: str, subnet_cidrs: List[str]) -> None:
    """
    Check that subnets fit inside the VPC and do not overlap

    Raises:
        pulumi.RunError: If any subnet is malformed, outside the VPC or overlapping
    """
    if len(subnet_cidrs) < MIN_SUBNETS:
        raise pulumi.RunError(
            f"At least {MIN_SUBNETS} public subnets are required by the load balancer, got {len(subnet_cidrs)}")

    vpc = parse_network(vpc_cidr, "vpc_cidr")
    subnets = [parse_network(cidr, "public subnet") for cidr in subnet_cidrs]

    for subnet in subnets:
        if not subnet.subnet_of(vpc):
            raise pulumi.RunError(f"Subnet {subnet} is not inside VPC {vpc}")

    for i, left in enumerate(subnets):
        for right in subnets[i + 1:]:
            if left.overlaps(right):
                raise pulumi.RunError(f"Subnets {left} and {right} overlap")


def validate_ssh_cidr(vpc_cidr: str, ssh_cidr: str) -> None:
    """SSH ingress must never be wider than the VPC itself"""
    vpc = parse_network(vpc_cidr, "vpc_cidr")
    ssh = parse_network(ssh_cidr, "ssh_cidr")
    if not ssh.subnet_of(vpc):
        raise pulumi.RunError(f"ssh_cidr {ssh} must be contained in VPC {vpc}")


def validate_availability_zones(subnet_cidrs: List[str], availability_zones: List[str]) -> None:
    if len(subnet_cidrs) > len(availability_zones):
        raise pulumi.RunError(
            f"{len(subnet_cidrs)} subnets requested but only {len(availability_zones)} "
            f"availability zones are available: {availability_zones}")


def validate_topology(config) -> None:
    """
    Validate the declared topology from a Config instance

    Args:
        config: Config instance (see config.py)

    Raises:
        pulumi.RunError: On the first invalid setting found
    """
    validate_subnets(config.vpc_cidr, config.public_subnet_cidrs)
    validate_ssh_cidr(config.vpc_cidr, config.ssh_cidr)

    if config.instance_count != len(config.public_subnet_cidrs):
        raise pulumi.RunError(
            f"instance_count ({config.instance_count}) must match the number of public subnets "
            f"({len(config.public_subnet_cidrs)}): one web server per subnet")

    if not 0 < config.http_port < 65536:
        raise pulumi.RunError(f"http_port {config.http_port} is out of range")

    if not config.health_check_path.startswith("/"):
        raise pulumi.RunError(f"health_check_path '{config.health_check_path}' must start with '/'")
