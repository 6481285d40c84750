"""
VPC Module Functions
Creates the VPC, public subnets, internet gateway and public route table
"""

import pulumi
import pulumi_aws as aws
from typing import Dict, List, Any

from validation import validate_availability_zones


def create_vpc(name: str, cidr: str, tags: Dict[str, str] = None) -> Dict[str, Any]:
    """
    Create VPC with DNS settings

    Args:
        name: VPC name
        cidr: VPC CIDR block
        tags: Additional tags

    Returns:
        Dict with vpc resource and outputs
    """
    tags = tags or {}

    vpc = aws.ec2.Vpc(
        f"{name}-vpc",
        cidr_block=cidr,
        enable_dns_hostnames=True,
        enable_dns_support=True,
        tags={
            **tags,
            "Name": f"{name}-vpc",
            "Module": "vpc"
        }
    )

    return {
        "vpc": vpc,
        "vpc_id": vpc.id,
        "vpc_cidr_block": vpc.cidr_block
    }


def create_internet_gateway(name: str, vpc_id: pulumi.Output[str], tags: Dict[str, str] = None) -> Dict[str, Any]:
    """
    Create Internet Gateway for VPC

    Args:
        name: Resource name prefix
        vpc_id: VPC ID to attach to
        tags: Additional tags

    Returns:
        Dict with igw resource and outputs
    """
    tags = tags or {}

    igw = aws.ec2.InternetGateway(
        f"{name}-igw",
        vpc_id=vpc_id,
        tags={
            **tags,
            "Name": f"{name}-igw",
            "Module": "vpc"
        }
    )

    return {
        "igw": igw,
        "igw_id": igw.id
    }


def create_public_subnets(name: str, vpc_id: pulumi.Output[str], subnet_cidrs: List[str],
                         availability_zones: List[str], tags: Dict[str, str] = None) -> Dict[str, Any]:
    """
    Create one public subnet per CIDR, the i-th subnet in the i-th availability zone

    Args:
        name: Resource name prefix
        vpc_id: VPC ID
        subnet_cidrs: List of CIDR blocks for subnets
        availability_zones: List of availability zones
        tags: Additional tags

    Returns:
        Dict with subnet resources and outputs
    """
    tags = tags or {}

    subnets = []
    for i, cidr in enumerate(subnet_cidrs):
        subnet = aws.ec2.Subnet(
            f"{name}-public-subnet-{i+1}",
            vpc_id=vpc_id,
            cidr_block=cidr,
            availability_zone=availability_zones[i],
            map_public_ip_on_launch=True,
            tags={
                **tags,
                "Name": f"{name}-public-subnet-{i+1}",
                "Type": "public",
                "Module": "vpc"
            }
        )
        subnets.append(subnet)

    return {
        "subnets": subnets,
        "subnet_ids": [subnet.id for subnet in subnets],
        "availability_zones": list(availability_zones[:len(subnet_cidrs)])
    }


def create_public_route_table(name: str, vpc_id: pulumi.Output[str], igw_id: pulumi.Output[str],
                             subnet_ids: List[pulumi.Output[str]], tags: Dict[str, str] = None) -> Dict[str, Any]:
    """
    Create route table for public subnets

    Args:
        name: Resource name prefix
        vpc_id: VPC ID
        igw_id: Internet Gateway ID
        subnet_ids: List of subnet IDs to associate
        tags: Additional tags

    Returns:
        Dict with route table resources and outputs
    """
    tags = tags or {}

    route_table = aws.ec2.RouteTable(
        f"{name}-public-rt",
        vpc_id=vpc_id,
        tags={
            **tags,
            "Name": f"{name}-public-rt",
            "Module": "vpc"
        }
    )

    # Default route always goes to the internet gateway
    route = aws.ec2.Route(
        f"{name}-public-route",
        route_table_id=route_table.id,
        destination_cidr_block="0.0.0.0/0",
        gateway_id=igw_id
    )

    associations = []
    for i, subnet_id in enumerate(subnet_ids):
        association = aws.ec2.RouteTableAssociation(
            f"{name}-public-rta-{i+1}",
            subnet_id=subnet_id,
            route_table_id=route_table.id
        )
        associations.append(association)

    return {
        "route_table": route_table,
        "route": route,
        "associations": associations,
        "route_table_id": route_table.id
    }


def create_vpc_resources(name: str, vpc_cidr: str, public_subnet_cidrs: List[str],
                        tags: Dict[str, str] = None) -> Dict[str, Any]:
    """
    Create complete public network for the web cluster

    Args:
        name: Resource name prefix
        vpc_cidr: VPC CIDR block
        public_subnet_cidrs: List of public subnet CIDR blocks
        tags: Additional tags for all resources

    Returns:
        Dict with all VPC resources and outputs
    """
    tags = tags or {}

    pulumi.log.info(f"Declaring network for {name}: VPC {vpc_cidr}, subnets {public_subnet_cidrs}")

    azs = aws.get_availability_zones(state="available")
    validate_availability_zones(public_subnet_cidrs, azs.names)

    vpc_result = create_vpc(name, vpc_cidr, tags)

    igw_result = create_internet_gateway(name, vpc_result["vpc_id"], tags)

    subnets_result = create_public_subnets(
        name,
        vpc_result["vpc_id"],
        public_subnet_cidrs,
        azs.names,
        tags
    )

    route_table_result = create_public_route_table(
        name,
        vpc_result["vpc_id"],
        igw_result["igw_id"],
        subnets_result["subnet_ids"],
        tags
    )

    return {
        "vpc_id": vpc_result["vpc_id"],
        "vpc_cidr_block": vpc_result["vpc_cidr_block"],
        "igw_id": igw_result["igw_id"],
        "public_subnet_ids": subnets_result["subnet_ids"],
        "availability_zones": subnets_result["availability_zones"],
        "route_table_id": route_table_result["route_table_id"],
        # Keep references to all resources for dependencies
        "_vpc": vpc_result["vpc"],
        "_igw": igw_result["igw"],
        "_subnets": subnets_result["subnets"],
        "_route_table": route_table_result["route_table"],
        "_route": route_table_result["route"],
    }
