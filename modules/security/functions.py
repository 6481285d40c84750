"""
Security Module Functions
Creates the web security group shared by the instances and the load balancer
"""

import pulumi
import pulumi_aws as aws
from typing import Dict, Any

from validation import validate_ssh_cidr


def create_web_security_group(name: str, vpc_id: pulumi.Output[str], vpc_cidr: str,
                              ssh_cidr: str = None, http_port: int = 80,
                              tags: Dict[str, str] = None) -> Dict[str, Any]:
    """
    Create security group allowing HTTP from anywhere and SSH from inside the VPC

    Args:
        name: Resource name prefix
        vpc_id: VPC ID
        vpc_cidr: VPC CIDR block, used as the SSH source by default
        ssh_cidr: SSH source CIDR, must be inside vpc_cidr
        http_port: Port served by Apache and the load balancer
        tags: Additional tags

    Returns:
        Dict with security group resource and outputs
    """
    tags = tags or {}
    ssh_cidr = ssh_cidr or vpc_cidr
    validate_ssh_cidr(vpc_cidr, ssh_cidr)

    security_group = aws.ec2.SecurityGroup(
        f"{name}-web-sg",
        vpc_id=vpc_id,
        description="Allow HTTP from anywhere and SSH from inside the VPC",
        ingress=[
            aws.ec2.SecurityGroupIngressArgs(
                description="HTTP",
                protocol="tcp",
                from_port=http_port,
                to_port=http_port,
                cidr_blocks=["0.0.0.0/0"],
            ),
            aws.ec2.SecurityGroupIngressArgs(
                description="SSH",
                protocol="tcp",
                from_port=22,
                to_port=22,
                cidr_blocks=[ssh_cidr],  # VPC CIDR only
            ),
        ],
        egress=[aws.ec2.SecurityGroupEgressArgs(
            protocol="-1",
            from_port=0,
            to_port=0,
            cidr_blocks=["0.0.0.0/0"],
        )],
        tags={
            **tags,
            "Name": f"{name}-web-sg",
            "Module": "security"
        }
    )

    return {
        "security_group": security_group,
        "security_group_id": security_group.id,
        "ssh_cidr": ssh_cidr
    }
