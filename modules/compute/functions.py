"""
Compute Module Functions
Resolves the Ubuntu AMI and creates the Apache web servers
"""

import shlex

import pulumi
import pulumi_aws as aws
from typing import Dict, List, Any, Optional

from config import UBUNTU_OWNER, UBUNTU_JAMMY_FILTER


def get_ubuntu_ami(owner: str = UBUNTU_OWNER, name_filter: str = UBUNTU_JAMMY_FILTER) -> str:
    """
    Look up the most recent AMI matching the name filter

    Args:
        owner: AMI owner account ID (Canonical by default)
        name_filter: AMI name pattern

    Returns:
        AMI ID
    """
    ami = aws.ec2.get_ami(
        most_recent=True,
        owners=[owner],
        filters=[
            aws.ec2.GetAmiFilterArgs(name="name", values=[name_filter]),
            aws.ec2.GetAmiFilterArgs(name="virtualization-type", values=["hvm"]),
        ]
    )
    return ami.id


def render_user_data(message: str = "Hello World") -> str:
    """Startup script installing Apache and serving a static page"""
    page = shlex.quote(f"<h1>{message}</h1>")
    return f"""#!/bin/bash
apt-get update -y
apt-get install -y apache2
systemctl start apache2
systemctl enable apache2
echo {page} > /var/www/html/index.html
"""


def create_web_instances(name: str, ami_id: str, instance_type: str,
                         subnet_ids: List[pulumi.Output[str]], security_group_id: pulumi.Output[str],
                         user_data: str, tags: Dict[str, str] = None,
                         key_name: Optional[str] = None) -> Dict[str, Any]:
    """
    Create one web server per subnet

    Args:
        name: Resource name prefix
        ami_id: AMI ID to boot
        instance_type: EC2 instance type
        subnet_ids: Subnets to spread the instances over, one instance each
        security_group_id: Security group attached to every instance
        user_data: Startup script
        tags: Additional tags
        key_name: Optional EC2 key pair name for SSH

    Returns:
        Dict with instance resources and outputs
    """
    tags = tags or {}

    if not key_name:
        pulumi.log.warn(f"No key pair configured for {name} web servers, SSH logins will not be possible")

    instances = []
    for i, subnet_id in enumerate(subnet_ids):
        instance = aws.ec2.Instance(
            f"{name}-web-{i+1}",
            ami=ami_id,
            instance_type=instance_type,
            subnet_id=subnet_id,
            vpc_security_group_ids=[security_group_id],
            associate_public_ip_address=True,
            key_name=key_name,
            user_data=user_data,
            tags={
                **tags,
                "Name": f"{name}-web-{i+1}",
                "Module": "compute"
            }
        )
        instances.append(instance)

    return {
        "instances": instances,
        "instance_ids": [instance.id for instance in instances],
        "public_dns": [instance.public_dns for instance in instances],
        "public_ips": [instance.public_ip for instance in instances]
    }


def create_compute_resources(name: str, instance_type: str, subnet_ids: List[pulumi.Output[str]],
                             security_group_id: pulumi.Output[str], ami_owner: str = UBUNTU_OWNER,
                             ami_name_filter: str = UBUNTU_JAMMY_FILTER, page_message: str = "Hello World",
                             key_name: Optional[str] = None, tags: Dict[str, str] = None) -> Dict[str, Any]:
    """
    Resolve the AMI, render the startup script and create the web servers

    Returns:
        Dict with instance outputs and the resolved AMI ID
    """
    pulumi.log.info(f"Declaring {len(subnet_ids)} {instance_type} web servers for {name}")

    ami_id = get_ubuntu_ami(ami_owner, ami_name_filter)
    result = create_web_instances(
        name,
        ami_id,
        instance_type,
        subnet_ids,
        security_group_id,
        render_user_data(page_message),
        tags,
        key_name
    )
    result["ami_id"] = ami_id
    return result
