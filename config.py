"""
Configuration management for the web-cluster deployment
"""

import pulumi
from typing import Dict

UBUNTU_OWNER = "099720109477"  # Canonical
UBUNTU_JAMMY_FILTER = "ubuntu/images/hvm-ssd/ubuntu-jammy-22.04-amd64-server-*"


class Config:
    """Centralized configuration management for the web-cluster stack"""

    def __init__(self):
        self.config = pulumi.Config()

        # Naming
        self.project_name = self.config.get("project_name") or "web-cluster"

        # VPC Configuration
        self.vpc_cidr = self.config.get("vpc_cidr") or "10.0.0.0/16"
        self.public_subnet_cidrs = self.config.get_object("public_subnet_cidrs") or ["10.0.1.0/24", "10.0.2.0/24"]

        # Compute Configuration
        self.instance_type = self.config.get("instance_type") or "t2.micro"
        self.instance_count = self.config.get_int("instance_count") or 2
        self.ami_owner = self.config.get("ami_owner") or UBUNTU_OWNER
        self.ami_name_filter = self.config.get("ami_name_filter") or UBUNTU_JAMMY_FILTER
        self.key_name = self.config.get("key_name")
        self.page_message = self.config.get("page_message") or "Hello World"

        # SSH is only reachable from inside the VPC unless overridden
        self.ssh_cidr = self.config.get("ssh_cidr") or self.vpc_cidr

        # Load Balancer Configuration
        self.http_port = self.config.get_int("http_port") or 80
        self.health_check_path = self.config.get("health_check_path") or "/"

        # Additional tags
        self.additional_tags = self.config.get_object("tags") or {}

    @property
    def common_tags(self) -> Dict[str, str]:
        """Get common tags for all resources"""
        base_tags = {
            "Environment": pulumi.get_stack(),
            "Project": self.project_name,
            "ManagedBy": "pulumi",
        }
        base_tags.update(self.additional_tags)
        return base_tags


def get_config() -> Config:
    """Get the global configuration instance"""
    return Config()
