"""
Web Cluster - two Apache servers behind an Application Load Balancer
VPC, public subnets, security group, EC2 instances and ALB
"""
import pulumi
from config import get_config
from validation import validate_topology
from modules.vpc import create_vpc_resources
from modules.security import create_web_security_group
from modules.compute import create_compute_resources
from modules.loadbalancer import create_load_balancer_resources

# Configuration
config = get_config()
validate_topology(config)
name = config.project_name
tags = config.common_tags

# 1. Network
network = create_vpc_resources(name, config.vpc_cidr, config.public_subnet_cidrs, tags)

# 2. Security group shared by instances and load balancer
security = create_web_security_group(
    name,
    network["vpc_id"],
    config.vpc_cidr,
    ssh_cidr=config.ssh_cidr,
    http_port=config.http_port,
    tags=tags)

# 3. Web servers, one per subnet
compute = create_compute_resources(
    name,
    config.instance_type,
    network["public_subnet_ids"],
    security["security_group_id"],
    ami_owner=config.ami_owner,
    ami_name_filter=config.ami_name_filter,
    page_message=config.page_message,
    key_name=config.key_name,
    tags=tags)

# 4. Load balancer
load_balancer = create_load_balancer_resources(
    name,
    network["vpc_id"],
    network["public_subnet_ids"],
    security["security_group_id"],
    compute["instance_ids"],
    port=config.http_port,
    health_check_path=config.health_check_path,
    tags=tags)

# Exports
pulumi.export("instance_public_dns", compute["public_dns"])
pulumi.export("instance_public_ips", compute["public_ips"])
pulumi.export("lb_dns_name", load_balancer["lb_dns_name"])
pulumi.export("vpc_id", network["vpc_id"])
pulumi.export("availability_zones", network["availability_zones"])
pulumi.export("url", pulumi.Output.concat("http://", load_balancer["lb_dns_name"]))
