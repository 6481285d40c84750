"""
Load Balancer Module Functions
Creates the target group, instance attachments, application load balancer and listener
"""

import pulumi
import pulumi_aws as aws
from typing import Dict, List, Any


def create_target_group(name: str, vpc_id: pulumi.Output[str], port: int = 80,
                        health_check_path: str = "/", tags: Dict[str, str] = None) -> Dict[str, Any]:
    """
    Create HTTP target group with a health check

    Args:
        name: Resource name prefix
        vpc_id: VPC ID
        port: Port the instances serve on
        health_check_path: Path probed by the health check
        tags: Additional tags

    Returns:
        Dict with target group resource and outputs
    """
    tags = tags or {}

    target_group = aws.lb.TargetGroup(
        f"{name}-tg",
        port=port,
        protocol="HTTP",
        target_type="instance",
        vpc_id=vpc_id,
        health_check=aws.lb.TargetGroupHealthCheckArgs(
            enabled=True,
            path=health_check_path,
            protocol="HTTP",
            port="traffic-port",
            matcher="200",
        ),
        tags={
            **tags,
            "Name": f"{name}-tg",
            "Module": "loadbalancer"
        }
    )

    return {
        "target_group": target_group,
        "target_group_arn": target_group.arn
    }


def attach_instances(name: str, target_group_arn: pulumi.Output[str],
                     instance_ids: List[pulumi.Output[str]], port: int = 80) -> Dict[str, Any]:
    """Register every instance with the same target group"""
    attachments = []
    for i, instance_id in enumerate(instance_ids):
        attachment = aws.lb.TargetGroupAttachment(
            f"{name}-tg-attachment-{i+1}",
            target_group_arn=target_group_arn,
            target_id=instance_id,
            port=port
        )
        attachments.append(attachment)

    return {
        "attachments": attachments
    }


def create_application_load_balancer(name: str, subnet_ids: List[pulumi.Output[str]],
                                     security_group_id: pulumi.Output[str],
                                     tags: Dict[str, str] = None) -> Dict[str, Any]:
    """
    Create internet-facing application load balancer across all public subnets

    Args:
        name: Resource name prefix
        subnet_ids: Public subnets, at least two in distinct availability zones
        security_group_id: Security group for the load balancer
        tags: Additional tags

    Returns:
        Dict with load balancer resource and outputs
    """
    tags = tags or {}

    load_balancer = aws.lb.LoadBalancer(
        f"{name}-alb",
        internal=False,
        load_balancer_type="application",
        security_groups=[security_group_id],
        subnets=subnet_ids,
        tags={
            **tags,
            "Name": f"{name}-alb",
            "Module": "loadbalancer"
        }
    )

    return {
        "load_balancer": load_balancer,
        "load_balancer_arn": load_balancer.arn,
        "dns_name": load_balancer.dns_name
    }


def create_http_listener(name: str, load_balancer_arn: pulumi.Output[str],
                         target_group_arn: pulumi.Output[str], port: int = 80) -> Dict[str, Any]:
    """Forward HTTP traffic on the listener port to the target group"""
    listener = aws.lb.Listener(
        f"{name}-http-listener",
        load_balancer_arn=load_balancer_arn,
        port=port,
        protocol="HTTP",
        default_actions=[aws.lb.ListenerDefaultActionArgs(
            type="forward",
            target_group_arn=target_group_arn,
        )]
    )

    return {
        "listener": listener,
        "listener_arn": listener.arn
    }


def create_load_balancer_resources(name: str, vpc_id: pulumi.Output[str], subnet_ids: List[pulumi.Output[str]],
                                   security_group_id: pulumi.Output[str], instance_ids: List[pulumi.Output[str]],
                                   port: int = 80, health_check_path: str = "/",
                                   tags: Dict[str, str] = None) -> Dict[str, Any]:
    """
    Create complete load balancing layer in front of the web servers

    Args:
        name: Resource name prefix
        vpc_id: VPC ID
        subnet_ids: Public subnets for the load balancer
        security_group_id: Security group for the load balancer
        instance_ids: Web server instance IDs to register
        port: HTTP port on both the listener and the instances
        health_check_path: Target group health check path
        tags: Additional tags for all resources

    Returns:
        Dict with all load balancer resources and outputs
    """
    tags = tags or {}

    pulumi.log.info(f"Declaring application load balancer for {name} with {len(instance_ids)} targets")

    tg_result = create_target_group(name, vpc_id, port, health_check_path, tags)

    attachments_result = attach_instances(name, tg_result["target_group_arn"], instance_ids, port)

    alb_result = create_application_load_balancer(name, subnet_ids, security_group_id, tags)

    listener_result = create_http_listener(
        name,
        alb_result["load_balancer_arn"],
        tg_result["target_group_arn"],
        port
    )

    return {
        "target_group_arn": tg_result["target_group_arn"],
        "load_balancer_arn": alb_result["load_balancer_arn"],
        "lb_dns_name": alb_result["dns_name"],
        "listener_arn": listener_result["listener_arn"],
        # Keep references to all resources for dependencies
        "_target_group": tg_result["target_group"],
        "_attachments": attachments_result["attachments"],
        "_load_balancer": alb_result["load_balancer"],
        "_listener": listener_result["listener"],
    }
