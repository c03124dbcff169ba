"""
Pulumi building blocks for the Fargate app stack
Function-based approach, each create_* returns a dict of resources and outputs
"""

from .cluster import create_cluster
from .load_balancer import create_load_balancer
from .dns import create_dns_record
from .registry import create_registry
from .service import build_environment, create_service
from .stack import deploy, endpoint_url

__all__ = [
    "create_cluster",
    "create_load_balancer",
    "create_dns_record",
    "create_registry",
    "build_environment",
    "create_service",
    "deploy",
    "endpoint_url",
]
