"""
Stack assembly
Declares every resource group in dependency order
"""
import pulumi

from .cluster import create_cluster
from .load_balancer import create_load_balancer
from .dns import create_dns_record
from .registry import create_registry
from .service import create_service


def endpoint_url(domain_name: str) -> str:
    """Public HTTPS URL of the deployed endpoint"""
    return f"https://{domain_name}"


def deploy(config):
    """Declare the whole topology from an already loaded Config"""
    pulumi.log.info(f"Deploying Fargate app for {config.domain_name}")

    # 1. ECS cluster
    cluster = create_cluster(config)

    # 2. Load balancer, needed by both DNS and the service
    load_balancer = create_load_balancer(config)

    # 3. DNS alias to the load balancer
    dns = create_dns_record(config, load_balancer)

    # 4. Registry and image
    registry = create_registry(config)

    # 5. Service
    service = create_service(config, cluster, load_balancer, registry)

    return {
        "cluster": cluster,
        "load_balancer": load_balancer,
        "dns": dns,
        "registry": registry,
        "service": service,
        "url": endpoint_url(config.domain_name),
    }
