"""
Fargate App - ECS service behind an HTTPS load balancer
Cluster, ALB, Route53 alias, ECR image and Fargate service
"""
import pulumi
from config import get_config
from fargate_app import deploy

# Configuration (fails fast before any resource is declared)
config = get_config()

# All resources, in dependency order
stack = deploy(config)

# Exports
pulumi.export("url", stack["url"])
pulumi.export("cluster_name", stack["cluster"]["cluster_name"])
pulumi.export("load_balancer_dns_name", stack["load_balancer"]["dns_name"])
pulumi.export("repository_url", stack["registry"]["repository_url"])
pulumi.export("image_uri", stack["registry"]["image_uri"])
