"""
ECS Cluster
Logical grouping for the Fargate service
"""
import pulumi
import pulumi_aws as aws


def create_cluster(config):
    """Create the ECS cluster the service is deployed into"""
    pulumi.log.info("Declaring ECS cluster app-cluster")

    cluster = aws.ecs.Cluster("app-cluster",
        tags={**config.common_tags, "Name": "app-cluster"})

    return {
        "cluster": cluster,
        "cluster_arn": cluster.arn,
        "cluster_name": cluster.name,
    }
