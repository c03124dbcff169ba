"""
Fargate Service
Single ARM64 task running the app image behind the load balancer
"""
import pulumi
import pulumi_aws as aws
import pulumi_awsx as awsx
from typing import Dict, List, Any

CONTAINER_NAME = "app-container"
CONTAINER_PORT = 80
CONTAINER_CPU = 128
CONTAINER_MEMORY = 1024


def build_environment(variables: Dict[str, Any]) -> List[awsx.ecs.TaskDefinitionKeyValuePairArgs]:
    """Turn a name -> value mapping into task definition key/value pairs, order preserved"""
    return [
        awsx.ecs.TaskDefinitionKeyValuePairArgs(name=name, value=value)
        for name, value in variables.items()
    ]


def create_service(config, cluster, load_balancer, registry):
    """
    Create the Fargate service

    Args:
        config: stack Config
        cluster: result of create_cluster
        load_balancer: result of create_load_balancer
        registry: result of create_registry

    Returns:
        Dict with service resource and outputs
    """
    pulumi.log.info(f"Declaring Fargate service app-service ({CONTAINER_NAME} on port {CONTAINER_PORT})")

    service = awsx.ecs.FargateService("app-service",
        assign_public_ip=True,
        cluster=cluster["cluster_arn"],
        desired_count=1,
        task_definition_args=awsx.ecs.FargateServiceTaskDefinitionArgs(
            runtime_platform=aws.ecs.TaskDefinitionRuntimePlatformArgs(
                cpu_architecture="ARM64",
                operating_system_family="LINUX",
            ),
            container=awsx.ecs.TaskDefinitionContainerDefinitionArgs(
                name=CONTAINER_NAME,
                image=registry["image_uri"],
                cpu=CONTAINER_CPU,
                memory=CONTAINER_MEMORY,
                essential=True,
                port_mappings=[awsx.ecs.TaskDefinitionPortMappingArgs(
                    container_port=CONTAINER_PORT,
                    target_group=load_balancer["default_target_group"],
                )],
                environment=build_environment(config.environment_variables),
            ),
        ),
        tags={**config.common_tags, "Name": "app-service"})

    return {
        "service": service,
        "service_name": service.service.name,
    }
