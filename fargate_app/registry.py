"""
Container Registry and Image Build
ECR repository plus an arm64 image built from the local app directory
"""
import pulumi
import pulumi_awsx as awsx

# Matches the ARM64 runtime platform of the Fargate task
IMAGE_PLATFORM = "linux/arm64"


def create_registry(config):
    """
    Create the ECR repository and build/publish the application image

    Args:
        config: stack Config, app_path is used as the Docker build context

    Returns:
        Dict with repository, image and their outputs
    """
    pulumi.log.info("Declaring ECR repository app-repo")

    # force_delete so teardown does not block on pushed images
    repo = awsx.ecr.Repository("app-repo",
        force_delete=True,
        tags={**config.common_tags, "Name": "app-repo"})

    pulumi.log.info(f"Declaring image app-img from {config.app_path} for {IMAGE_PLATFORM}")

    img = awsx.ecr.Image("app-img",
        repository_url=repo.url,
        context=config.app_path,
        platform=IMAGE_PLATFORM)

    return {
        "repository": repo,
        "repository_url": repo.url,
        "image": img,
        "image_uri": img.image_uri,
    }
