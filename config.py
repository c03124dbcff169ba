"""
Configuration management for the Fargate app deployment
"""

import pulumi
from typing import Dict, Any, List, Optional

REQUIRED_KEYS = ["acmCertificateArn", "route53ZoneId", "domainName"]
REQUIRED_SECRETS = ["DATABASE_URL"]


class MissingConfiguration(Exception):
    """Raised when required stack configuration is absent"""

    def __init__(self, keys: List[str]):
        self.keys = list(keys)
        commands = "; ".join(f"pulumi config set {key} <value>" for key in self.keys)
        super().__init__(f"Missing required configuration: {', '.join(self.keys)} ({commands})")


class Config:
    """Centralized configuration management for the Fargate deployment"""

    def __init__(self, source: Optional[Any] = None):
        self.config = source if source is not None else pulumi.Config()

        # Required values, checked together so every missing key is reported at once
        missing = [key for key in REQUIRED_KEYS if not self.config.get(key)]
        missing += [key for key in REQUIRED_SECRETS if self.config.get_secret(key) is None]
        if missing:
            pulumi.log.error(f"Stack configuration incomplete, missing: {', '.join(missing)}")
            raise MissingConfiguration(missing)

        # DNS / TLS
        self.acm_certificate_arn = self.require("acmCertificateArn")
        self.route53_zone_id = self.require("route53ZoneId")
        self.domain_name = self.require("domainName")

        # Application
        self.database_url = self.require_secret("DATABASE_URL")
        self.app_path = self.config.get("appPath") or "./app"

        # Tagging
        self.environment = self.config.get("environment") or "production"
        self.additional_tags = self.config.get_object("tags") or {}

    def require(self, name: str) -> str:
        value = self.config.get(name)
        if not value:
            raise MissingConfiguration([name])
        return value

    def require_secret(self, name: str) -> pulumi.Output:
        # Output stays secret-tagged, never log it
        value = self.config.get_secret(name)
        if value is None:
            raise MissingConfiguration([name])
        return value

    @property
    def common_tags(self) -> Dict[str, str]:
        """Get common tags for all resources"""
        base_tags = {
            "Project": "fargate-app",
            "Environment": self.environment,
            "ManagedBy": "pulumi",
        }
        base_tags.update(self.additional_tags)
        return base_tags

    @property
    def environment_variables(self) -> Dict[str, Any]:
        """Container environment, in the order it is handed to the task definition"""
        return {
            "PORT": "80",
            "NODE_ENV": "production",
            "DATABASE_URL": self.database_url,
        }


def get_config(source: Optional[Any] = None) -> Config:
    """Get a configuration instance for the current stack"""
    return Config(source)
