"""
Shared test fixtures
"""

from unittest.mock import Mock

VALID_VALUES = {
    "acmCertificateArn": "arn:aws:acm:us-east-1:123456789012:certificate/test-cert",
    "route53ZoneId": "Z0123456789TEST",
    "domainName": "app.example.com",
}


class FakeConfigSource:
    """Stands in for pulumi.Config, backed by plain dicts"""

    def __init__(self, values=None, secrets=None):
        self.values = dict(VALID_VALUES if values is None else values)
        if secrets is None:
            secrets = {"DATABASE_URL": Mock(name="database_url_secret")}
        self.secrets = dict(secrets)

    def get(self, key):
        return self.values.get(key)

    def get_secret(self, key):
        return self.secrets.get(key)

    def get_object(self, key):
        return self.values.get(key)
