"""
Route53 alias record pointing the domain at the load balancer
"""
import pulumi
import pulumi_aws as aws


def create_dns_record(config, load_balancer):
    """Create an A alias record for the configured domain"""
    pulumi.log.info(f"Declaring alias record {config.domain_name} in zone {config.route53_zone_id}")

    record = aws.route53.Record(config.domain_name,
        name=config.domain_name,
        zone_id=config.route53_zone_id,
        type="A",
        aliases=[aws.route53.RecordAliasArgs(
            name=load_balancer["dns_name"],
            zone_id=load_balancer["zone_id"],
            evaluate_target_health=True,  # only resolve to healthy targets
        )])

    return {
        "record": record,
        "fqdn": record.fqdn,
    }
