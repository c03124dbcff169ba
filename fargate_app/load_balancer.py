"""
Application Load Balancer
HTTP listener redirects to HTTPS, HTTPS terminates TLS with an ACM certificate
"""
import pulumi
import pulumi_aws as aws
import pulumi_awsx as awsx

HTTP_PORT = 80
HTTPS_PORT = 443


def create_load_balancer(config):
    """Create the public ALB with its listener pair and default target group"""
    pulumi.log.info("Declaring load balancer app-lb with HTTP->HTTPS redirect")

    # Certificate is not validated here, the provider rejects a bad ARN at apply time
    alb = awsx.lb.ApplicationLoadBalancer("app-lb",
        listeners=[
            awsx.lb.ListenerArgs(
                port=HTTP_PORT,
                protocol="HTTP",
                default_actions=[aws.lb.ListenerDefaultActionArgs(
                    type="redirect",
                    redirect=aws.lb.ListenerDefaultActionRedirectArgs(
                        protocol="HTTPS",
                        port=str(HTTPS_PORT),
                        status_code="HTTP_301",
                    ),
                )],
            ),
            awsx.lb.ListenerArgs(
                port=HTTPS_PORT,
                protocol="HTTPS",
                certificate_arn=config.acm_certificate_arn,
            ),
        ],
        tags={**config.common_tags, "Name": "app-lb"})

    return {
        "load_balancer": alb,
        "dns_name": alb.load_balancer.dns_name,
        "zone_id": alb.load_balancer.zone_id,
        "default_target_group": alb.default_target_group,
    }
