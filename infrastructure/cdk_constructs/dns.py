"""Route 53 DNS constructs."""

from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_route53 as route53
from aws_cdk import aws_route53_targets as targets
from constructs import Construct


def site_domain_names(root_domain: str) -> list[str]:
  """Names served by a site: the apex first, then its www alias.

  The certificate, the distribution aliases and the DNS records all use this
  list, so they always cover the same set.
  """
  return [root_domain, f"www.{root_domain}"]


class DnsRecords(Construct):
  """Reference to an existing hosted zone plus alias records for the site.

  The zone itself is never created here; it is looked up by name, or imported
  by id when one is configured.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    domain_name: str,
    existing_hosted_zone_id: str | None = None,
  ) -> None:
    super().__init__(scope, id)

    self.domain_name = domain_name

    if existing_hosted_zone_id:
      self.hosted_zone = route53.HostedZone.from_hosted_zone_attributes(
        self,
        "HostedZone",
        hosted_zone_id=existing_hosted_zone_id,
        zone_name=domain_name,
      )
    else:
      # Lookups need an explicit account/region on the stack
      self.hosted_zone = route53.HostedZone.from_lookup(
        self,
        "HostedZone",
        domain_name=domain_name,
      )

  def create_cloudfront_records(
    self,
    distribution: cloudfront.IDistribution,
    record_names: list[str],
  ) -> list[route53.ARecord]:
    """Create one A alias record per name, all pointing to the distribution."""
    target = route53.RecordTarget.from_alias(targets.CloudFrontTarget(distribution))

    self.records = [
      route53.ARecord(
        self,
        f"AliasRecord{index}",
        zone=self.hosted_zone,
        record_name=record_name,
        target=target,
      )
      for index, record_name in enumerate(record_names)
    ]
    return self.records
