"""Main composite construct for complete static website infrastructure."""

from pathlib import Path

from aws_cdk import CfnOutput, RemovalPolicy, Stack
from constructs import Construct

from .certificate import DnsValidatedCertificate
from .deployment import SiteDeployment
from .distribution import CloudFrontDistribution
from .dns import DnsRecords, site_domain_names
from .origin_access import OriginAccessControl, attach_origin_access_control
from .storage import StorageBucket, bucket_name_for


class StaticSiteConstruct(Construct):
  """Complete single-page-app hosting infrastructure.

  Creates:
  - Private S3 bucket for the built assets
  - ACM certificate for the apex and www names (DNS validated)
  - Origin Access Control, patched onto the distribution's S3 origin
  - CloudFront distribution with HTTPS and a 403 -> /index.html fallback
  - Bucket policy readable only by this distribution
  - Route 53 alias records for the apex and www names
  - Deployment of the build output with a /* invalidation
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    domain_name: str,
    build_output_path: Path | str,
    hosted_zone_id: str | None = None,
    removal_policy: RemovalPolicy = RemovalPolicy.RETAIN,
  ) -> None:
    super().__init__(scope, id)

    # Resource names derive from the stack name so each declaration is unique
    stack_name = Stack.of(self).stack_name
    bucket_name = bucket_name_for(stack_name)
    domain_names = site_domain_names(domain_name)

    self.storage = StorageBucket(
      self,
      "Storage",
      bucket_name=bucket_name,
      removal_policy=removal_policy,
    )

    self.dns = DnsRecords(
      self,
      "Dns",
      domain_name=domain_name,
      existing_hosted_zone_id=hosted_zone_id,
    )

    self.certificate = DnsValidatedCertificate(
      self,
      "Certificate",
      domain_names=domain_names,
      hosted_zone=self.dns.hosted_zone,
      certificate_name=f"{stack_name}-certificate",
    )

    self.origin_access = OriginAccessControl(
      self,
      "OriginAccess",
      name=f"{bucket_name[:60]}-oac",
    )

    self.distribution = CloudFrontDistribution(
      self,
      "Distribution",
      bucket=self.storage.bucket,
      certificate=self.certificate.certificate,
      domain_names=domain_names,
    )
    attach_origin_access_control(self.distribution.distribution, self.origin_access)

    self.storage.grant_distribution_read(self.distribution.source_arn)

    self.dns.create_cloudfront_records(self.distribution.distribution, domain_names)

    self.deployment = SiteDeployment(
      self,
      "Deployment",
      source_path=build_output_path,
      bucket=self.storage.bucket,
      distribution=self.distribution.distribution,
    )

    # Outputs
    CfnOutput(
      self,
      "BucketName",
      value=self.storage.bucket.bucket_name,
      description="S3 bucket name",
    )
    CfnOutput(
      self,
      "DistributionId",
      value=self.distribution.distribution.distribution_id,
      description="CloudFront distribution ID",
    )
    CfnOutput(
      self,
      "DistributionDomainName",
      value=self.distribution.distribution.distribution_domain_name,
      description="CloudFront distribution domain name",
    )
    CfnOutput(
      self,
      "HostedZoneId",
      value=self.dns.hosted_zone.hosted_zone_id,
      description="Route 53 hosted zone ID",
    )
    CfnOutput(
      self,
      "SiteUrl",
      value=f"https://{domain_name}",
      description="Public site URL",
    )
