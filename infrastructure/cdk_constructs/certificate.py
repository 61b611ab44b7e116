"""ACM certificate with DNS validation."""

from aws_cdk import aws_certificatemanager as acm
from aws_cdk import aws_route53 as route53
from constructs import Construct


class DnsValidatedCertificate(Construct):
  """ACM certificate for every name the site serves (no email approval needed)."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    domain_names: list[str],
    hosted_zone: route53.IHostedZone,
    certificate_name: str | None = None,
  ) -> None:
    super().__init__(scope, id)

    # CloudFront aliasing fails unless every alias is covered
    self.certificate = acm.Certificate(
      self,
      "Certificate",
      domain_name=domain_names[0],
      subject_alternative_names=domain_names[1:] or None,
      validation=acm.CertificateValidation.from_dns(hosted_zone),
      certificate_name=certificate_name,
    )
