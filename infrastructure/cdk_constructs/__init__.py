"""CDK constructs for static website infrastructure."""

from .certificate import DnsValidatedCertificate
from .deployment import SiteDeployment
from .distribution import CloudFrontDistribution
from .dns import DnsRecords, site_domain_names
from .origin_access import OriginAccessControl, attach_origin_access_control
from .static_site import StaticSiteConstruct
from .storage import StorageBucket, bucket_name_for

__all__ = [
  "CloudFrontDistribution",
  "DnsRecords",
  "DnsValidatedCertificate",
  "OriginAccessControl",
  "SiteDeployment",
  "StaticSiteConstruct",
  "StorageBucket",
  "attach_origin_access_control",
  "bucket_name_for",
  "site_domain_names",
]
