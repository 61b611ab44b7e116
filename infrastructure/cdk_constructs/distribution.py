"""CloudFront distribution for a single-page app served from S3."""

from aws_cdk import Aws, Duration
from aws_cdk import aws_certificatemanager as acm
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_cloudfront_origins as origins
from aws_cdk import aws_s3 as s3
from constructs import Construct

INDEX_DOCUMENT = "index.html"
SPA_FALLBACK_TTL = Duration.seconds(60)


class CloudFrontDistribution(Construct):
  """CloudFront distribution with a private S3 origin and SPA routing."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket: s3.IBucket,
    certificate: acm.ICertificate,
    domain_names: list[str],
  ) -> None:
    super().__init__(scope, id)

    self.distribution = cloudfront.Distribution(
      self,
      "Distribution",
      default_behavior=cloudfront.BehaviorOptions(
        # Origin Access Control is attached afterwards, see origin_access.py
        origin=origins.S3BucketOrigin.with_bucket_defaults(bucket),
        viewer_protocol_policy=cloudfront.ViewerProtocolPolicy.REDIRECT_TO_HTTPS,
        cache_policy=cloudfront.CachePolicy.CACHING_OPTIMIZED,
      ),
      domain_names=domain_names,
      certificate=certificate,
      default_root_object=INDEX_DOCUMENT,
      # S3 answers 403 for client-side routes; serve the app shell instead
      error_responses=[
        cloudfront.ErrorResponse(
          http_status=403,
          response_http_status=200,
          response_page_path=f"/{INDEX_DOCUMENT}",
          ttl=SPA_FALLBACK_TTL,
        ),
      ],
    )

  @property
  def source_arn(self) -> str:
    """ARN used to scope the bucket policy to this distribution only."""
    distribution_id = self.distribution.distribution_id
    return f"arn:aws:cloudfront::{Aws.ACCOUNT_ID}:distribution/{distribution_id}"
