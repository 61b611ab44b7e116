"""Upload of the built frontend to S3, followed by a full cache invalidation."""

from pathlib import Path

from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_s3 as s3
from aws_cdk import aws_s3_deployment as s3_deploy
from constructs import Construct

INVALIDATE_ALL = "/*"


class SiteDeployment(Construct):
  """Deploys a local build output directory into the site bucket.

  Every deployment invalidates ``/*`` on the distribution; there is no partial
  invalidation.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    source_path: Path | str,
    bucket: s3.IBucket,
    distribution: cloudfront.IDistribution,
  ) -> None:
    super().__init__(scope, id)

    self.deployment = s3_deploy.BucketDeployment(
      self,
      "BucketDeployment",
      sources=[s3_deploy.Source.asset(str(source_path))],
      destination_bucket=bucket,
      distribution=distribution,
      distribution_paths=[INVALIDATE_ALL],
    )
