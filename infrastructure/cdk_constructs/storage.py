"""Private S3 bucket holding the built single-page app."""

import re

from aws_cdk import RemovalPolicy
from aws_cdk import aws_iam as iam
from aws_cdk import aws_s3 as s3
from constructs import Construct

MAX_BUCKET_NAME_LENGTH = 63


def bucket_name_for(site_id: str) -> str:
  """Derive a deterministic, S3-safe bucket name from a declaration id.

  Example: ``bucket_name_for("Prod_Site")`` -> ``"static-site-prod-site"``.
  """
  slug = f"static-site-{site_id}".lower()
  slug = re.sub(r"[^a-z0-9.-]", "-", slug)
  slug = re.sub(r"-{2,}", "-", slug)
  return slug[:MAX_BUCKET_NAME_LENGTH].strip("-.")


class StorageBucket(Construct):
  """S3 bucket used as a CloudFront origin; never publicly readable."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket_name: str,
    removal_policy: RemovalPolicy = RemovalPolicy.RETAIN,
  ) -> None:
    super().__init__(scope, id)

    self.bucket = s3.Bucket(
      self,
      "Bucket",
      bucket_name=bucket_name,
      website_index_document="index.html",
      block_public_access=s3.BlockPublicAccess.BLOCK_ALL,
      removal_policy=removal_policy,
      auto_delete_objects=removal_policy == RemovalPolicy.DESTROY,
    )

  def grant_distribution_read(self, distribution_arn: str) -> None:
    """Allow exactly one CloudFront distribution to read objects.

    The ``AWS:SourceArn`` condition must name a single distribution; a wildcard
    would let any distribution in the account read the bucket.
    """
    self.bucket.add_to_resource_policy(
      iam.PolicyStatement(
        effect=iam.Effect.ALLOW,
        principals=[iam.ServicePrincipal("cloudfront.amazonaws.com")],
        actions=["s3:GetObject"],
        resources=[self.bucket.arn_for_objects("*")],
        conditions={"StringEquals": {"AWS:SourceArn": distribution_arn}},
      )
    )
