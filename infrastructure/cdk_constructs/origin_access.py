"""CloudFront Origin Access Control for the S3 origin."""

from typing import cast

from aws_cdk import aws_cloudfront as cloudfront
from constructs import Construct

ORIGIN_ACCESS_CONTROL_PATH = "DistributionConfig.Origins.0.OriginAccessControlId"


class OriginAccessControl(Construct):
  """SigV4 signing configuration CloudFront presents to the bucket."""

  def __init__(self, scope: Construct, id: str, *, name: str) -> None:
    super().__init__(scope, id)

    self.origin_access_control = cloudfront.CfnOriginAccessControl(
      self,
      "OriginAccessControl",
      origin_access_control_config=cloudfront.CfnOriginAccessControl.OriginAccessControlConfigProperty(
        name=name,
        origin_access_control_origin_type="s3",
        signing_behavior="always",
        signing_protocol="sigv4",
      ),
    )

  @property
  def origin_access_control_id(self) -> str:
    return self.origin_access_control.attr_id


def attach_origin_access_control(
  distribution: cloudfront.Distribution,
  origin_access_control: OriginAccessControl,
) -> None:
  """Patch the synthesized distribution so its first origin signs with the OAC.

  The L2 ``Distribution`` is built with a plain S3 origin, so the attachment is
  written straight into the ``AWS::CloudFront::Distribution`` template. Drop this
  once the origin is switched to ``S3BucketOrigin.with_origin_access_control``.
  """
  cfn_distribution = cast(cloudfront.CfnDistribution, distribution.node.default_child)
  cfn_distribution.add_property_override(
    ORIGIN_ACCESS_CONTROL_PATH,
    origin_access_control.origin_access_control_id,
  )
