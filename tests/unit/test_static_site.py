"""Tests for the StaticSiteConstruct."""

from pathlib import Path
from typing import Any

import pytest
from aws_cdk import App, Environment, Stack
from aws_cdk.assertions import Match, Template

from infrastructure.cdk_constructs import StaticSiteConstruct, site_domain_names

TEST_ENV = Environment(account="123456789012", region="us-east-1")


def _synth(build_dir: Path, hosted_zone_id: str | None = "Z0123456789ABC") -> Template:
  app = App()
  stack = Stack(app, "TestStack", env=TEST_ENV)
  StaticSiteConstruct(
    stack,
    "TestSite",
    domain_name="example.com",
    build_output_path=build_dir,
    hosted_zone_id=hosted_zone_id,
  )
  return Template.from_stack(stack)


def _logical_id(template: Template, resource_type: str) -> str:
  resources = template.find_resources(resource_type)
  assert len(resources) == 1
  return next(iter(resources))


class TestStaticSiteConstruct:
  """Test the main StaticSiteConstruct."""

  @pytest.fixture
  def template(self, build_dir: Path) -> Template:
    """Create a template with default options."""
    return _synth(build_dir)

  def test_creates_private_s3_bucket(self, template: Template) -> None:
    """Verify bucket name is derived from the stack and public access is blocked."""
    template.has_resource_properties(
      "AWS::S3::Bucket",
      {
        "BucketName": "static-site-teststack",
        "WebsiteConfiguration": {"IndexDocument": "index.html"},
        "PublicAccessBlockConfiguration": {
          "BlockPublicAcls": True,
          "BlockPublicPolicy": True,
          "IgnorePublicAcls": True,
          "RestrictPublicBuckets": True,
        },
      },
    )

  def test_certificate_covers_apex_and_www(self, template: Template) -> None:
    """Verify certificate uses DNS validation for exactly the two names."""
    template.has_resource_properties(
      "AWS::CertificateManager::Certificate",
      {
        "DomainName": "example.com",
        "SubjectAlternativeNames": ["www.example.com"],
        "ValidationMethod": "DNS",
      },
    )

  def test_distribution_aliases(self, template: Template) -> None:
    """Verify aliases are exactly the apex and www names."""
    template.has_resource_properties(
      "AWS::CloudFront::Distribution",
      {
        "DistributionConfig": {
          "Aliases": ["example.com", "www.example.com"],
          "DefaultRootObject": "index.html",
        },
      },
    )

  def test_distribution_redirects_to_https(self, template: Template) -> None:
    """Verify the default behavior forces HTTPS."""
    template.has_resource_properties(
      "AWS::CloudFront::Distribution",
      {
        "DistributionConfig": {
          "DefaultCacheBehavior": Match.object_like(
            {"ViewerProtocolPolicy": "redirect-to-https"}
          ),
        },
      },
    )

  def test_only_403_is_rewritten_to_index(self, template: Template) -> None:
    """Verify the single-page-app fallback is the only custom error response."""
    template.has_resource_properties(
      "AWS::CloudFront::Distribution",
      {
        "DistributionConfig": {
          "CustomErrorResponses": [
            {
              "ErrorCode": 403,
              "ResponseCode": 200,
              "ResponsePagePath": "/index.html",
              "ErrorCachingMinTTL": 60,
            }
          ],
        },
      },
    )

  def test_origin_access_control(self, template: Template) -> None:
    """Verify OAC signs every request with SigV4."""
    template.has_resource_properties(
      "AWS::CloudFront::OriginAccessControl",
      {
        "OriginAccessControlConfig": {
          "Name": "static-site-teststack-oac",
          "OriginAccessControlOriginType": "s3",
          "SigningBehavior": "always",
          "SigningProtocol": "sigv4",
        },
      },
    )

  def test_origin_access_control_attached_to_origin(self, template: Template) -> None:
    """Verify the patch wires the OAC into the first origin."""
    oac_id = _logical_id(template, "AWS::CloudFront::OriginAccessControl")
    template.has_resource_properties(
      "AWS::CloudFront::Distribution",
      {
        "DistributionConfig": {
          "Origins": [
            Match.object_like(
              {"OriginAccessControlId": {"Fn::GetAtt": [oac_id, "Id"]}}
            )
          ],
        },
      },
    )

  def test_bucket_policy_scoped_to_distribution(self, template: Template) -> None:
    """Verify CloudFront can read objects only from this distribution."""
    distribution_id = _logical_id(template, "AWS::CloudFront::Distribution")
    policies = template.find_resources("AWS::S3::BucketPolicy")
    statements: list[dict[str, Any]] = [
      statement
      for policy in policies.values()
      for statement in policy["Properties"]["PolicyDocument"]["Statement"]
      if statement.get("Principal") == {"Service": "cloudfront.amazonaws.com"}
    ]

    assert len(statements) == 1
    statement = statements[0]
    assert statement["Effect"] == "Allow"
    assert statement["Action"] == "s3:GetObject"
    assert statement["Condition"] == {
      "StringEquals": {
        "AWS:SourceArn": {
          "Fn::Join": [
            "",
            [
              "arn:aws:cloudfront::",
              {"Ref": "AWS::AccountId"},
              ":distribution/",
              {"Ref": distribution_id},
            ],
          ]
        }
      }
    }
    assert "*" not in str(statement["Condition"])

  def test_two_alias_records(self, template: Template) -> None:
    """Verify exactly two A alias records, both targeting the distribution."""
    distribution_id = _logical_id(template, "AWS::CloudFront::Distribution")
    template.resource_count_is("AWS::Route53::RecordSet", 2)
    for name in ("example.com.", "www.example.com."):
      template.has_resource_properties(
        "AWS::Route53::RecordSet",
        {
          "Name": name,
          "Type": "A",
          "HostedZoneId": "Z0123456789ABC",
          "AliasTarget": Match.object_like(
            {"DNSName": {"Fn::GetAtt": [distribution_id, "DomainName"]}}
          ),
        },
      )

  def test_deployment_invalidates_everything(self, template: Template) -> None:
    """Verify the upload invalidates /* on the distribution."""
    distribution_id = _logical_id(template, "AWS::CloudFront::Distribution")
    template.resource_count_is("Custom::CDKBucketDeployment", 1)
    template.has_resource_properties(
      "Custom::CDKBucketDeployment",
      {
        "DistributionId": {"Ref": distribution_id},
        "DistributionPaths": ["/*"],
      },
    )

  def test_outputs(self, template: Template) -> None:
    """Verify the distribution ID is exported for operator scripts."""
    outputs = template.find_outputs("*")
    assert any("DistributionId" in key for key in outputs)
    assert any("BucketName" in key for key in outputs)

  def test_certificate_aliases_and_records_cover_same_names(
    self, template: Template
  ) -> None:
    """Verify certificate, aliases and records are built from one name list."""
    expected = site_domain_names("example.com")

    certificates = template.find_resources("AWS::CertificateManager::Certificate")
    certificate = next(iter(certificates.values()))["Properties"]
    certificate_names = [
      certificate["DomainName"],
      *certificate["SubjectAlternativeNames"],
    ]

    distributions = template.find_resources("AWS::CloudFront::Distribution")
    aliases = next(iter(distributions.values()))["Properties"]["DistributionConfig"][
      "Aliases"
    ]

    records = template.find_resources("AWS::Route53::RecordSet")
    record_names = sorted(r["Properties"]["Name"].rstrip(".") for r in records.values())

    assert certificate_names == expected
    assert aliases == expected
    assert record_names == sorted(expected)


class TestSiteDomainNames:
  """Test the shared list of served names."""

  def test_apex_first_then_www(self) -> None:
    assert site_domain_names("example.com") == ["example.com", "www.example.com"]


class TestStaticSiteHostedZoneLookup:
  """Test StaticSiteConstruct without a configured hosted zone id."""

  def test_zone_is_looked_up_not_created(self, build_dir: Path) -> None:
    """Verify no hosted zone resource is declared."""
    template = _synth(build_dir, hosted_zone_id=None)

    template.resource_count_is("AWS::Route53::HostedZone", 0)
    template.resource_count_is("AWS::Route53::RecordSet", 2)


class TestStaticSiteResourceCounts:
  """Test resource counts for the full stack."""

  def test_resource_count(self, build_dir: Path) -> None:
    """Verify expected number of key resources."""
    template = _synth(build_dir)

    template.resource_count_is("AWS::S3::Bucket", 1)
    template.resource_count_is("AWS::CertificateManager::Certificate", 1)
    template.resource_count_is("AWS::CloudFront::OriginAccessControl", 1)
    template.resource_count_is("AWS::CloudFront::Distribution", 1)
    template.resource_count_is("AWS::S3::BucketPolicy", 1)
    template.resource_count_is("AWS::Route53::RecordSet", 2)
    template.resource_count_is("AWS::Route53::HostedZone", 0)

  def test_synthesis_is_deterministic(self, build_dir: Path) -> None:
    """Verify re-synthesizing unchanged inputs yields an identical template."""
    assert _synth(build_dir).to_json() == _synth(build_dir).to_json()
