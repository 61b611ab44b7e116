"""Configuration loader for multi-site management."""

from dataclasses import dataclass, field
from pathlib import Path

import yaml
from aws_cdk import RemovalPolicy

DEFAULT_BUILD_OUTPUT_PATH = "frontend/dist"
# CloudFront only accepts viewer certificates issued in us-east-1
CERTIFICATE_REGION = "us-east-1"


@dataclass
class SiteConfig:
  """Configuration for a single static site."""

  root_domain: str
  build_output_path: str = DEFAULT_BUILD_OUTPUT_PATH
  owner: str | None = None
  email: str | None = None
  removal_policy: RemovalPolicy = RemovalPolicy.RETAIN
  hosted_zone_id: str | None = None
  region: str = CERTIFICATE_REGION

  @property
  def stack_name(self) -> str:
    return f"StaticSite-{self.root_domain.replace('.', '-')}"


@dataclass
class Config:
  """Multi-site configuration."""

  sites: list[SiteConfig] = field(default_factory=list)

  @classmethod
  def from_yaml(cls, path: Path | str = "sites.yaml") -> "Config":
    """Load configuration from YAML file.

    Each entry under ``sites`` is merged over the optional ``defaults`` block.
    Relative build output paths are resolved against the YAML file's directory.
    """
    path = Path(path)
    with open(path) as f:
      data = yaml.safe_load(f)

    if not isinstance(data, dict):
      raise ValueError(f"{path}: expected a mapping with a 'sites' list")

    defaults = data.get("defaults") or {}
    sites: list[SiteConfig] = []

    for site_data in data.get("sites") or []:
      # Merge defaults with site-specific config
      merged = {**defaults, **site_data}

      # Convert removal_policy string to enum
      removal_policy_str = merged.pop("removal_policy", "retain")
      removal_policy = {
        "retain": RemovalPolicy.RETAIN,
        "destroy": RemovalPolicy.DESTROY,
        "snapshot": RemovalPolicy.SNAPSHOT,
      }.get(removal_policy_str.lower(), RemovalPolicy.RETAIN)

      region = merged.get("region", CERTIFICATE_REGION)
      if region != CERTIFICATE_REGION:
        raise ValueError(
          f"{path}: site {merged.get('domain')!r} has region {region!r}; "
          f"the certificate and stack must be in {CERTIFICATE_REGION}"
        )

      build_output_path = Path(
        merged.get("build_output_path", DEFAULT_BUILD_OUTPUT_PATH)
      )
      if not build_output_path.is_absolute():
        build_output_path = path.parent / build_output_path

      sites.append(
        SiteConfig(
          root_domain=merged["domain"].lower().strip(),
          build_output_path=str(build_output_path),
          owner=merged.get("owner"),
          email=merged.get("email"),
          removal_policy=removal_policy,
          hosted_zone_id=merged.get("hosted_zone_id"),
          region=region,
        )
      )

    return cls(sites=sites)
