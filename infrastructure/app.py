#!/usr/bin/env python3
"""CDK application entry point for static website infrastructure."""

import os
import sys
from pathlib import Path

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

import aws_cdk as cdk
import boto3

from infrastructure.config import Config, SiteConfig
from infrastructure.stacks.site_stack import StaticSiteStack


def get_account_id() -> str:
  """Get AWS account ID from the CDK CLI environment or current credentials."""
  account_id = os.environ.get("CDK_DEFAULT_ACCOUNT")
  if account_id:
    return account_id
  sts = boto3.client("sts")
  return str(sts.get_caller_identity()["Account"])


def require_build_outputs(sites: list[SiteConfig]) -> None:
  """Exit with a readable message when a site's build output is missing."""
  missing = [site for site in sites if not Path(site.build_output_path).is_dir()]
  for site in missing:
    print(
      f"Build output {site.build_output_path} for {site.root_domain} does not exist; "
      "build the frontend before running cdk",
      file=sys.stderr,
    )
  if missing:
    sys.exit(1)


def main() -> None:
  """Create CDK app with stacks for each configured site."""
  app = cdk.App()

  # Load configuration
  config_path = app.node.try_get_context("config") or "sites.yaml"
  config = Config.from_yaml(Path(config_path))

  # Hosted zone lookups require an explicit account
  account_id = get_account_id()

  # Every CDK command synthesizes, and synthesis stages the build output
  require_build_outputs(config.sites)

  # Create a stack for each site
  for site in config.sites:
    StaticSiteStack(
      app,
      site.stack_name,
      site_config=site,
      env=cdk.Environment(
        account=account_id,
        region=site.region,
      ),
      description=f"Static website infrastructure for {site.root_domain}",
    )

  app.synth()


if __name__ == "__main__":
  main()
