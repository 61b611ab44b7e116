#!/usr/bin/env python3
"""Invalidate the whole CloudFront cache for a deployed site stack."""

import argparse
import sys
import time

import boto3  # type: ignore[import-not-found]

INVALIDATE_ALL = "/*"


def get_distribution_id(stack_name: str, region: str = "us-east-1") -> str:
  """Read the distribution ID from the stack's CloudFormation outputs.

  Args:
    stack_name: The CDK stack name (e.g., 'StaticSite-example-com')
    region: AWS region

  Returns:
    CloudFront distribution ID

  Raises:
    LookupError: If the stack has no DistributionId output
  """
  cloudformation = boto3.client("cloudformation", region_name=region)
  response = cloudformation.describe_stacks(StackName=stack_name)

  for output in response["Stacks"][0].get("Outputs", []):
    # CDK prefixes and hashes output keys, e.g. SiteDistributionId1A2B3C4D
    if "DistributionId" in output["OutputKey"]:
      return str(output["OutputValue"])

  raise LookupError(f"Stack {stack_name} has no DistributionId output")


def invalidate_all(distribution_id: str, region: str = "us-east-1") -> str:
  """Create a /* invalidation and return its ID."""
  cloudfront = boto3.client("cloudfront", region_name=region)
  response = cloudfront.create_invalidation(
    DistributionId=distribution_id,
    InvalidationBatch={
      "Paths": {"Quantity": 1, "Items": [INVALIDATE_ALL]},
      "CallerReference": str(time.time()),
    },
  )
  return str(response["Invalidation"]["Id"])


def main() -> None:
  """Main entry point."""
  parser = argparse.ArgumentParser(
    description="Invalidate all cached paths of a static site distribution"
  )
  parser.add_argument(
    "stack_name",
    help="CDK stack name (e.g., StaticSite-example-com)",
  )
  parser.add_argument(
    "--region",
    default="us-east-1",
    help="AWS region (default: us-east-1)",
  )
  args = parser.parse_args()

  try:
    distribution_id = get_distribution_id(args.stack_name, args.region)
    invalidation_id = invalidate_all(distribution_id, args.region)
  except Exception as e:
    print(f"Error invalidating cache: {e}", file=sys.stderr)
    sys.exit(1)

  print(f"✓ Invalidation {invalidation_id} created for {distribution_id}")


if __name__ == "__main__":
  main()
