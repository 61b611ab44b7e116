"""Pytest fixtures for CDK construct tests."""

from pathlib import Path

import aws_cdk as cdk
import pytest

TEST_ENV = cdk.Environment(account="123456789012", region="us-east-1")


@pytest.fixture
def app() -> cdk.App:
  """Create a CDK App for testing."""
  return cdk.App()


@pytest.fixture
def stack(app: cdk.App) -> cdk.Stack:
  """Create a CDK Stack for testing."""
  return cdk.Stack(app, "TestStack", env=TEST_ENV)


@pytest.fixture
def build_dir(tmp_path: Path) -> Path:
  """Create a minimal frontend build output."""
  dist = tmp_path / "dist"
  dist.mkdir()
  (dist / "index.html").write_text("<!doctype html><div id=app></div>")
  (dist / "app.js").write_text("console.log('hello')")
  return dist
