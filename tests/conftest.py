"""Shared pytest fixtures."""

import os
import textwrap

import aws_cdk as cdk
import pytest

# Region for mocked AWS calls
TEST_AWS_REGION = "eu-central-1"

# Skip cargo-lambda bundling for every stack; synth then needs no Rust toolchain or Docker
NO_BUNDLING_CONTEXT = {"aws:cdk:bundling-stacks": []}


@pytest.fixture
def app():
    """A fresh CDK app per test, with bundling disabled."""
    return cdk.App(context=NO_BUNDLING_CONTEXT)


@pytest.fixture
def cargo_manifest(tmp_path):
    """A minimal crate laid out like the composable stack expects: <dir>/hello-world-api/Cargo.toml"""
    crate = tmp_path / "hello-world-api"
    (crate / "src").mkdir(parents=True)
    manifest = crate / "Cargo.toml"
    manifest.write_text(textwrap.dedent("""\
        [package]
        name = "hello-world-api"
        version = "0.1.0"
        edition = "2021"
    """))
    (crate / "src" / "main.rs").write_text("fn main() {}\n")
    return manifest


@pytest.fixture
def aws_credentials(monkeypatch):
    """Mock AWS credentials for testing"""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", TEST_AWS_REGION)


@pytest.fixture
def clean_settings_env(monkeypatch):
    """Remove settings variables the developer's shell may carry."""
    for name in (
        "STACK_NAME",
        "EXPOSE_HANDLES",
        "MANIFEST_PATH",
        "LAMBDA_MEMORY_MB",
        "LAMBDA_TIMEOUT_SEC",
        "CDK_DEFAULT_ACCOUNT",
        "CDK_DEFAULT_REGION",
    ):
        monkeypatch.delenv(name, raising=False)
    return os.environ
