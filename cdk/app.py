#!/usr/bin/env python3
import aws_cdk as cdk
from rusty_lambda.config import load_settings
from rusty_lambda.stack import RustyLambdaStack

app = cdk.App()

settings = load_settings(app)

RustyLambdaStack(
    app,
    settings.stack_name,
    expose_handles=settings.expose_handles,
    manifest_path=settings.manifest_path,
    function_options=settings.function_options(),
    env=settings.environment(),
)

app.synth()
