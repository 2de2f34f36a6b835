import os
from typing import Any, Mapping, Optional

from aws_cdk import (
    Annotations,
    Stack,
    aws_lambda as lambda_,
    CfnOutput,
)
from cargo_lambda_cdk import RustFunction
from constructs import Construct
from rusty_lambda.manifest import resolve_manifest_path

# <repo>/src/hello-world-api/Cargo.toml
DEFAULT_MANIFEST_PATH = os.path.join("..", "..", "src", "hello-world-api", "Cargo.toml")

FUNCTION_URL_OUTPUT = "helloWorldApiFnUrl"


class RustyLambdaStack(Stack):
    """
    Deploys the hello-world Rust function behind a public Function URL.

    With ``expose_handles`` the function and its URL stay reachable as
    ``hello_world_api`` and ``hello_world_api_fn_url`` so other stacks can
    wire permissions or outputs against them.
    """
    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        expose_handles: bool = False,
        manifest_path: Optional[str] = None,
        function_options: Optional[Mapping[str, Any]] = None,
        **kwargs,
    ) -> None:
        # Fail before the stack joins the tree so a bad path leaves nothing behind
        manifest = resolve_manifest_path(
            manifest_path or DEFAULT_MANIFEST_PATH,
            base_dir=os.path.dirname(os.path.abspath(__file__)),
        )

        super().__init__(scope, construct_id, **kwargs)

        # 1. Rust function
        hello_world_api = RustFunction(
            self,
            "Rust function",
            manifest_path=str(manifest),
            **dict(function_options or {}),
        )

        # 2. Function URL
        # No authentication required (for demonstration purposes only)
        hello_world_api_fn_url = hello_world_api.add_function_url(
            auth_type=lambda_.FunctionUrlAuthType.NONE,
        )
        Annotations.of(hello_world_api_fn_url).add_warning_v2(
            "rusty-lambda:unauthenticated-function-url",
            "Function URL accepts unauthenticated requests; do not use this configuration in production.",
        )

        # 3. Outputs
        CfnOutput(self, FUNCTION_URL_OUTPUT, value=hello_world_api_fn_url.url)

        if expose_handles:
            self.hello_world_api = hello_world_api
            self.hello_world_api_fn_url = hello_world_api_fn_url
