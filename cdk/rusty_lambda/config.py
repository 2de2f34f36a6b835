import os
from dataclasses import dataclass
from typing import Any, Optional

import aws_cdk as cdk
from aws_cdk import Duration

DEFAULT_STACK_NAME = "RustyLambdaStack"

_TRUTHY = {"true", "1", "yes", "on"}


@dataclass(frozen=True)
class StackSettings:
    """
    Settings for one RustyLambdaStack, read from CDK context or the environment.
    """
    stack_name: str = DEFAULT_STACK_NAME
    expose_handles: bool = False
    manifest_path: Optional[str] = None
    memory_size: Optional[int] = None
    timeout_seconds: Optional[int] = None
    account: Optional[str] = None
    region: Optional[str] = None

    def environment(self) -> Optional[cdk.Environment]:
        if self.account is None and self.region is None:
            return None
        return cdk.Environment(account=self.account, region=self.region)

    def function_options(self) -> dict:
        options = {}
        if self.memory_size is not None:
            options["memory_size"] = self.memory_size
        if self.timeout_seconds is not None:
            options["timeout"] = Duration.seconds(self.timeout_seconds)
        return options


def _lookup(app: cdk.App, context_key: str, env_var: str) -> Any:
    value = app.node.try_get_context(context_key)
    if value is None or value == "":
        value = os.environ.get(env_var) or None
    return value


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUTHY


def _as_int(name: str, value: Any) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


def load_settings(app: cdk.App) -> StackSettings:
    """Context (``cdk synth -c key=value``) wins over environment variables."""
    expose = _lookup(app, "expose_handles", "EXPOSE_HANDLES")
    return StackSettings(
        stack_name=_lookup(app, "stack_name", "STACK_NAME") or DEFAULT_STACK_NAME,
        expose_handles=_as_bool(expose) if expose is not None else False,
        manifest_path=_lookup(app, "manifest_path", "MANIFEST_PATH"),
        memory_size=_as_int("lambda_memory", _lookup(app, "lambda_memory", "LAMBDA_MEMORY_MB")),
        timeout_seconds=_as_int("lambda_timeout", _lookup(app, "lambda_timeout", "LAMBDA_TIMEOUT_SEC")),
        account=_lookup(app, "account", "CDK_DEFAULT_ACCOUNT"),
        region=_lookup(app, "region", "CDK_DEFAULT_REGION"),
    )
