#!/usr/bin/env python3
import aws_cdk as cdk
from stacks.file_share_stack import FileShareStack
from config.environments import get_environment_config
from fsx_windows.observability import configure_logging

app = cdk.App()

configure_logging(log_level=app.node.try_get_context("log_level") or "INFO")

# Get environment from context or use production as default
env_name = app.node.try_get_context("environment") or "production"
config = get_environment_config(env_name)

FileShareStack(
    app,
    f"WindowsFileShare-{config.environment_name}",
    config=config,
    env=cdk.Environment(region=config.region.region, account=app.account),
    description=f"FSx for Windows file share ({config.environment_name})",
)

app.synth()
