"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Awaitable, Callable, TypeVar

import structlog
import typer
from dotenv import load_dotenv
from pydantic import BaseModel
from typer import Argument, Option
from typing_extensions import Annotated

from stepsecurity_ops_manager.configuration.exceptions import ClientConfigurationUndefinedError
from stepsecurity_ops_manager.configuration.models import ClientConfig
from stepsecurity_ops_manager.configuration.reconcile import validate_client_configuration
from stepsecurity_ops_manager.schemas.policy_driven_prs import PolicyDrivenPRPolicy
from stepsecurity_ops_manager.stepsecurity.adapter import StepSecurityClient
from stepsecurity_ops_manager.stepsecurity.exceptions import StepSecurityError
from stepsecurity_ops_manager.utils.constants import DEFAULT_API_BASE_URL
from stepsecurity_ops_manager.utils.github import removed_repos
from stepsecurity_ops_manager.utils.yaml import load_policy_driven_pr_policy

load_dotenv()

T = TypeVar("T")

typer_app = typer.Typer(pretty_exceptions_show_locals=False)
users_app = typer.Typer(help="Customer user commands")
notification_settings_app = typer.Typer(help="Run notification settings commands")
policy_driven_pr_app = typer.Typer(help="Policy-driven pull request commands")
pr_checks_app = typer.Typer(help="Pull request checks commands")
pr_template_app = typer.Typer(help="Pull request template commands")
run_policies_app = typer.Typer(help="Run policy commands")
run_policy_evaluations_app = typer.Typer(help="Run policy evaluation commands")
subscription_status_app = typer.Typer(help="Subscription status commands")

typer_app.add_typer(users_app, name="users")
typer_app.add_typer(notification_settings_app, name="notification-settings")
typer_app.add_typer(policy_driven_pr_app, name="policy-driven-pr")
typer_app.add_typer(pr_checks_app, name="pr-checks")
typer_app.add_typer(pr_template_app, name="pr-template")
typer_app.add_typer(run_policies_app, name="run-policies")
typer_app.add_typer(run_policy_evaluations_app, name="run-policy-evaluations")
typer_app.add_typer(subscription_status_app, name="subscription-status")


def configure_logging(debug: bool) -> None:
    """Configure structlog to render to the console at the requested level."""
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG if debug else logging.WARNING),
    )


@typer_app.callback()
def main_callback(
    ctx: typer.Context,
    api_base_url: Annotated[str, Option(envvar="STEPSECURITY_API_BASE_URL", help="StepSecurity API base URL.")] = DEFAULT_API_BASE_URL,
    api_key: Annotated[str | None, Option(envvar="STEPSECURITY_API_KEY", help="StepSecurity API key.")] = None,
    customer: Annotated[str | None, Option(envvar="STEPSECURITY_CUSTOMER", help="StepSecurity customer identifier.")] = None,
    debug: Annotated[bool, Option(envvar="DEBUG", help="Enable debug mode.")] = False,
) -> None:
    """Manage StepSecurity GitHub Actions security policies."""
    configure_logging(debug)
    try:
        config = validate_client_configuration(base_url=api_base_url, api_key=api_key, customer=customer)
    except ClientConfigurationUndefinedError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1) from e
    ctx.ensure_object(dict)
    ctx.obj["config"] = config


def run_with_client(ctx: typer.Context, operation: Callable[[StepSecurityClient], Awaitable[T]]) -> T:
    """Run an API operation with a client built from the context, exiting with status 1 on API errors."""
    config: ClientConfig = ctx.obj["config"]

    async def run() -> T:
        async with StepSecurityClient(config) as client:
            return await operation(client)

    try:
        return asyncio.run(run())
    except StepSecurityError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e


def echo_json(data: Any) -> None:
    """Print models, or lists of models, as indented JSON."""
    if isinstance(data, BaseModel):
        data = data.model_dump(mode="json", by_alias=True)
    elif isinstance(data, list):
        data = [item.model_dump(mode="json", by_alias=True) if isinstance(item, BaseModel) else item for item in data]
    typer.echo(json.dumps(data, indent=2))


@users_app.command(name="list")
def list_users_cli(ctx: typer.Context) -> None:
    """List the users of the customer."""
    echo_json(run_with_client(ctx, lambda client: client.users.list_users()))


@notification_settings_app.command(name="get")
def get_notification_settings_cli(
    ctx: typer.Context,
    owner: Annotated[str, Argument(help="GitHub organization or user.")],
) -> None:
    """Show the run notification settings of an owner."""
    echo_json(run_with_client(ctx, lambda client: client.notification_settings.get_notification_settings(owner)))


@notification_settings_app.command(name="delete")
def delete_notification_settings_cli(
    ctx: typer.Context,
    owner: Annotated[str, Argument(help="GitHub organization or user.")],
) -> None:
    """Clear the run notification settings of an owner."""
    run_with_client(ctx, lambda client: client.notification_settings.delete_notification_settings(owner))
    typer.echo(f"Cleared notification settings of {owner}")


@policy_driven_pr_app.command(name="get")
def get_policy_driven_pr_cli(
    ctx: typer.Context,
    owner: Annotated[str, Argument(help="GitHub organization or user.")],
) -> None:
    """Show the policy-driven PR policy of an owner."""
    policy = run_with_client(ctx, lambda client: client.policy_driven_prs.get_policy(owner))
    echo_json(policy.to_document())


@policy_driven_pr_app.command(name="apply")
def apply_policy_driven_pr_cli(
    ctx: typer.Context,
    policy_path: Annotated[Path, Argument(envvar="POLICY_PATH", help="Path to a YAML policy-driven PR policy.")],
    previous_repos: Annotated[
        list[str] | None,
        Option("--previous-repos", help="Repositories selected before this change; their removal is applied as an update."),
    ] = None,
) -> None:
    """Create or update a policy-driven PR policy from a YAML file."""
    try:
        policy: PolicyDrivenPRPolicy = load_policy_driven_pr_policy(policy_path)
    except (FileNotFoundError, ValueError) as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1) from e

    if previous_repos is None:
        typer.echo(f"Creating policy-driven PR policy for {policy.owner}")
        run_with_client(ctx, lambda client: client.policy_driven_prs.create_policy(policy))
    else:
        removed = removed_repos(previous_repos, policy.selected_repos)
        typer.echo(f"Updating policy-driven PR policy for {policy.owner}, removing {len(removed)} repositories")
        run_with_client(ctx, lambda client: client.policy_driven_prs.update_policy(policy, removed))
    typer.echo(f"Applied policy-driven PR policy to {', '.join(policy.selected_repos)}")


@policy_driven_pr_app.command(name="delete")
def delete_policy_driven_pr_cli(
    ctx: typer.Context,
    owner: Annotated[str, Argument(help="GitHub organization or user.")],
    repos: Annotated[list[str], Option("--repo", help="Repository to remove the policy from; '*' for the owner-wide policy.")],
) -> None:
    """Delete the policy-driven PR configuration of repositories."""
    run_with_client(ctx, lambda client: client.policy_driven_prs.delete_policy(owner, repos))
    typer.echo(f"Deleted policy-driven PR configuration for {', '.join(repos)}")


@pr_checks_app.command(name="get")
def get_pr_checks_cli(
    ctx: typer.Context,
    owner: Annotated[str, Argument(help="GitHub organization or user.")],
) -> None:
    """Show the PR checks configuration of an owner."""
    echo_json(run_with_client(ctx, lambda client: client.pr_checks.get_pr_checks_config(owner)))


@pr_template_app.command(name="get")
def get_pr_template_cli(
    ctx: typer.Context,
    owner: Annotated[str, Argument(help="GitHub organization or user.")],
) -> None:
    """Show the pull request template of an owner."""
    echo_json(run_with_client(ctx, lambda client: client.pr_template.get_pr_template(owner)))


@run_policies_app.command(name="list")
def list_run_policies_cli(
    ctx: typer.Context,
    owner: Annotated[str, Argument(help="GitHub organization or user.")],
) -> None:
    """List the run policies of an owner."""
    echo_json(run_with_client(ctx, lambda client: client.run_policies.list_run_policies(owner)))


@run_policy_evaluations_app.command(name="list")
def list_run_policy_evaluations_cli(
    ctx: typer.Context,
    owner: Annotated[str, Argument(help="GitHub organization or user.")],
    repo: Annotated[str | None, Option(help="Only list evaluations of this repository.")] = None,
    status: Annotated[str | None, Option(help="Only list evaluations with this status.")] = None,
) -> None:
    """List run policy evaluations of an owner or a repository."""
    if repo:
        evaluations = run_with_client(ctx, lambda client: client.run_policy_evaluations.list_repo_run_policy_evaluations(owner, repo, status))
    else:
        evaluations = run_with_client(ctx, lambda client: client.run_policy_evaluations.list_org_run_policy_evaluations(owner, status))
    echo_json(evaluations)


@subscription_status_app.command(name="get")
def get_subscription_status_cli(
    ctx: typer.Context,
    owner: Annotated[str, Argument(help="GitHub organization or user.")],
    repo: Annotated[str, Argument(help="Repository name.")],
) -> None:
    """Show the subscription status of a repository."""
    echo_json(run_with_client(ctx, lambda client: client.subscription_status.get_subscription_status(owner, repo)))


if __name__ == "__main__":
    typer_app()
