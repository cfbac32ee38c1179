"""Translates between the user-facing policy-driven PR policy and the API's per-repository configurations.

Writing fans a single ``PolicyDrivenPRPolicy`` out into identical
``PolicyDrivenPRConfigOptions`` documents, one per selected repository or a
single one on the owner-wide ``[all]`` target. Reading folds the configurations
listed for an owner back into one policy.
"""

from dataclasses import dataclass, field

import structlog

from stepsecurity_ops_manager.schemas.policy_driven_prs import (
    CONTENT_CONTROLS,
    TOGGLE_CONTROLS,
    AutoRemediationOptions,
    Control,
    ControlSettings,
    IssuePRConfig,
    OrgLevel,
    PolicyDrivenPRConfigOptions,
    PolicyDrivenPRInternal,
    PolicyDrivenPRPolicy,
    RepoLevel,
)
from stepsecurity_ops_manager.utils.github import org_level_full_name

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def enabled_controls(options: AutoRemediationOptions) -> list[Control]:
    """Controls switched on by the remediation options, toggles first."""
    controls = [control for option, control in TOGGLE_CONTROLS.items() if getattr(options, option)]
    controls.extend(control for option, control in CONTENT_CONTROLS.items() if getattr(options, option))
    return controls


def build_control_checks_config(options: AutoRemediationOptions) -> dict[str, IssuePRConfig]:
    """Build the control checks map; each enabled control triggers what the global toggles ask for."""
    return {
        control.value: IssuePRConfig(trigger_github_issue=options.create_issue, trigger_github_pr=options.create_pr)
        for control in enabled_controls(options)
    }


def build_control_settings(options: AutoRemediationOptions, apply_to_all_repos: bool) -> ControlSettings:
    """Build the settings shared by the controls.

    The external policy names the actions to replace but not their
    replacements, so each action maps to an empty replacement.
    """
    return ControlSettings(
        exempted_actions=list(options.actions_to_exempt_while_pinning),
        actions_to_replace={action: "" for action in options.actions_to_replace_with_step_security_actions},
        update_precommit_file={path: True for path in options.update_precommit_file},
        package_ecosystem=[entry.model_copy() for entry in options.package_ecosystem],
        add_workflows=options.add_workflows,
        apply_issue_pr_config_for_all_repos=apply_to_all_repos,
    )


def build_config_options(policy: PolicyDrivenPRPolicy) -> PolicyDrivenPRConfigOptions:
    """Build the configuration written to every target of the policy."""
    options = policy.auto_remediation_options
    return PolicyDrivenPRConfigOptions(
        use_repo_level_config=policy.use_repo_level_config,
        use_org_level_config=policy.use_org_level_config,
        control_checks_config=build_control_checks_config(options),
        trigger_github_alert=options.create_github_advanced_security_alert,
        trigger_pr_instead_of_issue=options.create_pr,
        control_settings=build_control_settings(options, apply_to_all_repos=policy.use_org_level_config),
    )


def is_config_enabled(config: PolicyDrivenPRConfigOptions) -> bool:
    """Whether a configuration does anything: raises alerts, PRs, or has any control configured."""
    return config.trigger_github_alert or config.trigger_pr_instead_of_issue or bool(config.control_checks_config)


@dataclass
class PartitionedConfigs:
    """Configurations listed for an owner, split by target."""

    org_level: PolicyDrivenPRInternal | None = None
    repo_level: dict[str, PolicyDrivenPRInternal] = field(default_factory=dict)


def partition_configs(owner: str, configs: list[PolicyDrivenPRInternal]) -> PartitionedConfigs:
    """Split listed configurations into the owner-wide entry and the enabled repository entries.

    Repository entries that are fully disabled are dropped. Repository order
    follows the listing.
    """
    partitioned = PartitionedConfigs()
    org_full_name = org_level_full_name(owner)
    for config in configs:
        if config.full_name == org_full_name:
            partitioned.org_level = config
        elif is_config_enabled(config):
            partitioned.repo_level[config.repo_name] = config
    return partitioned


def diverging_repos(template: PolicyDrivenPRInternal, configs: dict[str, PolicyDrivenPRInternal]) -> list[str]:
    """Repositories whose shared settings differ from the template's."""
    expected = template.shared_settings()
    return [repo for repo, config in configs.items() if config.shared_settings() != expected]


def options_from_config(config: PolicyDrivenPRConfigOptions) -> AutoRemediationOptions:
    """Rebuild the remediation options from a stored configuration.

    Replacement targets of replaced actions are not part of the external
    policy and are dropped.
    """
    checks = config.control_checks_config
    settings = config.control_settings

    def control_enabled(control: Control) -> bool:
        check = checks.get(control.value)
        return check is not None and check.enabled

    if checks:
        create_issue = any(check.trigger_github_issue for check in checks.values())
    else:
        create_issue = not config.trigger_pr_instead_of_issue

    toggles = {option: control_enabled(control) for option, control in TOGGLE_CONTROLS.items()}
    return AutoRemediationOptions(
        create_pr=config.trigger_pr_instead_of_issue,
        create_issue=create_issue,
        create_github_advanced_security_alert=config.trigger_github_alert,
        actions_to_exempt_while_pinning=list(settings.exempted_actions),
        actions_to_replace_with_step_security_actions=list(settings.actions_to_replace),
        update_precommit_file=list(settings.update_precommit_file),
        package_ecosystem=[entry.model_copy() for entry in settings.package_ecosystem],
        add_workflows=settings.add_workflows,
        **toggles,
    )


def policy_from_configs(owner: str, configs: list[PolicyDrivenPRInternal]) -> PolicyDrivenPRPolicy:
    """Fold the configurations listed for an owner into a single policy.

    An enabled owner-wide configuration wins over any repository entries,
    including stale ones left by an earlier repository-level policy.
    Otherwise the enabled repository entries make up the selection and one of
    them is used as the template for the shared settings. Repository entries
    are expected to be identical because every write fans the same
    configuration out to each repository; entries that differ from the
    template are logged. With nothing enabled an empty policy is returned: every
    toggle off and an empty repository-level selection, so
    ``use_repo_level_config`` is true there and does not by itself mean that a
    policy exists; check ``selected_repos`` instead.
    """
    partitioned = partition_configs(owner, configs)

    if partitioned.org_level is not None and is_config_enabled(partitioned.org_level):
        logger.debug("Using owner-wide policy-driven PR configuration", owner=owner)
        return PolicyDrivenPRPolicy(
            owner=owner,
            auto_remediation_options=options_from_config(partitioned.org_level),
            selection=OrgLevel(),
        )

    if partitioned.repo_level:
        template_repo, template = next(iter(partitioned.repo_level.items()))
        diverging = diverging_repos(template, partitioned.repo_level)
        if diverging:
            logger.warning(
                "Repository-level policy-driven PR configurations are out of sync",
                owner=owner,
                template_repo=template_repo,
                diverging_repos=diverging,
            )
        return PolicyDrivenPRPolicy(
            owner=owner,
            auto_remediation_options=options_from_config(template),
            selection=RepoLevel(repos=list(partitioned.repo_level)),
        )

    logger.debug("No enabled policy-driven PR configuration found", owner=owner)
    return PolicyDrivenPRPolicy(owner=owner, selection=RepoLevel(repos=[]))
