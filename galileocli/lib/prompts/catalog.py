"""
Questions asked by the deployment wizard to collect the configuration of a Galileo deployment
"""

import logging
import os
from enum import Enum
from typing import Any, List, Mapping, Optional, Sequence, Union

from galileocli.lib.cache import Cache
from galileocli.lib.constants import (
    AWS_DEFAULT_REGION_ENV_VAR,
    AWS_PROFILE_ENV_VAR,
    AWS_REGION_ENV_VAR,
    BEDROCK_DEFAULT_MODEL,
    BEDROCK_REGION,
    CDK_BOOTSTRAPPING_CUSTOMIZATION_URL,
    DEFAULT_CLOUDFORMATION_EXECUTION_POLICIES,
    DEFAULT_FOUNDATION_MODEL_ID,
    DEFAULT_PREDEFINED_FOUNDATION_MODEL_LIST,
    BedrockModelIds,
    DeployModelOptions,
    FoundationModelIds,
)
from galileocli.lib.prompts import validators
from galileocli.lib.prompts.defaults import from_cache, from_env, from_value, resolve_default
from galileocli.lib.prompts.question import (
    AutocompleteMultiSelect,
    Confirm,
    MultiSelect,
    PromptChoice,
    Question,
    Select,
)
from galileocli.lib.utils.colors import Colored
from galileocli.lib.utils.messages import MessageFormatter

LOG = logging.getLogger(__name__)

MULTISELECT_INSTRUCTIONS = "Enter the numbers of the options to select, separated by commas"
AUTOCOMPLETE_MULTISELECT_INSTRUCTIONS = (
    "Enter the numbers, the ids or part of the ids of the options to select, separated by commas"
)


class RegionType(str, Enum):
    APP = "app"
    FOUNDATION_MODEL = "foundationModel"
    BEDROCK = "bedrock"


class PromptCatalog:
    """
    Builds the questions of the deployment wizard.

    Every method returns newly built questions whose default answers are resolved, at build time, from the answers
    cached by previous runs and from the environment. The catalog only reads from its collaborators.

    Parameters
    ----------
    cache: Cache
        Answers given in previous runs, keyed by question key
    environ: Optional[Mapping[str, str]]
        Environment variables, defaults to the process environment
    formatter: Optional[MessageFormatter]
        Builds the text of execution confirmations
    foundation_model_ids: Optional[Sequence[str]]
        Foundation models offered, in display order
    default_foundation_model_ids: Optional[Sequence[str]]
        Foundation models preselected when nothing was cached
    bedrock_model_ids: Optional[Sequence[str]]
        Bedrock models offered, displayed sorted
    """

    def __init__(
        self,
        cache: Cache,
        environ: Optional[Mapping[str, str]] = None,
        formatter: Optional[MessageFormatter] = None,
        foundation_model_ids: Optional[Sequence[str]] = None,
        default_foundation_model_ids: Optional[Sequence[str]] = None,
        bedrock_model_ids: Optional[Sequence[str]] = None,
    ) -> None:
        self._cache = cache
        self._environ = os.environ if environ is None else environ
        self._formatter = formatter or MessageFormatter()
        self._foundation_model_ids = list(
            foundation_model_ids if foundation_model_ids is not None else [_id.value for _id in FoundationModelIds]
        )
        self._default_foundation_model_ids = list(
            default_foundation_model_ids
            if default_foundation_model_ids is not None
            else DEFAULT_PREDEFINED_FOUNDATION_MODEL_LIST
        )
        self._bedrock_model_ids = list(
            bedrock_model_ids if bedrock_model_ids is not None else [_id.value for _id in BedrockModelIds]
        )
        self._color = Colored()

    def install_deps(self) -> Question:
        return Confirm(
            key="installDeps",
            text=self._color.yellow("Project dependencies not found. Install?"),
            default=True,
        )

    def confirm_exec(self, ctx: str, message: str) -> Question:
        return Confirm(key="confirmed", text=self._formatter.context_message(ctx, message), default=True)

    def confirm_exec_command(self, ctx: str, description: str, command: str) -> Question:
        return Confirm(
            key="confirmed",
            text=self._formatter.command_message(ctx, description, command),
            default=True,
        )

    def profile(self, initial: Optional[str] = None) -> Question:
        default = resolve_default(
            [
                from_value(initial),
                from_cache(self._cache, "profile"),
                from_env(self._environ, AWS_PROFILE_ENV_VAR),
                from_value("default"),
            ],
            skip_empty=True,
        )
        return Question(
            key="profile",
            text="AWS Profile",
            default=default,
            validator=validators.required("Profile is required"),
        )

    def aws_region(
        self,
        region_type: Union[RegionType, str],
        message: Optional[str] = None,
        initial: Optional[str] = None,
    ) -> Question:
        """
        Question for the region of one of the deployed components

        Parameters
        ----------
        region_type: Union[RegionType, str]
            Which component the region is for, one of "app", "foundationModel" or "bedrock"
        message: Optional[str]
            Text of the question, defaults to "AWS Region (<region_type>)"
        initial: Optional[str]
            Default answer overriding cached and environment values

        Raises
        ------
        ValueError
            When the region type is unknown
        """
        region_type = RegionType(region_type).value
        key = f"{region_type}Region"
        default = resolve_default(
            [
                from_value(initial),
                from_cache(self._cache, key),
                from_env(self._environ, AWS_REGION_ENV_VAR),
                from_env(self._environ, AWS_DEFAULT_REGION_ENV_VAR),
            ],
            skip_empty=True,
        )
        LOG.debug("Default %s resolved to %s", key, default)
        return Question(
            key=key,
            text=message or f"AWS Region ({region_type})",
            default=default,
            validator=validators.required(f'"{region_type}" region is required'),
        )

    def admin_email_and_username(self) -> List[Question]:
        """
        Administrator email, then administrator username which is only asked when an email was given
        """
        return [
            Question(
                key="adminEmail",
                text="Administrator email address",
                default=self._cache.get_item("adminEmail"),
                hint="Enter email address to automatically create Cognito admin user, otherwise leave blank",
            ),
            Question(
                key="adminUsername",
                text="Administrator username",
                default=resolve_default([from_cache(self._cache, "adminUsername"), from_value("admin")]),
                when=_has_answer,
            ),
        ]

    def confirm_deploy_app(self) -> Question:
        return Confirm(
            key="deployApp",
            text="Deploy main application stack?",
            default=resolve_default([from_cache(self._cache, "deployApp"), from_value(True)]),
        )

    # TODO: move sample dataset deployment to the upload data command
    def confirm_deploy_sample(self) -> Question:
        return Confirm(
            key="deploySample",
            text="Deploy sample dataset?",
            default=resolve_default([from_cache(self._cache, "deploySample"), from_value(True)]),
        )

    def foundation_models(self) -> Question:
        selected = set(
            resolve_default(
                [from_cache(self._cache, "foundationModels"), from_value(self._default_foundation_model_ids)],
                skip_empty=True,
            )
        )
        return MultiSelect(
            key="foundationModels",
            text="Choose the foundation models to support",
            choices=[PromptChoice(title=_id, value=_id, selected=_id in selected) for _id in self._foundation_model_ids],
            min_selected=1,
            instructions=MULTISELECT_INSTRUCTIONS,
        )

    def bedrock_model_ids(self) -> Question:
        selected = set(
            resolve_default(
                [from_cache(self._cache, "bedrockModelIds"), from_value([BEDROCK_DEFAULT_MODEL])],
                skip_empty=True,
            )
        )
        return AutocompleteMultiSelect(
            key="bedrockModelIds",
            text="Bedrock model ids",
            choices=[
                PromptChoice(title=_id, value=_id, selected=_id in selected) for _id in sorted(self._bedrock_model_ids)
            ],
            min_selected=1,
            instructions=AUTOCOMPLETE_MULTISELECT_INSTRUCTIONS,
        )

    def bedrock_region(self) -> Question:
        return Question(
            key="bedrockRegion",
            text="Bedrock region",
            default=resolve_default([from_cache(self._cache, "bedrockRegion"), from_value(BEDROCK_REGION)]),
        )

    def bedrock_endpoint_url(self) -> Question:
        return Question(
            key="bedrockEndpointUrl",
            text=f"Bedrock endpoint url {self._color.grey('(optional)')}",
            default=self._cache.get_item("bedrockEndpointUrl"),
        )

    def deploy_model_id(self, available_model_ids: Sequence[str]) -> Question:
        """
        Question for the model used by default by the inference engine, among the models made available.
        The cached default model is preselected when it is still available, the first model otherwise.
        """
        return Select(
            key="defaultModelId",
            text="Choose the default foundation model",
            choices=[PromptChoice(title=_id, value=_id) for _id in available_model_ids],
            default=resolve_default(
                [from_cache(self._cache, "defaultModelId"), from_value(DEFAULT_FOUNDATION_MODEL_ID)]
            ),
            hint="This will be the default model used in inference engine.",
        )

    def deploy_models(self) -> Question:
        return Select(
            key="deployModels",
            text="Deploy Foundation Models?",
            choices=[
                PromptChoice(title="Yes, in same region as application", value=DeployModelOptions.SAME_REGION.value),
                PromptChoice(title="Yes, but in different region", value=DeployModelOptions.DIFFERENT_REGION.value),
                PromptChoice(title="No, already deployed", value=DeployModelOptions.ALREADY_DEPLOYED.value),
                PromptChoice(title="No, but link to cross-account stack", value=DeployModelOptions.CROSS_ACCOUNT.value),
                PromptChoice(title="No", value=DeployModelOptions.NO.value),
            ],
            default=resolve_default(
                [from_cache(self._cache, "deployModels"), from_value(DeployModelOptions.SAME_REGION.value)]
            ),
        )

    def cross_region_role_arn(self, application_name: str) -> Question:
        return Question(
            key="crossRegionRoleArn",
            text="What is the cross-account role arn for Foundation Model stack?",
            default=self._cache.get_item("crossRegionRoleArn"),
            validator=validators.cross_account_role_arn(application_name),
        )

    def confirm_bootstrap_regions(self, regions: Sequence[str], account: str) -> Question:
        plural = len(regions) > 1
        quoted_regions = ", ".join(f'"{region}"' for region in regions)
        return Confirm(
            key="bootstrapRegions",
            text=f"Region{'s' if plural else ''} {quoted_regions} {'are' if plural else 'is'} not bootstrapped "
            f'in account "{account}". Do you want to bootstrap {"them" if plural else "it"}?',
            default=True,
        )

    def cloudformation_execution_policies(self) -> Question:
        return Question(
            key="cloudformationExecutionPolicies",
            text="What managed polices should be attached to bootstrap deployment role?",
            default=resolve_default(
                [
                    from_cache(self._cache, "cloudformationExecutionPolicies"),
                    from_value(",".join(DEFAULT_CLOUDFORMATION_EXECUTION_POLICIES)),
                ]
            ),
            hint=CDK_BOOTSTRAPPING_CUSTOMIZATION_URL,
        )


def _has_answer(previous_answer: Optional[Any]) -> bool:
    return bool(previous_answer)
