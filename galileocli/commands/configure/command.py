"""
CLI command for "configure" command
"""

import json
import logging
from typing import Dict, List, Optional

import click

from galileocli.cli.main import common_options, pass_context
from galileocli.cli.options import cache_file_option
from galileocli.lib.cache import Cache, JsonFileCache, MappingCache
from galileocli.lib.constants import DeployModelOptions
from galileocli.lib.prompts.catalog import PromptCatalog, RegionType
from galileocli.lib.prompts.interactive_flow import InteractiveFlow
from galileocli.lib.prompts.question import Question

LOG = logging.getLogger(__name__)

SHORT_HELP = "Collect the configuration of a Galileo deployment."

HELP_TEXT = """The galileo configure command asks the questions of the deployment wizard and prints the answers.

Answers from a previous run can be provided with --cache-file, they are suggested as default answers.

\b
e.g. galileo configure --cache-file answers.json --application-name Galileo

\b
"""

DEFAULT_APPLICATION_NAME = "Galileo"


@click.command("configure", short_help=SHORT_HELP, help=HELP_TEXT)
@cache_file_option
@click.option(
    "--application-name",
    required=False,
    default=DEFAULT_APPLICATION_NAME,
    show_default=True,
    help="Name of the application, used to check the cross-account role of the foundation model stack.",
)
@common_options
@pass_context
def cli(ctx, cache_file, application_name):
    # All logic must be implemented in the ``do_cli`` method. This helps with easy unit testing
    do_cli(cache_file, application_name)  # pragma: no cover


def do_cli(cache_file: Optional[str], application_name: str) -> Dict:
    cache: Cache = JsonFileCache(cache_file) if cache_file else MappingCache()
    catalog = PromptCatalog(cache)

    answers = InteractiveFlow(_application_questions(catalog), show_summary=False).run()
    answers = InteractiveFlow(
        _model_questions(catalog, answers["deployModels"], application_name), show_summary=False
    ).run(answers)

    available_model_ids = list(answers.get("foundationModels") or []) + list(answers.get("bedrockModelIds") or [])
    LOG.debug("Models available to the inference engine: %s", available_model_ids)
    answers = InteractiveFlow([catalog.deploy_model_id(available_model_ids)]).run(answers)

    click.echo(json.dumps(answers, indent=2))
    return answers


def _application_questions(catalog: PromptCatalog) -> List[Question]:
    return [
        catalog.profile(),
        catalog.aws_region(RegionType.APP),
        *catalog.admin_email_and_username(),
        catalog.confirm_deploy_app(),
        catalog.confirm_deploy_sample(),
        catalog.foundation_models(),
        catalog.deploy_models(),
    ]


def _model_questions(catalog: PromptCatalog, deploy_models: str, application_name: str) -> List[Question]:
    questions: List[Question] = []
    if deploy_models == DeployModelOptions.DIFFERENT_REGION.value:
        questions.append(catalog.aws_region(RegionType.FOUNDATION_MODEL))
    elif deploy_models == DeployModelOptions.CROSS_ACCOUNT.value:
        questions.append(catalog.cross_region_role_arn(application_name))
    questions.extend([catalog.bedrock_model_ids(), catalog.bedrock_region(), catalog.bedrock_endpoint_url()])
    return questions
