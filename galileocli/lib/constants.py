"""
Model identifiers, deployment options and defaults offered by the deployment wizard
"""

from enum import Enum


class FoundationModelIds(str, Enum):
    """Foundation models deployable as SageMaker endpoints, in the order they are offered"""

    FALCON_LITE = "falcon-lite"
    FALCON_LITE2 = "falcon-lite2"
    FALCON_7B_INSTRUCT = "falcon-7b-instruct"
    FALCON_40B_INSTRUCT = "falcon-40b-instruct"
    FALCON_OA_40B = "falcon-oa-40b"
    LLAMA2_13B_CHAT = "llama2-13b-chat"
    LLAMA2_70B_CHAT = "llama2-70b-chat"


class BedrockModelIds(str, Enum):
    """Bedrock model ids, not declared in display order"""

    TITAN_TG1_LARGE = "amazon.titan-tg1-large"
    TITAN_TEXT_EXPRESS_V1 = "amazon.titan-text-express-v1"
    CLAUDE_V2 = "anthropic.claude-v2"
    CLAUDE_V2_1 = "anthropic.claude-v2:1"
    CLAUDE_INSTANT_V1 = "anthropic.claude-instant-v1"
    AI21_J2_MID = "ai21.j2-mid"
    AI21_J2_ULTRA = "ai21.j2-ultra"
    COHERE_COMMAND = "cohere.command-text-v14"
    LLAMA2_13B_CHAT = "meta.llama2-13b-chat-v1"


class DeployModelOptions(str, Enum):
    """Strategies for where the foundation model stack gets deployed"""

    SAME_REGION = "same-region"
    DIFFERENT_REGION = "different-region"
    ALREADY_DEPLOYED = "already-deployed"
    CROSS_ACCOUNT = "cross-account"
    NO = "no"


DEFAULT_PREDEFINED_FOUNDATION_MODEL_LIST = [FoundationModelIds.FALCON_LITE.value]
DEFAULT_FOUNDATION_MODEL_ID = FoundationModelIds.FALCON_LITE.value

BEDROCK_DEFAULT_MODEL = BedrockModelIds.CLAUDE_V2.value
BEDROCK_REGION = "us-east-1"

DEFAULT_CLOUDFORMATION_EXECUTION_POLICIES = [
    "arn:aws:iam::aws:policy/PowerUserAccess",
    "arn:aws:iam::aws:policy/IAMFullAccess",
]

CDK_BOOTSTRAPPING_CUSTOMIZATION_URL = "https://docs.aws.amazon.com/cdk/v2/guide/bootstrapping.html#bootstrapping-customizing"

AWS_PROFILE_ENV_VAR = "AWS_PROFILE"
AWS_REGION_ENV_VAR = "AWS_REGION"
AWS_DEFAULT_REGION_ENV_VAR = "AWS_DEFAULT_REGION"
