"""
Validators of question answers.

A validator takes the submitted answer and returns None when it is valid, or the message to show to the user otherwise.
Validators never raise, the interactive engine re-asks the question on failure.
"""

import re
from functools import partial
from typing import Any, Callable, Optional

Validator = Callable[[Any], Optional[str]]


def validate_required(value: Any, message: str) -> Optional[str]:
    return None if value else message


def required(message: str) -> Validator:
    return partial(validate_required, message=message)


def cross_account_role_arn_pattern(application_name: str) -> str:
    return rf"arn:aws:iam::\d{{10,12}}:role/{application_name}-FoundationModel-CrossAccount-\w+"


def validate_cross_account_role_arn(value: Any, application_name: str) -> Optional[str]:
    """
    Checks the value is the ARN of the role created by the cross-account foundation model stack of the application.
    The application name is matched literally, the failure message shows it unescaped.
    """
    search_pattern = cross_account_role_arn_pattern(re.escape(application_name))
    if value and isinstance(value, str) and re.search(search_pattern, value):
        return None
    return f'Invalid cross-account arn - expected "{cross_account_role_arn_pattern(application_name)}"'


def cross_account_role_arn(application_name: str) -> Validator:
    return partial(validate_cross_account_role_arn, application_name=application_name)
