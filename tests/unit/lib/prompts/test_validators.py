from unittest import TestCase

from parameterized import parameterized

from galileocli.lib.prompts.validators import (
    cross_account_role_arn,
    cross_account_role_arn_pattern,
    required,
    validate_cross_account_role_arn,
    validate_required,
)


class TestRequired(TestCase):
    def test_validate_required(self):
        self.assertEqual(validate_required("", "Profile is required"), "Profile is required")
        self.assertEqual(validate_required(None, "Profile is required"), "Profile is required")
        self.assertIsNone(validate_required("default", "Profile is required"))

    def test_required_returns_validator(self):
        validator = required("Value is required")
        self.assertEqual(validator(""), "Value is required")
        self.assertIsNone(validator("x"))


class TestCrossAccountRoleArn(TestCase):
    @parameterized.expand(
        [
            ("arn:aws:iam::123456789012:role/myapp-FoundationModel-CrossAccount-abc",),
            ("arn:aws:iam::1234567890:role/myapp-FoundationModel-CrossAccount-A1b2C3",),
        ]
    )
    def test_valid_arn(self, arn):
        self.assertIsNone(validate_cross_account_role_arn(arn, "myapp"))

    @parameterized.expand(
        [
            ("arn:aws:iam::123:role/myapp-FoundationModel-CrossAccount-abc",),
            ("arn:aws:iam::123456789012:role/myapp-abc",),
            ("arn:aws:iam::123456789012:role/otherapp-FoundationModel-CrossAccount-abc",),
            ("",),
            (None,),
        ]
    )
    def test_invalid_arn(self, arn):
        self.assertEqual(
            validate_cross_account_role_arn(arn, "myapp"),
            'Invalid cross-account arn - expected "arn:aws:iam::\\d{10,12}:role/myapp-FoundationModel-CrossAccount-\\w+"',
        )

    def test_pattern(self):
        self.assertEqual(
            cross_account_role_arn_pattern("Galileo"),
            r"arn:aws:iam::\d{10,12}:role/Galileo-FoundationModel-CrossAccount-\w+",
        )

    def test_validator_captures_application_name(self):
        validator = cross_account_role_arn("Galileo")
        self.assertIsNone(validator("arn:aws:iam::123456789012:role/Galileo-FoundationModel-CrossAccount-x"))
        self.assertIsNotNone(validator("arn:aws:iam::123456789012:role/myapp-FoundationModel-CrossAccount-x"))

    def test_application_name_with_regex_metacharacters(self):
        validator = cross_account_role_arn("my(app")
        self.assertEqual(
            validator("arn:aws:iam::123456789012:role/x"),
            'Invalid cross-account arn - expected "arn:aws:iam::\\d{10,12}:role/my(app-FoundationModel-CrossAccount-\\w+"',
        )
        self.assertIsNone(validator("arn:aws:iam::123456789012:role/my(app-FoundationModel-CrossAccount-a"))

    def test_application_name_matched_literally(self):
        validator = cross_account_role_arn("my.app")
        self.assertIsNone(validator("arn:aws:iam::123456789012:role/my.app-FoundationModel-CrossAccount-a"))
        self.assertIsNotNone(validator("arn:aws:iam::123456789012:role/myxapp-FoundationModel-CrossAccount-a"))
