import json
import os
import tempfile
from unittest import TestCase
from unittest.mock import patch

from click.testing import CliRunner
from parameterized import parameterized

from galileocli.cli.main import cli
from galileocli.commands.configure.command import do_cli, _model_questions
from galileocli.commands.exceptions import CacheFileError
from galileocli.lib.cache import MappingCache
from galileocli.lib.prompts.catalog import PromptCatalog


class TestConfigureCliCommand(TestCase):
    def setUp(self):
        self.application_answers = {
            "profile": "dev",
            "appRegion": "eu-west-1",
            "adminEmail": "",
            "deployApp": True,
            "deploySample": False,
            "foundationModels": ["falcon-lite"],
            "deployModels": "cross-account",
        }
        self.model_answers = dict(
            self.application_answers,
            crossRegionRoleArn="arn:aws:iam::123456789012:role/myapp-FoundationModel-CrossAccount-abc",
            bedrockModelIds=["anthropic.claude-v2"],
            bedrockRegion="us-east-1",
            bedrockEndpointUrl="",
        )
        self.final_answers = dict(self.model_answers, defaultModelId="anthropic.claude-v2")

    @patch("galileocli.commands.configure.command.click")
    @patch("galileocli.commands.configure.command.InteractiveFlow")
    def test_all_questions_asked(self, mock_flow, mock_click):
        mock_flow.return_value.run.side_effect = [self.application_answers, self.model_answers, self.final_answers]

        answers = do_cli(None, "myapp")

        self.assertEqual(answers, self.final_answers)
        self.assertEqual(mock_flow.call_count, 3)

        application_questions = mock_flow.call_args_list[0][0][0]
        self.assertEqual(
            [q.key for q in application_questions],
            [
                "profile",
                "appRegion",
                "adminEmail",
                "adminUsername",
                "deployApp",
                "deploySample",
                "foundationModels",
                "deployModels",
            ],
        )

        model_questions = mock_flow.call_args_list[1][0][0]
        self.assertEqual(
            [q.key for q in model_questions],
            ["crossRegionRoleArn", "bedrockModelIds", "bedrockRegion", "bedrockEndpointUrl"],
        )
        mock_flow.return_value.run.assert_any_call(self.application_answers)

        (default_model_question,) = mock_flow.call_args_list[2][0][0]
        self.assertEqual(default_model_question.key, "defaultModelId")
        self.assertEqual(
            [choice.value for choice in default_model_question.choices], ["falcon-lite", "anthropic.claude-v2"]
        )

        mock_click.echo.assert_called_once_with(json.dumps(self.final_answers, indent=2))

    @patch("galileocli.commands.configure.command.click")
    @patch("galileocli.commands.configure.command.InteractiveFlow")
    def test_cached_answers_used_as_defaults(self, mock_flow, mock_click):
        mock_flow.return_value.run.side_effect = [self.application_answers, self.model_answers, self.final_answers]

        with tempfile.TemporaryDirectory() as temp_dir:
            cache_file = os.path.join(temp_dir, "answers.json")
            with open(cache_file, "w", encoding="utf-8") as f:
                json.dump({"profile": "cached-profile"}, f)

            do_cli(cache_file, "myapp")

        profile_question = mock_flow.call_args_list[0][0][0][0]
        self.assertEqual(profile_question.default_answer, "cached-profile")

    def test_invalid_cache_file(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            cache_file = os.path.join(temp_dir, "answers.json")
            with open(cache_file, "w", encoding="utf-8") as f:
                f.write("not json")

            with self.assertRaises(CacheFileError):
                do_cli(cache_file, "myapp")

            result = CliRunner().invoke(cli, ["configure", "--cache-file", cache_file])

        self.assertEqual(result.exit_code, 1)
        self.assertIn("Unable to read cached answers", result.output)


class TestModelQuestions(TestCase):
    def setUp(self):
        self.catalog = PromptCatalog(cache=MappingCache(), environ={})

    @parameterized.expand(
        [
            ("same-region", ["bedrockModelIds", "bedrockRegion", "bedrockEndpointUrl"]),
            (
                "different-region",
                ["foundationModelRegion", "bedrockModelIds", "bedrockRegion", "bedrockEndpointUrl"],
            ),
            ("already-deployed", ["bedrockModelIds", "bedrockRegion", "bedrockEndpointUrl"]),
            (
                "cross-account",
                ["crossRegionRoleArn", "bedrockModelIds", "bedrockRegion", "bedrockEndpointUrl"],
            ),
            ("no", ["bedrockModelIds", "bedrockRegion", "bedrockEndpointUrl"]),
        ]
    )
    def test_model_questions(self, deploy_models, expected_keys):
        questions = _model_questions(self.catalog, deploy_models, "myapp")
        self.assertEqual([q.key for q in questions], expected_keys)
