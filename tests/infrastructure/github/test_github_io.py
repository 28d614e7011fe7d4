"""Tests for GitHub Actions helpers.

Tests cover:
- Action input collection from INPUT_* variables
- Log group markers, including when the block raises
- Job summary writing
- Process environment sink
"""

import io
import os
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest.mock import patch

from nxrunner.infrastructure.github.environment import ProcessEnvironment
from nxrunner.infrastructure.github.inputs import input_env_name, read_action_inputs
from nxrunner.infrastructure.github.output import group, write_github_step_summary


class TestReadActionInputs(unittest.TestCase):
    def test_input_env_name_upper_cases(self):
        self.assertEqual(input_env_name("baseBoundaryOverride"), "INPUT_BASEBOUNDARYOVERRIDE")

    def test_reads_and_strips_inputs(self):
        inputs = read_action_inputs({
            "INPUT_TARGETS": " lint,test ",
            "INPUT_NXCLOUD": "true",
            "INPUT_WORKINGDIRECTORY": "apps",
            "UNRELATED": "x",
        })

        self.assertEqual(inputs["targets"], "lint,test")
        self.assertEqual(inputs["nxCloud"], "true")
        self.assertEqual(inputs["workingDirectory"], "apps")
        self.assertEqual(inputs["projects"], "")
        self.assertNotIn("UNRELATED", inputs)


class TestGroup(unittest.TestCase):
    def test_wraps_output_in_group_markers(self):
        with redirect_stdout(io.StringIO()) as output:
            with group("Boundaries"):
                print("inside")

        self.assertEqual(
            output.getvalue().splitlines(),
            ["::group::Boundaries", "inside", "::endgroup::"],
        )

    def test_end_marker_written_when_block_raises(self):
        with redirect_stdout(io.StringIO()) as output:
            with self.assertRaises(RuntimeError):
                with group("Boundaries"):
                    raise RuntimeError("boom")

        self.assertEqual(output.getvalue().splitlines()[-1], "::endgroup::")


class TestWriteGithubStepSummary(unittest.TestCase):
    def test_appends_to_summary_file(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            summary = Path(temp_dir) / "summary.md"
            with patch.dict(os.environ, {"GITHUB_STEP_SUMMARY": str(summary)}):
                self.assertTrue(write_github_step_summary("## Nx\n"))
                self.assertTrue(write_github_step_summary("done\n"))

            self.assertEqual(summary.read_text(), "## Nx\ndone\n")

    def test_skips_when_not_in_actions(self):
        with patch.dict(os.environ, {}, clear=True):
            with redirect_stdout(io.StringIO()):
                self.assertFalse(write_github_step_summary("## Nx\n"))


class TestProcessEnvironment(unittest.TestCase):
    def test_sets_os_environ(self):
        with patch.dict(os.environ, {}, clear=False):
            ProcessEnvironment().set("NX_RUN_GROUP", "123")
            self.assertEqual(os.environ["NX_RUN_GROUP"], "123")


if __name__ == "__main__":
    unittest.main()
