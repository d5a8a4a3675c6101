"""Tests for the LegalFlow CLI."""

import json
from pathlib import Path
from unittest.mock import patch

from conftest import make_plan_draft
from typer.testing import CliRunner

from legalflow import __version__
from legalflow.cli import app
from legalflow_ai.mocks import ScriptedModelService
from legalflow_ai.schemas import PlanDraft, ResearchOutput

runner = CliRunner()


class TestVersion:
    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"legalflow {__version__}" in result.stdout


class TestRunCommand:
    def test_dry_run_succeeds(self) -> None:
        with runner.isolated_filesystem():
            result = runner.invoke(app, ["run", "Research non-competes then draft a clause", "--dry"])

        assert result.exit_code == 0, result.stdout
        assert "Workflow completed successfully with 2 steps." in result.stdout
        assert "research" in result.stdout

    def test_json_output(self) -> None:
        with runner.isolated_filesystem():
            result = runner.invoke(app, ["run", "Review the lease", "--dry", "--json"])

        assert result.exit_code == 0, result.stdout
        data = json.loads(result.stdout)
        assert data["status"] == "success"
        assert data["plan"][0]["agent"] == "review"
        assert data["plan"][0]["status"] == "completed"

    def test_failed_run_exits_1(self) -> None:
        service = ScriptedModelService(
            {
                "plan": make_plan_draft("research", "draft"),
                "research": ResearchOutput(summary="ok"),
                "draft": RuntimeError("provider down"),
            }
        )
        with runner.isolated_filesystem(), patch(
            "legalflow.commands._common.demo_service", return_value=service
        ):
            result = runner.invoke(app, ["run", "Research X then draft Y", "--dry"])

        assert result.exit_code == 1
        assert "Workflow failed at step 2." in result.stdout

    def test_plan_error_exits_2(self) -> None:
        service = ScriptedModelService({"plan": PlanDraft(plan=[])})
        with runner.isolated_filesystem(), patch(
            "legalflow.commands._common.demo_service", return_value=service
        ):
            result = runner.invoke(app, ["run", "Research X", "--dry"])

        assert result.exit_code == 2
        assert "Could not create a valid workflow plan." in result.stdout

    def test_empty_objective_exits_2(self) -> None:
        with runner.isolated_filesystem():
            result = runner.invoke(app, ["run", "  ", "--dry"])
        assert result.exit_code == 2

    def test_invalid_config_exits_2(self) -> None:
        with runner.isolated_filesystem():
            Path(".legalflow").mkdir()
            Path(".legalflow/config.yaml").write_text("execution: [broken")
            result = runner.invoke(app, ["run", "Research X", "--dry"])

        assert result.exit_code == 2
        assert "Invalid YAML" in result.stdout

    def test_unknown_provider_exits_2(self) -> None:
        with runner.isolated_filesystem():
            result = runner.invoke(app, ["run", "Research X", "--dry", "--provider", "skynet"])
        assert result.exit_code == 2


class TestPlanCommand:
    def test_prints_plan(self) -> None:
        with runner.isolated_filesystem():
            result = runner.invoke(app, ["plan", "Predict the outcome then negotiate", "--dry"])

        assert result.exit_code == 0, result.stdout
        assert "predict" in result.stdout
        assert "negotiate" in result.stdout


class TestAgentsCommand:
    def test_lists_every_agent(self) -> None:
        with runner.isolated_filesystem():
            result = runner.invoke(app, ["agents"])

        assert result.exit_code == 0
        for agent in ("research", "draft", "review", "predict", "negotiate", "cross-examine"):
            assert agent in result.stdout


class TestInitCommand:
    def test_writes_config(self) -> None:
        with runner.isolated_filesystem():
            result = runner.invoke(app, ["init"])
            assert result.exit_code == 0
            assert Path(".legalflow/config.yaml").exists()

    def test_does_not_overwrite_without_force(self) -> None:
        with runner.isolated_filesystem():
            Path(".legalflow").mkdir()
            Path(".legalflow/config.yaml").write_text("ai: {}\n")

            result = runner.invoke(app, ["init"])
            assert "already initialized" in result.stdout
            assert Path(".legalflow/config.yaml").read_text() == "ai: {}\n"

            result = runner.invoke(app, ["init", "--force"])
            assert result.exit_code == 0
            assert "execution" in Path(".legalflow/config.yaml").read_text()
