"""
Integration tests for the command line driver.

Runs complete comparisons over temporary project trees.
"""

import io
import json
import logging
import os

import pytest

from locale_key_diff import main as main_module
from locale_key_diff.main import OUTPUT_NAME, parse_args, run


@pytest.fixture
def project(temp_dir, locale_tree):
    """A project with two shared folders and two comparison locales."""
    locale_tree({
        "app/locales/en/translation.json": {"title": "Title", "menu": {"open": "Open"}},
        "app/locales/en/settings/translation.json": {"save": {"translation": "Save", "note": "x"}},
        "app/locales/fr/translation.json": {"title": "Titre", "menu": {"open": "Ouvrir"}},
        "app/locales/fr/settings/translation.json": {"save": "Enregistrer"},
        "app/locales/de/translation.json": {"title": "Titel", "old": "Alt"},
        "app/features/billing/en/translation.json": {"pay": "Pay"},
        "app/features/billing/fr/translation.json": {"pay": "Payer"},
        "app/locales/en/.cache/translation.json": {"ignored": "x"},
    })
    return temp_dir / "app"


def run_cli(argv, env=None):
    stream = io.StringIO()
    code = run(argv, env=env or {}, stream=stream)
    return code, stream.getvalue()


class TestRun:
    """Test complete runs."""

    def test_reports_and_outputs(self, project, temp_dir):
        output_file = temp_dir / "github_output"
        json_file = temp_dir / "reports.json"
        env = {
            "INPUT_SHARED_FOLDER_PATHS": '[["locales"], ["features/billing", "billing"]]',
            "INPUT_COMPARE_LOCALES": '["fr", "de"]',
            "INPUT_DEFAULT_BASE": str(project),
            "INPUT_COMPARE_BASE": str(project),
            "GITHUB_OUTPUT": str(output_file),
        }

        code, out = run_cli(["--format", "github", "--json-output", str(json_file)], env)

        assert code == 0
        assert "::notice::" in out.splitlines()[0]
        assert "Total keys to add: " in out

        reports = json.loads(json_file.read_text(encoding="utf-8"))
        assert list(reports) == ["fr", "de"]

        fr = reports["fr"]
        assert all(not r["keysToAdd"] and not r["keysToRemove"] and not r["errors"] for r in fr.values())
        assert len(fr) == 3

        de_root = os.path.normpath(os.path.join(str(project), "locales", "de", "translation.json"))
        assert reports["de"][de_root]["keysToAdd"] == [["menu.open", "menu.open"]]
        assert reports["de"][de_root]["keysToRemove"] == [["old", "old"]]

        de_settings = os.path.normpath(os.path.join(str(project), "locales", "de", "settings", "translation.json"))
        assert reports["de"][de_settings]["keysToAdd"] == [["settings.save", "save"]]
        assert len(reports["de"][de_settings]["errors"]) == 1

        de_billing = os.path.normpath(os.path.join(str(project), "features", "billing", "de", "translation.json"))
        assert reports["de"][de_billing]["keysToAdd"] == [["billing.pay", "pay"]]

        written = output_file.read_text(encoding="utf-8")
        assert written.startswith(f"{OUTPUT_NAME}<<")

    def test_missing_shared_folder_does_not_fail_run(self, project):
        env = {
            "INPUT_SHARED_FOLDER_PATHS": '[["nowhere"], ["locales"]]',
            "INPUT_COMPARE_LOCALES": '["fr"]',
            "INPUT_DEFAULT_BASE": str(project),
            "INPUT_COMPARE_BASE": str(project),
        }

        code, out = run_cli(["--format", "github"], env)

        assert code == 0
        assert any(
            line.startswith("::error::DirectoryAccessError") for line in out.splitlines()
        )
        assert 'Report for "fr":' in out

    def test_cli_flags(self, project):
        code, out = run_cli([
            "--format", "plain",
            "--shared-folder-paths", '[["locales"]]',
            "--compare-locales", '["fr"]',
            "--default-base", str(project),
            "--compare-base", str(project),
        ])

        assert code == 0
        assert 'Report for "fr": ✓' in out
        assert "Total keys to add: 0, Total keys to remove: 0" in out

    def test_shared_folder_paths_file(self, project, temp_dir):
        config_file = temp_dir / "folders.json"
        config_file.write_text('[["locales"]]', encoding="utf-8")

        code, out = run_cli([
            "--format", "plain",
            "--shared-folder-paths", str(config_file),
            "--compare-locales", '["de"]',
            "--default-base", str(project),
            "--compare-base", str(project),
        ])

        assert code == 0
        assert 'Report for "de": ✖' in out


class TestRunLogging:
    """Test what a run logs."""

    def env_for(self, project, shared_folder_paths='[["locales"]]'):
        return {
            "INPUT_SHARED_FOLDER_PATHS": shared_folder_paths,
            "INPUT_COMPARE_LOCALES": '["fr"]',
            "INPUT_DEFAULT_BASE": str(project),
            "INPUT_COMPARE_BASE": str(project),
        }

    def test_finish_line_carries_error_stats(self, project, capsys):
        code, _ = run_cli(["--format", "plain"], self.env_for(project, '[["nowhere"], ["locales"]]'))

        assert code == 0
        finished = [line for line in capsys.readouterr().err.splitlines() if "Comparison finished" in line]
        assert len(finished) == 1
        assert '"total_errors": 1' in finished[0]
        assert "DirectoryAccessError" in finished[0]

    def test_unexpected_error_is_categorized(self, project, capsys, monkeypatch):
        def fail(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr(main_module, "compare_all_locales", fail)

        code, out = run_cli(["--format", "plain"], self.env_for(project))

        assert code == 1
        assert "ERROR: boom" in out
        assert '"category": "unknown"' in capsys.readouterr().err

    def test_runner_debug_enables_debug_logging(self, project):
        env = self.env_for(project)
        env["RUNNER_DEBUG"] = "1"

        code, _ = run_cli(["--format", "plain"], env)

        assert code == 0
        assert logging.getLogger().level == logging.DEBUG

    def test_info_level_by_default(self, project):
        code, _ = run_cli(["--format", "plain"], self.env_for(project))

        assert code == 0
        assert logging.getLogger().level == logging.INFO


class TestConfigurationFailures:
    """Test that bad configuration stops the run."""

    def test_invalid_shared_folder_paths(self, project, temp_dir):
        json_file = temp_dir / "reports.json"

        code, out = run_cli([
            "--format", "github",
            "--shared-folder-paths", '[["locales"], []]',
            "--compare-locales", '["fr"]',
            "--json-output", str(json_file),
        ])

        assert code == 1
        assert out.startswith("::error::Base locale folders JSON")
        assert "Report for" not in out
        assert not json_file.exists()

    def test_compare_locales_not_array(self):
        code, out = run_cli([
            "--format", "github",
            "--shared-folder-paths", '[["locales"]]',
            "--compare-locales", '{"fr": true}',
        ])

        assert code == 1
        assert "Array of comparison locale folder names not provided." in out

    def test_missing_required_input(self):
        code, out = run_cli(["--format", "plain"])

        assert code == 1
        assert "ERROR: Input required and not supplied: shared_folder_paths" in out


class TestParseArgs:
    """Test argument parsing."""

    def test_defaults(self):
        args = parse_args([])

        assert args.format is None
        assert args.json_output is None
        assert not args.debug

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["--version"])

        assert exc_info.value.code == 0
        assert "locale-key-diff" in capsys.readouterr().out
