"""Cookbook boundary tests.

Tests for the cookbook runner CLI and smoke runs of each recipe.
"""

from __future__ import annotations

from pathlib import Path
import socket
import sys

import pytest

# Ensure project root is in path for cookbook import
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

import cookbook.__main__ as runner

pytestmark = [pytest.mark.unit, pytest.mark.cookbook]


class TestCookbookRunner:
    """Tests for the cookbook CLI runner."""

    def test_list_shows_recipes_and_hides_helpers(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert runner.main(["--list"]) == 0
        out = capsys.readouterr().out

        assert "getting-started/divide-user-input" in out
        assert "production/batch-division" in out
        assert "start here" in out
        assert "utils/" not in out

    def test_dotted_spec_resolves_to_hyphenated_path(self) -> None:
        assert runner.dotted_to_path("production.batch_division") == (
            "production/batch-division.py"
        )
        spec = runner.resolve_spec("production.batch_division")
        assert spec.path.as_posix().endswith("cookbook/production/batch-division.py")

    @pytest.mark.parametrize(
        "spec",
        [
            "cookbook/getting-started/divide-user-input.py",
            "getting-started/divide-user-input.py",
            "getting-started/divide-user-input",
            "getting-started.divide_user_input",
        ],
    )
    def test_resolve_spec_accepts_various_forms(self, spec: str) -> None:
        resolved = runner.resolve_spec(spec)
        assert resolved.display == "getting-started/divide-user-input.py"

    @pytest.mark.parametrize("spec", ["src/trypy/result.py", "utils/presentation"])
    def test_non_recipes_are_rejected(
        self, spec: str, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert runner.main([spec]) == 2
        assert "Recipe not found" in capsys.readouterr().err

    def test_argv_is_restored_after_run(self) -> None:
        before = list(sys.argv)
        runner.main(
            ["getting-started/divide-user-input", "--", "--dividend", "1", "--divisor", "1"]
        )
        assert sys.argv == before


class TestRecipes:
    def test_divide_user_input_success(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        code = runner.main(
            ["getting-started/divide-user-input", "--", "--dividend", "100", "--divisor", "5"]
        )
        assert code == 0
        assert "Result of 100/5 is: 20" in capsys.readouterr().out

    def test_divide_user_input_truncates_toward_zero(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        code = runner.main(
            ["getting-started/divide-user-input", "--", "--dividend", "-7", "--divisor", "2"]
        )
        assert code == 0
        assert "Result of -7/2 is: -3" in capsys.readouterr().out

    def test_divide_user_input_reports_failure(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        code = runner.main(
            ["getting-started/divide-user-input", "--", "--dividend", "100", "--divisor", "0"]
        )
        assert code == 1
        out = capsys.readouterr().out
        assert "Attempt 1 failed" in out
        assert "division by zero" in out

    def test_divide_user_input_retries_interactively(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        answers = iter(["pig", "5", "100", "5"])
        monkeypatch.setattr("builtins.input", lambda _prompt="": next(answers))

        code = runner.main(
            ["getting-started/divide-user-input", "--", "--max-attempts", "2"]
        )

        assert code == 0
        out = capsys.readouterr().out
        assert "invalid literal" in out
        assert "Result of 100/5 is: 20" in out

    def test_batch_division(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert runner.main(["production/batch-division"]) == 0
        out = capsys.readouterr().out

        assert "values: [-50, -100, 100, 50, 33]" in out
        assert "failures: 1" in out
        assert "values: -50, -100, n/a, 100, 50, 33" in out
        assert "batch: error: ZeroDivisionError" in out

    def test_list_network_interfaces(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr(socket, "if_nameindex", lambda: [(1, "lo"), (2, "eth0")])
        monkeypatch.setattr(socket, "gethostname", lambda: "box")
        monkeypatch.setattr(
            socket, "gethostbyname_ex", lambda _h: ("box", [], ["10.0.0.2", "10.0.0.2"])
        )

        code = runner.main(
            ["getting-started/list-network-interfaces", "--", "--skip-loopback"]
        )

        assert code == 0
        out = capsys.readouterr().out
        assert "eth0: index 2" in out
        assert "lo: index 1" not in out
        assert "IPv4: 10.0.0.2" in out

    def test_list_network_interfaces_when_unsupported(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        def unsupported() -> list[tuple[int, str]]:
            raise OSError("not supported on this platform")

        def unresolvable(_host: str) -> tuple[str, list[str], list[str]]:
            raise socket.gaierror("no address")

        monkeypatch.setattr(socket, "if_nameindex", unsupported)
        monkeypatch.setattr(socket, "gethostname", lambda: "box")
        monkeypatch.setattr(socket, "gethostbyname_ex", unresolvable)

        assert runner.main(["getting-started/list-network-interfaces"]) == 0
        out = capsys.readouterr().out
        assert "interfaces: none reported" in out
        assert "IPv4: unresolved" in out
