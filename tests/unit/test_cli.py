"""Tests for the prima-calc CLI."""

import json

import pytest
from click.testing import CliRunner

from primacalc.cli.__main__ import cli


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """Set up isolated config directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    monkeypatch.setenv("PRIMA_CALC_CONFIG_PATH", str(config_dir))
    return {"config_dir": config_dir, "tmp_path": tmp_path}


@pytest.fixture
def record_file(isolated_env):
    """Write an employee record JSON file."""
    record = {
        "name": "Empleado de Prueba",
        "entry_date": "2023-01-01",
        "monthly_salaries": {
            "enero": 4000000, "febrero": 4000000, "marzo": 4000000,
            "abril": 4200000, "mayo": 4200000, "junio": 4200000,
        },
        "calculation_period": "first_half",
        "salary_method": "average",
        "unpaid_absences": ["2025-03-10"],
    }
    path = isolated_env["tmp_path"] / "employee.json"
    path.write_text(json.dumps(record))
    return path


class TestCalculateCommand:

    def test_json_output(self, record_file):
        runner = CliRunner()
        result = runner.invoke(cli, [
            "calculate", str(record_file), "--as-of", "2025-08-01", "--format", "json",
        ])

        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert payload["worked_days"] == 180
        assert payload["base_salary"] == 4100000.0
        assert payload["withholding_tax"] == 0

    def test_spanish_labels(self, record_file):
        runner = CliRunner()
        result = runner.invoke(cli, [
            "calculate", str(record_file), "--as-of", "2025-08-01",
            "--format", "json", "--labels", "es",
        ])

        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert payload["dias_trabajados_semestre"] == 180
        assert "prima_neta" in payload

    def test_text_output(self, record_file):
        runner = CliRunner()
        result = runner.invoke(cli, ["calculate", str(record_file), "--as-of", "2025-08-01"])

        assert result.exit_code == 0, result.output
        assert "NET PRIMA" in result.output
        assert "Empleado de Prueba" in result.output

    def test_reads_yaml_from_stdin(self, isolated_env):
        record = (
            "nombre: Empleada\n"
            "fecha_ingreso: 2025-03-15\n"
            "salarios_mensuales: {junio: 3600000}\n"
            "periodo_calculo: primer_semestre\n"
            "metodo_calculo_salario: actual\n"
        )
        runner = CliRunner()
        result = runner.invoke(
            cli, ["calculate", "-", "--as-of", "2025-08-01", "--format", "json"], input=record,
        )

        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert payload["worked_days"] == 108
        assert payload["gross_bonus"] == 1080000.0

    def test_impossible_yaml_date_reported(self, isolated_env):
        """Unquoted YAML dates reach the validator as strings."""
        record = (
            "name: Empleada\n"
            "entry_date: 2025-02-30\n"
            "monthly_salaries: {junio: 3600000}\n"
            "calculation_period: first_half\n"
            "salary_method: current\n"
        )
        runner = CliRunner()
        result = runner.invoke(cli, ["calculate", "-", "--as-of", "2025-08-01"], input=record)

        assert result.exit_code == 1
        assert "Invalid date in 'entry_date'" in result.output

    def test_infinite_yaml_salary_reported(self, isolated_env):
        record = (
            "name: Empleada\n"
            "entry_date: 2025-01-01\n"
            "monthly_salaries: {junio: .inf}\n"
            "calculation_period: first_half\n"
            "salary_method: current\n"
        )
        runner = CliRunner()
        result = runner.invoke(cli, ["calculate", "-", "--as-of", "2025-08-01"], input=record)

        assert result.exit_code == 1
        assert "junio" in result.output

    def test_invalid_rules_file_reported(self, record_file, isolated_env):
        rules_dir = isolated_env["config_dir"] / "tax-rules"
        rules_dir.mkdir()
        (rules_dir / "2026.yaml").write_text("year: 2026\ntypo: 1\n")

        runner = CliRunner()
        result = runner.invoke(cli, ["calculate", str(record_file), "--year", "2026"])

        assert result.exit_code == 1
        assert "Invalid rules file" in result.output

    def test_missing_key_reported(self, isolated_env):
        path = isolated_env["tmp_path"] / "bad.json"
        path.write_text(json.dumps({"name": "Test"}))

        runner = CliRunner()
        result = runner.invoke(cli, ["calculate", str(path)])

        assert result.exit_code == 1
        assert "Missing key 'entry_date'" in result.output

    def test_non_object_record_rejected(self, isolated_env):
        path = isolated_env["tmp_path"] / "list.json"
        path.write_text("[1, 2, 3]")

        runner = CliRunner()
        result = runner.invoke(cli, ["calculate", str(path)])

        assert result.exit_code == 1
        assert "must be a JSON/YAML object" in result.output

    def test_invalid_as_of(self, record_file):
        runner = CliRunner()
        result = runner.invoke(cli, ["calculate", str(record_file), "--as-of", "yesterday"])
        assert result.exit_code == 2

    def test_invalid_year(self, record_file):
        runner = CliRunner()
        result = runner.invoke(cli, ["calculate", str(record_file), "--year", "25"])
        assert result.exit_code == 2

    def test_fiscal_year_setting_used(self, record_file, isolated_env):
        """The fiscal_year setting selects the rules file."""
        (isolated_env["config_dir"] / "settings.json").write_text(
            json.dumps({"fiscal_year": "2025"})
        )

        runner = CliRunner()
        result = runner.invoke(cli, [
            "calculate", str(record_file), "--as-of", "2025-08-01", "--format", "json",
        ])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["worked_days"] == 180


class TestRulesCommands:

    def test_show_defaults_json(self, isolated_env):
        runner = CliRunner()
        result = runner.invoke(cli, ["rules", "show", "--format", "json"])

        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert payload["uvt_value"] == 49799.0
        assert payload["withholding_table"][0] == {
            "min_uvt": 360.0, "max_uvt": None, "rate": 0.39, "fixed_fee_uvt": 770.0,
        }

    def test_show_year_text(self, isolated_env):
        runner = CliRunner()
        result = runner.invoke(cli, ["rules", "show", "2025"])

        assert result.exit_code == 0, result.output
        assert "Withholding Table 2025" in result.output

    def test_show_invalid_rules_file(self, isolated_env):
        rules_dir = isolated_env["config_dir"] / "tax-rules"
        rules_dir.mkdir()
        (rules_dir / "2026.yaml").write_text("year: 2026\ntypo: 1\n")

        runner = CliRunner()
        result = runner.invoke(cli, ["rules", "show", "2026"])

        assert result.exit_code == 1
        assert "Invalid rules file" in result.output

    def test_list_includes_bundled(self, isolated_env):
        runner = CliRunner()
        result = runner.invoke(cli, ["rules", "list"])

        assert result.exit_code == 0
        assert "2025" in result.output.split()


class TestSettingsCommands:

    def test_set_and_show_fiscal_year(self, isolated_env):
        runner = CliRunner()
        result = runner.invoke(cli, ["settings", "fiscal-year", "2025"])
        assert result.exit_code == 0, result.output

        settings = json.loads((isolated_env["config_dir"] / "settings.json").read_text())
        assert settings == {"fiscal_year": "2025"}

        result = runner.invoke(cli, ["settings", "show"])
        assert "fiscal_year: 2025" in result.output

    def test_clear_fiscal_year(self, isolated_env):
        runner = CliRunner()
        runner.invoke(cli, ["settings", "fiscal-year", "2025"])
        result = runner.invoke(cli, ["settings", "fiscal-year", "--clear"])

        assert result.exit_code == 0
        assert "Cleared fiscal_year" in result.output

    def test_invalid_fiscal_year(self, isolated_env):
        runner = CliRunner()
        result = runner.invoke(cli, ["settings", "fiscal-year", "next"])
        assert result.exit_code == 2

    def test_rules_dir_must_exist(self, isolated_env):
        runner = CliRunner()
        result = runner.invoke(cli, ["settings", "rules-dir", str(isolated_env["tmp_path"] / "nope")])
        assert result.exit_code == 1
        assert "Not a directory" in result.output
