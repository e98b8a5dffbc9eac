"""
Tests for CLI module.
"""

from __future__ import annotations

import json

import click
import pytest
from click.testing import CliRunner

from renderbase import Renderbase
from renderbase.cli import main, parse_variables


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def mock_api(api, monkeypatch):
    """Route CLI clients to the recording backend."""

    def _client(**kwargs):
        return Renderbase(transport=api.transport(), **kwargs)

    monkeypatch.setattr("renderbase.cli.Renderbase", _client)
    return api


class TestCLIMain:
    """Test main CLI group."""

    def test_help(self, runner):
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "Renderbase SDK" in result.output

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "version" in result.output

    def test_no_api_key(self, runner):
        result = runner.invoke(main, ["templates", "list"], env={"RENDERBASE_API_KEY": ""})
        assert result.exit_code == 1
        assert "RENDERBASE_API_KEY" in result.output


class TestParseVariables:
    """Test --var / --vars-file handling."""

    def test_pairs(self):
        variables = parse_variables(("invoiceNumber=INV-001", "total=99.5", "paid=true"), None)
        assert variables == {"invoiceNumber": "INV-001", "total": 99.5, "paid": True}

    def test_value_with_equals(self):
        assert parse_variables(("note=a=b",), None) == {"note": "a=b"}

    def test_vars_file_then_pairs(self, tmp_path):
        path = tmp_path / "vars.json"
        path.write_text(json.dumps({"invoiceNumber": "INV-000", "items": [1, 2]}))

        variables = parse_variables(("invoiceNumber=INV-001",), str(path))

        assert variables == {"invoiceNumber": "INV-001", "items": [1, 2]}

    def test_bad_pair(self):
        with pytest.raises(Exception, match="KEY=VALUE"):
            parse_variables(("novalue",), None)

    def test_vars_file_invalid_json(self, tmp_path):
        path = tmp_path / "vars.json"
        path.write_text("{invoiceNumber: INV-001}")

        with pytest.raises(click.BadParameter, match="invalid JSON"):
            parse_variables((), str(path))

    def test_vars_file_not_object(self, tmp_path):
        path = tmp_path / "vars.json"
        path.write_text("[1, 2]")

        with pytest.raises(click.BadParameter, match="JSON object"):
            parse_variables((), str(path))


class TestCLITemplates:
    """Test templates commands."""

    def test_list(self, runner, mock_api):
        mock_api.queue(json_data={
            "data": [{"id": "t1", "shortId": "tmpl_inv", "name": "Invoice", "type": "pdf"}],
            "page": 1,
            "limit": 10,
            "total": 1,
        })

        result = runner.invoke(main, ["--api-key", "sk_test", "templates", "list", "--type", "pdf"])

        assert result.exit_code == 0, result.output
        assert "Invoice" in result.output
        assert mock_api.last.url.params["type"] == "pdf"

    def test_get_lists_required_variables(self, runner, mock_api, sample_template_data):
        mock_api.queue(json_data=sample_template_data)

        result = runner.invoke(main, ["--api-key", "sk_test", "templates", "get", "tmpl_invoice"])

        assert result.exit_code == 0, result.output
        assert "Required: invoiceNumber, customerName" in result.output
        assert "notes" in result.output

    def test_get_not_found(self, runner, mock_api):
        mock_api.queue(404, json_data={"message": "Template not found", "code": "NOT_FOUND"})

        result = runner.invoke(main, ["--api-key", "sk_test", "templates", "get", "missing"])

        assert result.exit_code == 1
        assert "Template not found" in result.output
        assert "404" in result.output


class TestCLIDocuments:
    """Test documents commands."""

    def test_generate(self, runner, mock_api):
        mock_api.queue(json_data={"jobId": "job_1", "status": "queued", "templateId": "tmpl_inv"})

        result = runner.invoke(
            main,
            [
                "--api-key", "sk_test",
                "documents", "generate", "tmpl_inv",
                "--format", "excel",
                "--var", "invoiceNumber=INV-001",
            ],
        )

        assert result.exit_code == 0, result.output
        assert "job_1" in result.output
        assert mock_api.last_json() == {
            "templateId": "tmpl_inv",
            "format": "excel",
            "variables": {"invoiceNumber": "INV-001"},
        }

    def test_generate_bad_vars_file(self, runner, mock_api, tmp_path):
        path = tmp_path / "vars.json"
        path.write_text("not json")

        result = runner.invoke(
            main,
            ["--api-key", "sk_test", "documents", "generate", "tmpl_inv", "--vars-file", str(path)],
        )

        assert result.exit_code == 2
        assert "invalid JSON" in result.output
        assert mock_api.requests == []

    def test_delete(self, runner, mock_api):
        mock_api.queue(204)

        result = runner.invoke(main, ["--api-key", "sk_test", "documents", "delete", "job_1"])

        assert result.exit_code == 0
        assert mock_api.last.method == "DELETE"

    def test_download(self, runner, mock_api, tmp_path):
        mock_api.queue(json_data={
            "jobId": "job_1",
            "status": "completed",
            "downloadUrl": "https://cdn.renderbase.dev/job_1.pdf",
        })
        mock_api.queue(200, content=b"%PDF-1.7")
        target = tmp_path / "job_1.pdf"

        result = runner.invoke(
            main,
            ["--api-key", "sk_test", "documents", "download", "job_1", "-o", str(target)],
        )

        assert result.exit_code == 0, result.output
        assert target.read_bytes() == b"%PDF-1.7"

    def test_download_not_ready(self, runner, mock_api, tmp_path):
        mock_api.queue(json_data={"jobId": "job_1", "status": "processing"})

        result = runner.invoke(
            main,
            ["--api-key", "sk_test", "documents", "download", "job_1", "-o", str(tmp_path / "x.pdf")],
        )

        assert result.exit_code == 1
        assert "processing" in result.output


class TestCLIWebhooks:
    """Test webhooks commands."""

    def test_create(self, runner, mock_api):
        mock_api.queue(json_data={"id": "wh_1", "url": "https://example.com/h", "secret": "whsec_x"})

        result = runner.invoke(
            main,
            ["--api-key", "sk_test", "webhooks", "create", "https://example.com/h", "-e", "document.completed"],
        )

        assert result.exit_code == 0, result.output
        assert "wh_1" in result.output
        assert mock_api.last_json()["events"] == ["document.completed"]

    def test_list_empty(self, runner, mock_api):
        mock_api.queue(json_data={"data": []})

        result = runner.invoke(main, ["--api-key", "sk_test", "webhooks", "list"])

        assert result.exit_code == 0
        assert "No webhooks" in result.output
