import httpx
import pytest
from rich.console import Console
from typer.testing import CliRunner

import cli.doctor as cli_doctor
import cli.main as cli_main
from adapters.http_client import RestClient

runner = CliRunner()


@pytest.fixture(autouse=True)
def wired(api, monkeypatch):
    monkeypatch.setenv("FETCHLAB_API_BASE_URL", "https://api.test")
    monkeypatch.setattr(
        cli_main,
        "build_rest_client",
        lambda settings: RestClient(settings, transport=api.transport()),
    )
    monkeypatch.setattr(cli_main, "_console", Console(width=200))
    return api


def test_basic_lists_posts():
    result = runner.invoke(cli_main.app, ["basic", "--limit", "2"])

    assert result.exit_code == 0, result.output
    assert "sunt aut facere" in result.stdout
    assert "qui est esse" in result.stdout
    assert "et ea vero quia" not in result.stdout
    assert "2 / 3" in result.stdout


def test_basic_failure_renders_inline(api):
    api.fail["/posts"] = 500

    result = runner.invoke(cli_main.app, ["basic"])

    assert result.exit_code == 0
    assert "Request failed with status code 500" in result.stdout


def test_advanced_search_and_select():
    result = runner.invoke(cli_main.app, ["advanced", "--search", "leanne", "--select", "1"])

    assert result.exit_code == 0, result.output
    assert "Leanne Graham" in result.stdout
    assert "Ervin Howell" not in result.stdout
    assert "Posts by Leanne Graham" in result.stdout
    assert "sunt aut facere" in result.stdout


def test_advanced_in_indonesian_without_posts():
    result = runner.invoke(cli_main.app, ["--lang", "id", "advanced", "--select", "3"])

    assert result.exit_code == 0, result.output
    assert "User ini belum membuat posts" in result.stdout
    assert "Ya" in result.stdout


def test_advanced_rejects_bad_select():
    result = runner.invoke(cli_main.app, ["advanced", "--select", "0"])

    assert result.exit_code != 0


def test_explore_session():
    script = "search ervin\nselect 2\nstats\nbogus\nreset\nquit\n"

    result = runner.invoke(cli_main.app, ["explore"], input=script)

    assert result.exit_code == 0, result.output
    assert "Posts by Ervin Howell" in result.stdout
    assert "et ea vero quia" in result.stdout
    assert "Unknown command" in result.stdout


def test_all_renders_three_sections():
    result = runner.invoke(cli_main.app, ["all"])

    assert result.exit_code == 0, result.output
    assert "1. Basic Fetching Demo" in result.stdout
    assert "2. Advanced Fetching Demo" in result.stdout
    assert "3. CRUD Operations Demo" in result.stdout


def test_crud_create(api):
    result = runner.invoke(cli_main.app, ["crud", "create", "--title", "hello", "--body", "world"])

    assert result.exit_code == 0, result.output
    assert "Saved posts #101" in result.stdout
    assert api.count("POST", "/posts") == 1


def test_crud_update_unknown_id_fails():
    result = runner.invoke(cli_main.app, ["crud", "update", "999", "--title", "x"])

    assert result.exit_code == 1
    assert "No posts entry with id 999" in result.stdout


def test_crud_delete_failure_exits_nonzero(api):
    api.fail["/posts/2"] = 500

    result = runner.invoke(cli_main.app, ["crud", "delete", "2"])

    assert result.exit_code == 1
    assert "Request failed with status code 500" in result.stdout


def test_crud_list():
    result = runner.invoke(cli_main.app, ["crud", "list"])

    assert result.exit_code == 0, result.output
    assert "et ea vero quia" in result.stdout


def test_doctor_set_endpoint(tmp_path, monkeypatch):
    target = tmp_path / ".env"
    monkeypatch.setattr(
        cli_doctor,
        "write_user_env_vars",
        lambda values: (target.write_text(str(values), encoding="utf-8"), target)[1],
    )

    result = runner.invoke(cli_main.app, ["doctor", "set-endpoint", "https://example.test/"])

    assert result.exit_code == 0, result.output
    assert "FETCHLAB_API_BASE_URL" in target.read_text(encoding="utf-8")
    assert "https://example.test'" in target.read_text(encoding="utf-8")


def test_doctor_set_endpoint_rejects_non_http():
    result = runner.invoke(cli_main.app, ["doctor", "set-endpoint", "ftp://x"])

    assert result.exit_code != 0


def test_doctor_run_reports_failures(api, monkeypatch):
    api.fail["/users"] = 500
    monkeypatch.setattr(
        cli_doctor,
        "build_async_client",
        lambda settings: httpx.AsyncClient(base_url=settings.api_base_url, transport=api.transport()),
    )
    monkeypatch.setattr(cli_doctor, "_console", Console(width=200))

    result = runner.invoke(cli_main.app, ["doctor", "run"])

    assert result.exit_code == 1
    assert "HTTP 500" in result.stdout


def test_explore_ends_cleanly_on_end_of_input():
    result = runner.invoke(cli_main.app, ["explore"], input="select 1\n")

    assert result.exit_code == 0, result.output
    assert "Posts by Leanne Graham" in result.stdout


def test_doctor_run_reports_invalid_base_url(monkeypatch):
    def reject(settings):
        raise httpx.InvalidURL("Invalid port: 'abc'")

    monkeypatch.setattr(cli_doctor, "build_async_client", reject)
    monkeypatch.setattr(cli_doctor, "_console", Console(width=200))

    result = runner.invoke(cli_main.app, ["doctor", "run"])

    assert result.exit_code == 1
    assert "Invalid port" in result.stdout
    assert "English" in result.stdout


def test_doctor_set_endpoint_rejects_unparsable_url(tmp_path, monkeypatch):
    target = tmp_path / ".env"
    monkeypatch.setattr(cli_doctor, "write_user_env_vars", lambda values: target)

    result = runner.invoke(cli_main.app, ["doctor", "set-endpoint", "https://example.test:abc"])

    assert result.exit_code != 0
    assert not target.exists()
