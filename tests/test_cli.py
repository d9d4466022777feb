# File: tests/test_cli.py
"""CLI tests (`policy_scout/cli.py`) with click.testing.CliRunner.

Cover the version flag, option/config merging, the end-to-end run through the
scripted driver and the fatal seed-connection error.
"""
import json

import pytest
from click.testing import CliRunner

import policy_scout.cli as cli_module
from fakes import SEED_URL, FakeDriver, FakePage, app_url
from policy_scout.cli import cli
from policy_scout.engine import start_scan
from policy_scout.logger import init_logging


@pytest.fixture(autouse=True)
def reset_logging():
    """CliRunner swaps stdout; rebind the log handler after each test."""
    yield
    init_logging()


@pytest.fixture()
def captured_configs(monkeypatch):
    """Patch start_scan to run on a scripted graph and record the config it got."""
    seen = []
    pages = [
        FakePage(SEED_URL, policy="https://seed.test/p", neighbors=[app_url("a"), app_url("b")]),
        FakePage(app_url("a"), status=404),
        FakePage(app_url("b"), policy="https://b.test/p"),
    ]

    async def fake_scan(cfg):
        seen.append(cfg)
        return await start_scan(cfg, driver_factory=lambda _: FakeDriver(pages))

    monkeypatch.setattr(cli_module, "start_scan", fake_scan)
    return seen


def test_version_option():
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "PolicyScout" in result.output


def test_missing_url_fails(captured_configs, tmp_path):
    runner = CliRunner()
    result = runner.invoke(cli, ["--directory", str(tmp_path)])
    assert result.exit_code == 1
    assert "Missing seed URL" in result.output
    assert captured_configs == []


def test_run_writes_policy_file(captured_configs, tmp_path):
    runner = CliRunner()
    result = runner.invoke(
        cli,
        ["--url", SEED_URL, "--depth", "1", "--directory", str(tmp_path / "out"), "--settle-timeout", "0"],
    )
    assert result.exit_code == 0, result.output
    assert "Saved 2 policies" in result.output
    out = tmp_path / "out" / "policy.txt"
    assert out.read_text(encoding="utf-8") == "https://seed.test/p\nhttps://b.test/p"

    cfg = captured_configs[0]
    assert cfg.depth == 1
    assert cfg.append is False
    assert cfg.skip_visited_pages is True


def test_defaults(captured_configs, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    runner = CliRunner()
    result = runner.invoke(cli, ["--url", SEED_URL, "--settle-timeout", "0"])
    assert result.exit_code == 0, result.output

    cfg = captured_configs[0]
    assert cfg.depth == 10
    assert cfg.filename == "policy.txt"
    assert cfg.headless is True
    assert (tmp_path / "data" / "policy.txt").is_file()


def test_append_flag(captured_configs, tmp_path):
    out_dir = tmp_path / "out"
    out_dir.mkdir()
    (out_dir / "policies.txt").write_text("https://old.test/p", encoding="utf-8")

    runner = CliRunner()
    result = runner.invoke(
        cli,
        [
            "--url", SEED_URL,
            "--directory", str(out_dir),
            "--filename", "policies.txt",
            "--append",
            "--settle-timeout", "0",
        ],
    )
    assert result.exit_code == 0, result.output
    lines = (out_dir / "policies.txt").read_text(encoding="utf-8").split("\n")
    assert set(lines) == {"https://old.test/p", "https://seed.test/p", "https://b.test/p"}


def test_config_file_with_cli_override(captured_configs, tmp_path):
    cfg_file = tmp_path / "scout.json"
    cfg_file.write_text(
        json.dumps(
            {
                "url": SEED_URL,
                "depth": 4,
                "directory": str(tmp_path / "from_config"),
                "settle_timeout": 0,
                "headless": False,
            }
        ),
        encoding="utf-8",
    )
    runner = CliRunner()
    result = runner.invoke(cli, ["--config", str(cfg_file), "--depth", "2", "--revisit-pages"])
    assert result.exit_code == 0, result.output

    cfg = captured_configs[0]
    assert cfg.depth == 2
    assert cfg.headless is False
    assert cfg.skip_visited_pages is False
    assert (tmp_path / "from_config" / "policy.txt").is_file()


def test_invalid_config_value(captured_configs, tmp_path):
    runner = CliRunner()
    result = runner.invoke(cli, ["--url", "not a url", "--directory", str(tmp_path)])
    assert result.exit_code == 1
    assert "Configuration error" in result.output
    assert captured_configs == []


def test_bad_seed_connection_exits_with_error(monkeypatch, tmp_path):
    async def fake_scan(cfg):
        driver = FakeDriver([FakePage(SEED_URL, status=404)])
        return await start_scan(cfg, driver_factory=lambda _: driver)

    monkeypatch.setattr(cli_module, "start_scan", fake_scan)

    runner = CliRunner()
    result = runner.invoke(cli, ["--url", SEED_URL, "--directory", str(tmp_path / "out")])
    assert result.exit_code == 1
    assert "HTTP 404 Not Found" in result.output
    assert not (tmp_path / "out").exists()
