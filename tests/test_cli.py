"""
CLI: stats-printer render / keys.
"""

from __future__ import annotations

import json

from statsprinter.config import CONFIG_FILE

from tests.infrastructure import run_cli, write

EXPECTED = "asset bundle.js 1.17 KiB [emitted]\nRspack 1.0.0 compiled successfully in 1.50 s (abc123)\n"


def test_render_plain(tmp_path, stats_file):
    cp = run_cli(tmp_path, "render", str(stats_file))
    assert cp.returncode == 0, cp.stderr
    assert cp.stdout == EXPECTED


def test_render_colors_flag(tmp_path, stats_file):
    cp = run_cli(tmp_path, "render", str(stats_file), "--colors")
    assert cp.returncode == 0, cp.stderr
    assert "\x1b[" in cp.stdout


def test_config_in_cwd_and_override(tmp_path, stats_file):
    write(tmp_path / CONFIG_FILE, "colors: true\n")
    colored = run_cli(tmp_path, "render", str(stats_file))
    plain = run_cli(tmp_path, "render", str(stats_file), "--no-colors")
    assert "\x1b[" in colored.stdout
    assert plain.stdout == EXPECTED


def test_explicit_config(tmp_path, stats_file):
    cfg = write(tmp_path / "cfg" / "printer.yaml", "colors: true\n")
    cp = run_cli(tmp_path, "render", str(stats_file), "--config", str(cfg))
    assert cp.returncode == 0, cp.stderr
    assert "\x1b[" in cp.stdout


def test_missing_stats_file(tmp_path):
    cp = run_cli(tmp_path, "render", "nope.json")
    assert cp.returncode == 2
    assert "not found" in cp.stderr
    assert "Traceback" not in cp.stderr


def test_bad_config(tmp_path, stats_file):
    write(tmp_path / CONFIG_FILE, "colour: true\n")
    cp = run_cli(tmp_path, "render", str(stats_file))
    assert cp.returncode == 2
    assert "Invalid config" in cp.stderr


def test_debug_logging(tmp_path, stats_file):
    cp = run_cli(tmp_path, "--debug", "render", str(stats_file))
    assert cp.returncode == 0
    assert "[DEBUG]" in cp.stderr
    assert cp.stdout == EXPECTED


def test_keys_command(tmp_path):
    cp = run_cli(tmp_path, "keys", "print")
    assert cp.returncode == 0, cp.stderr
    keys = json.loads(cp.stdout)
    assert "asset.name" in keys
    assert "compilation.summary!" in keys


def test_version(tmp_path):
    cp = run_cli(tmp_path, "--version")
    assert cp.returncode == 0
    assert cp.stdout.startswith("stats-printer ")
