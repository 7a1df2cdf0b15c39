"""
Tests for examscores/config_schema.py.

What we test
------------
get_default_config() returns an independent copy.
merge_config() overlays scalars, replaces the branch table wholesale and
keeps unspecified defaults.
load_config() reads JSON from disk and falls back to defaults with no path.
"""

from __future__ import annotations

import json

from examscores.config_schema import DEFAULT_CONFIG, get_default_config, load_config, merge_config


def test_default_copy_is_independent():
    cfg = get_default_config()
    cfg["branches"]["labels"]["ZZ"] = "Nope"
    assert "ZZ" not in DEFAULT_CONFIG["branches"]["labels"]


def test_merge_scalars():
    cfg = merge_config({"tolerance": 0.5, "top_n": 5})
    assert cfg["tolerance"] == 0.5
    assert cfg["top_n"] == 5
    assert cfg["output_file"] == DEFAULT_CONFIG["output_file"]


def test_merge_replaces_branch_table():
    cfg = merge_config({"branches": {"key_start": 0, "labels": {"2024A7": "CSE 2024"}}})
    assert cfg["branches"]["labels"] == {"2024A7": "CSE 2024"}
    assert cfg["branches"]["key_start"] == 0
    assert cfg["branches"]["key_end"] == 6


def test_merge_offsets_keep_default_table():
    cfg = merge_config({"branches": {"min_length": 8}})
    assert cfg["branches"]["labels"] == DEFAULT_CONFIG["branches"]["labels"]
    assert cfg["branches"]["min_length"] == 8


def test_merge_logging():
    cfg = merge_config({"logging": {"level": "DEBUG"}})
    assert cfg["logging"]["level"] == "DEBUG"


def test_load_config(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"top_n": 1}))
    assert load_config(path)["top_n"] == 1
    assert load_config(None) == get_default_config()
