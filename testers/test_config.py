# -*- coding: utf-8 -*-
import json
import logging

import numpy as np

from geomath import Vec3, Quat, init_logger, logger
from geomath.utils.config import Config, DEFAULT_CONFIG


def test_config_is_shared():
    assert Config() is Config()


def test_defaults(clean_config):
    assert clean_config.data == DEFAULT_CONFIG
    assert clean_config["precision"] == "float64"
    assert clean_config.get("missing", 42) == 42


def test_load_from_file(tmp_path, clean_config):
    path = tmp_path / "geomath.json"
    path.write_text(json.dumps({"precision": "float32", "print_precision": 3}), encoding="utf-8")
    clean_config.load(path)
    assert clean_config["precision"] == "float32"
    assert clean_config["strict_indexing"] is False
    assert Vec3(1, 2, 3).dtype == np.float32
    assert str(Vec3(1 / 3, 0, 0)) == "[0.333 0 0]"


def test_missing_file_keeps_defaults(tmp_path, clean_config):
    clean_config.load(tmp_path / "nope.json")
    assert clean_config.data == DEFAULT_CONFIG
    assert not (tmp_path / "nope.json").exists()


def test_broken_file_is_logged(tmp_path, clean_config, caplog):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with caplog.at_level(logging.ERROR, logger="geomath"):
        clean_config.load(path)
    assert "[Config] Failed to read config" in caplog.text
    assert clean_config.data == DEFAULT_CONFIG


def test_unknown_keys_are_ignored(tmp_path, clean_config, caplog):
    path = tmp_path / "extra.json"
    path.write_text(json.dumps({"precision": "double", "colour": "red"}), encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="geomath"):
        clean_config.load(path)
    assert "colour" not in clean_config.data
    assert "Ignoring unknown keys" in caplog.text


def test_save_round_trip(tmp_path, clean_config):
    clean_config["strict_indexing"] = True
    path = tmp_path / "saved.json"
    clean_config.save(path)
    clean_config.reset()
    clean_config.load(path)
    assert clean_config["strict_indexing"] is True


def test_quat_debug_log_on_zero_inverse(caplog):
    caplog.set_level(logging.DEBUG, logger="geomath")
    Quat(0, 0, 0, 0).inverse()
    assert "[Quat] inverse() of a zero quaternion" in caplog.text


def test_init_logger_applies_level():
    old = logger.level
    try:
        assert init_logger("debug") is logger
        assert logger.level == logging.DEBUG
    finally:
        logger.setLevel(old)


def test_second_construction_does_not_reload(tmp_path, clean_config):
    path = tmp_path / "geomath.json"
    path.write_text(json.dumps({"print_precision": 3}), encoding="utf-8")
    clean_config["precision"] = "float32"
    assert Config(path) is clean_config
    assert clean_config["precision"] == "float32"
    assert clean_config["print_precision"] == 6


def test_strict_indexing_flag_follows_changes(tmp_path, clean_config):
    assert clean_config.strict_indexing is False
    clean_config["strict_indexing"] = True
    assert clean_config.strict_indexing is True
    clean_config.reset()
    assert clean_config.strict_indexing is False
    path = tmp_path / "strict.json"
    path.write_text(json.dumps({"strict_indexing": True}), encoding="utf-8")
    clean_config.load(path)
    assert clean_config.strict_indexing is True
