from pathlib import Path

import pytest
from pydantic import ValidationError

from kdvbundle.config import load_config


def test_invalid_color_channel(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("layout:\n  text_color: [0.1, 2.0, 0.1]\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_invalid_page_size(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("layout:\n  page_size: A0\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_right_column_ratio_bounds(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("layout:\n  right_column_ratio: 1.5\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_unknown_key(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("unknown:\n  foo: 1\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_partial_override_keeps_defaults(tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text("layout:\n  font_name: Times-Roman\nbundle:\n  parallel: true\n")
    cfg = load_config(cfg_file, env={})
    assert cfg.layout.font_name == "Times-Roman"
    assert cfg.layout.margin == 56
    assert cfg.bundle.parallel is True
    assert cfg.bundle.filenames.cv == "03_Lebenslauf.pdf"
