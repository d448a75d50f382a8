from pathlib import Path

import pytest

from diedat.config import PipelineConfig, load_config


def test_defaults() -> None:
    cfg = load_config()
    assert cfg.max_seq_len == 128
    assert cfg.top_k == 5
    assert cfg.vocab_size is None
    assert cfg.device == "auto"


def test_yaml_device_kept_without_cli_override(tmp_path: Path) -> None:
    path = tmp_path / "pipeline.yaml"
    path.write_text("pipeline:\n  device: cpu\n", encoding="utf-8")
    assert load_config(path, device=None).device == "cpu"
    assert load_config(path, device="cuda").device == "cuda"


def test_load_yaml_section_and_overrides(tmp_path: Path) -> None:
    path = tmp_path / "pipeline.yaml"
    path.write_text("pipeline:\n  top_k: 3\n  vocab_path: v.json\n", encoding="utf-8")
    cfg = load_config(path, model_path="m", top_k=None)
    assert cfg.top_k == 3
    assert cfg.vocab_path == "v.json"
    assert cfg.model_path == "m"


def test_shipped_config_loads() -> None:
    path = Path(__file__).resolve().parents[1] / "configs" / "pipeline.yaml"
    cfg = load_config(path)
    assert cfg.max_seq_len == 128


def test_unknown_key_rejected(tmp_path: Path) -> None:
    path = tmp_path / "pipeline.yaml"
    path.write_text("top_k: 3\nbeam: 2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)


def test_invalid_values_rejected() -> None:
    with pytest.raises(ValueError):
        PipelineConfig(top_k=0)
    with pytest.raises(ValueError):
        PipelineConfig(max_seq_len=1)
