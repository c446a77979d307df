from pathlib import Path

import pytest

from shinkit.core.runtime_config import set_config_path


@pytest.fixture(autouse=True)
def _isolate_runtime_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """ユーザー環境の config.yaml を拾わないように探索先を tmp_path へ寄せる。"""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    set_config_path(None)
    yield
    set_config_path(None)
