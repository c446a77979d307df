# どこで: `src/shinkit/core/runtime_config.py`。
# 何を: config.yaml による実行時設定（探索・ロード・キャッシュ）を提供する。
# なぜ: 要素ごとの既定値（スライダーの step など）を 1 箇所で差し替えられるようにするため。

from __future__ import annotations

import logging
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any, Mapping

_logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """shinkit の実行時設定。"""

    config_path: Path | None
    element_defaults: Mapping[str, Mapping[str, Any]]

    def defaults_for(self, kind: str) -> dict[str, Any]:
        """kind に対する設定上の既定値を dict で返す（未設定なら空）。"""

        return dict(self.element_defaults.get(str(kind), {}))


_EXPLICIT_CONFIG_PATH: Path | None = None
_CONFIG_CACHE: RuntimeConfig | None = None


def set_config_path(path: str | Path | None) -> None:
    """以降の設定探索で使う明示 config パスを設定する。

    Notes
    -----
    `path` を None にすると明示指定を解除し、既定の探索に戻る。
    """

    global _EXPLICIT_CONFIG_PATH, _CONFIG_CACHE
    if path is None:
        _EXPLICIT_CONFIG_PATH = None
        _CONFIG_CACHE = None
        return
    _EXPLICIT_CONFIG_PATH = Path(str(path)).expanduser()
    _CONFIG_CACHE = None


def _default_config_candidates() -> tuple[Path, ...]:
    cwd = Path.cwd()
    home = Path.home()
    return (
        cwd / ".shinkit" / "config.yaml",
        home / ".config" / "shinkit" / "config.yaml",
    )


def _as_mapping(value: Any, *, key: str) -> dict[str, Any]:
    if value is None:
        return {}
    if isinstance(value, dict):
        return dict(value)
    raise RuntimeError(f"{key} は mapping である必要があります: got={value!r}")


def _load_yaml_text(text: str, *, source: str) -> dict[str, Any]:
    import yaml

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"config.yaml の読み込みに失敗しました: source={source}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise RuntimeError(f"config.yaml は mapping である必要があります: source={source}")

    return dict(data)


def _load_yaml_config(path: Path) -> dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    return _load_yaml_text(text, source=str(path))


def _load_packaged_default_config() -> dict[str, Any]:
    """同梱デフォルト config をロードして dict を返す。"""

    try:
        blob = (
            resources.files("shinkit")
            .joinpath("resource", "default_config.yaml")
            .read_text(encoding="utf-8")
        )
    except OSError as exc:  # pragma: no cover
        raise RuntimeError(
            "同梱 default_config.yaml の読み込みに失敗しました"
            "（パッケージ配布物の package-data を確認してください）"
        ) from exc

    return _load_yaml_text(blob, source="shinkit/resource/default_config.yaml")


def _merge_element_defaults(
    base: dict[str, dict[str, Any]],
    payload: Mapping[str, Any],
    *,
    source: str,
) -> None:
    """payload の elements.defaults を kind 単位・フィールド単位で base にマージする。"""

    elements = _as_mapping(payload.get("elements"), key=f"elements ({source})")
    defaults = _as_mapping(elements.get("defaults"), key=f"elements.defaults ({source})")
    for kind, fields in defaults.items():
        fields_map = _as_mapping(fields, key=f"elements.defaults.{kind} ({source})")
        base.setdefault(str(kind), {}).update(
            {str(name): value for name, value in fields_map.items()}
        )


def _check_version(payload: Mapping[str, Any], *, source: str) -> None:
    version = payload.get("version", 1)
    try:
        version_i = int(version)
    except (TypeError, ValueError) as exc:
        raise RuntimeError(
            f"config.yaml の version は整数である必要があります: got={version!r} source={source}"
        ) from exc
    if version_i != 1:
        raise RuntimeError(f"未対応の config.yaml version です: got={version_i} source={source}")


def runtime_config() -> RuntimeConfig:
    """実行時設定をロードして返す（キャッシュ）。

    上書き順（後勝ち）:
    1) 同梱 default_config.yaml
    2) `./.shinkit/config.yaml` / `~/.config/shinkit/config.yaml`（先に見つかった方）
    3) `set_config_path()` で指定した config
    """

    global _CONFIG_CACHE
    if _CONFIG_CACHE is not None:
        return _CONFIG_CACHE

    explicit_path = _EXPLICIT_CONFIG_PATH
    if explicit_path is not None and not explicit_path.is_file():
        raise FileNotFoundError(f"config.yaml が見つかりません: {explicit_path}")

    discovered_path: Path | None = None
    for p in _default_config_candidates():
        if p.is_file():
            discovered_path = p
            break

    sources: list[tuple[str, dict[str, Any]]] = [
        ("default_config.yaml", _load_packaged_default_config())
    ]
    if discovered_path is not None:
        sources.append((str(discovered_path), _load_yaml_config(discovered_path)))
    if explicit_path is not None:
        sources.append((str(explicit_path), _load_yaml_config(explicit_path)))

    element_defaults: dict[str, dict[str, Any]] = {}
    for source, payload in sources:
        _check_version(payload, source=source)
        _merge_element_defaults(element_defaults, payload, source=source)

    cfg = RuntimeConfig(
        config_path=explicit_path or discovered_path,
        element_defaults=element_defaults,
    )
    _logger.debug(
        "runtime config loaded: path=%s kinds=%s",
        cfg.config_path,
        sorted(element_defaults),
    )
    _CONFIG_CACHE = cfg
    return cfg


__all__ = ["RuntimeConfig", "runtime_config", "set_config_path"]
