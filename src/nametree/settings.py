"""
Configuration for the nametree editor.

This module provides the timing settings for deferred UI updates and the
message catalogue used for user-facing success and error text.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import fields as dataclass_fields
from pathlib import Path
from typing import Any

import yaml

from nametree.exceptions import TreeEditError


def _load_yaml_mapping(yaml_path: str | Path) -> dict[str, Any]:
    path = Path(yaml_path)
    with path.open(encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


@dataclass
class EditorSettings:
    """Delays (in seconds) for the editor's deferred state updates.

    Can be created from dict or YAML with partial overrides.
    Only specified values override defaults.

    Examples:
        # All defaults
        settings = EditorSettings()

        # Faster highlight fade
        settings = EditorSettings.from_dict({"highlight_duration": 0.5})
    """

    # Post-move highlight is cleared after this delay
    highlight_duration: float = 1.5
    # Each feedback message expires independently after this delay
    feedback_duration: float = 3.0
    # Copy button label reverts after this delay
    copy_label_reset_duration: float = 2.0

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> EditorSettings:
        """Create from dict, only overriding specified values.

        Args:
            config: Dictionary with partial overrides. Keys that are not
                   settings fields are ignored, as are None values.

        Returns:
            EditorSettings instance with specified overrides

        Raises:
            ValueError: If a value cannot be read as a number
        """
        valid_fields = {f.name for f in dataclass_fields(cls)}
        filtered = {}
        for key, value in config.items():
            # A key left empty in YAML loads as None and keeps the default
            if key not in valid_fields or value is None:
                continue
            try:
                filtered[key] = float(value)
            except (TypeError, ValueError) as e:
                raise ValueError(
                    f"Setting '{key}' must be a number of seconds, got {value!r}"
                ) from e
        return cls(**filtered)

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> EditorSettings:
        """Create from YAML file with partial overrides.

        Example YAML:
            highlight_duration: 2
            feedback_duration: 5
        """
        return cls.from_dict(_load_yaml_mapping(yaml_path))


@dataclass
class ActionMessages:
    """Templates for every message the action layer reports.

    Each field is a ``str.format`` template. Error templates are filled from
    the attributes of the matching ``TreeEditError`` (see its
    ``message_key``); success templates receive the node name as ``name``.

    Examples:
        # English defaults
        messages = ActionMessages()

        # Japanese catalogue
        messages = ActionMessages.japanese()

        # Partial override from YAML
        messages = ActionMessages.from_yaml("messages.yaml")
    """

    # Failures
    empty_name: str = "Please enter a node name"
    empty_import: str = "There is no data to import"
    parse_failed: str = "Could not read the import data: {reason}"
    root_exists: str = "Only one root node is allowed ('{existing_name}' already exists)"
    node_not_found: str = "Node '{node_id}' was not found"
    parent_not_found: str = "Parent node '{node_id}' was not found"
    source_not_found: str = "The node to move ('{node_id}') was not found"
    target_not_found: str = "The move destination ('{node_id}') was not found"
    duplicate_name: str = "A node named '{name}' already exists at this level"
    self_move: str = "Cannot move '{node_name}' onto itself"
    root_sibling: str = "Cannot place a node beside the root node '{root_name}'"
    cyclic_move: str = "Cannot move '{node_name}' into its own subtree"
    invalid_position: str = "Unknown drop position '{position}'"
    unexpected_error: str = "The operation failed"

    # Successes
    import_success: str = "Imported the data"
    add_root_success: str = "Added root node '{name}'"
    add_success: str = "Added node '{name}'"
    delete_success: str = "Deleted the node"
    move_success: str = "Moved the node"
    rename_success: str = "Renamed the node to '{name}'"
    clear_success: str = "Cleared the tree"

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> ActionMessages:
        """Create from dict, only overriding specified templates."""
        valid_fields = {f.name for f in dataclass_fields(cls)}
        filtered = {k: v for k, v in config.items() if k in valid_fields}
        return cls(**filtered)

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> ActionMessages:
        """Create from YAML file with partial overrides."""
        return cls.from_dict(_load_yaml_mapping(yaml_path))

    @classmethod
    def japanese(cls) -> ActionMessages:
        """Return the Japanese message catalogue."""
        return cls.from_dict(JAPANESE_MESSAGES)

    def format(self, key: str, **values: Any) -> str:
        """Fill the template called ``key`` with ``values``."""
        return getattr(self, key).format(**values)

    def render(self, error: TreeEditError) -> str:
        """Turn a rejected-edit exception into user-facing text.

        Falls back to ``unexpected_error`` when no template matches the
        error's ``message_key``.
        """
        template = getattr(self, error.message_key, None) or self.unexpected_error
        return template.format(**vars(error))


JAPANESE_MESSAGES: dict[str, str] = {
    "empty_name": "ノード名を入力してください",
    "empty_import": "インポートするデータがありません",
    "parse_failed": "データの解析に失敗しました: {reason}",
    "root_exists": "ルートノードは1つまでです",
    "node_not_found": "ノードが見つかりません",
    "parent_not_found": "親ノードが見つかりません",
    "source_not_found": "移動元ノードが見つかりません",
    "target_not_found": "移動先が見つかりません",
    "duplicate_name": "同じ名前のノード「{name}」が既に存在します",
    "self_move": "同じノードに移動することはできません",
    "root_sibling": "ルートレベルに新しいノードは追加できません",
    "cyclic_move": "親ノード「{node_name}」をその子孫に移動できません",
    "invalid_position": "ドロップ位置「{position}」が不正です",
    "unexpected_error": "操作に失敗しました",
    "import_success": "データをインポートしました",
    "add_root_success": "ルートノード「{name}」を追加しました",
    "add_success": "ノード「{name}」を追加しました",
    "delete_success": "ノードを削除しました",
    "move_success": "ノードを移動しました",
    "rename_success": "ノード名を「{name}」に変更しました",
    "clear_success": "ツリーをクリアしました",
}
