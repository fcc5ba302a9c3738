import logging
from pathlib import Path
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)

# 默认配置，为所有可能的设置提供一个基础
DEFAULTS = {
    "git": {
        "rev": "HEAD",
        "timestamp": "author",
    },
    "output": {"format": "text"},
}


class ConfigManager:
    """
    负责加载和管理 .daglp/config.yml 文件。
    """

    def __init__(self, work_dir: Path):
        self.config_path = work_dir.resolve() / ".daglp" / "config.yml"
        self.user_config: Dict[str, Any] = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        if not self.config_path.exists():
            return {}

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                config_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"❌ 解析配置文件 '{self.config_path}' 失败: {e}")
            return {}
        except OSError as e:
            logger.error(f"❌ 读取配置文件时发生错误: {e}")
            return {}

        if config_data is None:
            return {}
        if not isinstance(config_data, dict):
            logger.warning(f"⚠️  配置文件 '{self.config_path}' 不是有效的字典格式，已忽略。")
            return {}
        return config_data

    def get(self, key: str, fallback: Any = None) -> Any:
        """
        获取一个配置值，支持点状符号进行嵌套访问 (e.g., 'git.rev')。

        查找顺序:
        1. 用户配置 (`config.yml`)
        2. 内置默认值 (`DEFAULTS`)
        3. 提供的 `fallback` 值
        """
        user_val = self._get_nested(self.user_config, key)
        if user_val is not None:
            return user_val

        default_val = self._get_nested(DEFAULTS, key)
        if default_val is not None:
            return default_val

        return fallback

    def _get_nested(self, data: Dict, key: str) -> Any:
        current = data
        for k in key.split("."):
            if isinstance(current, dict) and k in current:
                current = current[k]
            else:
                return None
        return current
