import os
from pathlib import Path

# 全局配置中心

# 默认的工作区根目录 (读取 .daglp/config.yml 的位置)，可以通过环境变量覆盖
DEFAULT_WORK_DIR: Path = Path(os.getenv("DAGLP_WORK_DIR", "."))

# 日志级别
# 使用项目特定的环境变量 DAGLP_LOG_LEVEL，并确保其值为大写
LOG_LEVEL: str = os.getenv("DAGLP_LOG_LEVEL", "INFO").upper()
