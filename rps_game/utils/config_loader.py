"""
配置加载工具模块
Configuration Loader Utility
"""
import yaml
from pathlib import Path
from typing import Dict, Any, Optional, Union
from .exceptions import ConfigurationException
from .logger import setup_logger

logger = setup_logger("RPS.ConfigLoader")

DEFAULT_MAX_ROUNDS = 10

DEFAULT_CONFIG: Dict[str, Any] = {
    'game': {
        'max_rounds': DEFAULT_MAX_ROUNDS,
    },
    'bot': {
        'strategy': 'random',
        'seed': None,
    },
    'logging': {
        'level': 'WARNING',
        'file': None,
    },
}


class ConfigLoader:
    """配置加载器类"""

    @staticmethod
    def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
        """
        从YAML文件加载配置

        Args:
            config_path: 配置文件路径

        Returns:
            Dict[str, Any]: 配置字典

        Raises:
            FileNotFoundError: 配置文件不存在
            ConfigurationException: YAML解析错误或顶层不是映射
        """
        config_file = Path(config_path)

        if not config_file.exists():
            raise FileNotFoundError(f"配置文件不存在: {config_path}")

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"YAML解析错误: {e}")
            raise ConfigurationException(f"YAML解析错误: {e}") from e

        if config is None:
            logger.warning(f"配置文件为空: {config_path}")
            return {}

        if not isinstance(config, dict):
            raise ConfigurationException(f"配置文件顶层必须是映射: {config_path}")

        logger.info(f"成功加载配置文件: {config_path}")
        return config

    @staticmethod
    def save_config(config: Dict[str, Any], config_path: Union[str, Path]) -> bool:
        """
        保存配置到YAML文件

        Args:
            config: 配置字典
            config_path: 配置文件路径

        Returns:
            bool: 保存是否成功
        """
        config_file = Path(config_path)
        config_file.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(config_file, 'w', encoding='utf-8') as f:
                yaml.safe_dump(config, f, default_flow_style=False,
                               allow_unicode=True, sort_keys=False)
        except OSError as e:
            logger.error(f"保存配置文件失败: {e}")
            return False

        logger.info(f"成功保存配置文件: {config_path}")
        return True

    @staticmethod
    def merge_with_defaults(config: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        """
        用默认值补全配置（按段合并，一层深度）

        Args:
            config: 用户配置，可以为 None

        Returns:
            Dict[str, Any]: 补全后的新配置字典
        """
        merged = {section: dict(values) for section, values in DEFAULT_CONFIG.items()}
        for section, values in (config or {}).items():
            if values is None:
                continue
            if isinstance(values, dict) and isinstance(merged.get(section), dict):
                merged[section].update(values)
            else:
                merged[section] = values
        return merged

    @staticmethod
    def get_game_config(config: Dict[str, Any]) -> Dict[str, Any]:
        """从配置中获取游戏配置"""
        return config.get('game') or {}

    @staticmethod
    def get_bot_config(config: Dict[str, Any]) -> Dict[str, Any]:
        """从配置中获取机器人出拳策略配置"""
        return config.get('bot') or {}

    @staticmethod
    def get_logging_config(config: Dict[str, Any]) -> Dict[str, Any]:
        """从配置中获取日志配置"""
        return config.get('logging') or {}

    @staticmethod
    def get_max_rounds(config: Dict[str, Any]) -> int:
        """
        读取并校验最大回合数

        Args:
            config: 完整配置字典

        Returns:
            int: 最大回合数

        Raises:
            ConfigurationException: 回合数不是正整数
        """
        value = ConfigLoader.get_game_config(config).get('max_rounds', DEFAULT_MAX_ROUNDS)
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise ConfigurationException(
                f"max_rounds 必须是正整数，当前值: {value!r}",
                config_key='game.max_rounds'
            )
        return value
