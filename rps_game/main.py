"""
剪刀石头布游戏主程序入口
Rock Paper Scissors Game Main Entry
"""
import sys
import argparse
from typing import List, Optional
from .app import Application
from .utils.logger import setup_logger

logger = setup_logger("RPS.Main")


def build_parser() -> argparse.ArgumentParser:
    """构建命令行参数解析器"""
    parser = argparse.ArgumentParser(description='剪刀石头布游戏 / Rock Paper Scissors')
    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='配置文件路径（默认: config/config.yaml，不存在时使用默认配置）'
    )
    parser.add_argument('--name', type=str, default=None, help='玩家名（跳过输入）')
    parser.add_argument('--rounds', type=int, default=None, help='每场比赛回合数')
    parser.add_argument('--seed', type=int, default=None, help='机器人随机种子')
    parser.add_argument(
        '--log-level',
        type=str,
        default=None,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='日志级别'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """主函数"""
    args = build_parser().parse_args(argv)

    app = Application(
        config_path=args.config,
        player_name=args.name,
        max_rounds=args.rounds,
        seed=args.seed,
        log_level=args.log_level
    )

    try:
        if not app.start():
            logger.error("应用程序启动失败")
            return 1
    except KeyboardInterrupt:
        logger.info("用户中断程序")
    except Exception as e:
        logger.error(f"程序异常退出: {e}", exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
