"""
应用程序主类（控制台界面）
Application Main Class - Console Front End
"""
from pathlib import Path
from typing import Optional, Callable, Dict, Any
from .game import MatchController, Move, MatchPhase, MatchSnapshot, RoundResult, BotFactory
from .utils.logger import setup_logger, get_log_level, set_global_level, close_file_handlers
from .utils.config_loader import ConfigLoader
from .utils.error_handler import global_error_handler
from .utils.exceptions import GameException, InvalidInput, InvalidState, ConfigurationException

logger = setup_logger("RPS.App")

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config" / "config.yaml"

QUIT_COMMANDS = ("quit", "exit", "q")
RESTART_COMMANDS = ("restart",)


class Application:
    """应用程序主类：读取输入、转发给比赛控制器、根据状态快照渲染文本"""

    def __init__(self,
                 config_path: Optional[str] = None,
                 player_name: Optional[str] = None,
                 max_rounds: Optional[int] = None,
                 seed: Optional[int] = None,
                 log_level: Optional[str] = None,
                 input_func: Optional[Callable[[str], str]] = None,
                 output_func: Optional[Callable[[str], None]] = None):
        """
        初始化应用程序

        Args:
            config_path: 配置文件路径（为 None 时尝试默认路径，不存在则使用默认配置）
            player_name: 玩家名（可选，提供时跳过输入）
            max_rounds: 覆盖配置中的最大回合数
            seed: 覆盖配置中的随机种子
            log_level: 覆盖配置中的日志级别
            input_func: 输入函数，默认 input
            output_func: 输出函数，默认 print
        """
        self.config_path = config_path
        self.player_name = player_name
        self.overrides: Dict[str, Any] = {
            'max_rounds': max_rounds,
            'seed': seed,
            'log_level': log_level,
        }
        self.input_func = input_func or input
        self.output_func = output_func or print

        self.config: Dict[str, Any] = {}
        self.controller: Optional[MatchController] = None
        self._unsubscribe: Optional[Callable[[], None]] = None
        self.is_running = False
        self.should_exit = False

    def initialize(self) -> bool:
        """
        初始化所有组件

        Returns:
            bool: 初始化是否成功
        """
        try:
            if not self._load_config():
                return False
            self._setup_logging()
            self._initialize_controller()
        except (ConfigurationException, GameException) as e:
            global_error_handler.handle(e, "初始化")
            self.output_func(f"Configuration error: {e}")
            return False

        logger.info("应用程序初始化成功")
        return True

    def _load_config(self) -> bool:
        """加载配置文件，并应用命令行覆盖"""
        path = Path(self.config_path) if self.config_path else DEFAULT_CONFIG_PATH
        try:
            loaded = ConfigLoader.load_config(path)
        except FileNotFoundError:
            if self.config_path:
                logger.error(f"配置文件不存在: {path}")
                self.output_func(f"Config file not found: {path}")
                return False
            logger.info("未找到默认配置文件，使用默认配置")
            loaded = {}

        config = ConfigLoader.merge_with_defaults(loaded)
        if self.overrides['max_rounds'] is not None:
            config['game']['max_rounds'] = self.overrides['max_rounds']
        if self.overrides['seed'] is not None:
            config['bot']['seed'] = self.overrides['seed']
        if self.overrides['log_level'] is not None:
            config['logging']['level'] = self.overrides['log_level']

        self.config = config
        return True

    def _setup_logging(self):
        """按配置调整日志级别和日志文件"""
        logging_config = ConfigLoader.get_logging_config(self.config)
        set_global_level(get_log_level(logging_config.get('level')),
                         log_file=logging_config.get('file'))

    def _initialize_controller(self):
        """初始化比赛控制器"""
        max_rounds = ConfigLoader.get_max_rounds(self.config)
        bot = BotFactory.from_config(ConfigLoader.get_bot_config(self.config))

        self.controller = MatchController(max_rounds=max_rounds, bot=bot)
        self.controller.on_round_result = self._on_round_result
        self._unsubscribe = self.controller.subscribe(self._render)

    # ------------------------------------------------------------------
    # 渲染
    # ------------------------------------------------------------------
    def _render(self, snapshot: MatchSnapshot):
        """状态变化回调：打印记分牌"""
        if snapshot.phase is MatchPhase.NOT_STARTED:
            return
        self.output_func(
            f"🤖 {snapshot.bot_score}  |  {snapshot.player_name} {snapshot.player_score}  |  "
            f"Round {snapshot.round}/{snapshot.max_rounds}"
        )

    def _on_round_result(self, round_result: RoundResult):
        """回合结果回调"""
        outcome = "You win the round" if round_result.player_won else "Bot wins the round"
        self.output_func(
            f"You {round_result.player_move.glyph()} / {round_result.bot_move.glyph()} Bot"
            f"  -> {outcome}"
        )

    # ------------------------------------------------------------------
    # 主循环
    # ------------------------------------------------------------------
    def _prompt(self, text: str) -> Optional[str]:
        """读取一行输入，输入结束时返回 None"""
        try:
            return self.input_func(text)
        except EOFError:
            return None

    def _ask_name(self) -> bool:
        """询问玩家名直到开始比赛；输入结束返回 False"""
        name = self.player_name
        while True:
            if name is None:
                name = self._prompt("What's your name? ")
                if name is None:
                    return False
            try:
                self.controller.start(name)
                return True
            except GameException as e:
                global_error_handler.handle(e, "开始比赛")
                self.output_func("Please enter a name to play.")
                name = None

    def _ask_play_again(self) -> bool:
        """比赛结束后询问是否重新开始"""
        result = self.controller.result()
        self.output_func(result.message)
        answer = self._prompt("Restart? [y/N] ")
        return answer is not None and answer.strip().lower() in ("y", "yes")

    def _handle_command(self, text: str):
        """处理一条对局中的输入"""
        command = text.strip().lower()
        if command in QUIT_COMMANDS:
            self.should_exit = True
            return
        if command in RESTART_COMMANDS:
            self.controller.restart()
            return
        try:
            self.controller.choose_move(Move.from_string(command))
        except (InvalidInput, InvalidState) as e:
            global_error_handler.handle(e, "出拳")
            self.output_func("Choose rock, paper or scissors (r/p/s), 'restart' or 'quit'.")
        except GameException as e:
            global_error_handler.handle(e, "机器人出拳")
            self.output_func(f"Bot error: {e}. Check the bot configuration or type 'quit'.")

    def run(self):
        """运行应用程序主循环"""
        if not self.is_running:
            logger.error("应用程序未初始化，无法运行")
            return

        try:
            if not self._ask_name():
                return

            while not self.should_exit:
                if self.controller.phase is MatchPhase.FINISHED:
                    if self._ask_play_again():
                        self.controller.restart()
                        continue
                    break

                text = self._prompt(
                    f"Round {self.controller.round}/{self.controller.max_rounds} "
                    f"- your move (rock/paper/scissors): "
                )
                if text is None:
                    break
                self._handle_command(text)
        finally:
            self.cleanup()

    def cleanup(self):
        """清理资源"""
        if self._unsubscribe:
            self._unsubscribe()
            self._unsubscribe = None
        self.is_running = False
        logger.info("程序退出")
        close_file_handlers()

    def start(self) -> bool:
        """
        启动应用程序

        Returns:
            bool: 启动是否成功
        """
        if not self.initialize():
            logger.error("应用程序启动失败")
            return False
        self.is_running = True
        self.run()
        return True
