# ttt_nxn/config.py
from dataclasses import dataclass, field, fields
import os
import tomllib

DEFAULT_CONFIG_PATH = "ttt.toml"


@dataclass
class GameConfig:
    board_size: int = 3
    num_players: int = 2
    advance_turn_on_invalid: bool = True  # False: turn moves only on accepted moves


@dataclass
class Config:
    game: GameConfig = field(default_factory=GameConfig)
    print_board: bool = False
    log_level: str = "WARNING"

    @staticmethod
    def load_from_toml(path: str = DEFAULT_CONFIG_PATH) -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            try:
                raw = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"{path}: invalid TOML: {e}") from e
        # unknown keys are ignored
        game_types = {f.name: f.type for f in fields(GameConfig)}
        for k, v in raw.get("game", {}).items():
            if k in game_types:
                setattr(cfg.game, k, _checked(f"game.{k}", v, game_types[k]))
        for k, expected in (("print_board", bool), ("log_level", str)):
            if k in raw:
                setattr(cfg, k, _checked(k, raw[k], expected))
        return cfg

    def apply_env(self, environ=None) -> "Config":
        """TTT_BOARD_SIZE / TTT_NUM_PLAYERS / TTT_LOG_LEVEL win over the file"""
        environ = os.environ if environ is None else environ
        if environ.get("TTT_BOARD_SIZE"):
            self.game.board_size = _env_int(environ, "TTT_BOARD_SIZE")
        if environ.get("TTT_NUM_PLAYERS"):
            self.game.num_players = _env_int(environ, "TTT_NUM_PLAYERS")
        if environ.get("TTT_LOG_LEVEL"):
            self.log_level = environ["TTT_LOG_LEVEL"].upper()
        return self


def _checked(key, value, expected):
    # exact type match, so true is not accepted as an int
    if type(value) is not expected:
        raise ValueError(f"config key {key!r} must be {expected.__name__}, "
                         f"got {type(value).__name__} {value!r}")
    return value


def _env_int(environ, name):
    try:
        return int(environ[name])
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {environ[name]!r}") from None


def load_config(path=None, environ=None) -> Config:
    environ = os.environ if environ is None else environ
    path = path or environ.get("TTT_CONFIG_TOML", DEFAULT_CONFIG_PATH)
    return Config.load_from_toml(path).apply_env(environ)
