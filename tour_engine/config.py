# tour_engine/config.py
from dataclasses import dataclass, field
from typing import Optional
import logging
import os
import tomllib  # python >=3.11

from tour_engine.errors import ConfigurationError

logger = logging.getLogger(__name__)

# Menu letters accepted by the interactive CLI.
MENU_OPTIONS = {
    "a": "bfs",
    "b": "dfs",
    "c": "dfs-h1b",
    "d": "dfs-h2",
}

@dataclass
class SearchConfig:
    board_size: int = 8
    strategy: str = "dfs-h2"
    time_limit_ms: Optional[int] = 60_000  # None means unbounded

@dataclass
class OutputConfig:
    write_files: bool = True
    output_dir: str = "."
    path_file: str = "path.txt"
    board_file: str = "board.txt"
    log_file: str = "moves.txt"
    oom_file: str = "OutOfMem.txt"

@dataclass
class UIConfig:
    engine_name: str = "KnightTour"
    engine_author: str = "Medo"
    api_port: int = 8000
    max_api_board_size: int = 12

@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    log_level: str = "INFO"

    @staticmethod
    def load_from_toml(path: str = "config.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        # only keys the dataclasses already know about are merged
        for section in ("search", "output", "ui"):
            if section in raw:
                target = getattr(cfg, section)
                for k, v in raw[section].items():
                    if hasattr(target, k):
                        setattr(target, k, v)
        if "log_level" in raw:
            cfg.log_level = str(raw["log_level"]).upper()
        return cfg


def _env_int(name: str, value: str) -> int:
    try:
        return int(value.strip())
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}") from None


def _apply_env_overrides(cfg: Config) -> Config:
    """Apply KNIGHT_TOUR_* overrides; nothing is changed if any value is malformed."""
    overrides = {}
    board_size = os.environ.get("KNIGHT_TOUR_BOARD_SIZE")
    if board_size:
        overrides["board_size"] = _env_int("KNIGHT_TOUR_BOARD_SIZE", board_size)
    strategy = os.environ.get("KNIGHT_TOUR_STRATEGY")
    if strategy:
        overrides["strategy"] = strategy
    time_limit = os.environ.get("KNIGHT_TOUR_TIME_LIMIT_MS")
    if time_limit:
        overrides["time_limit_ms"] = (
            None if time_limit.strip().lower() == "none"
            else _env_int("KNIGHT_TOUR_TIME_LIMIT_MS", time_limit)
        )
    for k, v in overrides.items():
        setattr(cfg.search, k, v)
    return cfg

# single globally importable config instance
CONFIG = Config.load_from_toml(os.environ.get("KNIGHT_TOUR_CONFIG_TOML", "config.toml"))
# a malformed override leaves the file and default settings in place
try:
    _apply_env_overrides(CONFIG)
except ConfigurationError as e:
    logger.warning("Ignoring environment overrides: %s", e)
