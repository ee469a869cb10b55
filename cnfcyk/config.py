"""config.py
Runtime settings read from the environment. Command-line flags take precedence over these.
"""
import os
from dataclasses import dataclass
from typing import Optional

GRAMMAR_FORMATS = ("arrow", "nltk")

TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in TRUE_VALUES


@dataclass
class Settings:
    grammar_file: Optional[str] = None
    grammar_format: str = "arrow"
    tokens: bool = False
    log_level: str = "WARNING"
    log_file: Optional[str] = None
    log_json: bool = False


def load_settings() -> Settings:
    """
    Build Settings from the environment:

    - CYK_GRAMMAR_FILE (default: the built-in grammar)
    - CYK_GRAMMAR_FORMAT ('arrow' or 'nltk', default 'arrow')
    - CYK_TOKENS (true-like to split words on whitespace instead of per character)
    - CYK_LOG_LEVEL (default 'WARNING'), CYK_LOG_FILE (default stderr), CYK_LOG_JSON (true-like for JSON lines)
    """
    grammar_format = os.getenv("CYK_GRAMMAR_FORMAT", "arrow").strip().lower()
    if grammar_format not in GRAMMAR_FORMATS:
        raise ValueError("CYK_GRAMMAR_FORMAT must be one of %s, got %r" % (", ".join(GRAMMAR_FORMATS), grammar_format))

    return Settings(
        grammar_file=os.getenv("CYK_GRAMMAR_FILE") or None,
        grammar_format=grammar_format,
        tokens=_env_flag("CYK_TOKENS"),
        log_level=os.getenv("CYK_LOG_LEVEL", "WARNING").upper(),
        log_file=os.getenv("CYK_LOG_FILE") or None,
        log_json=_env_flag("CYK_LOG_JSON"),
    )
