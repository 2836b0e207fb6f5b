"""YAML config loading and validation."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml


@dataclass
class DocumentsConfig:
    allowed_extensions: tuple[str, ...] = (".pdf", ".docx", ".txt", ".md")
    max_file_size_mb: float = 8  # upload limit of the recruitment backend

    @property
    def max_file_size_bytes(self) -> int:
        return int(self.max_file_size_mb * 1024 * 1024)


@dataclass
class LoggingConfig:
    log_dir: str = "logs"
    level: str = "INFO"


@dataclass
class AppConfig:
    documents: DocumentsConfig = field(default_factory=DocumentsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _normalize_extensions(raw: list[str]) -> tuple[str, ...]:
    exts = []
    for ext in raw:
        ext = str(ext).strip().lower()
        if ext and not ext.startswith("."):
            ext = f".{ext}"
        if ext and ext not in exts:
            exts.append(ext)
    return tuple(exts)


def load_config(config_path: str = "config.yaml") -> AppConfig:
    """Load configuration from a YAML file, falling back to defaults per key."""
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    config = AppConfig()

    documents_raw = raw.get("documents", {}) or {}
    defaults = DocumentsConfig()
    config.documents = DocumentsConfig(
        allowed_extensions=_normalize_extensions(
            documents_raw.get("allowed_extensions", list(defaults.allowed_extensions))
        ),
        max_file_size_mb=documents_raw.get("max_file_size_mb", defaults.max_file_size_mb),
    )

    logging_raw = raw.get("logging", {}) or {}
    config.logging = LoggingConfig(
        log_dir=logging_raw.get("log_dir", "logs"),
        level=str(logging_raw.get("level", "INFO")).upper(),
    )

    return config


def apply_env_overrides(config: AppConfig) -> AppConfig:
    """Env vars take precedence over file settings."""
    level = os.environ.get("CV_EXTRACTOR_LOG_LEVEL")
    if level:
        config.logging.level = level.strip().upper()
    return config


def validate_config(config: AppConfig) -> list[str]:
    """Return list of validation warnings (empty = OK)."""
    from cv_extractor.profile.documents import SUPPORTED_EXTENSIONS

    warnings = []

    if not isinstance(logging.getLevelName(config.logging.level), int):
        warnings.append(f"Unknown log level '{config.logging.level}' - INFO will be used")

    if config.documents.max_file_size_mb <= 0:
        warnings.append("max_file_size_mb must be positive - every document will be rejected")

    unsupported = [e for e in config.documents.allowed_extensions if e not in SUPPORTED_EXTENSIONS]
    if unsupported:
        warnings.append(f"Unsupported document extensions configured: {', '.join(unsupported)}")

    if not config.documents.allowed_extensions:
        warnings.append("No document extensions allowed - every document will be rejected")

    return warnings
