"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlparse

import dotenv

from src.utils.utils import get_project_root


@dataclass(frozen=True)
class FinanceSettings:
    """Settings for selecting the transaction store.

    Attributes:
        backend: Backend identifier (memory, json, or sqlalchemy).
        transactions_file: Path of the JSON store used by the json backend.
    """

    backend: str = "memory"
    transactions_file: Optional[Path] = None

    @classmethod
    def from_env(cls) -> "FinanceSettings":
        """Build settings from environment variables and ``.env``.

        Returns:
            FinanceSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        backend = os.getenv("FINANCE_BACKEND", "memory").strip().lower()
        raw_file = os.getenv("TRANSACTIONS_FILE")
        if raw_file:
            transactions_file = cls._normalize_path(raw_file)
        else:
            transactions_file = cls._default_transactions_file()
        return cls(backend=backend, transactions_file=transactions_file)

    @staticmethod
    def _normalize_path(raw_path: str) -> Path:
        """Normalize the JSON store path.

        Args:
            raw_path: Raw file path or ``file://`` URI.

        Returns:
            Path: Absolute filesystem path.
        """
        parsed = urlparse(raw_path)
        if parsed.scheme == "file":
            raw_path = unquote(parsed.path)
        return Path(raw_path).expanduser().resolve()

    @staticmethod
    def _default_transactions_file() -> Path:
        """Return the default JSON store path under ``data/``."""
        return get_project_root() / "data" / "transactions.json"


__all__ = ["FinanceSettings"]
