from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv


def _int_or_none(name: str) -> int | None:
    raw = os.getenv(name)
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from e


def _int_set(name: str) -> frozenset[int]:
    raw = os.getenv(name, "")
    ids: set[int] = set()
    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            ids.add(int(part))
        except ValueError as e:
            raise RuntimeError(f"{name} must be a comma-separated list of integers, got {raw!r}") from e
    return frozenset(ids)


@dataclass(frozen=True)
class Settings:
    """
    Global application settings loaded from environment variables.

    This class should remain dependency-free and side-effect free
    except for loading environment variables.
    """

    # Environment
    env: str
    log_level: str

    # Discord
    discord_token: str
    discord_guild_id: int | None

    # Word Scramble
    start_words_path: Path
    dictionary_language: str = "en"
    # "wordfreq" (frequency list, the default) or "file" (DICTIONARY_PATH, one word per line)
    dictionary_source: str = "wordfreq"
    dictionary_path: Path | None = None
    dictionary_top_n: int = 100_000
    # Empty means every channel is enabled.
    wordscramble_channel_ids: frozenset[int] = field(default_factory=frozenset)

    @classmethod
    def load(cls) -> "Settings":
        """
        Load settings from environment variables.
        """

        # Load .env for local development
        load_dotenv()

        env = os.getenv("ENV", "development")
        log_level = os.getenv("LOG_LEVEL", "INFO")

        discord_token = os.getenv("DISCORD_TOKEN")
        if not discord_token:
            raise RuntimeError("DISCORD_TOKEN is required")

        dictionary_source = os.getenv("DICTIONARY_SOURCE", "wordfreq").strip().lower()
        if dictionary_source not in ("wordfreq", "file"):
            raise RuntimeError(f"DICTIONARY_SOURCE must be 'wordfreq' or 'file', got {dictionary_source!r}")

        dictionary_path_raw = os.getenv("DICTIONARY_PATH")
        if dictionary_source == "file" and not dictionary_path_raw:
            raise RuntimeError("DICTIONARY_PATH is required when DICTIONARY_SOURCE=file")

        dictionary_top_n = _int_or_none("DICTIONARY_TOP_N") or 100_000

        return cls(
            env=env,
            log_level=log_level,
            discord_token=discord_token,
            discord_guild_id=_int_or_none("DISCORD_GUILD_ID"),
            start_words_path=Path(os.getenv("START_WORDS_PATH", "src/assets/start.txt")),
            dictionary_language=os.getenv("DICTIONARY_LANGUAGE", "en"),
            dictionary_source=dictionary_source,
            dictionary_path=Path(dictionary_path_raw) if dictionary_path_raw else None,
            dictionary_top_n=dictionary_top_n,
            wordscramble_channel_ids=_int_set("WORDSCRAMBLE_CHANNEL_IDS"),
        )
