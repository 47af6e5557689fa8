"""Application settings and configuration."""
import os
from pathlib import Path
from dotenv import load_dotenv

ENV_PATH = Path(__file__).resolve().parent / '.env'
load_dotenv(dotenv_path=ENV_PATH)


class Settings:
    """
    Process-wide settings read once at import time.

    Pipeline knobs (timeouts, concurrency, pacing) are read by
    ``PollerConfig.from_env`` after this module has loaded config/.env.
    """

    # ── Paths ──────────────────────────────────────────────────────────────
    BASE_DIR:    Path = Path(__file__).resolve().parent.parent
    DATA_DIR:    Path = BASE_DIR / 'data'
    LOG_DIR:     Path = DATA_DIR / 'logs'
    HOSTS_FILE:  Path = Path(os.getenv('HOSTS_FILE', 'servers.txt'))
    REPORT_FILE: Path = Path(os.getenv('REPORT_FILE', 'report.json'))

    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')

    @classmethod
    def create_directories(cls) -> None:
        cls.LOG_DIR.mkdir(parents=True, exist_ok=True)


settings = Settings()
