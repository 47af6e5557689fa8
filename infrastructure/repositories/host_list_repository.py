"""Host list read from a plain-text file."""
import logging
from pathlib import Path
from typing import List, Union

from core.errors import HostListError
from domain.entities import HostAddress
from domain.interfaces import IHostListRepository

logger = logging.getLogger(__name__)


class FileHostListRepository(IHostListRepository):
    """One host per line; lines are passed through unvalidated."""

    def __init__(self, path: Union[str, Path], encoding: str = "utf-8"):
        self.path = Path(path)
        self.encoding = encoding

    def load(self) -> List[HostAddress]:
        try:
            text = self.path.read_text(encoding=self.encoding)
        except FileNotFoundError as exc:
            raise HostListError(str(self.path), "file not found") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise HostListError(str(self.path), str(exc)) from exc

        hosts = text.splitlines()
        logger.info(f"Loaded {len(hosts)} hosts from {self.path}")
        return hosts
