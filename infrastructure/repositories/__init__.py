"""Infrastructure repositories."""
from .host_list_repository import FileHostListRepository

__all__ = [
    'FileHostListRepository',
]
