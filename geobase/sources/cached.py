from abc import ABC
import inspect
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple, Union

logger = logging.getLogger(__name__)


class CachedSource(ABC):
    """
    Base class for sources whose files are downloaded into a local directory.

    A file is fetched again only when it is missing, older than the allowed
    age, or when a refresh is forced. Each file is named by a key, and the
    subclass provides a fetch_<key>() method with no arguments returning the
    file content as bytes (fetch_por for the key 'por').
    """

    def __init__(self, cache_dir: Union[str, Path]):
        self.cache_dir = Path(cache_dir)
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        self.source_name = self.__class__.__name__.lower()
        self._force_refresh = False
        self._never_refresh = False

    def set_force_refresh(self, force_refresh: bool = True) -> None:
        """Download every file again, whatever its age."""
        self._force_refresh = force_refresh

    def set_never_refresh(self, never_refresh: bool = True) -> None:
        """Keep any file already present, whatever its age."""
        self._never_refresh = never_refresh

    def _is_cache_valid(self, cache_file: Path, max_age_days: Optional[int] = None) -> Tuple[bool, Optional[str]]:
        """
        Returns:
            (True, None) when the file can be used as is, otherwise
            (False, reason) with reason one of 'force refresh', 'missing',
            'expired'
        """
        if self._force_refresh:
            return False, "force refresh"
        if not cache_file.exists():
            return False, "missing"
        if self._never_refresh or max_age_days is None:
            return True, None
        age = datetime.now() - datetime.fromtimestamp(cache_file.stat().st_mtime)
        if age.days > max_age_days:
            return False, "expired"
        return True, None

    def _fetch_method(self, key: str):
        name = f"fetch_{key}"
        method = getattr(self, name, None)
        if method is None:
            raise NotImplementedError(
                f"{self.__class__.__name__} has no {name}() method for the file key '{key}'"
            )
        if inspect.signature(method).parameters:
            raise TypeError(f"{name}() must not take any argument")
        return method

    def get_file(self, key: str, filename: str, max_age_days: Optional[int] = None) -> Path:
        """
        Path of an up to date copy of a file, downloading it when needed.

        Args:
            key: File key, selecting the fetch_<key>() method
            filename: Name of the file in the cache directory
            max_age_days: Age after which the file is downloaded again (None for no limit)

        Raises:
            NotImplementedError: If a download is needed and fetch_<key>() does not exist
        """
        cache_file = self.cache_dir / filename

        is_valid, reason = self._is_cache_valid(cache_file, max_age_days)
        if is_valid:
            logger.info(f"{filename} retrieved from cache {self.source_name}")
            return cache_file

        fetch = self._fetch_method(key)
        data = fetch()

        # A failed write leaves the previous copy in place
        partial_file = cache_file.with_name(filename + '.part')
        partial_file.write_bytes(data)
        partial_file.replace(cache_file)
        logger.info(f"{filename} [{reason}] fetched using {fetch.__name__}")
        return cache_file
