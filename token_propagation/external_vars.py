"""Extraction and caching of custom properties defined in external files."""

import logging

from token_propagation.binding import BindingMap
from token_propagation.css_parser import parse_stylesheet
from token_propagation.file_reader import FileReader, read_text_file
from token_propagation.variable_collector import collect_scoped_bindings

logger = logging.getLogger(__name__)


class ExternalVarCache:
    """Memoizes the bindings defined by each external file, keyed by path.

    Results depend only on the file contents, so a race that computes the same
    entry twice stores an identical value.
    """

    def __init__(self, reader: FileReader = read_text_file) -> None:
        """Initialize an empty cache using ``reader`` to load files."""
        self.reader = reader
        self._cache: dict[str, BindingMap] = {}

    def get(self, path: str) -> BindingMap:
        """Return the external bindings of ``path``, parsing it on first use.

        Read and parse errors propagate to the caller and are not cached.
        """
        cached = self._cache.get(path)
        if cached is None:
            sheet = parse_stylesheet(self.reader(path), source=path)
            cached = collect_scoped_bindings(sheet, path)
            self._cache[path] = cached
            logger.debug("Collected %d external vars from %s", len(cached), path)
        return dict(cached)

    def clear(self) -> None:
        """Drop every cached entry."""
        self._cache.clear()
