"""
Search results mapper.
Turns the file search results page into File records.
"""

import logging
import re
from typing import List, Optional
from urllib.parse import unquote, urlparse

from bs4 import Tag

from chomikuj.core.interfaces import File, Response
from chomikuj.scraper.base_mapper import BaseMapper

logger: logging.Logger = logging.getLogger(__name__)

# File links end with ",<id>.<ext>", e.g. /alice/Music/song,123456.mp3
_FILE_ID_RE = re.compile(r",(\d+)\.[^/]*$")


class FileMapper(BaseMapper):
    """Maps search results markup; each `div.filerow` is one file."""

    def map_search_response_to_files(self, response: Response) -> List[File]:
        """
        Extract files from a search results page.

        Args:
            response: Successful search response.

        Returns:
            Files in document order. Rows without a file id are skipped.
        """
        soup = self._soup(response)
        files: List[File] = []

        for row in soup.select("div.filerow"):
            link = row.select_one("a.downloadAction") or row.select_one("a.expanderHeader")
            if link is None:
                continue

            href = link.get("href", "")
            file_id = self._extract_file_id(link, href)
            if file_id is None:
                logger.debug(f"Skipping result without file id: {href}")
                continue

            files.append(
                File(
                    file_id=file_id,
                    name=(link.get("title") or link.get_text(strip=True)).strip(),
                    url=self._absolute_url(href),
                    size=self._extract_size(row),
                    owner=self._extract_owner(href),
                )
            )

        logger.debug(f"Mapped {len(files)} files")
        return files

    def _extract_file_id(self, link: Tag, href: str) -> Optional[int]:
        match = _FILE_ID_RE.search(urlparse(href).path)
        if match:
            return int(match.group(1))
        rel = link.get("rel")
        return self._to_int(" ".join(rel) if isinstance(rel, list) else rel)

    @staticmethod
    def _extract_size(row: Tag) -> Optional[str]:
        item = row.select_one(".fileinfo li")
        if item is None:
            return None
        return item.get_text(strip=True) or None

    @staticmethod
    def _extract_owner(href: str) -> Optional[str]:
        segments = [s for s in urlparse(href).path.split("/") if s]
        return unquote(segments[0]) if segments else None
