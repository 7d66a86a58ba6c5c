"""
Folder tree mapper.
Turns the folder-children HTML fragment into Folder records.
"""

import logging
from typing import List, Set

from chomikuj.core.interfaces import Folder, Response
from chomikuj.scraper.base_mapper import BaseMapper

logger: logging.Logger = logging.getLogger(__name__)


class FolderMapper(BaseMapper):
    """
    Maps folder tree markup.

    Each folder in the fragment is a link whose `rel` attribute holds the
    numeric folder id, e.g.::

        <a href="/alice/Music" rel="1234" title="Music">Music</a>
    """

    def map_html_response_to_folders(self, response: Response) -> List[Folder]:
        """
        Extract folders from a tree fragment.

        Args:
            response: Successful folder-children response.

        Returns:
            Folders in document order, without duplicates.
        """
        soup = self._soup(response)
        folders: List[Folder] = []
        seen_ids: Set[int] = set()

        for link in soup.find_all("a", rel=True):
            # bs4 splits rel into a list of tokens
            rel = link.get("rel")
            folder_id = self._to_int(" ".join(rel) if isinstance(rel, list) else rel)
            if folder_id is None or folder_id in seen_ids:
                continue
            seen_ids.add(folder_id)

            name = (link.get("title") or link.get_text(strip=True)).strip()
            folders.append(
                Folder(
                    folder_id=folder_id,
                    name=name,
                    url=self._absolute_url(link.get("href", "")),
                )
            )

        logger.debug(f"Mapped {len(folders)} folders")
        return folders
