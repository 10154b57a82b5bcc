from __future__ import annotations

import threading
from pathlib import Path
from typing import Optional

from server.config import Settings
from study.synonyms import SynonymIndex


class Runtime:
   """
   Process-wide runtime cache for objects loaded once from static data.

   - Synonym index: read from disk on first use, then shared read-only
   """

   def __init__(self, synonyms_path: Path):
      self.synonyms_path = Path(synonyms_path)

      self._synonyms_lock = threading.Lock()
      self._synonyms: Optional[SynonymIndex] = None

   # ----------------------------
   # Synonyms
   # ----------------------------
   def get_synonyms(self) -> SynonymIndex:
      if self._synonyms is not None:
         return self._synonyms
      with self._synonyms_lock:
         if self._synonyms is None:
               self._synonyms = SynonymIndex.from_file(self.synonyms_path)
      return self._synonyms

   def reset_synonyms(self) -> None:
      """
      Useful for tests or after the synonym file is replaced.
      """
      with self._synonyms_lock:
         self._synonyms = None


def runtime_from_settings(settings: Settings) -> Runtime:
   return Runtime(settings.synonyms_path)
