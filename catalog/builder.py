from __future__ import annotations
import logging
import pathlib
from operator import attrgetter
from typing import List, Optional

from catalog.extractor import extract_title_and_description
from catalog.models import DocumentEntry
from core.config import Settings, settings as default_settings

log = logging.getLogger(__name__)

def list_sources(directory, cfg: Optional[Settings] = None) -> List[pathlib.Path]:
    """Immediate HTML files in `directory`, by name, minus the index itself."""
    cfg = cfg or default_settings
    sources = []
    for p in sorted(pathlib.Path(directory).iterdir()):
        if p.is_file() and p.suffix == cfg.source_suffix and p.name != cfg.index_name:
            sources.append(p)
    return sources

def build_catalog(directory, cfg: Optional[Settings] = None) -> List[DocumentEntry]:
    cfg = cfg or default_settings
    entries = []
    for p in list_sources(directory, cfg):
        title, description = extract_title_and_description(p, cfg)
        entries.append(DocumentEntry(filename=p.name, title=title, description=description))
    # sorted() is stable, so equal titles keep file-name order
    entries = sorted(entries, key=attrgetter("title"))
    log.info("Cataloged %d file(s) from %s", len(entries), directory)
    return entries
