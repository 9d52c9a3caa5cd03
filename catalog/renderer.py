"""Render the catalog into a single static index page."""
from __future__ import annotations
import datetime
import logging
import pathlib
from typing import Callable, Optional, Sequence

from jinja2 import Environment, FileSystemLoader, select_autoescape

from catalog.models import DocumentEntry
from core.config import Settings, settings as default_settings

log = logging.getLogger(__name__)

TPL = pathlib.Path(__file__).resolve().parent / "templates"

Clock = Callable[[], datetime.datetime]

class IndexWriteError(OSError):
    """The index page (or its directory) could not be written."""

    def __init__(self, path: pathlib.Path) -> None:
        super().__init__(f"No se pudo crear {path}")
        self.path = path

def _env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TPL)),
        autoescape=select_autoescape(["html", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )

def render_index(
    entries: Sequence[DocumentEntry],
    clock: Clock = datetime.datetime.now,
    cfg: Optional[Settings] = None,
) -> str:
    cfg = cfg or default_settings
    tpl = _env().get_template("index.html")
    return tpl.render(
        entries=entries,
        title=cfg.page_title,
        lang=cfg.page_lang,
        generated_at=clock().strftime(cfg.timestamp_format),
    )

def write_index(
    entries: Sequence[DocumentEntry],
    output_dir,
    clock: Clock = datetime.datetime.now,
    cfg: Optional[Settings] = None,
) -> pathlib.Path:
    """Write `<output_dir>/index.html`, replacing any previous one.

    The page goes to a temporary sibling first and is moved into place only
    once fully written, so readers never see a truncated index.
    """
    cfg = cfg or default_settings
    out_dir = pathlib.Path(output_dir)
    out_file = out_dir / cfg.index_name
    page = render_index(entries, clock, cfg)

    try:
        out_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise IndexWriteError(out_file) from e

    tmp = out_file.with_name(out_file.name + ".tmp")
    try:
        tmp.write_text(page, encoding="utf-8")
        tmp.replace(out_file)
    except OSError as e:
        tmp.unlink(missing_ok=True)
        raise IndexWriteError(out_file) from e
    log.info("Index written: %s (%d entries)", out_file, len(entries))
    return out_file
