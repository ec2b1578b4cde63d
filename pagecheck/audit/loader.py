import logging
from pathlib import Path
from typing import Iterable

from pagecheck.audit.types import LoadedDocument
from pagecheck.config import DEFAULT_CANDIDATES
from pagecheck.exceptions import EmptyDocument, MissingDocument, UnreadableDocument

logger = logging.getLogger("pagecheck.audit")


def find_document(candidates: Iterable[str] = DEFAULT_CANDIDATES, root: str | Path = ".") -> tuple[str, Path] | None:
    """Return the first candidate that exists under ``root``."""
    base = Path(root).expanduser().resolve()
    for rel in candidates:
        p = base / rel
        if p.is_file():
            return rel, p
    return None


def load_document(candidates: Iterable[str] = DEFAULT_CANDIDATES, root: str | Path = ".") -> LoadedDocument:
    """
    Locate and read the target HTML document.

    Raises MissingDocument if no candidate exists, UnreadableDocument if the
    winner cannot be read and EmptyDocument if it is blank after trimming.
    """
    candidates = tuple(candidates)
    found = find_document(candidates, root)
    if found is None:
        raise MissingDocument(candidates)

    rel, path = found
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise UnreadableDocument(rel, str(e)) from e
    doc = LoadedDocument(path=path, relpath=rel, text=text)
    if not doc.has_content:
        raise EmptyDocument(rel)

    logger.debug("Loaded %s (%d chars)", rel, len(text))
    return doc
