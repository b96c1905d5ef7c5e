"""In-process image catalog and the link data rendered for each entry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional
from urllib.parse import urlencode

from ..extensions import download_keys


@dataclass(frozen=True)
class CatalogEntry:
    file: str
    title: str
    price: int
    entitled: bool = False


# If this were a real system the list would come from a store backend.
_CATALOG: List[CatalogEntry] = [
    CatalogEntry(file="free", title="Free image", price=0, entitled=True),
    CatalogEntry(file="valuable", title="Valuable image", price=9999, entitled=False),
]

_BY_FILE: Dict[str, CatalogEntry] = {entry.file: entry for entry in _CATALOG}


def list_entries() -> List[CatalogEntry]:
    return list(_CATALOG)


def get_entry(file: str) -> Optional[CatalogEntry]:
    return _BY_FILE.get(file)


def download_url(entry: CatalogEntry) -> str:
    return f"/?{download_keys.signer.link_query(entry.file)}"


def purchase_url(entry: CatalogEntry) -> str:
    return f"/?{urlencode([('purchase', entry.file)])}"


def thumbnail_url(entry: CatalogEntry) -> str:
    return f"/thumbnails/{entry.file}.jpg"


def catalog_view() -> List[dict]:
    """Entries plus their links; only entitled entries receive a signed link."""

    view = []
    for entry in list_entries():
        item = {
            "file": entry.file,
            "title": entry.title,
            "price": entry.price,
            "entitled": entry.entitled,
            "thumbnail_url": thumbnail_url(entry),
        }
        if entry.entitled:
            item["download_url"] = download_url(entry)
        else:
            item["purchase_url"] = purchase_url(entry)
        view.append(item)
    return view
