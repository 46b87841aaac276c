"""Clipboard and file-export collaborators.

The color math never touches I/O.  Copying and downloading are injected as
plain callables (``copy(text) -> bool`` and ``emit(data, filename)``), and
every outcome comes back as a :class:`Notice` for the notification layer.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Iterable, Sequence

from .catalog import ColorScheme, slug
from .models import ColorInfo

log = logging.getLogger(__name__)

CopyFn = Callable[[str], bool]
EmitFn = Callable[[bytes, str], None]

PALETTE_FILENAME = "color-wheel-palette.json"


@dataclass(frozen=True)
class Notice:
    ok: bool
    message: str


def make_copier(primary: CopyFn | None, fallback: CopyFn) -> CopyFn:
    """Clipboard write that tries ``primary`` first and ``fallback`` second.

    ``primary`` stands for the secure-context clipboard and may be absent;
    a False result or an exception from it moves on to ``fallback``.
    """

    def copy(text: str) -> bool:
        if primary is not None:
            try:
                if primary(text):
                    return True
            except Exception:
                log.warning("primary clipboard failed; using fallback", exc_info=True)
        try:
            return bool(fallback(text))
        except Exception:
            log.exception("fallback copy failed")
            return False

    return copy


def copy_text(copy: CopyFn, text: str, label: str) -> Notice:
    if copy(text):
        return Notice(True, f"Copied {label}: {text}")
    return Notice(False, "Failed to copy")


def copy_all(copy: CopyFn, hexes: Iterable[str], name: str) -> Notice:
    if copy(", ".join(hexes)):
        return Notice(True, f"Copied entire {name} palette")
    return Notice(False, "Failed to copy scheme")


def timestamp(now: datetime | None = None) -> str:
    """ISO-8601 UTC with milliseconds and a trailing Z."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace(
        "+00:00", "Z"
    )


def palette_document(
    colors: Sequence[ColorInfo], base_hue: float | None, now: datetime | None = None
) -> dict:
    return {
        "colors": [ColorInfo.to_dict(c) for c in colors],
        "baseHue": base_hue,
        "generatedAt": timestamp(now),
    }


def scheme_document(scheme: ColorScheme, now: datetime | None = None) -> dict:
    doc = scheme.to_dict()
    doc["downloadedAt"] = timestamp(now)
    return doc


def scheme_filename(scheme: ColorScheme) -> str:
    return f"{slug(scheme.name)}-scheme.json"


def dumps(doc: dict) -> bytes:
    return json.dumps(doc, indent=2).encode("utf-8")


def _emit(emit: EmitFn, data: bytes, filename: str, ok_message: str) -> Notice:
    try:
        emit(data, filename)
    except OSError as exc:
        log.error("export of %s failed: %s", filename, exc)
        return Notice(False, f"Failed to save {filename}")
    log.info("exported %s (%d bytes)", filename, len(data))
    return Notice(True, ok_message)


def export_palette(
    colors: Sequence[ColorInfo],
    base_hue: float | None,
    emit: EmitFn,
    now: datetime | None = None,
) -> Notice:
    if not colors:
        return Notice(False, "No palette generated yet")
    data = dumps(palette_document(colors, base_hue, now))
    return _emit(emit, data, PALETTE_FILENAME, "Palette downloaded successfully")


def export_scheme(
    scheme: ColorScheme, emit: EmitFn, now: datetime | None = None
) -> Notice:
    data = dumps(scheme_document(scheme, now))
    return _emit(emit, data, scheme_filename(scheme), f"Downloaded {scheme.name} scheme")


__all__ = [
    "Notice",
    "CopyFn",
    "EmitFn",
    "make_copier",
    "copy_text",
    "copy_all",
    "palette_document",
    "scheme_document",
    "scheme_filename",
    "export_palette",
    "export_scheme",
]
