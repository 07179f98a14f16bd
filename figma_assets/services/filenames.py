"""Turn designer-assigned layer names into safe, unique filenames."""

import re
from typing import Dict, Optional, Set

UNNAMED = "unnamed"

_WHITESPACE_RE = re.compile(r"\s+")
# characters stripped from layer names
_ILLEGAL_CHARS_RE = re.compile(r'[<>:"/\\|?*!]')
_HYPHEN_RUN_RE = re.compile(r"-+")
_EXTENSION_RE = re.compile(r"\.(svg|png)$", re.IGNORECASE)


def extension_for(image_format: str) -> str:
    """Map an export format to its file extension, defaulting to SVG."""
    return ".png" if (image_format or "").lower() == "png" else ".svg"


def sanitize_filename(name: Optional[str], image_format: str = "svg") -> str:
    """Build a filesystem-legal filename from a layer name.

    Whitespace runs become a single hyphen, characters that are illegal on
    common filesystems are dropped, and the extension for ``image_format``
    is appended unless the name already ends with it.
    """
    ext = extension_for(image_format)
    base = _WHITESPACE_RE.sub("-", name or UNNAMED)
    base = _ILLEGAL_CHARS_RE.sub("", base)
    base = _HYPHEN_RUN_RE.sub("-", base).strip("-") or UNNAMED
    return base if base.endswith(ext) else base + ext


class FilenameRegistry:
    """Hands out unique filenames for one export run.

    The first node with a given filename gets it unchanged; later ones get
    ``_1``, ``_2``, ... inserted before the extension.
    """

    def __init__(self, image_format: str = "svg"):
        self.image_format = image_format
        self.extension = extension_for(image_format)
        self._counts: Dict[str, int] = {}
        self._issued: Set[str] = set()

    def unique(self, name: Optional[str]) -> str:
        filename = sanitize_filename(name, self.image_format)
        count = self._counts.get(filename, 0)
        candidate = filename
        if count or candidate in self._issued:
            base = _EXTENSION_RE.sub("", filename)
            # A layer may literally be called "Icon_1", so skip names already handed out
            while True:
                count = max(count, 1)
                candidate = f"{base}_{count}{self.extension}"
                if candidate not in self._issued:
                    break
                count += 1
        self._counts[filename] = count + 1
        self._issued.add(candidate)
        return candidate
