"""
Profile document reader.

Reads the source profile JSON from disk.

Dependencies: json, pathlib
System role: Supplies the raw document to the corpus builder
"""

import json
from pathlib import Path
from typing import Any

from profile_rag.core.exceptions import SourceDocumentInvalid


def read_profile_document(path: str | Path) -> Any:
    """
    Read and parse the profile document.

    Args:
        path: Location of the profile JSON file

    Returns:
        Any: Parsed JSON value (normalized later by the corpus builder)

    Raises:
        SourceDocumentInvalid: When the file is missing or not valid JSON
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise SourceDocumentInvalid("Profile document not found", path=str(path)) from e
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise SourceDocumentInvalid(f"Profile document unreadable: {e}", path=str(path)) from e
