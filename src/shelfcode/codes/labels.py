# ABOUTME: Builds the JSON payload encoded into a book's shelf label QR code.
# ABOUTME: Rendering the QR image itself is left to the caller.

import json

LABEL_TYPE = "library_book"


def qr_payload(
    book_id: str,
    title: str | None = None,
    author: str | None = None,
    library_code: str | None = None,
) -> str:
    """Serialize the label fields as compact JSON.

    The library code is stored under "location". Missing text fields are
    written as empty strings.
    """
    data = {
        "id": book_id,
        "title": title or "",
        "author": author or "",
        "location": library_code or "",
        "type": LABEL_TYPE,
    }
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)
