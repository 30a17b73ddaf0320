# SPDX-License-Identifier: MIT

import os
from pathlib import Path
from tempfile import NamedTemporaryFile


def atomic_write_text(path: Path, text: str) -> None:
    """Write text next to path, then rename it into place."""
    tmp = None
    try:
        tmp = NamedTemporaryFile(
            "w",
            encoding="utf-8",
            # undecodable argv bytes come back as the bytes they were
            errors="surrogateescape",
            dir=str(path.parent),
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        )
        tmp.write(text)
        tmp.flush()
        os.fsync(tmp.fileno())
        tmp.close()
        os.replace(tmp.name, path)
        tmp = None
    finally:
        if tmp is not None:
            tmp.close()
            # surface the write error, not a cleanup error
            try:
                Path(tmp.name).unlink(missing_ok=True)
            except OSError:
                pass
