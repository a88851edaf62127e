"""JSON application record reader."""

from __future__ import annotations

import json
import os
from pathlib import Path

from ...record import ApplicationRecord, parse_record
from ...utils.errors import RecordError


def read_json_record(
    path: str | os.PathLike[str], *, encoding: str = "utf-8-sig"
) -> ApplicationRecord:
    """Read ``path`` as JSON and validate it into an :class:`ApplicationRecord`.

    The default ``utf-8-sig`` encoding strips a leading BOM when present.
    """

    with Path(path).open("r", encoding=encoding) as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise RecordError(f"{path}: invalid JSON: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise RecordError(f"{path}: cannot decode as {encoding}: {exc}") from exc
    return parse_record(data)


__all__ = ["read_json_record"]
