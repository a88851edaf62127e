"""YAML application record reader."""

from __future__ import annotations

import os
from pathlib import Path

import yaml

from ...record import ApplicationRecord, parse_record
from ...utils.errors import RecordError


def read_yaml_record(
    path: str | os.PathLike[str], *, encoding: str = "utf-8-sig"
) -> ApplicationRecord:
    """Read ``path`` as YAML and validate it into an :class:`ApplicationRecord`."""

    with Path(path).open("r", encoding=encoding) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise RecordError(f"{path}: invalid YAML: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise RecordError(f"{path}: cannot decode as {encoding}: {exc}") from exc
    return parse_record(data or {})


__all__ = ["read_yaml_record"]
