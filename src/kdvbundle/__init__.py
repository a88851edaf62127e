"""kdvbundle: PDF bundle generator for conscientious objection applications.

Lays out a cover letter, a personal justification and a tabular CV from an
:class:`~kdvbundle.record.ApplicationRecord` and concatenates them into one
PDF.  The command line interface lives in :mod:`kdvbundle.cli`.
"""

from .bundle import Bundle, BundlePart, assemble_bundle
from .config import ConfigModel, load_config
from .record import ApplicationRecord, CvEntry, parse_record

__version__ = "0.1.0"

__all__ = [
    "ApplicationRecord",
    "Bundle",
    "BundlePart",
    "ConfigModel",
    "CvEntry",
    "assemble_bundle",
    "load_config",
    "parse_record",
]
