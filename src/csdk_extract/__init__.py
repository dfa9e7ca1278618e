"""csdk_extract: build-parameter extractor for the Ledger C SDK.

Runs the SDK makefiles of an application in ``--trace --dry-run`` mode,
picks the compile command the SDK would issue for a translation unit, and
writes its preprocessor definitions and compiler flags as two sidecar files
that downstream (non-make) builds can consume.
"""

__version__ = "0.1.0"
