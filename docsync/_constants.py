"""Common literal values used across docsync.

File names and filename patterns live here so the reconciler, the driver, and
the tests agree on which files are navigation configs, index pages, and
drafts.

Examples
--------
>>> from docsync import _constants
>>> _constants.CONFIG_FILENAME
'config.json'
>>> bool(_constants.README_PATTERN.match("README.mdx"))
True
"""

import re

CONFIG_FILENAME = "config.json"
DOCS_DIRNAME = "docs"
DOCS_REF_PREFIX = f"{DOCS_DIRNAME}/"
CONTENT_SUFFIXES = (".md", ".mdx")

README_PATTERN = re.compile(r"^readme\.mdx?$", re.IGNORECASE)
DRAFT_PATTERN = re.compile(r"\.draft\.mdx?$", re.IGNORECASE)
