"""Shared constants for spdx-guide.

For environment-based configuration (output file, log level, etc.), use the env module:
    from common.env import env
    filename = env.output_filename()
"""

TOOL_NAME = "spdx-guide"
TOOL_VERSION = "0.1.0"

DEFAULT_OUTPUT_FILENAME = "LICENSE.spdx"

# Fixed document properties
SPDX_VERSION = "SPDX-2.3"
DATA_LICENSE = "CC0-1.0"
DOCUMENT_SPDX_ID = "SPDXRef-DOCUMENT"
LICENSE_LIST_VERSION = "3.25"
DOCUMENT_COMMENT = (
    "This document only gives licensing information about the package it was "
    "created for, not its dependencies."
)
DOCUMENT_COMMENT_NOTE = "Update DocumentComment if you make further changes to this document"

PACKAGE_SPDX_ID_PREFIX = "SPDXRef-Package-"
NAMESPACE_PREFIX = "https://spdx.org/spdxdocs/"

# Literal values defined by the SPDX tag/value format
NO_ASSERTION = "NOASSERTION"
NONE = "NONE"

# Written when no license is declared
LICENSE_PLACEHOLDER_COMMENTS: tuple[str, ...] = (
    "Edit the line below to specify a license.",
    "DeclaredLicense: LICENSE-ID",
)

# Version control
MAX_RANKED_AUTHORS = 5
TAG_REF_PREFIX = "refs/tags/"
