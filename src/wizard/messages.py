"""User-facing strings for the interview.

Keys follow the naming used by the translation catalogs (``creator-person-prompt``,
``select-supplier-prompt``...). Only English is bundled; a translated catalog
is passed in as overrides.
"""

from collections.abc import Mapping

DEFAULT_MESSAGES: dict[str, str] = {
    "detecting-vcs": "Detecting version control in {dir}",
    "found-vcs": "Found {name} repository",
    "no-vcs": "No supported version control found",
    "error": "Error",
    "other": "Other",
    "no-assertion": "No assertion",
    "nowhere": "Nowhere (not downloadable)",
    "person": "Person",
    "org": "Organization",
    "go-back": "Go back",
    "creator-person-prompt": "Who is creating this document?",
    "creator-custom-person-prompt": "Enter the name (and email) of the person creating this document",
    "creator-has-org-prompt": "Are you creating this document on behalf of an organization?",
    "creator-org-prompt": "Name of the organization (leave empty to skip)",
    "name-prompt": "Package name",
    "version-prompt": "Package version (leave empty if there is none)",
    "doc-name-prompt": "Document name",
    "select-supplier-prompt": "Who distributes (supplies) this package?",
    "input-supplier-prompt": "Enter the name of the package supplier",
    "select-originator-prompt": "Who originally created this package?",
    "input-originator-prompt": "Enter the name of the package originator",
    "ask-person-or-org": "Is {name} a person or an organization?",
    "ask-different-originator-prompt": "Was the package originally created by someone other than its supplier?",
    "download-select-prompt": "Where can the package be downloaded from?",
    "download-rev-select-prompt": "Which revision should the download location point to?",
    "download-rev-input-prompt": "Enter a revision (leave empty for none)",
    "other-download-prompt": "Download URL",
    "license-input-prompt": "Declared license, as an SPDX license expression (leave empty to fill in later)",
    "ask-verif-code": "Generate a package verification code?",
    "verif-code-unsupported": "Sorry, this feature is not yet implemented.",
    "creating-file": "Creating {path}",
    "file-created": "Wrote {path}",
}


class Messages:
    """String catalog with per-key overrides.

    Args:
        overrides: Replacement strings keyed like DEFAULT_MESSAGES
    """

    def __init__(self, overrides: Mapping[str, str] | None = None):
        self._messages = {**DEFAULT_MESSAGES, **(overrides or {})}

    def get(self, key: str, **kwargs) -> str:
        """Look up ``key`` and fill in its placeholders.

        Raises:
            KeyError: If ``key`` is not in the catalog
        """
        template = self._messages[key]
        return template.format(**kwargs) if kwargs else template
