"""Shared state handed to every wizard step."""

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console

from document.model import SpdxDocument
from vcs.snapshot import VcsSnapshot

from .messages import Messages
from .prompts import Prompter, Validator
from .validators import normalize_license_expression, validate_license_expression


@dataclass
class WizardContext:
    """State threaded through the interview.

    The VCS snapshot is read-only; the document and the creator names grow as
    steps run.

    Attributes:
        vcs: Repository snapshot, or None outside a repository
        document: The document being assembled
        creators: Names entered as document creators, offered again as
            supplier and originator candidates
        prompter: Asks the user questions
        console: Output for notices that are not questions
        messages: String catalog
        directory: Directory the guide runs in
        filename: Output file name, relative to ``directory``
        license_list_version: Recorded as LicenseListVersion
        license_validator: Checks declared license expressions
        license_normalizer: Rewrites an accepted license expression before it
            is recorded
    """

    vcs: VcsSnapshot | None
    prompter: Prompter
    console: Console
    messages: Messages
    directory: Path
    filename: str
    license_list_version: str
    license_validator: Validator = validate_license_expression
    license_normalizer: Callable[[str], str] = normalize_license_expression
    document: SpdxDocument = field(default_factory=SpdxDocument)
    creators: list[str] = field(default_factory=list)

    @property
    def output_path(self) -> Path:
        return self.directory / self.filename
