"""The interview, one question per step.

Each step asks its question, records the answer in the document and returns
the step to run next, or None once the document has been written. Supplier and
originator share one step type, parameterised by an AuthorRole.
"""

import getpass
import uuid
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

from rich.markup import escape

from common.constants import (
    DATA_LICENSE,
    DOCUMENT_COMMENT,
    DOCUMENT_COMMENT_NOTE,
    DOCUMENT_SPDX_ID,
    LICENSE_PLACEHOLDER_COMMENTS,
    NAMESPACE_PREFIX,
    NO_ASSERTION,
    NONE,
    PACKAGE_SPDX_ID_PREFIX,
    SPDX_VERSION,
    TOOL_NAME,
    TOOL_VERSION,
)
from common.logger import get_logger
from vcs.authors import User
from vcs.snapshot import VcsSnapshot

from .context import WizardContext

logger = get_logger(__name__)


class SetupStep(ABC):
    """A single question in the interview."""

    @abstractmethod
    def run(self, ctx: WizardContext) -> "SetupStep | None":
        """Ask, record the answer, and return the next step (None when done).

        Raises:
            OSError: If talking to the user or writing the file fails
        """
        pass

    def __repr__(self) -> str:
        return type(self).__name__


def initial_step() -> SetupStep:
    return FixedDocumentPropertiesStep()


def _unique(values: Sequence[str]) -> list[str]:
    return list(dict.fromkeys(value for value in values if value))


def system_user_names() -> list[str]:
    """Return the OS login name and, where the platform records one, the real name."""
    names = []
    try:
        names.append(getpass.getuser())
    except (OSError, KeyError, ImportError) as e:
        logger.debug(f"Could not determine login name: {escape(str(e))}")
        return []

    try:
        import pwd
    except ImportError:
        return _unique(names)

    try:
        gecos = pwd.getpwnam(names[0]).pw_gecos
    except KeyError:
        return _unique(names)

    # GECOS is "Full Name,room,phone,..."
    names.append(gecos.split(",")[0].strip())
    return _unique(names)


def select_or_input(
    ctx: WizardContext,
    items: Sequence[str],
    select_prompt: str,
    input_prompt: str,
) -> str | None:
    """Offer ``items`` plus "Other"; "Other" asks for free text.

    With no items the free-text prompt is shown straight away.

    Returns:
        The chosen or entered value, or None if the selection was skipped or the
        free text left empty
    """
    if items:
        choice = ctx.prompter.select(select_prompt, [*items, ctx.messages.get("other")])
        if choice is None:
            return None
        if choice < len(items):
            return items[choice]

    value = ctx.prompter.text(input_prompt, allow_empty=True)
    return value or None


class FixedDocumentPropertiesStep(SetupStep):
    def run(self, ctx: WizardContext) -> SetupStep | None:
        section = ctx.document.document_section
        section.add_entry("SPDXVersion", SPDX_VERSION)
        section.add_entry("DataLicense", DATA_LICENSE)
        section.add_entry("SPDXID", DOCUMENT_SPDX_ID)
        section.add_entry("LicenseListVersion", ctx.license_list_version)
        section.add_comment(DOCUMENT_COMMENT_NOTE)
        section.add_entry("DocumentComment", DOCUMENT_COMMENT)
        section.add_entry("Creator", f"Tool: {TOOL_NAME}-{TOOL_VERSION}")
        return CreatorPersonStep()


class CreatorPersonStep(SetupStep):
    """Who is writing the document: the VCS user, the OS user, or someone typed in."""

    def run(self, ctx: WizardContext) -> SetupStep | None:
        items = []
        if ctx.vcs is not None and ctx.vcs.user is not None:
            items.append(str(ctx.vcs.user))
        items.extend(system_user_names())

        person = select_or_input(
            ctx,
            _unique(items),
            ctx.messages.get("creator-person-prompt"),
            ctx.messages.get("creator-custom-person-prompt"),
        )
        if person is not None:
            ctx.document.document_section.add_entry("Creator", f"Person: {person}")
            ctx.creators.append(person)
        return CreatorHasOrgStep()


class CreatorHasOrgStep(SetupStep):
    def run(self, ctx: WizardContext) -> SetupStep | None:
        if ctx.prompter.confirm(ctx.messages.get("creator-has-org-prompt"), default=False):
            return CreatorOrgStep()
        return PackageNameStep()


class CreatorOrgStep(SetupStep):
    def run(self, ctx: WizardContext) -> SetupStep | None:
        org = ctx.prompter.text(ctx.messages.get("creator-org-prompt"), allow_empty=True)
        if org:
            ctx.document.document_section.add_entry("Creator", f"Organization: {org}")
            ctx.creators.append(org)
        return PackageNameStep()


class PackageNameStep(SetupStep):
    def run(self, ctx: WizardContext) -> SetupStep | None:
        name = ctx.prompter.text(ctx.messages.get("name-prompt"), default=ctx.directory.name)
        ctx.document.package_section.add_entry("SPDXID", f"{PACKAGE_SPDX_ID_PREFIX}{name}")
        ctx.document.package_section.add_entry("PackageName", name)
        return PackageVersionStep()


class PackageVersionStep(SetupStep):
    def run(self, ctx: WizardContext) -> SetupStep | None:
        latest = ctx.vcs.latest_version if ctx.vcs is not None else None
        version = ctx.prompter.text(
            ctx.messages.get("version-prompt"), default=latest, allow_empty=True
        )
        if version:
            ctx.document.package_section.add_entry("PackageVersion", version)
        return DocumentNameStep()


class DocumentNameStep(SetupStep):
    """Defaults to "<PackageName>-<PackageVersion>", or the bare name without a version."""

    def run(self, ctx: WizardContext) -> SetupStep | None:
        package = ctx.document.package_section
        default = package.require("PackageName")
        versions = package.find("PackageVersion")
        if versions:
            default = f"{default}-{versions[0]}"

        name = ctx.prompter.text(ctx.messages.get("doc-name-prompt"), default=default)
        ctx.document.document_section.add_entry("DocumentName", name)
        return DocumentNamespaceStep()


class DocumentNamespaceStep(SetupStep):
    """Not a question: the namespace is the document name plus a fresh UUID."""

    def run(self, ctx: WizardContext) -> SetupStep | None:
        doc_name = ctx.document.document_section.require("DocumentName")
        namespace = f"{NAMESPACE_PREFIX}{doc_name}-{uuid.uuid4()}"
        ctx.document.document_section.add_entry("DocumentNamespace", namespace)
        return AuthorRoleStep(SUPPLIER)


@dataclass(frozen=True)
class AuthorRole:
    """What differs between asking for the supplier and for the originator.

    Attributes:
        name: Role name, used to look up the role's prompts
        tag: Package tag the answer is written to
        ranking: Picks the authors to suggest from the VCS snapshot
        skip_step: Next step when the question is skipped
        finish_step: Next step once an answer has been written
    """

    name: str
    tag: str
    ranking: Callable[[VcsSnapshot], Sequence[User]]
    skip_step: Callable[[], SetupStep]
    finish_step: Callable[[], SetupStep]


class AuthorRoleStep(SetupStep):
    """Pick a supplier or originator from VCS authors and the document creators."""

    def __init__(self, role: AuthorRole):
        self.role = role

    def run(self, ctx: WizardContext) -> SetupStep | None:
        items = []
        if ctx.vcs is not None:
            items.extend(str(user) for user in self.role.ranking(ctx.vcs))
        items.extend(ctx.creators)
        no_assertion = ctx.messages.get("no-assertion")
        items = _unique([*items, no_assertion])

        name = select_or_input(
            ctx,
            items,
            ctx.messages.get(f"select-{self.role.name}-prompt"),
            ctx.messages.get(f"input-{self.role.name}-prompt"),
        )
        if name is None:
            return self.role.skip_step()
        if name == no_assertion:
            return self.finish(ctx, NO_ASSERTION)
        return PersonOrOrgStep(name, self)

    def finish(self, ctx: WizardContext, value: str) -> SetupStep:
        ctx.document.package_section.add_entry(self.role.tag, value)
        return self.role.finish_step()

    def __repr__(self) -> str:
        return f"AuthorRoleStep({self.role.name})"


class PersonOrOrgStep(SetupStep):
    """Ask whether the chosen name is a person or an organization.

    "Go back" returns the role step itself, so its question is asked again.
    """

    def __init__(self, name: str, parent: AuthorRoleStep):
        self.name = name
        self.parent = parent

    def run(self, ctx: WizardContext) -> SetupStep | None:
        kinds = ["Person", "Organization"]
        choice = ctx.prompter.select(
            ctx.messages.get("ask-person-or-org", name=self.name),
            [ctx.messages.get("person"), ctx.messages.get("org"), ctx.messages.get("go-back")],
            allow_skip=False,
        )
        if choice is None or choice >= len(kinds):
            return self.parent
        return self.parent.finish(ctx, f"{kinds[choice]}: {self.name}")


class AskDifferentOriginatorStep(SetupStep):
    def run(self, ctx: WizardContext) -> SetupStep | None:
        if ctx.prompter.confirm(ctx.messages.get("ask-different-originator-prompt"), default=False):
            return AuthorRoleStep(ORIGINATOR)
        return DownloadLocationStep()


class DownloadLocationStep(SetupStep):
    """Choose a remote, NONE, NOASSERTION, or another URL."""

    def run(self, ctx: WizardContext) -> SetupStep | None:
        remotes = list(ctx.vcs.remote_urls) if ctx.vcs is not None else []
        fixed = [(ctx.messages.get("nowhere"), NONE), (ctx.messages.get("no-assertion"), NO_ASSERTION)]
        items = [*remotes, *(label for label, _ in fixed), ctx.messages.get("other")]

        choice = ctx.prompter.select(
            ctx.messages.get("download-select-prompt"), items, allow_skip=False
        )
        if choice is None or choice >= len(remotes) + len(fixed):
            return OtherDownloadLocationStep()
        if choice < len(remotes):
            return RevisionStep(remotes[choice])

        ctx.document.package_section.add_entry("DownloadLocation", fixed[choice - len(remotes)][1])
        return DeclaredLicenseStep()


class RevisionStep(SetupStep):
    """Pin a remote download location to a revision: "<vcs>+<url>[@<revision>]"."""

    def __init__(self, base_url: str):
        self.base_url = base_url

    def run(self, ctx: WizardContext) -> SetupStep | None:
        if ctx.vcs is None:
            return DeclaredLicenseStep()

        revision = select_or_input(
            ctx,
            list(ctx.vcs.head_refs),
            ctx.messages.get("download-rev-select-prompt"),
            ctx.messages.get("download-rev-input-prompt"),
        )
        location = f"{ctx.vcs.vcs_name}+{self.base_url}"
        if revision:
            location = f"{location}@{revision}"
        ctx.document.package_section.add_entry("DownloadLocation", location)
        return DeclaredLicenseStep()


class OtherDownloadLocationStep(SetupStep):
    def run(self, ctx: WizardContext) -> SetupStep | None:
        url = ctx.prompter.text(ctx.messages.get("other-download-prompt"))
        ctx.document.package_section.add_entry("DownloadLocation", url)
        return DeclaredLicenseStep()


class DeclaredLicenseStep(SetupStep):
    """Ask for a license expression; leaving it empty writes instructions instead."""

    def run(self, ctx: WizardContext) -> SetupStep | None:
        license_expression = ctx.prompter.text(
            ctx.messages.get("license-input-prompt"),
            allow_empty=True,
            validate=ctx.license_validator,
        )
        if license_expression:
            ctx.document.package_section.add_entry(
                "DeclaredLicense", ctx.license_normalizer(license_expression)
            )
        else:
            for comment in LICENSE_PLACEHOLDER_COMMENTS:
                ctx.document.package_section.add_comment(comment)
        return AskVerificationCodeStep()


class AskVerificationCodeStep(SetupStep):
    def run(self, ctx: WizardContext) -> SetupStep | None:
        if ctx.prompter.confirm(ctx.messages.get("ask-verif-code"), default=False):
            return VerificationCodeStep()
        return FileCreateStep()


class VerificationCodeStep(SetupStep):
    # TODO: compute PackageVerificationCode from the SHA1 of every tracked file
    def run(self, ctx: WizardContext) -> SetupStep | None:
        ctx.console.print(f"[guide.notice]{ctx.messages.get('verif-code-unsupported')}")
        return FileCreateStep()


class FileCreateStep(SetupStep):
    def run(self, ctx: WizardContext) -> SetupStep | None:
        path: Path = ctx.output_path
        ctx.console.print(ctx.messages.get("creating-file", path=path), markup=False)
        ctx.document.write(path)
        logger.debug(f"Wrote SPDX document to {escape(str(path))}")
        return None


SUPPLIER = AuthorRole(
    name="supplier",
    tag="PackageSupplier",
    ranking=lambda vcs: vcs.active_authors,
    skip_step=lambda: AuthorRoleStep(ORIGINATOR),
    finish_step=AskDifferentOriginatorStep,
)

ORIGINATOR = AuthorRole(
    name="originator",
    tag="PackageOriginator",
    ranking=lambda vcs: vcs.oldest_authors,
    skip_step=DownloadLocationStep,
    finish_step=DownloadLocationStep,
)
