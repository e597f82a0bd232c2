"""Interactive interview that assembles an SPDX document."""

from .context import WizardContext
from .engine import Wizard
from .messages import Messages
from .prompts import Prompter, PromptAborted
from .steps import AuthorRole, AuthorRoleStep, SetupStep, initial_step

__all__ = [
    "AuthorRole",
    "AuthorRoleStep",
    "Messages",
    "PromptAborted",
    "Prompter",
    "SetupStep",
    "Wizard",
    "WizardContext",
    "initial_step",
]
