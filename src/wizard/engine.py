"""Run loop that drives the interview from step to step."""

from rich.markup import escape

from common.logger import get_logger

from .context import WizardContext
from .steps import SetupStep, initial_step

logger = get_logger(__name__)


class Wizard:
    """Runs steps until one returns None.

    An OSError raised by a step (an aborted prompt, a failed write) is reported
    and ends the run; the step that failed is kept in ``failed_step``. Nothing
    is retried and the document is not written.
    """

    def __init__(self, context: WizardContext, first_step: SetupStep | None = None):
        """Initialize the wizard.

        Args:
            context: Shared state for all steps
            first_step: Step to start from, defaults to the fixed document properties
        """
        self.context = context
        self.first_step = first_step or initial_step()
        self.failed_step: SetupStep | None = None

    def run(self) -> bool:
        """Run the interview.

        Returns:
            True if the last step completed, False if an I/O error ended the run
        """
        step: SetupStep | None = self.first_step
        while step is not None:
            logger.debug(f"Running {step!r}")
            try:
                step = step.run(self.context)
            except OSError as e:
                self.failed_step = step
                logger.error(f"{step!r} failed: {escape(str(e))}")
                label = self.context.messages.get("error")
                self.context.console.print(f"{label}: [guide.error]{escape(str(e))}")
                return False
        return True
