"""Environment configuration interface for spdx-guide.

This module provides a clean interface for accessing environment variables,
centralizing all environment variable access in one place. Command-line flags
take precedence over these values.
"""

import os

from dotenv import load_dotenv

from .constants import DEFAULT_OUTPUT_FILENAME, LICENSE_LIST_VERSION

# Load environment variables from .env file if it exists
load_dotenv()


class Environment:
    """Interface for accessing environment configuration."""

    @staticmethod
    def output_filename() -> str:
        """Get the name of the SPDX file to write.

        Returns:
            File name relative to the target directory, defaults to 'LICENSE.spdx'
        """
        return os.getenv("SPDX_GUIDE_FILE", DEFAULT_OUTPUT_FILENAME)

    @staticmethod
    def log_level() -> str:
        """Get the default logging level.

        Returns:
            Upper-cased level name, defaults to 'INFO'
        """
        return os.getenv("LOG_LEVEL", "INFO").upper()

    @staticmethod
    def license_list_version() -> str:
        """Get the SPDX license list version recorded in new documents.

        Returns:
            License list version, defaults to the bundled constant
        """
        return os.getenv("SPDX_LICENSE_LIST_VERSION", LICENSE_LIST_VERSION)

    @staticmethod
    def git_executable() -> str:
        """Get the git binary used to read repositories.

        Returns:
            Executable name or path, defaults to 'git'
        """
        return os.getenv("GIT_EXECUTABLE", "git")


# Singleton instance for convenient access
env = Environment()
