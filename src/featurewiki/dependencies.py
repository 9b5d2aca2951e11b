"""
Dependency and configuration checking for featurewiki commands.

Every check records a message on failure instead of raising, so a single
run reports everything that needs fixing at once.
"""

import shutil
import subprocess
import sys
from pathlib import Path
from typing import Callable, NoReturn

from featurewiki.config import Config

GIT_MISSING = "Git was not found. Install from: https://git-scm.com/"
CUCUMBER_MISSING = "Cucumber was not found. Install from: https://cucumber.io/"
REPOSITORY_URL_MISSING = "You must specify a repository_url to run featurewiki"
IDENTIFIER_MISSING = (
    "You must specify an identifier when annotate_results is enabled"
)


def command_available(name: str) -> bool:
    """Return True if `name --version` runs and exits cleanly."""
    if not shutil.which(name):
        return False
    try:
        result = subprocess.run(
            [name, "--version"],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError:
        return False
    return result.returncode == 0


class DependencyChecker:
    """
    Verify the external tools and config values featurewiki needs.

    Args:
        config: loaded featurewiki config
        probe: callable taking a command name, returning whether it is usable
    """

    def __init__(
        self, config: Config, probe: Callable[[str], bool] = command_available
    ):
        self.config = config
        self.probe = probe
        self._errors: list[str] = []

    @property
    def errors(self) -> list[str]:
        """Errors recorded so far, in the order the checks failed."""
        return list(self._errors)

    def check(self, abort: bool = True) -> list[str]:
        """
        Run every check, then report.

        All checks run even after a failure. When any failed and `abort` is
        set, the errors are printed and the process exits.
        """
        self.check_git()
        self.check_cucumber()
        self.check_repository_url()
        self.check_identifier()
        self.check_features_dir_exists()

        if self._errors and abort:
            self.display_errors()
        return self.errors

    def check_git(self) -> bool:
        if self.probe("git"):
            return True
        self._errors.append(GIT_MISSING)
        return False

    def check_cucumber(self) -> bool:
        if self.probe("cucumber"):
            return True
        self._errors.append(CUCUMBER_MISSING)
        return False

    def check_repository_url(self) -> bool:
        if self.config.repository_url:
            return True
        self._errors.append(REPOSITORY_URL_MISSING)
        return False

    def check_identifier(self) -> bool:
        # Only annotated runs tag results with the identifier.
        if not self.config.annotate_results:
            return True
        if self.config.identifier:
            return True
        self._errors.append(IDENTIFIER_MISSING)
        return False

    def check_features_dir_exists(self) -> bool:
        features_dir = self.config.features_dir
        if Path(features_dir).is_dir():
            return True
        self._errors.append(f"The features directory '{features_dir}' does not exist")
        return False

    def display_errors(self) -> NoReturn:
        """Print every recorded error and exit with status 1."""
        print("Configuration errors were found!")
        for error in self._errors:
            print(f"  - {error}")
        sys.exit(1)
