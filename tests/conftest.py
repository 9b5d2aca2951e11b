"""
Pytest configuration and shared fixtures.

Marks:
    integration -- requires git and cucumber on PATH

Tests decorated with this mark are skipped automatically when the tools
are absent, so the unit test suite always runs cleanly.

Local setup:
    - Install git: https://git-scm.com/
    - Install cucumber: gem install cucumber
"""

import shutil

import pytest

from featurewiki.config import Config


# ---------------------------------------------------------------------------
# Dependency detection
# ---------------------------------------------------------------------------

_HAVE_GIT = shutil.which("git") is not None
_HAVE_CUCUMBER = shutil.which("cucumber") is not None


# ---------------------------------------------------------------------------
# Auto-skip via markers
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(config, items):
    for item in items:
        if item.get_closest_marker("integration") and not (
            _HAVE_GIT and _HAVE_CUCUMBER
        ):
            missing = [
                name
                for name, present in [("git", _HAVE_GIT), ("cucumber", _HAVE_CUCUMBER)]
                if not present
            ]
            item.add_marker(
                pytest.mark.skip(
                    reason=f"integration deps missing: {', '.join(missing)}"
                )
            )


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def config(tmp_path):
    """A config that passes every check: real features dir, URL set."""
    features = tmp_path / "features"
    features.mkdir()
    return Config(
        repository_url="git@github.com:hybridgroup/gitnesse.wiki.git",
        features_dir=str(features),
    )
