#!/usr/bin/env python3
"""
Install dependencies required to run the integration tests.

Usage:
    python scripts/install_test_deps.py

What this installs (if missing):
    - cucumber            via: gem install cucumber

Prerequisites this script cannot install for you:
    - git                 https://git-scm.com/
    - Ruby / gem          https://www.ruby-lang.org/

Running the tests:
    pytest -m "not integration"      # always runs, no deps needed
    pytest -m integration            # needs git and cucumber
    pytest                           # runs everything, skips what it can't
"""

import shutil
import subprocess


def check(tool: str) -> bool:
    return shutil.which(tool) is not None


def run(cmd: list[str], description: str) -> bool:
    print(f"  Running: {' '.join(cmd)}")
    result = subprocess.run(cmd)
    if result.returncode != 0:
        print(f"  FAILED: {description}")
        return False
    print(f"  OK: {description}")
    return True


def main() -> None:
    print("=== featurewiki: install test dependencies ===\n")

    missing_prereqs = []
    if not check("git"):
        missing_prereqs.append(("git", "https://git-scm.com/"))
    if not check("gem"):
        missing_prereqs.append(("gem", "https://www.ruby-lang.org/  (comes with Ruby)"))

    if missing_prereqs:
        print("The following prerequisites must be installed manually:\n")
        for name, url in missing_prereqs:
            print(f"  {name:6s}  {url}")
        print()

    if check("cucumber"):
        print("cucumber: already installed")
    elif not check("gem"):
        print("cucumber: skipped (gem not available)")
    else:
        print("cucumber: installing...")
        run(["gem", "install", "cucumber"], "install cucumber")

    print("\n--- Status ---")
    all_good = True
    for tool in ("git", "cucumber"):
        present = check(tool)
        print(f"  {tool:10s} {'OK' if present else 'MISSING'}")
        all_good = all_good and present

    print()
    if all_good:
        print("All dependencies present. Run: pytest")
    else:
        print("Some deps still missing. Integration tests will be skipped.")


if __name__ == "__main__":
    main()
