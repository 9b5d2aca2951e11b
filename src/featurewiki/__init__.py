"""featurewiki -- keep Cucumber features in sync with a git wiki."""

__version__ = "0.1.0"
