"""relbranch: keep release/v<major> branches in sync with version tags."""

__version__ = "0.3.0"
