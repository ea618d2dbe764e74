"""classwatch - change detection for compiled build outputs.

Polls class output directories and reports which files are new,
modified or removed since the previous pass.
"""

__version__ = "0.1.0"
