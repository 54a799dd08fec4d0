"""hostsync — keep a marked block of hosts entries in sync with a remote file.

The managed block is demarcated by two marker lines:
    # <-- COOL-LAB HOSTS BEGIN -->
    10.0.0.5 gitlab.lab
    ...
    # <-- COOL-LAB HOSTS END -->

Anything outside these markers is preserved untouched.
"""

# Marker constants used by block scanning and sync
START_MARKER = "# <-- COOL-LAB HOSTS BEGIN -->"
END_MARKER = "# <-- COOL-LAB HOSTS END -->"

DEFAULT_URL = "https://cdn.jsdelivr.net/gh/COOLLab-CQU/DevOps-Docs/hosts"

__version__ = "0.1.0"
