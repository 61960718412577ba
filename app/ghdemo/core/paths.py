"""Path management for gh-demo configuration.

Demo content lives in a directory inside the target project, by default
``.github/demos`` relative to the project root:

- issues.json, discussions.json, prs.json: content to create
- labels.json: explicit label definitions (optional)
- preserve.json: cleanup preservation rules (optional)
- project.json: project board settings (optional)
"""

from pathlib import Path

DEFAULT_CONFIG_PATH = ".github/demos"

ISSUES_FILE = "issues.json"
DISCUSSIONS_FILE = "discussions.json"
PULL_REQUESTS_FILE = "prs.json"
LABELS_FILE = "labels.json"
PRESERVE_FILE = "preserve.json"
PROJECT_FILE = "project.json"


def find_project_root(start: Path | None = None) -> Path:
    """Find the nearest ancestor directory containing ``.git``.

    Args:
        start: Directory to start from. If None, uses the current directory.

    Returns:
        The project root, or ``start`` itself when no ``.git`` is found.
    """
    current = (start or Path.cwd()).resolve()
    for candidate in (current, *current.parents):
        if (candidate / ".git").exists():
            return candidate
    return current


def resolve_config_root(config_path: str | Path | None, start: Path | None = None) -> Path:
    """Resolve the configuration directory.

    Absolute paths are used as is; relative paths are taken relative to the
    project root.

    Args:
        config_path: User-supplied path, or None for the default.
        start: Directory to start the project root search from.

    Returns:
        Absolute path to the configuration directory.
    """
    path = Path(config_path or DEFAULT_CONFIG_PATH).expanduser()
    if path.is_absolute():
        return path
    return find_project_root(start) / path
