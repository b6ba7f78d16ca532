"""
Convinci

Guided terminal helper for writing Conventional Commits messages.
"""

__version__ = "0.3.0"

# Centralized commit types - single source of truth
# Used by: tui/app.py (type list), tui/render.py, cli/args.py
COMMIT_TYPES = {
    'feat': 'A new feature or capability',
    'fix': 'A bug fix',
    'docs': 'Documentation only changes',
    'style': 'Formatting, whitespace, no code change',
    'refactor': 'Code restructuring without behavior change',
    'perf': 'Performance improvement',
    'test': 'Adding or updating tests',
    'build': 'Build system or external dependency changes',
    'ci': 'CI/CD configuration changes',
    'chore': 'Maintenance tasks, dependencies, tooling',
}

# Ordered type names, index-selectable from the Type field
COMMIT_TYPE_NAMES = tuple(COMMIT_TYPES.keys())

# Index 0 means "no scope"
COMMIT_SCOPES = (
    '<None>', 'ui', 'api', 'database', 'auth', 'config', 'logging', 'network', 'storage',
)

COMMIT_ICONS = {
    'feat': '✨',
    'fix': '🐛',
    'docs': '📚',
    'style': '🎨',
    'refactor': '♻️',
    'perf': '⚡',
    'test': '✅',
    'build': '📦',
    'ci': '👷',
    'chore': '🔧',
}
