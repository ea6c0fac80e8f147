from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class UsageExample:
    """A slash command worth showing off, with what it does and when to reach for it"""

    command: str
    description: str
    when: str

    def get_help(self) -> str:
        return f"**`{self.command}`**\n- {self.description}\n- _{self.when}_\n"


@dataclass(frozen=True)
class TroubleshootingTip:
    issue: str
    solution: str

    def get_help(self) -> str:
        return f"**{self.issue}**\n{self.solution}\n"


COMMAND_DESCRIPTIONS = MappingProxyType(
    {
        "fix:dict": "Normalize cspell front matter in markdown files",
        "fix:expired": "Delete expired content files",
        "fix:filenames": "Rename files with underscores to kebab-case",
        "fix:format": "Format code and trim trailing spaces",
        "fix:htmltest-config": "Update htmltest configuration",
        "fix:i18n:status": "Update internationalization status",
        "fix:i18n:new": "Handle new internationalization files",
        "fix:i18n": "Run all i18n fixes (new + status)",
        "fix:markdown": "Fix markdown linting issues and trailing spaces",
        "fix:refcache:refresh": "Refresh reference cache (prune entries)",
        "fix:refcache": "Prune reference cache and check links",
        "fix:submodule": "Pin submodules and update semconv mounts",
        "fix:text": "Fix textlint issues",
        "fix:all": "Run all fix commands (except i18n)",
        "fix": "Run all fix commands",
    }
)

USAGE_EXAMPLES = (
    UsageExample(
        command="/fix:format",
        description="Format all code files and fix spacing issues",
        when="Use when CI shows formatting errors",
    ),
    UsageExample(
        command="/fix:markdown",
        description="Fix markdown linting issues",
        when="Use when markdownlint checks fail",
    ),
    UsageExample(
        command="/fix:refcache",
        description="Update the reference cache for link checking",
        when="Use when link checker shows stale cached results",
    ),
    UsageExample(
        command="/fix:submodule",
        description="Update git submodules to latest versions",
        when="Use when submodule updates are needed",
    ),
)

TROUBLESHOOTING = (
    TroubleshootingTip(
        issue="Command had no effect",
        solution="The command may have run successfully but found nothing to fix. Check the workflow run logs for details.",
    ),
    TroubleshootingTip(
        issue="Command failed with errors",
        solution="Check the workflow run logs for specific error messages. You may need to fix issues manually.",
    ),
    TroubleshootingTip(
        issue="Patch too large",
        solution="The changes exceed 1MB limit. Break into smaller fixes or apply changes manually.",
    ),
    TroubleshootingTip(
        issue="Patch failed to apply",
        solution="Conflicts with recent commits. Pull latest changes and run the fix locally.",
    ),
)
