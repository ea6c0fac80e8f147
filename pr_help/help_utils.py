from __future__ import annotations

from dataclasses import dataclass
import json
from pathlib import Path
from textwrap import dedent
from typing import Any, Iterable, Mapping, Optional, Sequence, Union

from structlog import get_logger

from pr_help.config import (
    DEFAULT_COMMAND_DESCRIPTION,
    FIX_COMMAND_PREFIX,
    get_package_json_path,
    log_type,
)
from pr_help.help_content import (
    COMMAND_DESCRIPTIONS,
    TROUBLESHOOTING,
    USAGE_EXAMPLES,
    TroubleshootingTip,
    UsageExample,
)

log = get_logger()


class ManifestError(Exception):
    """The manifest could not be read, or it doesn't hold a `scripts` mapping"""


@dataclass(frozen=True)
class FixCommand:
    """A `fix:*` script from the manifest, paired with the description shown to PR authors"""

    name: str
    descr: str

    @property
    def listed_descr(self) -> str:
        """Bulletpoint: slash command followed by its description"""
        return f"- `/{self.name}` - {self.descr}"


#################
# Load Manifest #
#################


def load_manifest(path: Union[str, Path]) -> dict[str, Any]:
    """Read a `package.json`-style manifest and return its `scripts` mapping.

    Every way of failing (missing file, broken JSON, wrong shape) is raised as `ManifestError`
    so that callers have exactly one thing to catch.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            manifest = json.load(f)
    except OSError as e:
        raise ManifestError(f"Could not read {path}: {e.strerror or e}") from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ManifestError(f"Could not parse {path}: {e}") from e
    if not isinstance(manifest, dict):
        raise ManifestError(
            f"{path} must contain a JSON object, not {type(manifest).__name__}"
        )
    if "scripts" not in manifest:
        raise ManifestError(f"{path} has no `scripts` entry")
    scripts = manifest["scripts"]
    if not isinstance(scripts, dict):
        raise ManifestError(
            f"`scripts` in {path} must be an object, not {type(scripts).__name__}"
        )
    return scripts


def select_fix_commands(
    scripts: Mapping[str, Any], prefix: str = FIX_COMMAND_PREFIX
) -> list[str]:
    return sorted(name for name in scripts if name.startswith(prefix))


def describe_fix_commands(
    names: Iterable[str], descriptions: Mapping[str, str] = COMMAND_DESCRIPTIONS
) -> list[FixCommand]:
    return [
        FixCommand(name, descriptions.get(name, DEFAULT_COMMAND_DESCRIPTION))
        for name in names
    ]


####################
# Build PR Help MD #
####################


def build_pr_help_md(
    scripts: Mapping[str, Any],
    descriptions: Mapping[str, str] = COMMAND_DESCRIPTIONS,
    usage_examples: Sequence[UsageExample] = USAGE_EXAMPLES,
    troubleshooting: Sequence[TroubleshootingTip] = TROUBLESHOOTING,
) -> str:
    """Render the help comment for the PR Actions bot.

    Only the names of `scripts` matter. Usage examples and troubleshooting tips
    are rendered in the order they are given.
    """
    fix_commands = describe_fix_commands(select_fix_commands(scripts), descriptions)
    return render_pr_help_md(fix_commands, usage_examples, troubleshooting)


def render_pr_help_md(
    fix_commands: Sequence[FixCommand],
    usage_examples: Sequence[UsageExample] = USAGE_EXAMPLES,
    troubleshooting: Sequence[TroubleshootingTip] = TROUBLESHOOTING,
) -> str:
    segments = [HELP_MD_HEADER]
    segments.extend(f"{cmd.listed_descr}\n" for cmd in fix_commands)
    segments.append(USAGE_EXAMPLES_HEADER)
    segments.extend(f"{example.get_help()}\n" for example in usage_examples)
    segments.append(HOW_IT_WORKS_MD)
    segments.append(TROUBLESHOOTING_HEADER)
    segments.extend(f"{tip.get_help()}\n" for tip in troubleshooting)
    segments.append(HELP_MD_FOOTER)
    return "".join(segments)


def generate_help_text(package_json_path: Optional[Union[str, Path]] = None) -> str:
    """Load the manifest (`PR_HELP_PACKAGE_JSON` by default) and render help for its fix commands"""
    path = Path(package_json_path or get_package_json_path())
    fix_commands = describe_fix_commands(select_fix_commands(load_manifest(path)))
    log.info(
        log_type,
        msg="Loaded manifest",
        path=str(path),
        fix_commands=len(fix_commands),
    )
    return render_pr_help_md(fix_commands)


HELP_MD_HEADER = dedent(
    """\
    ## 🤖 PR Actions Bot - Help

    This bot can automatically fix common issues in your PR by responding to slash commands.

    ### 📋 Available Commands

    Comment on this PR with any of these commands:

    """
)

USAGE_EXAMPLES_HEADER = "\n### 💡 Usage Examples\n\n"

HOW_IT_WORKS_MD = dedent(
    """\
    ### ⚙️ How It Works

    1. Comment with a `/fix:*` command on this PR
    2. The bot runs the command in a secure environment
    3. If changes are needed, they're automatically committed to your branch
    4. You'll get a success/failure notification

    """
)

TROUBLESHOOTING_HEADER = "### 🔧 Troubleshooting\n\n"

HELP_MD_FOOTER = dedent(
    """\
    ### 📚 Documentation

    - [Contributing Guide](https://opentelemetry.io/docs/contributing/)
    - [Project README](../CONTRIBUTING.md)
    - [PR Actions Workflow](.github/workflows/pr-actions.yml)

    ---
    _💬 Need more help? Ask in the PR comments or reach out to maintainers._
    """
)
