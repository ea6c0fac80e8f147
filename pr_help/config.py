import os
import sys
from typing import TypeVar, Union, overload

import dotenv
import structlog

log_type = "build_pr_help.py"

dotenv.load_dotenv()
NOT_PROVIDED = "__NOT_PROVIDED__"

# fmt:off

T = TypeVar("T")
@overload
def getenv(env_var: str, default: T) -> Union[str, T]:...
@overload
def getenv(env_var: str) -> str:...

def getenv(env_var: str, default = NOT_PROVIDED) -> str:
    """
    Get an environment variable with a default,
    raise an exception if the environment variable isn't set and no default is provided
    """
    value = os.getenv(env_var, default)
    if value == NOT_PROVIDED:
        raise Exception(
            f"Environment Variable '{env_var}' not set and no default provided"
        )
    return value
# fmt:on


# scripts with this prefix are exposed as PR slash commands
FIX_COMMAND_PREFIX = "fix:"
DEFAULT_COMMAND_DESCRIPTION = "Run fix command"

# .ENV VARIABLE SETTING


def get_package_json_path() -> str:
    """Manifest read when no path is passed explicitly, relative to the working directory"""
    return getenv("PR_HELP_PACKAGE_JSON", default="package.json")


def _stderr_logger_factory(*args) -> structlog.PrintLogger:
    # sys.stderr is looked up per logger so redirected streams are honoured
    return structlog.PrintLogger(file=sys.stderr)


def configure_cli_logging() -> None:
    """Send log events to stderr, leaving stdout for the generated markdown"""
    structlog.configure(logger_factory=_stderr_logger_factory)
