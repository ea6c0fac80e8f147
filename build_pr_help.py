import sys

from structlog import get_logger

from pr_help.config import configure_cli_logging, log_type
from pr_help.help_utils import ManifestError, generate_help_text

log = get_logger()


def main() -> None:
    configure_cli_logging()
    try:
        help_text = generate_help_text()
    except ManifestError as e:
        log.error(log_type, msg="Failed to generate help text", error=str(e))
        print(f"Error generating help text: {e}", file=sys.stderr)
        sys.exit(1)
    print(help_text)


if __name__ == "__main__":
    main()
