from pr_help.help_utils import (
    FixCommand,
    ManifestError,
    build_pr_help_md,
    describe_fix_commands,
    generate_help_text,
    load_manifest,
    render_pr_help_md,
    select_fix_commands,
)
