import argparse
import logging
import sys

from dotenv import load_dotenv
from rich.console import Console

from irongen.container import container
from irongen.exceptions import BaseAppError, ExitCode


def log_level(name: str) -> int:
    """Map a level name to its number, WARNING for unknown names."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.WARNING


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="irongen",
        description=(
            "Pick an installed desktop application with fzf and print its launch command."
        ),
    )
    parser.add_argument(
        "--config",
        action="store_true",
        help="Create the config file if missing and exit",
    )
    args = parser.parse_args(argv)

    _ = load_dotenv()
    out = Console(highlight=False)
    err = Console(stderr=True, highlight=False)

    try:
        settings = container.get_settings()
        logging.basicConfig(
            level=log_level(settings.log_level),
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            stream=sys.stderr,
        )

        if args.config:
            path = container.get_init_config_use_case().execute()
            out.print(
                f"Config file has been created, located at: {path}",
                markup=False,
                soft_wrap=True,
            )
            return ExitCode.SUCCESS

        directories = container.get_resolve_directories_use_case().execute()
        applications = container.get_load_applications_use_case().execute(directories)
        command = container.get_select_application_use_case().execute(applications)
    except BaseAppError as e:
        err.print(str(e), markup=False, soft_wrap=True, style="red")
        return e.exit_code

    # No trailing newline, the output is meant for command substitution
    sys.stdout.write(command)
    sys.stdout.flush()
    return ExitCode.SUCCESS


if __name__ == "__main__":
    sys.exit(main())
