import argparse
import os
import sys

from repoinfo.core.runner import run
from repoinfo.settings import RUNNER_SETTINGS


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Fetch a URL and print the status code and body."
    )
    parser.add_argument(
        "url",
        nargs="?",
        default=None,
        help=(f"URL to fetch (default: ${RUNNER_SETTINGS.url_env_var}, "
              f"then {RUNNER_SETTINGS.default_url})"),
    )
    # debug
    parser.add_argument("--debug", action="store_true", help="Debug mode")

    args = parser.parse_args(argv)

    if args.debug:
        from repoinfo import configure_logging
        configure_logging('DEBUG')

    url = args.url
    if url is None:
        url = os.environ.get(RUNNER_SETTINGS.url_env_var)

    try:
        run(url)
    except BrokenPipeError:
        sys.exit(0)


if __name__ == "__main__":
    main()
