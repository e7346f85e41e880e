import argparse
import sys

from launcher import Launcher
from scssbundle.config import CONFIG_FILE, load_config
from scssbundle.console import Verbosity, error_log, set_debug, set_verbosity
from scssbundle.errors import ScssBundleError


def build_parser():
    parser = argparse.ArgumentParser(prog="scss-bundle", description="Bundle SCSS files into one file.")
    parser.add_argument("-c", "--config", help=f"Config file path (default: {CONFIG_FILE} in the project directory)")
    parser.add_argument("-p", "--project", default=".", help="Project directory (default: current directory)")
    parser.add_argument("-e", "--entry", help="Bundle entry file location")
    parser.add_argument("-d", "--dest", help="Bundled file destination")
    parser.add_argument("--dedupe", nargs="*", help="Files that will be emitted only once (glob patterns)")
    parser.add_argument("--includePaths", dest="include_paths", nargs="*", help="Extra directories used to resolve imports")
    parser.add_argument("--ignoredImports", dest="ignored_imports", nargs="*", help="Imports to leave untouched (regular expressions)")
    parser.add_argument("--verbosity", choices=["None", "Errors", "Verbose"], help="Logging level (default: Verbose)")
    parser.add_argument("--debug", action="store_true", help="Trace import resolution (sent to stderr)")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    set_debug(args.debug)

    try:
        config = load_config(
            project_directory=args.project,
            config_file=args.config,
            overrides={
                "entry": args.entry,
                "dest": args.dest,
                "dedupe_globs": args.dedupe,
                "include_paths": args.include_paths,
                "ignored_imports": args.ignored_imports,
                "verbosity": args.verbosity,
            },
        )
    except ScssBundleError as e:
        error_log(e.message if e.path is None else f"{e.message} ({e.path})")
        sys.exit(1)

    set_verbosity(config.verbosity)

    if config.entry is None or config.dest is None:
        error_log("'entry' and 'dest' are required.")
        sys.exit(1)

    try:
        Launcher(config).bundle()
    except ScssBundleError as e:
        error_log(str(e).strip())
        sys.exit(1)


if __name__ == "__main__":
    main()
