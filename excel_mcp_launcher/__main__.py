import sys
from .logging import log
from .launcher import LauncherError, resolve_binary_path, run


def main() -> None:
    try:
        binary_path = resolve_binary_path()
        code = run(binary_path)
    except LauncherError as e:
        log.error(str(e))
        sys.exit(1)
    sys.exit(code)


if __name__ == "__main__":
    main()
