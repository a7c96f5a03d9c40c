import sys

import yaml

from .data.repository import DataRepository


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    config_path = argv[0] if argv else None

    repo = None
    try:
        repo = DataRepository(config_path)
        repo.merge_roll_calls()
    except (OSError, ValueError, RuntimeError, yaml.YAMLError) as e:
        if repo is not None:
            repo.logger.error(f"Roll-call merge failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
