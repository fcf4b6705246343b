"""Allow ``python -m capability_dispatch``."""

from capability_dispatch.cli.main import main

if __name__ == "__main__":
    main()
