# SPDX-License-Identifier: MIT

from trifecta.cleanup import register_cleanup
from trifecta.initialize import initialize
from trifecta.logger import configure_logging
from trifecta.repository.configuration import CONFIGURATION_REPO
from trifecta.terminal.app import run


def main() -> None:
    initialize()
    configure_logging(CONFIGURATION_REPO.get_config()["log_level"])
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
