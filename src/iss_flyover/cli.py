"""Print upcoming ISS passes for the current location.

Run directly:
    python -m iss_flyover.cli
"""

import logging
import sys
from datetime import datetime

from iss_flyover.config import Settings
from iss_flyover.passes.schemas import PassRecord
from iss_flyover.passes.service import FlyoverService

logger = logging.getLogger(__name__)


def format_pass(record: PassRecord) -> str:
    """Render a pass as a line with its local rise time and duration."""
    risetime = datetime.fromtimestamp(record.risetime).astimezone()
    return f"Next pass at {risetime:%a %b %d %Y %H:%M:%S %Z} for {record.duration} seconds."


def main() -> int:
    """Look up passes and print them; returns the process exit status."""
    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
    )

    outcome = FlyoverService(settings).run()

    if outcome.error is not None:
        print(f"It didn't work! {outcome.error}")
        return 1

    for record in outcome.value or []:
        print(format_pass(record))
    return 0


if __name__ == "__main__":
    sys.exit(main())
