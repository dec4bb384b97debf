"""Create reminder notifications for interviews starting soon.

Meant to run periodically (cron, a scheduled job). Interviews that already
have a reminder are skipped, so overlapping runs do not duplicate them.
"""

from __future__ import annotations

import argparse
import logging
from datetime import datetime

from sqlalchemy.exc import SQLAlchemyError

from app.application.use_cases.notifications import send_interview_reminders
from app.config import get_settings
from app.infrastructure.database import SessionLocal, initialize_database


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for the reminder batch."""

    parser = argparse.ArgumentParser(
        description="Send reminders for upcoming adoption interviews.",
    )
    parser.add_argument(
        "--lead-hours",
        type=int,
        default=None,
        help="Remind about interviews starting within this many hours "
        "(default: REMINDER_LEAD_HOURS)",
    )
    parser.add_argument(
        "--now",
        type=datetime.fromisoformat,
        default=None,
        help="Reference time in ISO format, mainly for backfills (default: current time)",
    )
    return parser.parse_args()


def main() -> None:
    """Run one reminder batch."""

    args = parse_args()
    logging.basicConfig(level=get_settings().log_level.upper())

    initialize_database()

    session = SessionLocal()
    try:
        reminders = send_interview_reminders(
            session, now=args.now, lead_hours=args.lead_hours
        )
    except SQLAlchemyError as exc:
        raise SystemExit(f"Could not create reminders: {exc}") from exc
    else:
        print(f"Created {len(reminders)} interview reminders")
    finally:
        session.close()


if __name__ == "__main__":
    main()
