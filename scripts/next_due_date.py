#!/usr/bin/env python3
"""
Print the next due date and current stage of an assignment
Usage: next_due_date.py ASSIGNMENT_ID [TOPIC_ID]
"""

import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import json
from app.database import init_db
from app.exceptions import DeadlineError
from app.services.deadline_scheduler import DeadlineScheduler
from app.utils.logger import get_logger

logger = get_logger('next_due_date')


def main(argv):
    if len(argv) not in (2, 3):
        print(__doc__.strip().splitlines()[-1])
        return 2

    assignment_id = int(argv[1])
    topic_id = int(argv[2]) if len(argv) == 3 else None

    init_db()
    try:
        summary = DeadlineScheduler().schedule_summary(assignment_id, topic_id)
    except DeadlineError as e:
        logger.error(str(e))
        return 1

    print(json.dumps(summary, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
