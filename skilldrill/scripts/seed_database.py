import argparse
import logging
import os
import sys
from typing import Optional

from skilldrill.database import SessionLocal
from skilldrill.services.seed_service import clear_database, seed_database


CONFIRM_PHRASE = "CLEAR-ALL-DATA"


def _is_truthy(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes", "y", "on"}


def run(clear: bool = False, confirm: Optional[str] = None) -> int:
    try:
        if clear and confirm != CONFIRM_PHRASE:
            raise ValueError(
                f"Refusing to clear data. Pass --confirm {CONFIRM_PHRASE} to proceed."
            )

        db = SessionLocal()
        try:
            if clear:
                print(clear_database(db).message)
            print(seed_database(db).message)
            return 0
        finally:
            db.close()
    except Exception as exc:
        print(f"Seeding failed: {exc}", file=sys.stderr)
        return 1


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Load sample SkillDrill data.")
    parser.add_argument(
        "--clear",
        action="store_true",
        default=_is_truthy(os.getenv("SEED_CLEAR_FIRST")),
        help="Delete all sessions, drills, skills and users before seeding.",
    )
    parser.add_argument("--confirm", default=os.getenv("SEED_CLEAR_CONFIRM"))
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    return run(clear=args.clear, confirm=args.confirm)


if __name__ == "__main__":
    raise SystemExit(main())
