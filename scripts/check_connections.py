#!/usr/bin/env python3
"""
Connection Check Script

Run this to verify the configured storage backend is reachable and the
schema can be created. Pass --seed to load the demo catalog as well.
Usage: python scripts/check_connections.py [--seed]
"""
import sys

from sqlalchemy.engine import make_url

from internhub.core.config import get_settings
from internhub.core.logging import configure_logging
from internhub.repositories import build_repository
from internhub.services.seed_data import seed_demo_data


def main():
    settings = get_settings()
    configure_logging(settings.log_level)
    print("=" * 50)
    print("INTERNHUB - CONNECTION CHECK")
    print("=" * 50)

    print(f"\n[1] Storage backend: {settings.storage_backend}")
    if settings.storage_backend == "sql":
        print(f"    URL: {make_url(settings.database_url).render_as_string(hide_password=True)}")

    repo = build_repository(settings)
    if repo.ping():
        print("    ✅ Storage: CONNECTED")
    else:
        print("    ❌ Storage: FAILED")
        return 1

    print("\n[2] Creating tables...")
    repo.create_all()
    print("    ✅ Schema ready")

    if "--seed" in sys.argv[1:]:
        print("\n[3] Seeding demo data...")
        if seed_demo_data(repo):
            print("    ✅ Demo data loaded")
        else:
            print("    ⚠️  Courses already present, skipped")

    print("\n" + "=" * 50)
    print("Connection check complete!")
    print("=" * 50)
    return 0


if __name__ == "__main__":
    sys.exit(main())
