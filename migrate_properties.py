#!/usr/bin/env python3
"""
Copy the old site's hardcoded listings into the configured store.
Run once: python migrate_properties.py
"""
import asyncio
import logging
import sys

from stays.core.config import settings
from stays.core.deps import get_store
from stays.database import init_db
from stays.services.migration_service import MigrationRunner

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


def main() -> int:
    if not settings.uses_supabase:
        init_db()

    report = asyncio.run(MigrationRunner(get_store()).run())

    print(f"✅ Migrated {len(report.migrated)} listing(s)")
    for title in report.failed:
        print(f"❌ Not migrated: {title}")
    for title in report.image_failures:
        print(f"⚠️ Images not migrated: {title}")
    return 0 if report.success else 1


if __name__ == "__main__":
    sys.exit(main())
