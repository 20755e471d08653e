from __future__ import annotations

import sys
from pathlib import Path

import importlib

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.hr_admin.hr_admin.database.bootstrap import ensure_indexes, list_collections
from src.hr_admin.hr_admin.database.connection import DatabaseConnection, MongoConfig


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    mongo_config = dict(settings.MONGO_CONFIG)

    conn = DatabaseConnection(MongoConfig(**mongo_config))
    ensure_indexes(conn)
    collections = list_collections(conn)
    print(
        "OK: Indexes ready -> "
        f"{mongo_config.get('uri')}/{mongo_config.get('database')} "
        f"(collections={len(collections)})"
    )


if __name__ == "__main__":
    main()
