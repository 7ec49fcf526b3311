from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path

# Allow running this script directly from repository root.
PROJECT_ROOT = next(
    (parent for parent in Path(__file__).resolve().parents if (parent / "sqloo").exists()),
    None,
)
if PROJECT_ROOT and str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from sqloo import get_database


async def main() -> None:
    logging.basicConfig(level=logging.DEBUG)

    async with await get_database() as db:
        await db.execute(
            """
            create table contents (
              id uuid primary key not null default (uuid_generate_v4()),
              title text,
              body text
            )
            """
        )

        print("insert:", await db.insert("contents", {"title": "hello", "body": "world"}))
        print(
            "insert many:",
            await db.insert(
                "contents",
                [
                    {"title": "hi", "body": "universe"},
                    {"title": "hey", "body": "galaxy"},
                ],
            ),
        )

        row = await db.get("contents", {"title": "hello"})
        print("get:", row)
        if row is None:
            raise RuntimeError("Inserted row was not found.")

        print("update:", await db.update("contents", {"id": row["id"]}, {"body": "there"}))
        print("single:", await db.single(["select * from contents where id = ", ""], row["id"]))
        print("count:", await db.pluck("select count(*) from contents"))
        print("rows:", await db.many("select title, body from contents order by title"))


if __name__ == "__main__":
    asyncio.run(main())
