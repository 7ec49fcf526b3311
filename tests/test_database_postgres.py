from __future__ import annotations

import importlib.util
import os
import unittest
import uuid

from sqloo import OperationResult, RemoteOptions, ShapeMismatchError, get_database
from sqloo.ports.db_api.dialects import PostgresDialect

HAS_ASYNCPG = importlib.util.find_spec("asyncpg") is not None


def _options() -> RemoteOptions:
    return RemoteOptions(
        host=os.getenv("SQLOO_HOST", os.getenv("PGHOST", "localhost")),
        port=int(os.getenv("SQLOO_PORT", os.getenv("PGPORT", "5432"))),
        database=os.getenv("SQLOO_DATABASE", os.getenv("PGDATABASE", "sqloo")),
        user=os.getenv("SQLOO_USER", os.getenv("PGUSER", "sqloo")),
        password=os.getenv("SQLOO_PASSWORD", os.getenv("PGPASSWORD", "sqloo")),
        min_size=1,
        max_size=2,
    )


@unittest.skipUnless(HAS_ASYNCPG, "asyncpg is not installed")
class PostgresDatabaseTests(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self) -> None:
        options = _options()
        try:
            self.db = await get_database(options)
        except Exception as exc:
            raise unittest.SkipTest(
                f"PostgreSQL is not reachable at {options.host}:{options.port} "
                f"with configured credentials: {exc}"
            ) from exc

        await self.db.execute(
            """
            drop table if exists contents;
            create table contents (
              id uuid primary key not null default (gen_random_uuid()),
              title text,
              body text
            )
            """
        )

    async def asyncTearDown(self) -> None:
        await self.db.execute("drop table contents")
        await self.db.close()

    async def test_client_and_dialect_are_exposed(self) -> None:
        self.assertIsNotNone(self.db.client)
        self.assertIsInstance(self.db.dialect, PostgresDialect)

    async def test_statement_without_interpolation_on_empty_table(self) -> None:
        self.assertEqual(await self.db.many("select * from contents"), [])

    async def test_insert_and_list(self) -> None:
        inserted = await self.db.insert("contents", {"title": "hello", "body": "world"})
        self.assertEqual(inserted, OperationResult("insert", 1))

        rows = await self.db.list("contents", {"title": "hello"})
        self.assertEqual(len(rows), 1)
        self.assertEqual((rows[0]["title"], rows[0]["body"]), ("hello", "world"))

    async def test_insert_multiple_rows_at_a_time(self) -> None:
        inserted = await self.db.insert(
            "contents",
            [
                {"title": "hello", "body": "world"},
                {"title": "hi", "body": "universe"},
            ],
        )
        self.assertEqual(inserted.affected, 2)

    async def test_query_data_with_a_condition(self) -> None:
        data = {"id": uuid.uuid4(), "title": "hello", "body": "world"}
        await self.db.insert("contents", data)

        result = await self.db.single(["select * from contents where id = ", ""], data["id"])
        self.assertEqual(result, data)

    async def test_update_a_row(self) -> None:
        data = {"id": uuid.uuid4(), "title": "hello", "body": "world"}
        await self.db.insert("contents", data)

        updated = await self.db.update(
            "contents", {"id": data["id"]}, {"title": "hi", "body": "universe"}
        )
        self.assertEqual(updated, OperationResult("update", 1))

        result = await self.db.oO(["select * from contents where id = ", ""], data["id"])
        self.assertEqual(result, {"id": data["id"], "title": "hi", "body": "universe"})

    async def test_get_pluck_and_table_handle(self) -> None:
        contents = self.db.table("contents")
        await contents.insert([{"title": "a", "body": "1"}, {"title": "b", "body": "2"}])

        self.assertEqual((await contents.get({"title": "b"}))["body"], "2")
        self.assertIsNone(await contents.get({"title": "zzz"}))
        self.assertEqual(await self.db.ox("select count(*) from contents"), 2)
        self.assertIsNone(await self.db.pluck("select title from contents where false"))

    async def test_shape_mismatch_fails_before_driver(self) -> None:
        with self.assertRaises(ShapeMismatchError):
            await self.db.insert("contents", [{"title": "a"}, {"body": "b"}])


if __name__ == "__main__":
    unittest.main()
