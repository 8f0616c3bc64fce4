import json
import logging
from typing import Any

from databases import Database
from databases.interfaces import Record

from orders.models import Order


logger = logging.getLogger(__name__)


CREATE_ORDERS_TABLE = """
CREATE TABLE IF NOT EXISTS Orders (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name VARCHAR(256),
    cake_type VARCHAR(256),
    fillings VARCHAR(3000)
)
"""


CREATE_ORDER = """
INSERT INTO Orders(name, cake_type, fillings) VALUES (:name, :cake_type, :fillings)
"""


GET_ORDER = "SELECT * FROM Orders WHERE id = :id"


FIRST_ORDER = "SELECT * FROM Orders ORDER BY id LIMIT 1"


CLEAR_ORDERS = "DELETE FROM Orders"


# Only these columns can be written one at a time.
COLUMNS = ("name", "cake_type", "fillings")


class OrderNotFound(Exception):
    pass


async def create_db(db: Database) -> None:
    await db.execute(  # pyright: ignore[reportUnknownMemberType]
        query=CREATE_ORDERS_TABLE
    )


def _to_order(record: Record) -> Order:
    fillings = record["fillings"]
    return Order(
        id=record["id"],
        name=record["name"] or "",
        cake_type=record["cake_type"] or "",
        fillings=json.loads(fillings) if fillings else [],
    )


def _to_values(fields: dict[str, Any]) -> dict[str, Any]:
    unknown = set(fields) - set(COLUMNS)
    if unknown:
        raise ValueError(f"Unknown order fields: {sorted(unknown)}")
    values = {column: fields.get(column) for column in COLUMNS}
    if values["fillings"] is not None:
        values["fillings"] = json.dumps(list(values["fillings"]))
    return values


class OrderRepository:
    """Orders repository.

    The app only deals with one order, "the" order being the first row in the
    table. Nothing outside this class knows how that row is picked.
    """

    def __init__(self, db: Database) -> None:
        self.db = db

    async def get(self, id: int) -> Order:
        result = await self.db.fetch_one(  # pyright: ignore[reportUnknownMemberType]
            GET_ORDER, values={"id": id}
        )
        if result is None:
            raise OrderNotFound(f"{id}")
        return _to_order(result)

    async def first(self) -> Order | None:
        result = await self.db.fetch_one(  # pyright: ignore[reportUnknownMemberType]
            FIRST_ORDER
        )
        return None if result is None else _to_order(result)

    async def create(self, **fields: Any) -> Order:
        values = _to_values(fields)
        id = await self.db.execute(  # pyright: ignore[reportUnknownMemberType]
            CREATE_ORDER, values=values
        )
        logger.info("Created order %s with %s", id, sorted(fields))
        return await self.get(id)

    async def update(self, id: int, **fields: Any) -> None:
        values = {k: v for k, v in _to_values(fields).items() if k in fields}
        assignments = ", ".join(f"{column} = :{column}" for column in values)
        await self.db.execute(  # pyright: ignore[reportUnknownMemberType]
            f"UPDATE Orders SET {assignments} WHERE id = :id",
            values={**values, "id": id},
        )
        logger.info("Updated order %s with %s", id, sorted(fields))

    async def upsert(self, **fields: Any) -> Order:
        # read then write, no transaction
        order = await self.first()
        if order is None:
            return await self.create(**fields)
        assert order.id is not None
        await self.update(order.id, **fields)
        return await self.get(order.id)

    async def clear(self) -> None:
        await self.db.execute(  # pyright: ignore[reportUnknownMemberType]
            CLEAR_ORDERS
        )
