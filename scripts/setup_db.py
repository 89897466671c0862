"""
Database setup script: create tables, optionally seed demo data.

    python -m scripts.setup_db           # tables only
    python -m scripts.setup_db --seed    # tables + demo records
"""
import asyncio
import sys

from inventory_api.database import engine, Base, AsyncSessionLocal
from inventory_api import models  # noqa: F401 - register tables on Base.metadata
from inventory_api.exceptions import ConflictError
from inventory_api.services import CategoryService, InventoryItemService, SupplierService

DEMO_CATEGORIES = [
    {"categoryId": 5000, "categoryName": "Board Games", "description": "Games played on a table."},
    {"categoryId": 6000, "categoryName": "Puzzles", "description": "Jigsaws and brain teasers."},
]

DEMO_SUPPLIERS = [
    {"supplierName": "Hasbro", "contactInformation": "401-431-8697", "address": "1027 Newport Ave, Pawtucket RI"},
    {"supplierName": "Ravensburger", "contactInformation": "800-886-1236", "address": "Robert-Bosch-Str. 1, Ravensburg"},
]


async def setup_database(seed: bool = False):
    """Create tables and seed initial data"""
    print("Creating database tables...")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    print("Tables created")

    if not seed:
        await engine.dispose()
        return

    async with AsyncSessionLocal() as session:
        categories = CategoryService(session)
        suppliers = SupplierService(session)
        items = InventoryItemService(session)

        for payload in DEMO_CATEGORIES:
            try:
                await categories.create(payload)
            except ConflictError:
                print(f"  category {payload['categoryName']} already present")

        supplier_ids = []
        for payload in DEMO_SUPPLIERS:
            try:
                supplier = await suppliers.create(payload)
                supplier_ids.append(supplier.supplier_id)
            except ConflictError:
                print(f"  supplier {payload['supplierName']} already present")

        if supplier_ids:
            try:
                await items.create({
                    "categoryId": 5000,
                    "supplierId": supplier_ids[0],
                    "name": "Hungry Hippos",
                    "description": "Have your hippo eat the most marbles to win.",
                    "quantity": 7,
                    "price": 18.98,
                    "dateCreated": "",
                })
            except ConflictError:
                print("  item Hungry Hippos already present")

    print("Seed data created")
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(setup_database(seed="--seed" in sys.argv))
