"""MongoDB schema initialization and indexes for User domain.

This script creates the indexes the user repositories declare:
- users.email: unique index (one account per address)
- users.created_at: index for sorting/filtering
- account_details: keyed by _id = user_id, nothing extra needed

Run with: python -m scripts.init_user_schema
"""

import asyncio
from typing import Any, Dict

from dotenv import load_dotenv
from motor.motor_asyncio import AsyncIOMotorClient

from infrastructure.config import get_mongodb_database
from infrastructure.user.mongo_user_repository import EMAIL_INDEX_NAME
from infrastructure.user.repository_factory import (
    create_mongo_client,
    create_user_repositories,
)


async def create_user_indexes(client: AsyncIOMotorClient[Dict[str, Any]]) -> None:
    """Create MongoDB indexes for the users and account_details collections."""
    db_name = get_mongodb_database()
    print(f"Creating indexes for {db_name}...")

    repositories = create_user_repositories(client=client, backend="mongodb")
    names = await repositories.ensure_indexes()
    for name in names:
        print(f"✓ Index ready: {name}")


async def verify_schema(client: AsyncIOMotorClient[Dict[str, Any]]) -> bool:
    """Verify that the unique email index is in place."""
    db = client[get_mongodb_database()]

    print("\nVerifying schema...")

    indexes = await db.users.list_indexes().to_list(length=100)
    unique_email = [
        idx for idx in indexes if idx["name"] == EMAIL_INDEX_NAME and idx.get("unique")
    ]
    if not unique_email:
        print(f"⚠ Missing unique index: {EMAIL_INDEX_NAME}")
        return False

    print("✓ All required indexes present")
    for idx in indexes:
        print(f"  - {idx['name']}: {idx.get('key', {})}")
    return True


async def main() -> int:
    client = create_mongo_client()
    try:
        await create_user_indexes(client)
        ok = await verify_schema(client)
    finally:
        client.close()
    return 0 if ok else 1


if __name__ == "__main__":
    load_dotenv()
    print("=== User Domain MongoDB Schema Initialization ===\n")
    raise SystemExit(asyncio.run(main()))
