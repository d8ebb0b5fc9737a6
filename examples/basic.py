# Mongo Data API Examples

# Meant to be run cell by cell (select a block and execute it with Shift+Enter),
# or as a plain script. Each comment marks a cell.

# Load requirements

import asyncio
import logging

from dotenv import load_dotenv

from mongo_data_api import MongoClient, ObjectId


# Load environment from .env (copy and rename .env.example if needed)
load_dotenv()
logging.basicConfig(level=logging.INFO)

# Reads MONGO_DATA_API_ENDPOINT, MONGO_DATA_API_DATA_SOURCE and one credential set
client = MongoClient.from_env()
users = client.db("examples").collection("users")


# Insert a few documents


async def insert_users() -> None:
    result = await users.insert_many(
        [
            {"name": "Alice", "age": 30, "tags": ["admin"]},
            {"name": "Bob", "age": 25, "tags": []},
            {"name": "Carol", "age": 41, "tags": ["billing"]},
        ],
        label="examples-insert",
    )
    if result.error:
        print(f"Insert failed ({result.error.code}): {result.error.message}")
        return
    print(result.data)


asyncio.run(insert_users())


# Query


async def query_users() -> None:
    alice = await users.find_one({"name": "Alice"}, projection={"_id": 1, "age": 1})
    print(alice.data)

    # ObjectIds come back as bson.ObjectId and can be sent back as-is
    if alice.data:
        same = await users.find_one({"_id": alice.data["_id"]})
        assert isinstance(same.data["_id"], ObjectId)  # type: ignore[index]

    adults = await users.find({"age": {"$gte": 26}}, sort={"age": -1}, limit=10)
    for user in adults.data or []:
        print(user["name"], user["age"])


asyncio.run(query_users())


# Update and aggregate


async def update_and_aggregate() -> None:
    await users.update_one({"name": "Bob"}, {"$set": {"age": 26}})
    await users.update_one({"name": "Dave"}, {"$set": {"age": 19}}, upsert=True)

    stats = await users.aggregate([{"$group": {"_id": None, "average": {"$avg": "$age"}}}])
    print(stats.data)


asyncio.run(update_and_aggregate())


# Clean up


async def cleanup() -> None:
    result = await users.delete_many({})
    print(f"Deleted {result.unwrap()}")


asyncio.run(cleanup())
