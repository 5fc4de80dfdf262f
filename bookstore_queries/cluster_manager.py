from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import ConnectionFailure, ServerSelectionTimeoutError

from config import SERVER_SELECTION_TIMEOUT_MS
from logger import logger


def connect_to_cluster(mongo_uri: str) -> MongoClient:
    """Create a MongoClient and force a round trip to the server."""
    client = MongoClient(mongo_uri, serverSelectionTimeoutMS=SERVER_SELECTION_TIMEOUT_MS)
    try:
        client.server_info()  # force connection test
    except ServerSelectionTimeoutError:
        client.close()
        raise ConnectionError("Connection timed out. Check your MongoDB URI and network.")
    except ConnectionFailure:
        client.close()
        raise ConnectionError("Failed to connect to MongoDB server")
    logger.info("Connected to MongoDB at %s", mongo_uri)
    return client


def get_collection(client: MongoClient, database_name: str, collection_name: str) -> Collection:
    return client[database_name][collection_name]
