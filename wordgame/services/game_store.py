"""
Game State Store

Persistence for GameState documents, one document per gameId.
Both stores implement the same contract:

    get(game_id) -> GameState | None
    upsert(state, expected_version=None)

upsert replaces the whole document. When expected_version is given the
write only lands if the stored document still carries that version;
otherwise StaleStateConflict is raised.
"""

import copy
import threading
from typing import Dict, Optional

from pymongo.errors import DuplicateKeyError, PyMongoError
from pymongo.mongo_client import MongoClient
from pymongo.server_api import ServerApi

from ..models.errors import PersistenceError, StaleStateConflict
from ..models.game import GameState
from ..utils.game_logger import game_logger


class MongoGameStateStore:
    """MongoDB-backed store using a unique index on gameId."""

    def __init__(self, mongo_uri: str, db_name: str, collection_name: str = 'games', client=None):
        """
        Initialize the store with a MongoDB connection.

        Args:
            mongo_uri: MongoDB connection string
            db_name: Database holding the games collection
            collection_name: Collection name
            client: Optional pre-built client (injected in tests)
        """
        self.client = client or MongoClient(mongo_uri, server_api=ServerApi('1'))
        self.collection = self.client[db_name][collection_name]

        # Test connection
        try:
            self.client.admin.command('ping')
            game_logger.logger.info(f"Successfully connected to MongoDB database: {db_name}")
        except PyMongoError as e:
            game_logger.logger.error(f"MongoDB connection error: {e}")
            raise

        self.collection.create_index("gameId", unique=True)

    def get(self, game_id: str) -> Optional[GameState]:
        try:
            document = self.collection.find_one({"gameId": game_id}, {"_id": 0})
        except PyMongoError as e:
            game_logger.logger.error(f"Error finding game state for gameId {game_id}: {e}")
            raise PersistenceError('Database error while finding game state.')

        if not document:
            return None
        return GameState.from_document(document)

    def upsert(self, state: GameState, expected_version: Optional[int] = None) -> None:
        query = {"gameId": state.game_id}
        if expected_version == 0:
            # Documents written before versioning have no version field
            query["$or"] = [{"version": 0}, {"version": {"$exists": False}}]
        elif expected_version is not None:
            query["version"] = expected_version

        try:
            # upsert inserts if not exists, replaces if exists; a version
            # mismatch turns into an insert that hits the unique index
            self.collection.replace_one(query, state.to_document(), upsert=True)
        except DuplicateKeyError:
            game_logger.logger.warning(f"Stale write rejected for gameId {state.game_id}")
            raise StaleStateConflict(state.game_id)
        except PyMongoError as e:
            game_logger.logger.error(f"Error saving game state for gameId {state.game_id}: {e}")
            raise PersistenceError()

        game_logger.logger.info(f"Game state saved/updated for gameId: {state.game_id}")

    def close(self) -> None:
        self.client.close()
        game_logger.logger.info("MongoDB connection closed.")


class InMemoryGameStateStore:
    """Process-local store for development and tests. Holds documents, not objects."""

    def __init__(self):
        self._documents: Dict[str, dict] = {}
        self._lock = threading.Lock()

    def get(self, game_id: str) -> Optional[GameState]:
        with self._lock:
            document = self._documents.get(game_id)
        if document is None:
            return None
        return GameState.from_document(copy.deepcopy(document))

    def upsert(self, state: GameState, expected_version: Optional[int] = None) -> None:
        document = copy.deepcopy(state.to_document())
        with self._lock:
            stored = self._documents.get(state.game_id)
            if expected_version is not None and stored is not None and stored.get('version', 0) != expected_version:
                raise StaleStateConflict(state.game_id)
            self._documents[state.game_id] = document

    def __len__(self) -> int:
        return len(self._documents)

    def close(self) -> None:
        pass
