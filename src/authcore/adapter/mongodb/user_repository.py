"""MongoDB implementation of UserRepository."""

import uuid
from datetime import datetime, timezone
from logging import getLogger
from pymongo import ReturnDocument
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, PyMongoError
from authcore.adapter.mongodb.connection import USERS_COLLECTION_NAME
from authcore.domain.model.errors import DuplicateError, RepositoryError
from authcore.domain.model.user import User

logger = getLogger(__name__)


class MongoUserRepository:
    def __init__(self, db: Database):
        self.collection = db[USERS_COLLECTION_NAME]

    def ensure_indexes(self) -> bool:
        """Create indexes for users collection.

        The unique email index is what ultimately guarantees one account per email.
        """
        from authcore.adapter.mongodb.indexes import create_index_safe

        try:
            create_index_safe(self.collection, [('email', 1)], 'idx_users_email', unique=True)
            create_index_safe(self.collection, [('created_at', -1)], 'idx_users_created_at')
            return True
        except PyMongoError as e:
            logger.error("Failed to create users indexes", extra={"error": str(e)})
            return False

    def _to_domain(self, doc: dict) -> User:
        """Convert MongoDB document to User domain model."""
        return User(
            id=doc['_id'],
            name=doc['name'],
            email=doc['email'],
            password_hash=doc['password_hash'],
            created_at=doc['created_at'],
            updated_at=doc['updated_at'],
            is_active=doc.get('is_active', True),
        )

    def create(self, name: str, email: str, password_hash: str) -> User:
        """Insert a new user document and return the User."""
        user_id = uuid.uuid4().hex
        now = datetime.now(timezone.utc)
        user_doc = {
            '_id': user_id,
            'name': name,
            'email': email,
            'password_hash': password_hash,
            'is_active': True,
            'created_at': now,
            'updated_at': now,
        }
        try:
            self.collection.insert_one(user_doc)
        except DuplicateKeyError:
            logger.warning("User creation failed: email already exists", extra={"email": email})
            raise DuplicateError("Email already exists")
        except PyMongoError as e:
            logger.error("Failed to create user", extra={"email": email, "error": str(e)})
            raise RepositoryError() from e

        logger.info("User created", extra={"userId": user_id, "email": email})
        return self._to_domain(user_doc)

    def get_by_email(self, email: str) -> User | None:
        """Find a user by email. Return User or None if not found."""
        try:
            doc = self.collection.find_one({'email': email})
        except PyMongoError as e:
            logger.error("Failed to get user by email", extra={"email": email, "error": str(e)})
            raise RepositoryError() from e
        return self._to_domain(doc) if doc else None

    def get_by_id(self, user_id: str) -> User | None:
        """Find a user by ID. Return User or None if not found."""
        try:
            doc = self.collection.find_one({'_id': user_id})
        except PyMongoError as e:
            logger.error("Failed to get user by ID", extra={"userId": user_id, "error": str(e)})
            raise RepositoryError() from e
        return self._to_domain(doc) if doc else None

    def update_password(self, user_id: str, password_hash: str) -> bool:
        """Replace the password hash for a user. Return True if a user was updated."""
        try:
            now = datetime.now(timezone.utc)
            result = self.collection.update_one(
                {'_id': user_id},
                {'$set': {'password_hash': password_hash, 'updated_at': now}}
            )
        except PyMongoError as e:
            logger.error("Failed to update password", extra={"userId": user_id, "error": str(e)})
            raise RepositoryError() from e

        if result.matched_count > 0:
            logger.debug("Updated password hash", extra={"userId": user_id})
            return True
        return False

    def update_profile(self, user_id: str, name: str | None = None, email: str | None = None) -> User | None:
        """Update name and/or email. Return the updated User or None if not found."""
        fields = {'updated_at': datetime.now(timezone.utc)}
        if name is not None:
            fields['name'] = name
        if email is not None:
            fields['email'] = email

        try:
            doc = self.collection.find_one_and_update(
                {'_id': user_id},
                {'$set': fields},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError:
            logger.warning("Profile update failed: email already exists", extra={"userId": user_id, "email": email})
            raise DuplicateError("Email already exists")
        except PyMongoError as e:
            logger.error("Failed to update profile", extra={"userId": user_id, "error": str(e)})
            raise RepositoryError() from e

        if doc is None:
            return None
        logger.info("User profile updated", extra={"userId": user_id})
        return self._to_domain(doc)
