import logging
from typing import Any, Dict
from passlib.context import CryptContext
from pydantic import BaseModel

from ..models import CredentialHistory
from .crud import CrudService

logger = logging.getLogger(__name__)

password_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return password_context.hash(password)


def password_matches(password: str, password_hash: str) -> bool:
    return password_context.verify(password, password_hash)


class CredentialService(CrudService):
    """Credentials store a password hash and keep the hashes they replace"""

    def prepare_create(self, create_dto: BaseModel) -> Dict[str, Any]:
        values = create_dto.model_dump(exclude={"password"})
        values["password_hash"] = hash_password(create_dto.password)
        return values

    def prepare_update(self, record, dto: BaseModel) -> Dict[str, Any]:
        values = dto.model_dump(include={"user_id", "login"})

        if dto.password is not None and not password_matches(dto.password, record.password_hash):
            self.db.add(CredentialHistory(
                credential_id=record.id,
                password_hash=record.password_hash
            ))
            values["password_hash"] = hash_password(dto.password)
            logger.info(f"Password changed for credential {record.id}")

        return values
