import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.message import Message as MessageModel
from app.domains.messages.entities import Message, MessageRole
from app.domains.ports import MessageRepositoryPort

logger = logging.getLogger(__name__)


class MessageRepository(MessageRepositoryPort):
    """Append-only message storage backed by SQLAlchemy"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, message: Message) -> Message:
        db_message = MessageModel(
            id=message.id,
            take_id=message.take_id,
            role=MessageRole(message.role),
            content=message.content,
            enabled_document_ids=list(message.enabled_document_ids),
            created_at=message.created_at
        )

        self.session.add(db_message)
        await self.session.commit()
        await self.session.refresh(db_message)
        return self._to_domain(db_message)

    async def find_by_take_id(self, take_id: str) -> List[Message]:
        """Transcript order: created_at, then insertion counter"""
        try:
            result = await self.session.execute(
                select(MessageModel)
                .where(MessageModel.take_id == take_id)
                .order_by(MessageModel.created_at.asc(), MessageModel.seq.asc())
            )
            db_messages = result.scalars().all()
        except SQLAlchemyError:
            logger.exception("Failed to list messages of take %s", take_id)
            await self.session.rollback()
            return []
        return [self._to_domain(message) for message in db_messages]

    def _to_domain(self, db_message: MessageModel) -> Message:
        return Message(
            id=str(db_message.id),
            take_id=str(db_message.take_id),
            role=MessageRole(db_message.role),
            content=db_message.content,
            enabled_document_ids=list(db_message.enabled_document_ids or []),
            created_at=db_message.created_at
        )
