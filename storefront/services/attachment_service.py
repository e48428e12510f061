"""첨부 파일 서비스 — 업로드 및 삭제.

Attachment Service — uploads and removes attachments.
Each call is its own unit of work: the stored bytes and the metadata row
are written (or removed) and committed before returning.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.models.attachment import Attachment
from storefront.repositories.attachment_repository import (
    AttachmentRepository,
    attachment_repository,
)
from storefront.schemas.attachment import AttachmentCreate, AttachmentResponse
from storefront.services.storage_service import StorageService, storage_service


class AttachmentService:
    """첨부 파일 업로드/삭제를 처리하는 서비스."""

    def __init__(
        self,
        repository: AttachmentRepository = attachment_repository,
        storage: StorageService = storage_service,
    ) -> None:
        self.repository = repository
        self.storage = storage

    def to_response(self, attachment: Attachment) -> AttachmentResponse:
        return AttachmentResponse(
            id=attachment.id,
            file_name=attachment.file_name,
            file_url=attachment.file_url,
            content_type=attachment.content_type,
        )

    async def upload(self, db: AsyncSession, data: AttachmentCreate) -> Attachment:
        """파일을 저장하고 첨부 레코드를 생성합니다.

        Store the file bytes and create the attachment row.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 업로드할 파일 (File bytes and metadata)

        Returns:
            Attachment: ID가 부여된 첨부 레코드 (Committed attachment with its id)
        """
        key: str = self.storage.generate_key(data.file_name)
        file_url: str = self.storage.save(key, data.content, data.content_type)

        attachment = Attachment(
            file_name=data.file_name,
            file_path=key,
            file_url=file_url,
            content_type=data.content_type,
        )
        await self.repository.create(db, attachment)
        await self.repository.save(db)
        return attachment

    async def remove(self, db: AsyncSession, attachment: Attachment) -> None:
        """저장된 파일과 첨부 레코드를 삭제합니다.

        Delete the stored bytes and the attachment row.
        """
        self.storage.delete(attachment.file_path)
        await self.repository.delete(db, attachment)
        await self.repository.save(db)


# 싱글턴 인스턴스 — Singleton instance
attachment_service: AttachmentService = AttachmentService()
