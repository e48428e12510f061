"""첨부 파일 레포지토리.

Attachment Repository — metadata rows for stored files.
"""

from storefront.models.attachment import Attachment
from storefront.repositories.base import BaseRepository


class AttachmentRepository(BaseRepository[Attachment]):
    """첨부 파일 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리."""

    def __init__(self) -> None:
        super().__init__(Attachment)


# 싱글턴 인스턴스 — Singleton instance
attachment_repository: AttachmentRepository = AttachmentRepository()
