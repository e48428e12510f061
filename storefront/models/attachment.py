"""첨부 파일 SQLAlchemy ORM 모델.

Attachment SQLAlchemy ORM model.
Stores the metadata of a binary file kept by the storage backend.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from storefront.database import Base


class Attachment(Base):
    """첨부 파일 모델.

    Attachment model — opaque reference to a stored binary resource.

    Attributes:
        file_name: 원본 파일명 (Original file name)
        file_path: 저장소 키 (Storage key, local path suffix or S3 key)
        file_url: 공개 URL (Public file URL)
        content_type: MIME 타입 (Content type)
    """

    __tablename__ = "attachments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    file_name: Mapped[str] = mapped_column(String(255), nullable=False)
    file_path: Mapped[str] = mapped_column(String(512), nullable=False)
    file_url: Mapped[str] = mapped_column(Text, nullable=False)
    content_type: Mapped[str] = mapped_column(String(100), nullable=False, default="application/octet-stream")
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
