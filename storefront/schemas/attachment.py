"""첨부 파일 Pydantic 스키마.

Attachment Pydantic schemas.
"""

from pydantic import BaseModel, Field


class AttachmentCreate(BaseModel):
    """첨부 파일 업로드 요청 스키마.

    Attachment upload request: raw file bytes plus metadata.
    """

    file_name: str = Field(min_length=1, max_length=255)
    content: bytes
    content_type: str = "application/octet-stream"


class AttachmentResponse(BaseModel):
    """첨부 파일 응답 스키마."""

    id: int
    file_name: str
    file_url: str
    content_type: str
