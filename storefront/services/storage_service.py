"""스토리지 서비스 — S3 또는 로컬 파일 저장.

Storage Service — stores attachment bytes in S3 or on local disk.
AWS 키가 비어있으면 자동으로 로컬 모드로 전환됩니다.
(Falls back to local mode when AWS credentials or bucket are not configured.)
"""

import uuid
from datetime import datetime, timezone
from pathlib import Path

from storefront.config import settings

# 로컬 업로드 기본 디렉토리 — 프로젝트 루트의 uploads/
_PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent.parent


class StorageService:
    """파일 저장 서비스 — S3 또는 로컬 모드 자동 선택."""

    def __init__(self) -> None:
        self._client = None

    @property
    def is_local(self) -> bool:
        return not settings.AWS_ACCESS_KEY_ID or not settings.AWS_S3_BUCKET

    @property
    def uploads_dir(self) -> Path:
        if settings.LOCAL_UPLOADS_DIR:
            return Path(settings.LOCAL_UPLOADS_DIR)
        return _PROJECT_ROOT / "uploads"

    @property
    def client(self):
        if self.is_local:
            return None
        if self._client is None:
            import boto3
            from botocore.config import Config as BotoConfig

            self._client = boto3.client(
                "s3",
                region_name=settings.AWS_S3_REGION,
                aws_access_key_id=settings.AWS_ACCESS_KEY_ID,
                aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
                config=BotoConfig(signature_version="s3v4"),
            )
        return self._client

    def generate_key(self, filename: str, folder: str = "products") -> str:
        """날짜별 폴더 아래 고유 저장 키를 만듭니다 (Unique key under a dated folder)."""
        ext = filename.rsplit(".", 1)[-1] if "." in filename else "bin"
        date_prefix = datetime.now(timezone.utc).strftime("%Y/%m/%d")
        return f"{folder}/{date_prefix}/{uuid.uuid4().hex}.{ext}"

    def build_url(self, key: str) -> str:
        """저장 키의 공개 URL을 반환합니다."""
        if self.is_local:
            return f"{settings.PUBLIC_BASE_URL}/uploads/{key}"
        return f"https://{settings.AWS_S3_BUCKET}.s3.{settings.AWS_S3_REGION}.amazonaws.com/{key}"

    def save(self, key: str, data: bytes, content_type: str) -> str:
        """파일을 저장하고 공개 URL을 반환합니다.

        Store the bytes under ``key`` and return the public file URL.
        """
        if self.is_local:
            path = self.uploads_dir / key
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
            return self.build_url(key)

        self.client.put_object(
            Bucket=settings.AWS_S3_BUCKET,
            Key=key,
            Body=data,
            ContentType=content_type,
        )
        return self.build_url(key)

    def delete(self, key: str) -> None:
        """저장된 파일을 삭제합니다. 이미 없는 파일은 무시합니다.

        Delete the stored bytes; a key that is already gone is not an error.
        """
        if self.is_local:
            (self.uploads_dir / key).unlink(missing_ok=True)
            return

        self.client.delete_object(Bucket=settings.AWS_S3_BUCKET, Key=key)


storage_service: StorageService = StorageService()
