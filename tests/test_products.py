"""상품 서비스 테스트.

Product service tests — add/modify/remove/retrieve, inventory enrichment,
pagination/sorting and image attachment swapping.
"""

from decimal import Decimal

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.models import Attachment, Product
from storefront.schemas.attachment import AttachmentCreate
from storefront.schemas.inventory import InventoryCreate
from storefront.schemas.product import ProductCreate, ProductUpdate
from storefront.services.attachment_service import AttachmentService
from storefront.services.inventory_service import inventory_service
from storefront.services.product_service import ProductService, product_service
from storefront.utils.exceptions import AlreadyExistsError, BadRequestError, NotFoundError
from storefront.utils.pagination import Filter, PaginationParams
from tests.conftest import count_products, count_rows


class RecordingAttachmentService(AttachmentService):
    """삭제 호출을 기록하는 첨부 서비스."""

    def __init__(self) -> None:
        super().__init__()
        self.removed: list[int] = []

    async def remove(self, db, attachment) -> None:
        self.removed.append(attachment.id)
        await super().remove(db, attachment)


def _png(name: str = "photo.png") -> AttachmentCreate:
    return AttachmentCreate(file_name=name, content=b"\x89PNG fake", content_type="image/png")


async def _add(db: AsyncSession, name: str, category_id: int, price: str = "10.00"):
    return await product_service.add(
        db, ProductCreate(name=name, price=Decimal(price), category_id=category_id)
    )


class TestProductAdd:
    """상품 생성 테스트."""

    async def test_add_product(self, db: AsyncSession, category):
        """상품 생성 성공 — 분류가 채워진 응답."""
        result = await product_service.add(db, ProductCreate(
            name="Laptop",
            description="14 inch",
            price=Decimal("999.90"),
            category_id=category.id,
        ))
        assert result.id is not None
        assert result.name == "Laptop"
        assert result.description == "14 inch"
        assert result.price == Decimal("999.90")
        assert result.category_id == category.id
        assert result.category.name == "Electronics"
        assert result.attachment is None
        assert result.quantity is None
        assert result.is_available is False

    async def test_add_duplicate_name(self, db: AsyncSession, category):
        """같은 이름(대소문자 무시) 생성 시 AlreadyExists, 추가 저장 없음."""
        await _add(db, "Laptop", category.id)

        with pytest.raises(AlreadyExistsError) as exc:
            await _add(db, "LAPTOP", category.id)
        assert exc.value.status_code == 409
        assert await count_products(db) == 1

    async def test_add_duplicate_non_ascii_name(self, db: AsyncSession, category):
        """비ASCII 이름도 대소문자 무시 중복 검사."""
        await _add(db, "Éclair Pan", category.id)

        with pytest.raises(AlreadyExistsError):
            await _add(db, "éclair pan", category.id)
        assert await count_products(db) == 1

    async def test_add_missing_category(self, db: AsyncSession):
        """존재하지 않는 분류로 생성 시 NotFound."""
        with pytest.raises(NotFoundError):
            await _add(db, "Laptop", 9999)
        assert await count_products(db) == 0


class TestProductModify:
    """상품 수정 테스트."""

    async def test_modify_product(self, db: AsyncSession, category, other_category):
        """전체 필드 덮어쓰기 및 분류 재할당."""
        created = await _add(db, "Kettle", category.id)

        result = await product_service.modify(db, ProductUpdate(
            id=created.id,
            name="Electric Kettle",
            price=Decimal("25.50"),
            category_id=other_category.id,
        ))
        assert result.id == created.id
        assert result.name == "Electric Kettle"
        assert result.description is None
        assert result.price == Decimal("25.50")
        assert result.category.name == "Household"

    async def test_modify_nonexistent(self, db: AsyncSession, category):
        """존재하지 않는 상품 수정 시 NotFound."""
        with pytest.raises(NotFoundError):
            await product_service.modify(db, ProductUpdate(
                id=12345, name="Ghost", category_id=category.id
            ))

    async def test_modify_missing_category(self, db: AsyncSession, category):
        """존재하지 않는 분류로 수정 시 NotFound, 상품 변경 없음."""
        created = await _add(db, "Kettle", category.id)

        with pytest.raises(NotFoundError):
            await product_service.modify(db, ProductUpdate(
                id=created.id, name="Renamed", category_id=9999
            ))

        product = (await db.execute(select(Product).where(Product.id == created.id))).scalar_one()
        assert product.name == "Kettle"
        assert product.category_id == category.id

    async def test_modify_rename_to_existing(self, db: AsyncSession, category):
        """다른 상품의 이름으로 변경 시 AlreadyExists."""
        await _add(db, "Kettle", category.id)
        toaster = await _add(db, "Toaster", category.id)

        with pytest.raises(AlreadyExistsError):
            await product_service.modify(db, ProductUpdate(
                id=toaster.id, name="kettle", category_id=category.id
            ))

    async def test_modify_same_name_different_case(self, db: AsyncSession, category):
        """자기 이름의 대소문자만 변경하는 것은 허용."""
        created = await _add(db, "Kettle", category.id)

        result = await product_service.modify(db, ProductUpdate(
            id=created.id, name="KETTLE", category_id=category.id
        ))
        assert result.name == "KETTLE"


class TestProductRemove:
    """상품 삭제 테스트."""

    async def test_remove_product(self, db: AsyncSession, category):
        """삭제 성공 후 조회 시 NotFound."""
        created = await _add(db, "Lamp", category.id)

        assert await product_service.remove(db, created.id) is True
        with pytest.raises(NotFoundError):
            await product_service.retrieve_by_id(db, created.id)

    async def test_remove_product_with_image(self, db: AsyncSession, category, uploads_dir):
        """상품 삭제 시 이미지 파일과 첨부 행도 삭제."""
        created = await _add(db, "Lamp", category.id)
        uploaded = await product_service.image_upload(db, created.id, _png())
        file_path = (await db.execute(
            select(Attachment.file_path).where(Attachment.id == uploaded.attachment.id)
        )).scalar_one()

        assert await product_service.remove(db, created.id) is True
        assert await count_rows(db, Attachment) == 0
        assert not (uploads_dir / file_path).exists()

    async def test_remove_nonexistent(self, db: AsyncSession):
        """존재하지 않는 상품 삭제 시 NotFound."""
        with pytest.raises(NotFoundError):
            await product_service.remove(db, 424242)


class TestProductEnrichment:
    """재고 기반 파생 필드 테스트."""

    async def test_zero_quantity_not_available(self, db: AsyncSession, category):
        """재고 0이면 구매 불가."""
        created = await _add(db, "Chair", category.id)
        await inventory_service.add(db, InventoryCreate(product_id=created.id, quantity=0))

        result = await product_service.retrieve_by_id(db, created.id)
        assert result.quantity == 0
        assert result.is_available is False

    async def test_positive_quantity_available(self, db: AsyncSession, category):
        """재고가 있으면 구매 가능."""
        created = await _add(db, "Chair", category.id)
        await inventory_service.add(db, InventoryCreate(product_id=created.id, quantity=7))

        result = await product_service.retrieve_by_id(db, created.id)
        assert result.quantity == 7
        assert result.is_available is True

    async def test_no_inventory_keeps_defaults(self, db: AsyncSession, category):
        """재고 행이 없으면 기본값 유지."""
        created = await _add(db, "Chair", category.id)

        result = await product_service.retrieve_by_id(db, created.id)
        assert result.quantity is None
        assert result.is_available is False

    async def test_latest_inventory_row_wins(self, db: AsyncSession, category):
        """여러 재고 행 중 최신 행 기준."""
        created = await _add(db, "Chair", category.id)
        await inventory_service.add(db, InventoryCreate(product_id=created.id, quantity=3))
        await inventory_service.add(db, InventoryCreate(product_id=created.id, quantity=0))

        result = await product_service.retrieve_by_id(db, created.id)
        assert result.quantity == 0
        assert result.is_available is False

    async def test_list_enriches_each_product(self, db: AsyncSession, category):
        """목록 조회 시 상품별 재고 반영."""
        stocked = await _add(db, "Stocked", category.id)
        await _add(db, "Unstocked", category.id)
        await inventory_service.add(db, InventoryCreate(product_id=stocked.id, quantity=4))

        results = {p.name: p for p in await product_service.retrieve_all(db)}
        assert results["Stocked"].quantity == 4
        assert results["Stocked"].is_available is True
        assert results["Unstocked"].quantity is None
        assert results["Unstocked"].is_available is False


class TestProductList:
    """상품 목록 조회 테스트 — 페이지네이션/정렬/필터."""

    async def _seed(self, db: AsyncSession, category_id: int) -> list[str]:
        names = ["Alpha", "Echo", "Charlie", "Bravo", "Delta"]
        for name in names:
            await _add(db, name, category_id)
        return names

    async def test_first_page(self, db: AsyncSession, category):
        """1페이지(크기 2)는 ID 순 2개."""
        names = await self._seed(db, category.id)

        results = await product_service.retrieve_all(db, PaginationParams(page_index=1, page_size=2))
        assert [p.name for p in results] == names[:2]

    async def test_last_partial_page(self, db: AsyncSession, category):
        """3페이지(크기 2)는 1개."""
        names = await self._seed(db, category.id)

        results = await product_service.retrieve_all(db, PaginationParams(page_index=3, page_size=2))
        assert [p.name for p in results] == names[4:]

    async def test_without_params_returns_all(self, db: AsyncSession, category):
        await self._seed(db, category.id)
        assert len(await product_service.retrieve_all(db)) == 5

    async def test_order_before_pagination(self, db: AsyncSession, category):
        """정렬 후 페이지네이션 적용."""
        await self._seed(db, category.id)

        results = await product_service.retrieve_all(
            db,
            PaginationParams(page_index=1, page_size=2),
            Filter(order_by="name", is_desc=True),
        )
        assert [p.name for p in results] == ["Echo", "Delta"]

    async def test_unknown_order_field(self, db: AsyncSession, category):
        """모델에 없는 정렬 컬럼은 BadRequest."""
        await self._seed(db, category.id)

        with pytest.raises(BadRequestError):
            await product_service.retrieve_all(db, filter=Filter(order_by="nope"))

    async def test_category_filter(self, db: AsyncSession, category, other_category):
        """분류 필터."""
        await _add(db, "Laptop", category.id)
        await _add(db, "Mop", other_category.id)

        results = await product_service.retrieve_all(db, category_id=other_category.id)
        assert [p.name for p in results] == ["Mop"]
        assert results[0].category.name == "Household"


class TestProductImage:
    """상품 이미지 업로드/교체 테스트."""

    async def test_image_upload(self, db: AsyncSession, category, uploads_dir):
        """이미지 업로드 후 상품에 첨부."""
        created = await _add(db, "Camera", category.id)

        result = await product_service.image_upload(db, created.id, _png())
        assert result.attachment is not None
        assert result.attachment.file_name == "photo.png"
        assert result.attachment.content_type == "image/png"

        attachment = (await db.execute(
            select(Attachment).where(Attachment.id == result.attachment.id)
        )).scalar_one()
        assert (uploads_dir / attachment.file_path).read_bytes() == b"\x89PNG fake"

    async def test_image_upload_twice_keeps_previous(self, db: AsyncSession, category):
        """재업로드는 기존 첨부를 분리만 하고 삭제하지 않음."""
        created = await _add(db, "Camera", category.id)
        first = await product_service.image_upload(db, created.id, _png("a.png"))
        second = await product_service.image_upload(db, created.id, _png("b.png"))

        assert second.attachment.id != first.attachment.id
        assert await count_rows(db, Attachment) == 2

    async def test_image_upload_nonexistent_product(self, db: AsyncSession):
        """존재하지 않는 상품에 업로드 시 NotFound, 첨부 생성 없음."""
        with pytest.raises(NotFoundError):
            await product_service.image_upload(db, 999, _png())
        assert await count_rows(db, Attachment) == 0

    async def test_modify_image(self, db: AsyncSession, category, uploads_dir):
        """이미지 교체 — 기존 첨부는 한 번만 삭제되고 새 첨부로 교체."""
        attachments = RecordingAttachmentService()
        service = ProductService(attachments=attachments)
        created = await _add(db, "Camera", category.id)

        first = await service.image_upload(db, created.id, _png("old.png"))
        old_id = first.attachment.id
        old_path = (await db.execute(
            select(Attachment.file_path).where(Attachment.id == old_id)
        )).scalar_one()

        result = await service.modify_image(db, created.id, _png("new.png"))

        assert result.attachment.id != old_id
        assert result.attachment.file_name == "new.png"
        assert attachments.removed == [old_id]
        assert not (uploads_dir / old_path).exists()

        product = (await db.execute(select(Product).where(Product.id == created.id))).scalar_one()
        assert product.attachment_id == result.attachment.id
        assert await count_rows(db, Attachment) == 1

    async def test_modify_image_without_previous(self, db: AsyncSession, category):
        """기존 이미지가 없으면 삭제 없이 업로드만."""
        attachments = RecordingAttachmentService()
        service = ProductService(attachments=attachments)
        created = await _add(db, "Camera", category.id)

        result = await service.modify_image(db, created.id, _png())
        assert result.attachment is not None
        assert attachments.removed == []

    async def test_modify_image_nonexistent_product(self, db: AsyncSession):
        with pytest.raises(NotFoundError):
            await product_service.modify_image(db, 999, _png())
