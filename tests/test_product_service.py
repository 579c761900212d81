"""
Unit tests for ProductService with the DAOs replaced by mocks.
"""

from unittest.mock import AsyncMock

import pytest

from catalog_api.core.exceptions import ClientError, NotFoundError, StoreError
from catalog_api.schemas.product_schemas import (
    ImageCreateRequest,
    ProductAddImagesRequest,
    ProductCreateRequest,
    ProductSearchFilter,
)
from catalog_api.services.product_service import ProductService

PRODUCT_ROW = {"product_id": "p1", "title": "Lamp", "description": "Warm", "price": 25.0}


@pytest.fixture
def service():
    service = ProductService()
    service.product_dao = AsyncMock()
    service.comment_dao = AsyncMock()
    service.image_dao = AsyncMock()
    service.similar_product_dao = AsyncMock()
    return service


@pytest.fixture
def db():
    return AsyncMock()


class TestSearchProducts:

    @pytest.mark.asyncio
    async def test_no_matches_skips_follow_up_queries(self, service, db):
        service.product_dao.search.return_value = []

        result = await service.search_products(db, ProductSearchFilter(title="nothing"))

        assert result == []
        service.comment_dao.get_all.assert_not_awaited()
        service.image_dao.get_all.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_matches_are_enhanced(self, service, db):
        service.product_dao.search.return_value = [PRODUCT_ROW]
        service.comment_dao.get_all.return_value = [
            {"comment_id": "c1", "name": "Ann", "email": None, "body": "Nice", "product_id": "p1"},
        ]
        service.image_dao.get_all.return_value = [
            {"image_id": "i1", "url": "a", "product_id": "p1", "main": False},
        ]

        result = await service.search_products(db, ProductSearchFilter(title="Lamp"))

        assert [p.id for p in result] == ["p1"]
        assert result[0].comments[0].id == "c1"
        assert result[0].thumbnail.id == "i1"


class TestGetProduct:

    @pytest.mark.asyncio
    async def test_missing_product_raises_not_found(self, service, db):
        service.product_dao.get_by_id.return_value = None

        with pytest.raises(NotFoundError) as exc_info:
            await service.get_product(db, "ghost")

        assert exc_info.value.message == "Product with id ghost is not found"
        assert exc_info.value.status_code == 404
        service.comment_dao.get_by_product_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_store_errors_propagate(self, service, db):
        service.product_dao.get_by_id.side_effect = StoreError("select from products", RuntimeError("boom"))

        with pytest.raises(StoreError):
            await service.get_product(db, "p1")


class TestCreateProduct:

    @pytest.mark.asyncio
    async def test_without_images_inserts_only_the_product(self, service, db):
        product_id = await service.create_product(db, ProductCreateRequest(title="Lamp", images=[]))

        assert product_id
        service.product_dao.create.assert_awaited_once()
        assert service.product_dao.create.await_args.kwargs["product_id"] == product_id
        service.image_dao.create_many.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_images_get_generated_ids(self, service, db):
        request = ProductCreateRequest(
            title="Lamp",
            images=[ImageCreateRequest(url="a", main=True), ImageCreateRequest(url="b")],
        )

        product_id = await service.create_product(db, request)

        rows = service.image_dao.create_many.await_args.args[1]
        assert [row["url"] for row in rows] == ["a", "b"]
        assert all(row["product_id"] == product_id for row in rows)
        assert len({row["image_id"] for row in rows}) == 2


class TestDeleteProduct:

    @pytest.mark.asyncio
    async def test_deletes_images_then_comments_then_product(self, service, db):
        calls = []
        service.product_dao.get_by_id.return_value = PRODUCT_ROW
        service.image_dao.delete_by_product_id.side_effect = lambda *args: calls.append("images")
        service.comment_dao.delete_by_product_id.side_effect = lambda *args: calls.append("comments")
        service.product_dao.delete.side_effect = lambda *args: calls.append("product")

        await service.delete_product(db, "p1")

        assert calls == ["images", "comments", "product"]

    @pytest.mark.asyncio
    async def test_missing_product_deletes_nothing(self, service, db):
        service.product_dao.get_by_id.return_value = None

        with pytest.raises(NotFoundError):
            await service.delete_product(db, "ghost")

        service.image_dao.delete_by_product_id.assert_not_awaited()
        service.product_dao.delete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_failure_after_image_delete_is_not_undone(self, service, db):
        service.product_dao.get_by_id.return_value = PRODUCT_ROW
        service.comment_dao.delete_by_product_id.side_effect = StoreError("write to comments", RuntimeError())

        with pytest.raises(StoreError):
            await service.delete_product(db, "p1")

        service.image_dao.delete_by_product_id.assert_awaited_once_with(db, "p1")
        service.product_dao.delete.assert_not_awaited()


class TestImages:

    @pytest.mark.asyncio
    async def test_add_images_requires_images(self, service, db):
        with pytest.raises(ClientError) as exc_info:
            await service.add_images(db, ProductAddImagesRequest(product_id="p1", images=[]))

        assert exc_info.value.message == "Images array is empty"
        assert exc_info.value.status_code == 400

    @pytest.mark.asyncio
    async def test_remove_images_requires_ids(self, service, db):
        with pytest.raises(ClientError):
            await service.remove_images(db, [])
        with pytest.raises(ClientError):
            await service.remove_images(db, None)

    @pytest.mark.asyncio
    async def test_remove_images_reports_nothing_removed(self, service, db):
        service.image_dao.delete_many.return_value = 0

        with pytest.raises(NotFoundError) as exc_info:
            await service.remove_images(db, ["i9"])

        assert exc_info.value.message == "No one image has been removed"


class TestSimilarProducts:

    @pytest.mark.asyncio
    async def test_duplicate_ids_are_collapsed(self, service, db):
        await service.add_similar_products(db, "p1", ["p2", "p3", "p2"])

        service.similar_product_dao.add.assert_awaited_once_with(db, "p1", ["p2", "p3"])

    @pytest.mark.asyncio
    async def test_similar_products_are_mapped(self, service, db):
        service.similar_product_dao.get_similar.return_value = [PRODUCT_ROW]

        result = await service.get_similar_products(db, "p0")

        assert [p.id for p in result] == ["p1"]
        assert result[0].images is None
