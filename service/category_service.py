# service/category_service.py
import logging

from sqlalchemy import func, or_
from database_init import db
from models.category import Category
from service.result import ServiceResult, catch_store_errors
from util.serializer import category_to_dict
from util.until import make_slug, parse_id

logger = logging.getLogger(__name__)


def _find_conflict(name, exclude_id=None):
    """Tìm category khác trùng tên hoặc trùng slug, không phân biệt hoa thường."""
    query = Category.query.filter(
        or_(
            func.lower(Category.name) == name.lower(),
            func.lower(Category.slug) == make_slug(name).lower(),
        )
    )
    if exclude_id is not None:
        query = query.filter(Category.id != exclude_id)
    return query.first()


@catch_store_errors("Error in Category")
def create_category(name):
    if _find_conflict(name):
        return ServiceResult.fail(401, "The name of the category already exists")

    category = Category(name=name, slug=make_slug(name))
    db.session.add(category)
    db.session.commit()
    logger.info("Đã tạo category %s", category.slug)
    return ServiceResult.ok(201, "new category created", category=category_to_dict(category))


@catch_store_errors("Error while updating category")
def update_category(category_id, name):
    cid = parse_id(category_id)
    # Cho phép đổi hoa/thường của chính category đó
    if _find_conflict(name, exclude_id=cid):
        return ServiceResult.fail(400, "The name of the category already exists")

    category = db.session.get(Category, cid) if cid else None
    if not category:
        return ServiceResult.fail(400, "Unable to find and update the category")

    category.name = name
    category.slug = make_slug(name)
    db.session.commit()
    return ServiceResult.ok(
        200, "Category Updated Successfully", category=category_to_dict(category)
    )


@catch_store_errors("Error while getting all categories")
def list_categories():
    categories = Category.query.order_by(Category.id).all()
    return ServiceResult.ok(
        200, "All Categories List", category=[category_to_dict(c) for c in categories]
    )


@catch_store_errors("Error While getting Single Category")
def get_category(slug):
    category = Category.query.filter_by(slug=slug).first()
    if not category:
        return ServiceResult.fail(400, "Unable to find the category with provided slug")
    return ServiceResult.ok(
        200, "Get Single Category Successfully", category=category_to_dict(category)
    )


@catch_store_errors("error while deleting category")
def delete_category(category_id):
    cid = parse_id(category_id)
    category = db.session.get(Category, cid) if cid else None
    if not category:
        return ServiceResult.fail(400, "Unable to find the category to delete")

    db.session.delete(category)
    db.session.commit()
    logger.info("Đã xóa category %s", cid)
    return ServiceResult.ok(200, "Category Deleted Successfully")
