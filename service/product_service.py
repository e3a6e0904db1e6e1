# service/product_service.py
import logging

from sqlalchemy import func, or_
from sqlalchemy.orm import joinedload
from database_init import db
from models.category import Category
from models.product import Product
from service.result import ServiceResult, catch_store_errors
from util.constant import MAX_DB_INT, PER_PAGE_LIMIT, PRODUCT_LIMIT, RELATED_PRODUCT_LIMIT
from util.serializer import category_to_dict, product_to_dict
from util.until import escape_like, make_slug, parse_id, parse_page, to_price

logger = logging.getLogger(__name__)

INVALID_PAGE = "Invalid page number. Page must be positive integer"


def _newest_first(query):
    return query.order_by(Product.created_at.desc(), Product.id.desc())


def _page(query, page_number):
    """Một trang PER_PAGE_LIMIT sản phẩm; trang vượt quá số bản ghi có thể có thì rỗng."""
    offset = (page_number - 1) * PER_PAGE_LIMIT
    if offset > MAX_DB_INT:
        return []
    return query.offset(offset).limit(PER_PAGE_LIMIT).all()


def _conflict(form, exclude_id=None):
    """
    Kiểm tra category tồn tại và tên/slug chưa bị sản phẩm khác dùng
    (không phân biệt hoa thường). Trả về ServiceResult lỗi hoặc None.
    """
    category_id = parse_id(form.category.data)
    if not category_id or not db.session.get(Category, category_id):
        return ServiceResult.fail(400, "Category given does not exist")

    name = form.name.data
    same_name = Product.query.filter(func.lower(Product.name) == name.lower())
    if exclude_id is not None:
        same_name = same_name.filter(Product.id != exclude_id)
    if same_name.first():
        return ServiceResult.fail(400, "Product with this name already exists")

    slug = make_slug(name)
    same_slug = Product.query.filter(func.lower(Product.slug) == slug.lower())
    if exclude_id is not None:
        same_slug = same_slug.filter(Product.id != exclude_id)
    if same_slug.first():
        return ServiceResult.fail(
            400, f"Product with this name format or slug already exists: {slug}"
        )
    return None


def _apply_form(product, form):
    product.name = form.name.data
    product.slug = make_slug(form.name.data)
    product.description = form.description.data
    product.price = to_price(form.price.data)
    product.category_id = parse_id(form.category.data)
    product.quantity = parse_id(form.quantity.data)
    product.shipping = form.shipping.data == "1"

    photo = form.photo.data
    if photo:
        product.photo_data = photo.read()
        product.photo_content_type = photo.mimetype or "application/octet-stream"


@catch_store_errors("Error in creating product")
def create_product(form):
    error = _conflict(form)
    if error:
        return error

    product = Product()
    _apply_form(product, form)
    db.session.add(product)
    db.session.commit()
    logger.info("Đã tạo sản phẩm %s", product.slug)
    return ServiceResult.ok(
        201, "Product Created Successfully", products=product_to_dict(product)
    )


@catch_store_errors("Error in Update product")
def update_product(product_id, form):
    pid = parse_id(product_id)
    if not pid:
        return ServiceResult.fail(400, "Invalid Product format")
    product = db.session.get(Product, pid)
    if not product:
        return ServiceResult.fail(404, "Product not found")

    error = _conflict(form, exclude_id=pid)
    if error:
        return error

    _apply_form(product, form)
    db.session.commit()
    return ServiceResult.ok(
        201, "Product Updated Successfully", product=product_to_dict(product)
    )


@catch_store_errors("Error in getting products")
def list_latest_products():
    products = (
        _newest_first(Product.query.options(joinedload(Product.category)))
        .limit(PRODUCT_LIMIT)
        .all()
    )
    return ServiceResult.ok(
        200,
        "AllProducts",
        countTotal=len(products),
        products=[product_to_dict(p, with_category=True) for p in products],
    )


def lookup_product(slug):
    """Sản phẩm (dict) theo slug hoặc None; dùng cho giỏ hàng kiểm tra tồn kho."""
    product = Product.query.filter_by(slug=slug).first()
    return product_to_dict(product, with_category=True) if product else None


@catch_store_errors("Error while getting single product")
def get_product(slug):
    if not slug or not slug.strip():
        return ServiceResult.fail(400, "Invalid product slug provided")
    # Không tìm thấy vẫn trả 200 với product = null
    return ServiceResult.ok(200, "Single Product Fetched", product=lookup_product(slug))


@catch_store_errors("Error while getting photo")
def get_product_photo(product_id):
    pid = parse_id(product_id)
    if not pid:
        return ServiceResult.fail(400, "Invalid Product id format")
    product = db.session.get(Product, pid)
    if not product or not product.photo_data:
        return ServiceResult.fail(404, "Photo not found")
    return ServiceResult.ok(
        200, photo=product.photo_data, contentType=product.photo_content_type
    )


@catch_store_errors("Error while deleting product")
def delete_product(product_id):
    pid = parse_id(product_id)
    if not pid:
        return ServiceResult.fail(400, "Invalid Product format")
    product = db.session.get(Product, pid)
    if not product:
        return ServiceResult.fail(404, "Product not found")

    db.session.delete(product)
    db.session.commit()
    logger.info("Đã xóa sản phẩm %s", pid)
    return ServiceResult.ok(200, "Product Deleted successfully")


@catch_store_errors("Error WHile Filtering Products", status=400)
def filter_products(product_filter):
    """Lọc theo tập category (nếu có) VÀ khoảng giá [min, max] (nếu có)."""
    query = Product.query
    if product_filter.category_ids:
        query = query.filter(Product.category_id.in_(product_filter.category_ids))
    if product_filter.price_range:
        low, high = product_filter.price_range
        query = query.filter(Product.price >= low, Product.price <= high)
    products = _newest_first(query).all()
    return ServiceResult.ok(200, products=[product_to_dict(p) for p in products])


@catch_store_errors("Error in product count", status=400)
def count_products():
    return ServiceResult.ok(200, total=Product.query.count())


@catch_store_errors("error in per page ctrl", status=400)
def list_products_page(page):
    page_number = parse_page(page)
    if not page_number:
        return ServiceResult.fail(400, INVALID_PAGE)
    products = _page(_newest_first(Product.query), page_number)
    return ServiceResult.ok(200, products=[product_to_dict(p) for p in products])


@catch_store_errors("Error In Search Product API", status=400)
def search_products(keyword, page):
    if not keyword or not keyword.strip():
        return ServiceResult.fail(400, "Keyword must not be empty")
    # Không dài hơn giới hạn tên sản phẩm
    if len(keyword) > 100:
        return ServiceResult.fail(400, "Keyword is too long")
    page_number = parse_page(page)
    if not page_number:
        return ServiceResult.fail(400, INVALID_PAGE)

    pattern = f"%{escape_like(keyword)}%"
    query = Product.query.filter(
        or_(
            Product.name.ilike(pattern, escape="\\"),
            Product.description.ilike(pattern, escape="\\"),
        )
    )
    results = _page(_newest_first(query), page_number)
    return ServiceResult.ok(200, results=[product_to_dict(p) for p in results])


@catch_store_errors("error while geting related product", status=400)
def related_products(product_id, category_id):
    pid, cid = parse_id(product_id), parse_id(category_id)
    if not pid or not cid:
        return ServiceResult.fail(400, "Pid and Cid must be in a valid format")
    products = (
        Product.query.options(joinedload(Product.category))
        .filter(Product.category_id == cid, Product.id != pid)
        .order_by(Product.id)
        .limit(RELATED_PRODUCT_LIMIT)
        .all()
    )
    return ServiceResult.ok(
        200, products=[product_to_dict(p, with_category=True) for p in products]
    )


@catch_store_errors("Error While Getting products", status=400)
def products_by_category(slug):
    if not slug or not slug.strip():
        return ServiceResult.fail(400, "Invalid category slug provided")
    category = Category.query.filter_by(slug=slug).first()
    if not category:
        return ServiceResult.fail(404, "Category not found")
    products = _newest_first(Product.query.filter_by(category_id=category.id)).all()
    return ServiceResult.ok(
        200,
        category=category_to_dict(category),
        products=[product_to_dict(p, with_category=True) for p in products],
    )
