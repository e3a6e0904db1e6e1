from flask import Blueprint, jsonify, request, Response
from flask_login import login_required, current_user
from Form.product_form import (
    PHOTO_ERROR,
    UPDATE_PHOTO_ERROR,
    ProductFilter,
    ProductForm,
    UpdateProductForm,
)
from service import payment_service, product_service
from util.auth import admin_required
from util.until import request_formdata

product_bp = Blueprint("product", __name__, url_prefix="/api/v1/product")


def _invalid(message):
    return jsonify({"success": False, "message": message}), 400


# Body vượt MAX_CONTENT_LENGTH: báo như ảnh quá lớn
@product_bp.errorhandler(413)
def request_too_large(error):
    if request.endpoint == "product.update_product":
        return _invalid(UPDATE_PHOTO_ERROR)
    return _invalid(PHOTO_ERROR)


@product_bp.route("/create-product", methods=["POST"])
@admin_required
def create_product():
    form = ProductForm(formdata=request_formdata())
    if not form.validate():
        return _invalid(form.first_error())
    return product_service.create_product(form).to_response()


@product_bp.route("/update-product/<pid>", methods=["PUT"])
@admin_required
def update_product(pid):
    form = UpdateProductForm(formdata=request_formdata())
    if not form.validate():
        return _invalid(form.first_error())
    return product_service.update_product(pid, form).to_response()


@product_bp.route("/get-product")
def get_products():
    return product_service.list_latest_products().to_response()


@product_bp.route("/get-product/<slug>")
def get_product(slug):
    return product_service.get_product(slug).to_response()


@product_bp.route("/product-photo/<pid>")
def product_photo(pid):
    result = product_service.get_product_photo(pid)
    if not result.success:
        return result.to_response()
    return Response(result.data["photo"], mimetype=result.data["contentType"])


@product_bp.route("/delete-product/<pid>", methods=["DELETE"])
@admin_required
def delete_product(pid):
    return product_service.delete_product(pid).to_response()


@product_bp.route("/product-filters", methods=["POST"])
def product_filters():
    product_filter, error = ProductFilter.parse(request.get_json(silent=True))
    if error:
        return _invalid(error)
    return product_service.filter_products(product_filter).to_response()


@product_bp.route("/product-count")
def product_count():
    return product_service.count_products().to_response()


@product_bp.route("/product-list/<page>")
def product_list(page):
    return product_service.list_products_page(page).to_response()


@product_bp.route("/search/<keyword>/<page>")
def search_product(keyword, page):
    return product_service.search_products(keyword, page).to_response()


@product_bp.route("/related-product/<pid>/<cid>")
def related_product(pid, cid):
    return product_service.related_products(pid, cid).to_response()


@product_bp.route("/product-category/<slug>")
def product_category(slug):
    return product_service.products_by_category(slug).to_response()


# ====== Thanh toán Braintree ======
@product_bp.route("/braintree/token")
def braintree_token():
    return payment_service.generate_client_token().to_response()


@product_bp.route("/braintree/payment", methods=["POST"])
@login_required
def braintree_payment():
    return payment_service.checkout(
        current_user._get_current_object(), request.get_json(silent=True)
    ).to_response()
