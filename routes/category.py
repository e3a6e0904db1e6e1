from flask import Blueprint, jsonify
from Form.category_form import CreateCategoryForm, UpdateCategoryForm
from service import category_service
from util.auth import admin_required
from util.until import request_formdata

category_bp = Blueprint("category", __name__, url_prefix="/api/v1/category")


@category_bp.route("/create-category", methods=["POST"])
@admin_required
def create_category():
    form = CreateCategoryForm(formdata=request_formdata())
    if not form.validate():
        # Lỗi khi tạo category trả 401 (giữ nguyên hành vi cũ)
        return jsonify({"success": False, "message": form.first_error()}), 401
    return category_service.create_category(form.name.data).to_response()


@category_bp.route("/update-category/<category_id>", methods=["PUT"])
@admin_required
def update_category(category_id):
    form = UpdateCategoryForm(formdata=request_formdata())
    if not form.validate():
        return jsonify({"success": False, "message": form.first_error()}), 400
    return category_service.update_category(category_id, form.name.data).to_response()


@category_bp.route("/get-category")
def list_categories():
    return category_service.list_categories().to_response()


@category_bp.route("/single-category/<slug>")
def single_category(slug):
    return category_service.get_category(slug).to_response()


@category_bp.route("/delete-category/<category_id>", methods=["DELETE"])
@admin_required
def delete_category(category_id):
    return category_service.delete_category(category_id).to_response()
