from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
import re

from flask import request
from slugify import slugify
from werkzeug.datastructures import CombinedMultiDict, MultiDict

from util.constant import MAX_DB_INT

_ID_PATTERN = re.compile(r"[0-9]+")


def _parse_positive_int(value):
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if not isinstance(value, str) or not _ID_PATTERN.fullmatch(value):
        return None
    digits = value.lstrip("0")
    if not digits:
        return None
    # Quá dài để int() đổi được, chắc chắn vượt mọi giới hạn
    if len(digits) > 20:
        return float("inf")
    return int(digits)


def parse_id(value):
    """
    Chuyển id dạng chuỗi (từ URL hoặc body) thành số nguyên dương.
    Trả về None nếu sai định dạng hoặc vượt quá giá trị cột Integer.
    """
    number = _parse_positive_int(value)
    if number is None or number > MAX_DB_INT:
        return None
    return number


def parse_page(value):
    """Số trang: số nguyên >= 1, không giới hạn trên."""
    return _parse_positive_int(value)


def make_slug(name):
    return slugify(name or "")


def to_price(value):
    """Làm tròn giá về đúng 2 chữ số thập phân."""
    return Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def escape_like(value):
    """Escape các ký tự đặc biệt của LIKE (\\, %, _) để keyword được so khớp nguyên văn."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def request_formdata():
    """
    Gom body của request (JSON hoặc multipart) thành MultiDict cho Flask-WTF.
    Giá trị JSON dạng số/bool được ép về chuỗi; list/dict bị bỏ qua.
    """
    if request.is_json:
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            payload = {}
        return MultiDict(
            {
                key: "" if value is None else str(value)
                for key, value in payload.items()
                if not isinstance(value, (dict, list))
            }
        )
    return CombinedMultiDict((request.files, request.form))


def format_datetime(value, format="%Y-%m-%dT%H:%M:%S.%fZ"):
    if isinstance(value, datetime):
        return value.strftime(format)
    return value
