# service/result.py
import logging
from dataclasses import dataclass, field
from functools import wraps
from typing import Optional

from flask import jsonify
from sqlalchemy.exc import SQLAlchemyError
from database_init import db

logger = logging.getLogger(__name__)


@dataclass
class ServiceResult:
    """Kết quả của một thao tác: status HTTP + envelope {success, message?, ...}."""

    status: int
    success: bool = True
    message: Optional[str] = None
    data: dict = field(default_factory=dict)

    @classmethod
    def ok(cls, status=200, message=None, **data):
        return cls(status=status, success=True, message=message, data=data)

    @classmethod
    def fail(cls, status, message, **data):
        return cls(status=status, success=False, message=message, data=data)

    def to_body(self):
        body = {"success": self.success}
        if self.message is not None:
            body["message"] = self.message
        body.update(self.data)
        return body

    def to_response(self):
        return jsonify(self.to_body()), self.status


def catch_store_errors(message, status=500):
    """
    Bắt lỗi DB không lường trước: rollback, ghi log và trả về
    ServiceResult chung chung (không lộ lỗi gốc ra response).
    """

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except SQLAlchemyError:
                db.session.rollback()
                logger.exception("%s (%s)", message, func.__name__)
                return ServiceResult.fail(status, message)

        return wrapper

    return decorator
