from flask import Flask, jsonify
from flask_cors import CORS
from flask_migrate import Migrate
from werkzeug.exceptions import HTTPException
from database_init import db
from dotenv import load_dotenv
import os
from log import setup_logging
from util.auth import login_manager

from models.user import User
from models.category import Category
from models.product import Product
from models.order import Order
from models.order_item import OrderItem

load_dotenv()
migrate = Migrate()


def _database_uri():
    # Ưu tiên DATABASE_URL, sau đó tới bộ biến MySQL, cuối cùng là SQLite local
    if os.getenv("DATABASE_URL"):
        return os.getenv("DATABASE_URL")
    if os.getenv("NAME_DB"):
        return (
            f"mysql+pymysql://{os.getenv('USER_DB')}:{os.getenv('PASSWORD_DB')}"
            f"@{os.getenv('ADDRESS_DB')}/{os.getenv('NAME_DB')}"
        )
    return "sqlite:///shop.db"


def create_app(test_config=None):
    app = Flask(__name__)
    CORS(app, resources={r"/api/*": {"origins": "*"}})

    app.config["SECRET_KEY"] = os.getenv("SECRET_KEY", "dev-secret-key")
    app.config["JWT_SECRET"] = os.getenv("JWT_SECRET") or app.config["SECRET_KEY"]
    app.config["SQLALCHEMY_DATABASE_URI"] = _database_uri()
    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False
    # Ảnh tối đa 1MB, chừa thêm chỗ cho các field khác của multipart
    app.config["MAX_CONTENT_LENGTH"] = 5 * 1024 * 1024
    app.config["WTF_CSRF_ENABLED"] = False
    app.config["LOG_DIR"] = os.getenv("LOG_DIR", "logs")
    app.config["BRAINTREE_ENVIRONMENT"] = os.getenv("BRAINTREE_ENVIRONMENT", "sandbox")
    app.config["BRAINTREE_MERCHANT_ID"] = os.getenv("BRAINTREE_MERCHANT_ID")
    app.config["BRAINTREE_PUBLIC_KEY"] = os.getenv("BRAINTREE_PUBLIC_KEY")
    app.config["BRAINTREE_PRIVATE_KEY"] = os.getenv("BRAINTREE_PRIVATE_KEY")

    if test_config:
        app.config.update(test_config)

    # Cấu hình logging
    setup_logging(app.config["LOG_DIR"])

    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)

    from routes.home import home_bp
    from routes.auth import auth_bp
    from routes.category import category_bp
    from routes.product import product_bp

    app.register_blueprint(home_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(category_bp)
    app.register_blueprint(product_bp)

    # 404/405/413... cũng trả về JSON cùng format với API
    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({"success": False, "message": error.description}), error.code

    return app
