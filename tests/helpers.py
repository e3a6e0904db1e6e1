from database_init import db
from models.category import Category
from models.product import Product
from models.user import User
from util.auth import create_token
from util.constant import ROLE_USER
from util.until import make_slug, to_price


def make_user(app, email="user@test.com", password="password123", role=ROLE_USER, **fields):
    with app.app_context():
        user = User(
            name=fields.get("name", "Test User"),
            email=email,
            phone=fields.get("phone", "81234567"),
            address=fields.get("address", "1 Test Street"),
            answer=fields.get("answer", "football"),
            role=role,
        )
        user.set_password(password)
        db.session.add(user)
        db.session.commit()
        return user.id


def headers_for(app, user_id):
    with app.app_context():
        token = create_token(db.session.get(User, user_id))
    return {"Authorization": token}


def make_category(app, name="Electronics"):
    with app.app_context():
        category = Category(name=name, slug=make_slug(name))
        db.session.add(category)
        db.session.commit()
        return category.id


def make_product(app, category_id, name="Laptop", price="999.99", quantity=10, **fields):
    with app.app_context():
        product = Product(
            name=name,
            slug=make_slug(name),
            description=fields.get("description", f"A {name.lower()} for testing"),
            price=to_price(price),
            category_id=category_id,
            quantity=quantity,
            shipping=fields.get("shipping", True),
            photo_data=fields.get("photo_data"),
            photo_content_type=fields.get("photo_content_type"),
        )
        db.session.add(product)
        db.session.commit()
        return product.id
