# seed.py
from app_factory import create_app
from database_init import db
from seeder.seed_user import seed_admin_user
from seeder.seed_category import seed_categories
from seeder.seed_product import seed_product

app = create_app()
with app.app_context():
    db.create_all()
    seed_admin_user(app)
    seed_categories(app)
    seed_product(app)
