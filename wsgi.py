import os
from app_factory import create_app
from database_init import db

app = create_app()

if __name__ == "__main__":
    from seeder.seed_user import seed_admin_user
    from seeder.seed_category import seed_categories
    from seeder.seed_product import seed_product

    with app.app_context():
        db.create_all()
        seed_admin_user(app)
        seed_categories(app)
        seed_product(app)

    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "6060")), debug=True)
