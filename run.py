import os
import logging
import click
from dotenv import load_dotenv

# Load environment variables before the config class reads them
load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO"),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

from ecommerce import create_app, db
from ecommerce.enums import UserRole
from ecommerce.models.user import User
from ecommerce.services.category_service import CategoryService

# Create app instance
app = create_app()


@app.cli.command()
def init_db():
    """Initialize database"""
    db.create_all()
    print('Database initialized successfully!')


@app.cli.command()
def drop_db():
    """Drop all tables"""
    if input('Are you sure you want to drop all tables? (yes/no): ') == 'yes':
        db.drop_all()
        print('Database dropped successfully!')
    else:
        print('Operation cancelled')


@app.cli.command()
def create_admin():
    """Create admin user"""
    email = input('Admin email: ')
    name = input('Admin name: ')
    password = input('Admin password: ')
    answer = input('Security answer: ')

    if User.query.filter_by(email=email).first():
        print('Email already exists')
        return

    admin = User(
        name=name,
        email=email,
        phone='',
        address='',
        answer=answer,
        role=UserRole.ADMIN,
    )
    admin.set_password(password)

    db.session.add(admin)
    db.session.commit()

    print('Admin user created successfully!')


@app.cli.command()
@click.argument('names', nargs=-1, required=True)
def seed_categories(names):
    """Create the given categories, skipping existing ones"""
    for name in names:
        if CategoryService.find_by_name(name):
            print(f'Category {name} already exists')
            continue
        CategoryService.create_category(name)
        print(f'Category {name} created')


if __name__ == '__main__':
    app.run(
        host=os.getenv('HOST', '0.0.0.0'),
        port=int(os.getenv('PORT', 5000)),
        debug=os.getenv('DEBUG', 'True') == 'True'
    )
