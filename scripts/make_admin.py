"""Create an admin account, or reset the password of an existing one.

Usage: python scripts/make_admin.py EMAIL PASSWORD [--name NAME] [--role ROLE]
"""
import argparse
import os
import sys

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from werkzeug.security import generate_password_hash
from aisolutions import create_app
from aisolutions.extensions import db
from aisolutions.models import AdminUser

parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
parser.add_argument('email')
parser.add_argument('password')
parser.add_argument('--name', default='Administrator')
parser.add_argument('--role', default='admin')
args = parser.parse_args()

if len(args.password) < 6:
    parser.error('password must be at least 6 characters long')

app = create_app()

with app.app_context():
    email = args.email.strip().lower()
    user = AdminUser.query.filter_by(email=email).first()

    if not user:
        user = AdminUser(
            email=email,
            name=args.name,
            role=args.role,
            password_hash=generate_password_hash(args.password, method='pbkdf2:sha256'),
        )
        db.session.add(user)
        print("New admin user created")
    else:
        user.password_hash = generate_password_hash(args.password, method='pbkdf2:sha256')
        print("Existing admin password reset")

    db.session.commit()
