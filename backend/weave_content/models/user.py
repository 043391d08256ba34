from werkzeug.security import generate_password_hash, check_password_hash
from weave_content.extensions import db
from .base import BaseModel


class User(BaseModel):
    """Dashboard account. Only admins may change site content."""
    __tablename__ = 'users'

    email = db.Column(db.String(120), unique=True, nullable=False)
    password_hash = db.Column(db.String(256), nullable=False)

    role = db.Column(db.String(50), nullable=False, default='user')
    is_active = db.Column(db.Boolean, default=True)

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)

    def token_claims(self):
        """Extra JWT claims; the identity itself is the user id."""
        return {"role": self.role}
