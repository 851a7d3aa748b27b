from sqlalchemy import TIMESTAMP, Column, Integer, String, func
from passlib.context import CryptContext
from ..core.database import AuthBase

bcrypt_context = CryptContext(schemes=['bcrypt'], deprecated='auto')


class Users(AuthBase):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(50), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default="receptionist")
    status = Column(String(16), nullable=False, default="active")
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    def set_password(self, password: str):
        self.password = bcrypt_context.hash(password)

    def verify_password(self, password: str) -> bool:
        return bcrypt_context.verify(password, self.password)
