# products_api/models.py

from sqlalchemy import Boolean, Column, Float, Integer, String

from .db import Base


class Product(Base):
    __tablename__ = "products"
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    price = Column(Float, nullable=False)
    availability = Column(Boolean, nullable=False, default=True)

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', price={self.price}, availability={self.availability})>"
