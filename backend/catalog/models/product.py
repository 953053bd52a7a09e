from datetime import date
from decimal import Decimal

from sqlalchemy import Integer, String, Numeric, Text, Date
from sqlalchemy.orm import Mapped, mapped_column, relationship
from catalog.core.db import Base


class Product(Base):
    __tablename__ = "products"

    product_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    release_date: Mapped[date | None] = mapped_column(Date)
    image_url: Mapped[str | None] = mapped_column(String(255))

    # variant rows go away with the product (ON DELETE CASCADE in the schema)
    colors = relationship("Color", back_populates="product", passive_deletes=True)
    storage_options = relationship("StorageOption", back_populates="product", passive_deletes=True)
    features = relationship("Feature", back_populates="product", passive_deletes=True)
    specifications = relationship("Specification", back_populates="product", passive_deletes=True)
