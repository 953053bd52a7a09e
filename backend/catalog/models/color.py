from sqlalchemy import Integer, String, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from catalog.core.db import Base


class Color(Base):
    __tablename__ = "colors"

    color_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_id: Mapped[int | None] = mapped_column(
        ForeignKey("products.product_id", ondelete="CASCADE")
    )
    color_name: Mapped[str] = mapped_column(String(100), nullable=False)
    color_code: Mapped[str] = mapped_column(String(7), nullable=False)  # hex, e.g. #1F2020

    product = relationship("Product", back_populates="colors")
