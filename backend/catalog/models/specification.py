from sqlalchemy import Integer, String, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from catalog.core.db import Base


class Specification(Base):
    __tablename__ = "specifications"

    spec_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_id: Mapped[int | None] = mapped_column(
        ForeignKey("products.product_id", ondelete="CASCADE")
    )
    spec_name: Mapped[str] = mapped_column(String(255), nullable=False)  # "Weight"
    spec_value: Mapped[str] = mapped_column(String(255), nullable=False)  # "174g"

    product = relationship("Product", back_populates="specifications")
