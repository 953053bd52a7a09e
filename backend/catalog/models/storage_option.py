from decimal import Decimal

from sqlalchemy import Integer, String, Numeric, ForeignKey, text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from catalog.core.db import Base


class StorageOption(Base):
    __tablename__ = "storage_options"

    storage_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_id: Mapped[int | None] = mapped_column(
        ForeignKey("products.product_id", ondelete="CASCADE")
    )
    capacity: Mapped[str] = mapped_column(String(50), nullable=False)  # "128GB"
    # difference from the base model price
    price_diff: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), server_default=text("0"))

    product = relationship("Product", back_populates="storage_options")
