from sqlalchemy import Integer, String, Text, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from catalog.core.db import Base


class Feature(Base):
    __tablename__ = "features"

    feature_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_id: Mapped[int | None] = mapped_column(
        ForeignKey("products.product_id", ondelete="CASCADE")
    )
    feature_name: Mapped[str] = mapped_column(String(255), nullable=False)
    feature_description: Mapped[str | None] = mapped_column(Text)

    product = relationship("Product", back_populates="features")
