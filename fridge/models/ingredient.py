import datetime as dt

from sqlalchemy import Date, DateTime, Float, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base


INGREDIENT_CATEGORIES = ("VEGETABLE", "MEAT", "DAIRY", "SEASONING", "OTHER")


class Ingredient(Base):
    __tablename__ = "ingredients"
    __table_args__ = (
        Index("ix_ingredients_user_expires", "user_id", "expires_at"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)

    name: Mapped[str] = mapped_column(String(100))
    # VEGETABLE | MEAT | DAIRY | SEASONING | OTHER
    category: Mapped[str] = mapped_column(String(20), default="OTHER")
    # Nullable for rows imported without an amount; reported as 1.
    quantity: Mapped[float | None] = mapped_column(Float, nullable=True, default=1)
    unit: Mapped[str] = mapped_column(String(20))

    purchased_at: Mapped[dt.date | None] = mapped_column(Date, nullable=True)
    expires_at: Mapped[dt.date | None] = mapped_column(Date, nullable=True)

    created_at: Mapped[dt.datetime] = mapped_column(DateTime, default=lambda: dt.datetime.utcnow())
    updated_at: Mapped[dt.datetime] = mapped_column(DateTime, default=lambda: dt.datetime.utcnow(), onupdate=lambda: dt.datetime.utcnow())

    user = relationship("User", back_populates="ingredients")
